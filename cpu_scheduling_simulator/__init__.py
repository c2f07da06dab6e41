"""
CPU scheduling simulator: FCFS, SJN, SRT and Round Robin over a fixed workload.
"""

__version__ = "1.0.0"
