from __future__ import annotations
import os, sys
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from cpu_scheduling_simulator.backend.os_kernel import main


if __name__ == '__main__':
    # FCFS, SJN, SRT, then Round Robin with quantum 4, each on its own copy
    main()
