"""
Simulation backend: job model, workloads, scheduling algorithms and reporting.
"""

from .core import Job, JobState, SchedulerError, WorkloadError, ConfigError
from .schedulers import Scheduler, fcfs, sjn, srt, round_robin
from .simulator import simulate, SimulationResult
from .os_kernel import OSKernel, KernelConfig
from .workload import create_jobs, build_workload, copy_workload, new_run_state

__all__ = [
    'Job', 'JobState', 'SchedulerError', 'WorkloadError', 'ConfigError',
    'Scheduler', 'fcfs', 'sjn', 'srt', 'round_robin',
    'simulate', 'SimulationResult', 'OSKernel', 'KernelConfig',
    'create_jobs', 'build_workload', 'copy_workload', 'new_run_state',
]
