from __future__ import annotations

from typing import List, Optional, Dict, Sequence
from dataclasses import dataclass

from .core import Job, JobState, ConfigError
from .schedulers import Scheduler, DEFAULT_QUANTUM, fcfs, sjn, srt, round_robin, validate_quantum
from .utils import (
    EventLogger,
    compute_waiting_times,
    compute_turnaround_times,
    compute_response_times,
    compute_avg,
    compute_makespan,
    compute_throughput,
    compute_cpu_utilization,
)


POLICY_TITLES = {
    Scheduler.FCFS: "FCFS",
    Scheduler.SJN: "SJN",
    Scheduler.SRT: "SRT",
    Scheduler.RR: "Round Robin",
}


@dataclass
class SimulationResult:
    policy: str
    time_quantum: Optional[int]
    states: List[JobState]
    completion_order: List[str]
    total_time: int
    waiting_times: Dict[str, int]
    turnaround_times: Dict[str, int]
    avg_waiting_time: float
    avg_turnaround_time: float
    avg_response_time: float
    throughput: float
    cpu_utilization: float
    logger: EventLogger

    @property
    def title(self) -> str:
        return POLICY_TITLES.get(self.policy, self.policy)


def normalize_policy(policy: str) -> str:
    """Map user-facing names (case-insensitive, common aliases) to a policy constant."""
    aliases = {
        "FCFS": Scheduler.FCFS,
        "SJN": Scheduler.SJN,
        "SJF": Scheduler.SJN,
        "SRT": Scheduler.SRT,
        "SRTF": Scheduler.SRT,
        "RR": Scheduler.RR,
        "ROUND ROBIN": Scheduler.RR,
        "ROUND_ROBIN": Scheduler.RR,
    }
    key = str(policy).strip().upper()
    if key not in aliases:
        raise ConfigError(f"unknown scheduling policy {policy!r}")
    return aliases[key]


def simulate(
    jobs: Sequence[Job],
    policy: str = Scheduler.FCFS,
    time_quantum: int = DEFAULT_QUANTUM,
) -> SimulationResult:
    """Run one scheduling policy over a workload and collect its statistics.

    The workload itself is never mutated; every call works on fresh
    JobState records, so repeated calls give identical results.
    """
    policy = normalize_policy(policy)
    logger = EventLogger()

    if policy == Scheduler.FCFS:
        states = fcfs(jobs, logger=logger)
    elif policy == Scheduler.SJN:
        states = sjn(jobs, logger=logger)
    elif policy == Scheduler.SRT:
        states = srt(jobs, logger=logger)
    else:
        time_quantum = validate_quantum(time_quantum)
        states = round_robin(jobs, quantum=time_quantum, logger=logger)

    completion_order = [s.job_id for s in sorted(
        (s for s in states if s.completed), key=lambda s: s.completion_time)]

    waiting_times = compute_waiting_times(states)
    turnaround_times = compute_turnaround_times(states)
    total_time = compute_makespan(states)

    return SimulationResult(
        policy=policy,
        time_quantum=time_quantum if policy == Scheduler.RR else None,
        states=states,
        completion_order=completion_order,
        total_time=total_time,
        waiting_times=waiting_times,
        turnaround_times=turnaround_times,
        avg_waiting_time=compute_avg(list(waiting_times.values())),
        avg_turnaround_time=compute_avg(list(turnaround_times.values())),
        avg_response_time=compute_avg(list(compute_response_times(states).values())),
        throughput=compute_throughput(states, total_time),
        cpu_utilization=compute_cpu_utilization(states, total_time),
        logger=logger,
    )
