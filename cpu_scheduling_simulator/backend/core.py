"""
Core data structures for the CPU scheduling simulator.
Includes the immutable Job record, the per-run JobState and error types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class SchedulerError(Exception):
    """Base class for all simulator errors."""


class WorkloadError(SchedulerError, ValueError):
    """Raised when job data is malformed."""


class ConfigError(SchedulerError, ValueError):
    """Raised when a simulation is configured with invalid values."""


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Job:
    """A schedulable unit of work. Never mutated by a simulation."""
    job_id: str
    arrival_time: int
    burst_time: int

    def __post_init__(self):
        if not isinstance(self.job_id, str) or not self.job_id:
            raise WorkloadError(f"job id must be a non-empty string, got {self.job_id!r}")
        if not _is_int(self.arrival_time) or self.arrival_time < 0:
            raise WorkloadError(
                f"job {self.job_id}: arrival time must be a non-negative integer, got {self.arrival_time!r}")
        if not _is_int(self.burst_time) or self.burst_time <= 0:
            raise WorkloadError(
                f"job {self.job_id}: burst time must be a positive integer, got {self.burst_time!r}")


@dataclass
class JobState:
    """Mutable simulation record for one job during one run."""
    job: Job
    remaining_time: Optional[int] = None
    waiting_time: int = 0
    turnaround_time: int = 0
    completion_time: Optional[int] = None
    first_run_time: Optional[int] = None
    dispatches: int = 0

    def __post_init__(self):
        self.remaining_time = self.job.burst_time if self.remaining_time is None else self.remaining_time

    @property
    def job_id(self) -> str:
        return self.job.job_id

    @property
    def arrival_time(self) -> int:
        return self.job.arrival_time

    @property
    def burst_time(self) -> int:
        return self.job.burst_time

    @property
    def completed(self) -> bool:
        return self.completion_time is not None

    @property
    def response_time(self) -> Optional[int]:
        if self.first_run_time is None:
            return None
        return self.first_run_time - self.arrival_time

    def dispatch(self, now: int) -> None:
        """Record that the job was handed the CPU at `now`."""
        if self.first_run_time is None:
            self.first_run_time = now
        self.dispatches += 1

    def complete(self, now: int) -> None:
        """Mark the job finished at `now` and derive its statistics."""
        self.remaining_time = 0
        self.completion_time = now
        self.turnaround_time = now - self.arrival_time
        self.waiting_time = self.turnaround_time - self.burst_time
