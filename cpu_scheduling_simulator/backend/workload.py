"""
Workload construction: the canonical job set, copies for independent runs,
CSV import/export and seeded synthetic workloads.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple
import numpy as np
import pandas as pd

from .core import Job, JobState, WorkloadError


CANONICAL_JOBS: Tuple[Tuple[str, int, int], ...] = (
    ("A", 0, 16), ("B", 3, 2), ("C", 5, 1),
    ("D", 9, 6), ("E", 10, 1), ("F", 12, 9),
    ("G", 14, 4), ("H", 16, 14), ("I", 17, 1),
    ("J", 19, 8),
)

CSV_COLUMNS = ["id", "arrival_time", "burst_time"]


def build_workload(descriptors: Iterable[Tuple[str, int, int]]) -> List[Job]:
    """Build and validate a workload from (id, arrival, burst) tuples."""
    jobs: List[Job] = []
    seen = set()
    for job_id, arrival, burst in descriptors:
        job = Job(job_id, arrival, burst)
        if job.job_id in seen:
            raise WorkloadError(f"duplicate job id {job.job_id!r}")
        seen.add(job.job_id)
        jobs.append(job)
    return jobs


def create_jobs() -> List[Job]:
    """Return the canonical ten-job workload."""
    return build_workload(CANONICAL_JOBS)


def copy_workload(jobs: Sequence[Job]) -> List[Job]:
    return [Job(j.job_id, j.arrival_time, j.burst_time) for j in jobs]


def new_run_state(jobs: Sequence[Job]) -> List[JobState]:
    """Allocate fresh simulation records, one per job, in workload order."""
    return [JobState(job) for job in jobs]


def _as_int(value: str, column: str, row: int) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise WorkloadError(f"row {row}: {column} must be an integer, got {value!r}") from None


def load_workload_csv(path: str) -> List[Job]:
    """Read a workload from a CSV file with columns id, arrival_time, burst_time."""
    try:
        # Read everything as text so ids keep leading zeros and integers stay exact
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise WorkloadError(f"{path}: cannot parse workload ({e})") from e
    df = df.fillna("")
    missing = [c for c in CSV_COLUMNS if c not in df.columns]
    if missing:
        raise WorkloadError(f"{path}: missing column(s) {', '.join(missing)}")

    descriptors = []
    for i, row in enumerate(df.itertuples(index=False), start=1):
        descriptors.append((
            row.id.strip(),
            _as_int(row.arrival_time, "arrival_time", i),
            _as_int(row.burst_time, "burst_time", i),
        ))
    return build_workload(descriptors)


def save_workload_csv(jobs: Sequence[Job], path: str) -> None:
    df = pd.DataFrame(
        [(j.job_id, j.arrival_time, j.burst_time) for j in jobs],
        columns=CSV_COLUMNS,
    )
    df.to_csv(path, index=False)


def generate_workload(n: int, seed: int = 42, max_arrival: int = 20, max_burst: int = 10) -> List[Job]:
    """Generate a reproducible random workload of `n` jobs sorted by arrival."""
    if n < 0:
        raise WorkloadError(f"number of jobs must be non-negative, got {n}")
    if max_arrival < 0 or max_burst < 1:
        raise WorkloadError("max_arrival must be >= 0 and max_burst >= 1")
    rng = np.random.default_rng(seed)
    arrivals = sorted(int(a) for a in rng.integers(0, max_arrival + 1, size=n))
    bursts = [int(b) for b in rng.integers(1, max_burst + 1, size=n)]
    return build_workload(
        (f"P{i + 1}", arrival, burst)
        for i, (arrival, burst) in enumerate(zip(arrivals, bursts))
    )
