"""
Scheduling algorithms: FCFS, SJN, SRT and Round Robin.

Each algorithm takes a read-only workload and returns freshly allocated
JobState records (workload order) with waiting and turnaround times filled
in. When nothing is ready the clock jumps to the next arrival instead of
stepping one unit at a time; observable results are identical.
"""

from __future__ import annotations

from collections import deque
from typing import List, Optional, Sequence
import heapq

from .core import Job, JobState, ConfigError
from .utils import EventLogger
from .workload import new_run_state


class Scheduler:
    FCFS = "FCFS"   # non-preemptive, arrival order
    SJN = "SJN"     # non-preemptive shortest job next
    SRT = "SRT"     # preemptive shortest remaining time
    RR = "RR"       # round robin, fixed quantum

    ALL = (FCFS, SJN, SRT, RR)


DEFAULT_QUANTUM = 4


def validate_quantum(quantum) -> int:
    if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
        raise ConfigError(f"time quantum must be a positive integer, got {quantum!r}")
    return quantum


def _arrival_order(states: Sequence[JobState]) -> List[int]:
    # Stable: equal arrivals keep workload order
    return sorted(range(len(states)), key=lambda i: states[i].arrival_time)


def _idle(logger: Optional[EventLogger], start: int, end: int, policy: str) -> None:
    if logger:
        logger.log_timeline_slice(start, end, None, policy, reason="idle")


def _run(state: JobState, start: int, end: int, policy: str, logger: Optional[EventLogger]) -> None:
    if logger:
        logger.log_timeline_slice(start, end, state.job_id, policy)


def _dispatch(state: JobState, now: int, logger: Optional[EventLogger]) -> None:
    state.dispatch(now)
    if logger:
        logger.log_process_event(now, state.job_id, "dispatch")


def _complete(state: JobState, now: int, logger: Optional[EventLogger]) -> None:
    state.complete(now)
    if logger:
        logger.log_process_event(now, state.job_id, "complete")


def fcfs(jobs: Sequence[Job], logger: Optional[EventLogger] = None) -> List[JobState]:
    """First-Come, First-Served: run jobs to completion in arrival order."""
    states = new_run_state(jobs)
    clock = 0
    for i in _arrival_order(states):
        state = states[i]
        if clock < state.arrival_time:
            _idle(logger, clock, state.arrival_time, Scheduler.FCFS)
            clock = state.arrival_time
        _dispatch(state, clock, logger)
        _run(state, clock, clock + state.burst_time, Scheduler.FCFS, logger)
        clock += state.burst_time
        _complete(state, clock, logger)
    return states


def sjn(jobs: Sequence[Job], logger: Optional[EventLogger] = None) -> List[JobState]:
    """Shortest-Job-Next (non-preemptive).

    Whenever the CPU is free, the arrived job with the smallest burst time
    runs to completion. Ties go to the earlier arrival, then to the job
    listed first in the workload.
    """
    states = new_run_state(jobs)
    order = _arrival_order(states)
    ready: List[tuple] = []
    nxt = 0
    clock = 0
    done = 0

    while done < len(states):
        while nxt < len(order) and states[order[nxt]].arrival_time <= clock:
            i = order[nxt]
            heapq.heappush(ready, (states[i].burst_time, states[i].arrival_time, i))
            nxt += 1

        if not ready:
            next_arrival = states[order[nxt]].arrival_time
            _idle(logger, clock, next_arrival, Scheduler.SJN)
            clock = next_arrival
            continue

        _, _, i = heapq.heappop(ready)
        state = states[i]
        _dispatch(state, clock, logger)
        _run(state, clock, clock + state.burst_time, Scheduler.SJN, logger)
        clock += state.burst_time
        _complete(state, clock, logger)
        done += 1

    return states


def srt(jobs: Sequence[Job], logger: Optional[EventLogger] = None) -> List[JobState]:
    """Shortest-Remaining-Time (preemptive).

    At every time unit the arrived, unfinished job with the least remaining
    work holds the CPU; ties go to the job listed first in the workload.
    The selection can only change when a job arrives or finishes, so the
    clock advances from one such event to the next.
    """
    states = new_run_state(jobs)
    order = _arrival_order(states)
    ready: List[int] = []
    nxt = 0
    clock = 0
    done = 0
    current: Optional[int] = None
    segment_start = 0

    while done < len(states):
        while nxt < len(order) and states[order[nxt]].arrival_time <= clock:
            ready.append(order[nxt])
            nxt += 1

        if not ready:
            next_arrival = states[order[nxt]].arrival_time
            _idle(logger, clock, next_arrival, Scheduler.SRT)
            clock = next_arrival
            continue

        i = min(ready, key=lambda k: (states[k].remaining_time, k))
        state = states[i]
        if i != current:
            if current is not None:
                # The previous holder is still unfinished here
                _run(states[current], segment_start, clock, Scheduler.SRT, logger)
                if logger:
                    logger.log_process_event(clock, states[current].job_id, "preempt")
            _dispatch(state, clock, logger)
            current = i
            segment_start = clock

        run_for = state.remaining_time
        if nxt < len(order):
            run_for = min(run_for, states[order[nxt]].arrival_time - clock)
        clock += run_for
        state.remaining_time -= run_for

        if state.remaining_time == 0:
            _run(state, segment_start, clock, Scheduler.SRT, logger)
            _complete(state, clock, logger)
            ready.remove(i)
            current = None
            done += 1

    return states


def round_robin(jobs: Sequence[Job], quantum: int = DEFAULT_QUANTUM,
                logger: Optional[EventLogger] = None) -> List[JobState]:
    """Round Robin with a fixed time quantum.

    The head of the FIFO ready queue runs for min(quantum, remaining) time
    units. Jobs arriving during that slice, including at its last instant,
    join the queue before the preempted job goes back to the tail.
    """
    quantum = validate_quantum(quantum)
    states = new_run_state(jobs)
    order = _arrival_order(states)
    queue: deque = deque()
    nxt = 0
    clock = 0
    done = 0

    def admit(now: int) -> None:
        nonlocal nxt
        while nxt < len(order) and states[order[nxt]].arrival_time <= now:
            queue.append(order[nxt])
            nxt += 1

    while done < len(states):
        admit(clock)
        if not queue:
            next_arrival = states[order[nxt]].arrival_time
            _idle(logger, clock, next_arrival, Scheduler.RR)
            clock = next_arrival
            continue

        i = queue.popleft()
        state = states[i]
        run_time = min(quantum, state.remaining_time)
        _dispatch(state, clock, logger)
        _run(state, clock, clock + run_time, Scheduler.RR, logger)
        clock += run_time
        admit(clock)
        state.remaining_time -= run_time

        if state.remaining_time > 0:
            queue.append(i)
            if logger:
                logger.log_process_event(clock, state.job_id, "preempt")
        else:
            _complete(state, clock, logger)
            done += 1

    return states
