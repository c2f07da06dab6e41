"""
Cross-checks against straightforward unit-step simulations on random workloads.
"""

from __future__ import annotations

import pytest

from cpu_scheduling_simulator.backend.schedulers import sjn, srt, round_robin
from cpu_scheduling_simulator.backend.simulator import simulate, Scheduler
from cpu_scheduling_simulator.backend.utils import EventLogger
from cpu_scheduling_simulator.backend.workload import generate_workload, build_workload


SEEDS = range(25)


def reference_sjn(jobs):
    time = 0
    completed = set()
    result = {}
    while len(completed) < len(jobs):
        ready = [k for k, j in enumerate(jobs) if j.arrival_time <= time and k not in completed]
        if not ready:
            time += 1
            continue
        k = min(ready, key=lambda k: (jobs[k].burst_time, jobs[k].arrival_time, k))
        wait = time - jobs[k].arrival_time
        time += jobs[k].burst_time
        result[jobs[k].job_id] = (wait, wait + jobs[k].burst_time)
        completed.add(k)
    return result


def reference_srt(jobs):
    remaining = [j.burst_time for j in jobs]
    result = {}
    time = 0
    while len(result) < len(jobs):
        shortest = None
        for k, j in enumerate(jobs):
            if j.arrival_time <= time and remaining[k] > 0:
                if shortest is None or remaining[k] < remaining[shortest]:
                    shortest = k
        if shortest is not None:
            remaining[shortest] -= 1
            if remaining[shortest] == 0:
                tat = time + 1 - jobs[shortest].arrival_time
                result[jobs[shortest].job_id] = (tat - jobs[shortest].burst_time, tat)
        time += 1
    return result


def reference_rr(jobs, quantum):
    # Stable arrival order so simultaneous arrivals enqueue in workload order
    order = sorted(range(len(jobs)), key=lambda k: jobs[k].arrival_time)
    remaining = [j.burst_time for j in jobs]
    seen = set()
    queue = []
    result = {}
    time = 0
    while len(result) < len(jobs):
        for k in order:
            if jobs[k].arrival_time <= time and k not in seen:
                queue.append(k)
                seen.add(k)
        if not queue:
            time += 1
            continue
        current = queue.pop(0)
        run_time = min(quantum, remaining[current])
        for _ in range(run_time):
            time += 1
            for k in order:
                if jobs[k].arrival_time == time and k not in seen:
                    queue.append(k)
                    seen.add(k)
        remaining[current] -= run_time
        if remaining[current] > 0:
            queue.append(current)
        else:
            tat = time - jobs[current].arrival_time
            result[jobs[current].job_id] = (tat - jobs[current].burst_time, tat)
    return result


def as_dict(states):
    return {s.job_id: (s.waiting_time, s.turnaround_time) for s in states}


@pytest.mark.parametrize("seed", SEEDS)
def test_sjn_matches_reference(seed):
    jobs = generate_workload(8, seed=seed, max_arrival=25, max_burst=8)
    assert as_dict(sjn(jobs)) == reference_sjn(jobs)


@pytest.mark.parametrize("seed", SEEDS)
def test_sjn_picks_minimum_burst_at_every_decision(seed):
    jobs = generate_workload(10, seed=seed, max_arrival=30, max_burst=9)
    logger = EventLogger()
    states = {s.job_id: s for s in sjn(jobs, logger=logger)}
    for event in logger.process_events:
        if event["event"] != "dispatch":
            continue
        now = event["time"]
        candidates = [s for s in states.values()
                      if s.arrival_time <= now and s.completion_time > now]
        chosen = states[event["pid"]]
        assert chosen.burst_time == min(s.burst_time for s in candidates)


@pytest.mark.parametrize("seed", SEEDS)
def test_srt_matches_unit_step_reference(seed):
    jobs = generate_workload(8, seed=seed, max_arrival=25, max_burst=8)
    assert as_dict(srt(jobs)) == reference_srt(jobs)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("quantum", [1, 2, 3, 4])
def test_round_robin_matches_unit_step_reference(seed, quantum):
    jobs = generate_workload(8, seed=seed, max_arrival=25, max_burst=8)
    assert as_dict(round_robin(jobs, quantum=quantum)) == reference_rr(jobs, quantum)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("quantum", [1, 3, 4])
def test_round_robin_fairness_bound(seed, quantum):
    n = 6
    jobs = generate_workload(n, seed=seed, max_arrival=0, max_burst=12)
    logger = EventLogger()
    round_robin(jobs, quantum=quantum, logger=logger)
    for job in jobs:
        slices = logger.slices_for(job.job_id)
        for prev, nxt in zip(slices, slices[1:]):
            assert nxt["start"] - prev["end"] <= (n - 1) * quantum


@pytest.mark.parametrize("policy", Scheduler.ALL)
@pytest.mark.parametrize("seed", range(5))
def test_average_consistency(policy, seed):
    jobs = generate_workload(12, seed=seed)
    result = simulate(jobs, policy=policy, time_quantum=3)
    waits = [s.waiting_time for s in result.states]
    tats = [s.turnaround_time for s in result.states]
    assert result.avg_waiting_time == pytest.approx(sum(waits) / len(waits))
    assert result.avg_turnaround_time == pytest.approx(sum(tats) / len(tats))


def test_canonical_references_agree(canonical_jobs):
    assert as_dict(sjn(canonical_jobs)) == reference_sjn(canonical_jobs)
    assert as_dict(srt(canonical_jobs)) == reference_srt(canonical_jobs)
    assert as_dict(round_robin(canonical_jobs, quantum=4)) == reference_rr(canonical_jobs, 4)


def test_srt_total_work_conserved():
    jobs = build_workload([("X", 0, 10), ("Y", 2, 1), ("Z", 3, 4)])
    logger = EventLogger()
    srt(jobs, logger=logger)
    for job in jobs:
        assert sum(s["end"] - s["start"] for s in logger.slices_for(job.job_id)) == job.burst_time
