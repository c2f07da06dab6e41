from __future__ import annotations

from typing import List, Dict, Optional, Any, Sequence
import json
import csv

from .core import JobState


class EventLogger:
    def __init__(self) -> None:
        self.process_events: List[Dict[str, Any]] = []
        self.timeline: List[Dict[str, Any]] = []

    def log_process_event(self, time_s: int, pid: str, event: str) -> None:
        self.process_events.append({
            "time": time_s,
            "pid": pid,
            "event": event,
        })

    def log_timeline_slice(self, start: int, end: int, pid: Optional[str], policy: str, reason: Optional[str] = None) -> None:
        if end <= start:
            return
        self.timeline.append({
            "start": start,
            "end": end,
            "pid": pid,
            "policy": policy,
            "reason": reason,
        })

    def slices_for(self, pid: str) -> List[Dict[str, Any]]:
        return [s for s in self.timeline if s["pid"] == pid]

    def export_json(self, path: str) -> None:
        data = {
            "process_events": self.process_events,
            "timeline": self.timeline,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def export_csv(self, base_path_no_ext: str) -> None:
        with open(f"{base_path_no_ext}_events.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["time", "pid", "event"])
            writer.writeheader()
            for row in self.process_events:
                writer.writerow(row)
        with open(f"{base_path_no_ext}_timeline.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["start", "end", "pid", "policy", "reason"])
            writer.writeheader()
            for row in self.timeline:
                writer.writerow(row)


def compute_waiting_times(states: Sequence[JobState]) -> Dict[str, int]:
    return {s.job_id: s.waiting_time for s in states if s.completed}


def compute_turnaround_times(states: Sequence[JobState]) -> Dict[str, int]:
    return {s.job_id: s.turnaround_time for s in states if s.completed}


def compute_response_times(states: Sequence[JobState]) -> Dict[str, int]:
    return {s.job_id: s.response_time for s in states if s.response_time is not None}


def compute_avg(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def compute_makespan(states: Sequence[JobState]) -> int:
    finished = [s.completion_time for s in states if s.completed]
    return max(finished) if finished else 0


def compute_throughput(states: Sequence[JobState], total_time: float) -> float:
    if total_time <= 0:
        return 0.0
    completed = len([s for s in states if s.completed])
    return completed / total_time


def compute_cpu_utilization(states: Sequence[JobState], total_time: float) -> float:
    """Percentage of the makespan during which the CPU was busy."""
    if total_time <= 0:
        return 0.0
    busy = sum(s.burst_time for s in states if s.completed)
    return (busy / total_time) * 100
