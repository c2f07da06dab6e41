"""
Result reporting: plain-text tables, coloured console output and pandas
summaries for comparing policies.
"""

from __future__ import annotations

from typing import Dict, List, Mapping
import pandas as pd
from colorama import Fore, Style

from .simulator import SimulationResult


def format_results(name: str, result: SimulationResult) -> str:
    """Render one run as the classic ID/WT/TAT table with averages."""
    lines: List[str] = [f"--- {name} ---", f"{'ID':<3} {'WT':<6} {'TAT':<8}".rstrip()]
    for s in result.states:
        lines.append(f"{s.job_id:<3} {s.waiting_time:<6d} {s.turnaround_time:<8d}".rstrip())
    lines.append(f"Average WT: {result.avg_waiting_time:.2f} ms")
    lines.append(f"Average TAT: {result.avg_turnaround_time:.2f} ms")
    return "\n".join(lines)


def print_results(name: str, result: SimulationResult) -> None:
    header, columns, *rows = format_results(name, result).splitlines()
    job_rows, averages = rows[:-2], rows[-2:]
    print()
    print(Fore.CYAN + Style.BRIGHT + header + Style.RESET_ALL)
    print(Style.BRIGHT + columns + Style.RESET_ALL)
    for row in job_rows:
        print(row)
    for row in averages:
        print(Fore.GREEN + row + Style.RESET_ALL)


def jobs_frame(result: SimulationResult) -> pd.DataFrame:
    """Per-job table of one run, indexed by job id."""
    df = pd.DataFrame([
        {
            "id": s.job_id,
            "arrival_time": s.arrival_time,
            "burst_time": s.burst_time,
            "completion_time": s.completion_time,
            "waiting_time": s.waiting_time,
            "turnaround_time": s.turnaround_time,
            "response_time": s.response_time,
            "dispatches": s.dispatches,
        }
        for s in result.states
    ], columns=["id", "arrival_time", "burst_time", "completion_time", "waiting_time",
                "turnaround_time", "response_time", "dispatches"])
    return df.set_index("id")


def results_frame(results: Mapping[str, SimulationResult]) -> pd.DataFrame:
    """One row of aggregate metrics per policy."""
    rows: List[Dict[str, object]] = []
    for result in results.values():
        rows.append({
            "policy": result.title,
            "time_quantum": result.time_quantum,
            "avg_waiting_time": result.avg_waiting_time,
            "avg_turnaround_time": result.avg_turnaround_time,
            "avg_response_time": result.avg_response_time,
            "total_time": result.total_time,
            "throughput": result.throughput,
            "cpu_utilization": result.cpu_utilization,
        })
    columns = ["policy", "time_quantum", "avg_waiting_time", "avg_turnaround_time",
               "avg_response_time", "total_time", "throughput", "cpu_utilization"]
    return pd.DataFrame(rows, columns=columns).set_index("policy")
