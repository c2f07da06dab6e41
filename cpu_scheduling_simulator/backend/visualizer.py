from __future__ import annotations

from typing import Dict, Optional
import os
import matplotlib
import matplotlib.pyplot as plt

from .simulator import SimulationResult


PALETTE = matplotlib.colormaps["tab20"].colors


def ensure_dir(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def plot_gantt(result: SimulationResult, out_path: Optional[str] = None) -> None:
    ids = [s.job_id for s in result.states]
    fig, ax = plt.subplots(figsize=(12, 3 + 0.3 * max(1, len(ids))))

    # Workload order top to bottom
    y_positions: Dict[str, int] = {pid: len(ids) - 1 - i for i, pid in enumerate(ids)}
    pid_to_color = {pid: PALETTE[i % len(PALETTE)] for i, pid in enumerate(ids)}

    for seg in result.logger.timeline:
        pid = seg.get("pid")
        if not pid:
            # idle CPU
            ax.axvspan(seg["start"], seg["end"], color="#dddddd", alpha=0.5, zorder=0)
            continue
        start = seg["start"]
        end = seg["end"]
        ax.barh(y_positions[pid], end - start, left=start, color=pid_to_color[pid], edgecolor="black", alpha=0.9)

    for s in result.states:
        ax.plot(s.arrival_time, y_positions[s.job_id], marker="v", color="#444444", markersize=5)

    ax.set_yticks([y_positions[pid] for pid in ids])
    ax.set_yticklabels(ids)
    ax.set_xlabel("Time")
    title = f"Gantt Chart - {result.title}"
    if result.time_quantum is not None:
        title += f" (quantum={result.time_quantum})"
    ax.set_title(f"{title}  avg WT={result.avg_waiting_time:.2f}, avg TAT={result.avg_turnaround_time:.2f}")
    ax.set_xlim(0, max(1, result.total_time))
    ax.grid(True, axis="x", linestyle=":", alpha=0.5)
    fig.tight_layout()

    if out_path:
        ensure_dir(out_path)
        fig.savefig(out_path, dpi=150)
        plt.close(fig)
    else:
        plt.show()
