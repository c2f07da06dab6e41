from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure repo root is on sys.path so this script can be executed directly
repo_root = Path(__file__).resolve().parents[2]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from colorama import Fore, init as colorama_init

from cpu_scheduling_simulator.backend.core import Job, SchedulerError
from cpu_scheduling_simulator.backend.schedulers import Scheduler, DEFAULT_QUANTUM
from cpu_scheduling_simulator.backend.workload import create_jobs, load_workload_csv, generate_workload
from cpu_scheduling_simulator.backend.os_kernel import OSKernel, KernelConfig
from cpu_scheduling_simulator.backend.report import print_results, results_frame
from cpu_scheduling_simulator.backend.visualizer import plot_gantt


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="CPU scheduling simulator (FCFS, SJN, SRT, Round Robin)")
    p.add_argument("--policy", default="ALL", help="FCFS, SJN, SRT, RR or ALL (default ALL)")
    p.add_argument("--quantum", type=int, default=DEFAULT_QUANTUM, help="Round Robin time quantum")
    source = p.add_mutually_exclusive_group()
    source.add_argument("--workload", type=str, default=None, help="CSV with columns id,arrival_time,burst_time")
    source.add_argument("--random", type=int, default=None, metavar="N", help="Generate N random jobs")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--gantt", type=str, default=None, metavar="DIR", help="Save one Gantt chart per policy")
    p.add_argument("--logs", type=str, default=None, metavar="DIR", help="Export event logs (JSON and CSV)")
    p.add_argument("--csv", type=str, default=None, metavar="PATH", help="Write the policy comparison table")
    return p.parse_args(argv)


def load_jobs(args: argparse.Namespace) -> List[Job]:
    if args.workload:
        return load_workload_csv(args.workload)
    if args.random is not None:
        return generate_workload(args.random, seed=args.seed)
    return create_jobs()


def main(argv: Optional[List[str]] = None) -> int:
    colorama_init(autoreset=True)
    args = parse_args(argv)
    policies = Scheduler.ALL if args.policy.upper() == "ALL" else (args.policy,)

    try:
        jobs = load_jobs(args)
        kernel = OSKernel(KernelConfig(policies=policies, time_quantum=args.quantum))
    except (SchedulerError, OSError) as e:
        print(Fore.RED + f"Error: {e}", file=sys.stderr)
        return 2

    results = kernel.run(jobs)
    for policy, result in results.items():
        print_results(result.title, result)
        if args.gantt:
            out = Path(args.gantt) / f"gantt_{policy.lower()}.png"
            plot_gantt(result, str(out))
            print(Fore.CYAN + f"Saved plot to {out}")
        if args.logs:
            out = Path(args.logs)
            out.mkdir(parents=True, exist_ok=True)
            base = out / f"run_{policy.lower()}"
            result.logger.export_json(str(base.with_suffix(".json")))
            result.logger.export_csv(str(base))
            print(Fore.CYAN + f"Logs written to {out} (base: {base})")

    if len(results) > 1:
        print()
        print(results_frame(results).round(2).to_string())
    if args.csv:
        results_frame(results).to_csv(args.csv)
        print(Fore.CYAN + f"Saved comparison to {args.csv}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
