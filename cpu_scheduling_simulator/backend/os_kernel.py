from __future__ import annotations

from typing import Dict, Sequence, Tuple
from dataclasses import dataclass
from colorama import init as colorama_init

from .core import Job, ConfigError
from .schedulers import Scheduler, DEFAULT_QUANTUM, validate_quantum
from .simulator import simulate, normalize_policy, SimulationResult
from .workload import copy_workload, create_jobs
from .report import print_results


@dataclass
class KernelConfig:
    policies: Tuple[str, ...] = Scheduler.ALL
    time_quantum: int = DEFAULT_QUANTUM

    def __post_init__(self):
        if not self.policies:
            raise ConfigError("at least one scheduling policy is required")
        self.policies = tuple(normalize_policy(p) for p in self.policies)
        if Scheduler.RR in self.policies:
            validate_quantum(self.time_quantum)


class OSKernel:
    """Runs a set of scheduling policies over one workload.

    Configuration is validated when the kernel is built, so a bad quantum
    or policy name is rejected before any simulation starts. Each policy
    gets its own copy of the workload.
    """

    def __init__(self, config: KernelConfig | None = None):
        self.config = config or KernelConfig()

    def run(self, jobs: Sequence[Job]) -> Dict[str, SimulationResult]:
        results: Dict[str, SimulationResult] = {}
        for policy in self.config.policies:
            results[policy] = simulate(copy_workload(jobs), policy=policy, time_quantum=self.config.time_quantum)
        return results


def main() -> None:
    """Reference driver: all four policies, quantum 4, canonical workload."""
    colorama_init(autoreset=True)
    jobs = create_jobs()
    results = OSKernel().run(jobs)
    for result in results.values():
        print_results(result.title, result)


if __name__ == "__main__":
    main()
