import os
import sys

import pytest

# Headless plotting for the Gantt chart tests
os.environ.setdefault("MPLBACKEND", "Agg")


def pytest_sessionstart(session):
    # Ensure project root is on sys.path so 'cpu_scheduling_simulator' can be imported
    here = os.path.dirname(os.path.abspath(__file__))
    project_root = os.path.abspath(os.path.join(here, os.pardir, os.pardir))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


@pytest.fixture
def canonical_jobs():
    from cpu_scheduling_simulator.backend.workload import create_jobs
    return create_jobs()
