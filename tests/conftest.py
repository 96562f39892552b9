import os
import time
from pathlib import Path

import pytest

from src.common.tensors.access_pattern import new_ap
from src.common.tensors.logger import get_access_logger


def pytest_addoption(parser):
    parser.addoption(
        "--access-debug",
        action="store_true",
        help="Emit DEBUG logs from the access-pattern layer during tests",
    )


def pytest_configure(config):
    if config.getoption("--access-debug"):
        os.environ["ACCESS_DEBUG"] = "1"
        get_access_logger()


_RUN_LOG = "pytest_run_times.log"


def pytest_sessionstart(session):
    log_file = Path(session.config.rootpath) / _RUN_LOG
    if log_file.exists():
        lines = log_file.read_text().splitlines()
    else:
        lines = []

    reporter = session.config.pluginmanager.get_plugin("terminalreporter")
    if reporter and lines:
        reporter.write_line("Recent pytest run times:")
        for entry in lines[-5:]:
            reporter.write_line(f"  {entry}")

    session._start_time = time.time()


def pytest_sessionfinish(session, exitstatus):
    duration = time.time() - session._start_time
    log_file = Path(session.config.rootpath) / _RUN_LOG
    history = int(os.environ.get("PYTEST_RUN_TIME_HISTORY", "50"))
    line = f"{time.strftime('%Y-%m-%d %H:%M:%S')} {duration:.2f}"

    if log_file.exists():
        lines = log_file.read_text().splitlines()
    else:
        lines = []

    lines.append(line)
    lines = lines[-history:]
    log_file.write_text("\n".join(lines) + "\n")


# ---------------------------------------------------------------------------
# Shared access patterns
# ---------------------------------------------------------------------------


@pytest.fixture
def grid_ap():
    """A frozen 4x4 row-major access pattern."""
    return new_ap((4, 4))


@pytest.fixture(params=[(2, 3), (2, 2, 6), (3, 1, 2), (4,), (5, 1), (1, 5), (2, 3, 4, 2)])
def shape(request):
    """A selection of shapes covering matrices, vectors and N-D arrays."""
    return request.param
