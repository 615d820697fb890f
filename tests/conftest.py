"""conftest.py
Pytest logging hooks and shared fixtures.
"""

import pytest
from resume_ats.logging import LoggerFactory
from resume_ats.conftest_helpers import apply_sequential_id_patch

# --------------------------------------------------------------
# SETUP TEST LOGGING
# --------------------------------------------------------------

# Integrate logger with pytest
logger = LoggerFactory().get_logger(
    name="pytest_logger",
    logger_type="pytest",
    console=True
)
current_class = None

@pytest.hookimpl(tryfirst=True)
def pytest_sessionstart(session):
    """Session start header."""
    logger.info("==== PYTEST SESSION START ====")

@pytest.hookimpl(tryfirst=True)
def pytest_runtest_logstart(nodeid, location):
    """Called at the start of each test."""
    global current_class
    class_name = location[0]
    if class_name != current_class:
        current_class = class_name
        logger.info(f"\n---- TestClass: {current_class} ----")

@pytest.hookimpl(tryfirst=True)
def pytest_runtest_logreport(report):
    """Called at the end of each test phase (setup/call/teardown)."""
    if report.when != "call":
        return  # only care about the main call, not setup/teardown

    status = report.outcome.upper()  # PASSED / FAILED / SKIPPED
    if status == "PASSED":
        logger.info(f"PASSED: {report.nodeid}")
    elif status == "FAILED":
        logger.error(f"FAILED: {report.nodeid}\n{report.longreprtext}")
    elif status == "SKIPPED":
        logger.warning(f"SKIPPED: {report.nodeid}\n{report.longreprtext}")

@pytest.hookimpl(tryfirst=True)
def pytest_sessionfinish(session, exitstatus):
    """Session finish footer."""
    logger.info(f"==== PYTEST SESSION END: exitstatus={exitstatus} ====")


# --------------------------------------------------------------
# SETUP FIXTURES
# --------------------------------------------------------------
@pytest.fixture(autouse=False)
def FORCE_SEQUENTIAL_IDS(monkeypatch):
    """
    Make extracted entries get predictable ids (`entry-1`, `entry-2`, ...).

    Scope:
      - Per test function or per test class (via `@pytest.mark.usefixtures`).

    Usage:
      - Class-level:
        ```
        @pytest.mark.usefixtures("FORCE_SEQUENTIAL_IDS")
        class TestResumeExtractor:
            ...
        ```
      - Function-level:
        ```
        def test_example(FORCE_SEQUENTIAL_IDS):
            ...
        ```

    Only extractors created after the fixture runs are affected.
    """
    apply_sequential_id_patch(monkeypatch)
    yield
