"""pytest plugin providing the ``tester`` fixture."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from assertkit.config import configure, load_config
from assertkit.tester import PytestTester
from assertkit.verbose import setup_logger

logger = logging.getLogger(__name__)

tester_key = pytest.StashKey[PytestTester]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("assertkit")
    group.addoption(
        "--assertkit-config",
        dest="assertkit_config",
        default=None,
        help="YAML settings file for assertkit checks.",
    )
    group.addoption(
        "--assertkit-no-location",
        dest="assertkit_no_location",
        action="store_true",
        default=False,
        help="Do not prefix failure messages with the caller's file:line.",
    )
    parser.addini("assertkit_config", "YAML settings file for assertkit checks.")


def pytest_configure(config: pytest.Config) -> None:
    path = config.getoption("assertkit_config") or config.getini("assertkit_config")
    if path:
        settings = configure(load_config(Path(config.rootpath, path)))
    else:
        settings = configure()

    if config.getoption("assertkit_no_location"):
        settings = configure(show_location=False)

    setup_logger(settings)
    if settings.log_file or settings.verbose:
        logger.debug(f"assertkit settings: {settings.model_dump()}")


@pytest.fixture
def tester(request: pytest.FixtureRequest) -> PytestTester:
    """Reporting target for assertkit checks in the current test."""
    t = PytestTester()
    request.node.stash[tester_key] = t
    return t


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[None]):
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or report.skipped:
        return
    t = item.stash.get(tester_key, None)
    if t is None or not t.failures:
        return
    collected = "\n".join(t.failures)
    if report.passed:
        report.outcome = "failed"
        report.longrepr = collected
        return
    # keep the soft failures that came before the error
    report.sections.append(("assertkit failures", collected))
