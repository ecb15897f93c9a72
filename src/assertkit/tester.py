"""Reporting targets that checks deliver their failures to."""

from __future__ import annotations

import unittest
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import pytest


class TestAborted(AssertionError):
    """Raised by :class:`RecordingTester` when a fatal failure aborts the test."""

    __test__ = False


@runtime_checkable
class Tester(Protocol):
    """What a check needs from the test it runs in.

    ``error`` records a failure and lets the test continue; ``fatal`` records
    a failure and must not return control to the test.
    """

    def error(self, message: str) -> None: ...

    def fatal(self, message: str) -> None: ...


@dataclass
class Report:
    method: str
    message: str


@dataclass
class RecordingTester:
    """Tester that keeps every report it receives.

    With ``abort=True`` a fatal report raises :class:`TestAborted`.
    """

    __test__ = False

    abort: bool = False
    reports: list[Report] = field(default_factory=list)

    def error(self, message: str) -> None:
        self.reports.append(Report("error", message))

    def fatal(self, message: str) -> None:
        self.reports.append(Report("fatal", message))
        if self.abort:
            raise TestAborted(message)

    @property
    def method(self) -> str:
        """Method of the latest report, or ``""`` when nothing was reported."""
        return self.reports[-1].method if self.reports else ""

    @property
    def messages(self) -> list[str]:
        return [r.message for r in self.reports]


class PytestTester:
    """Tester for pytest tests.

    Non-fatal failures are collected and turned into a test failure by the
    ``assertkit.plugin`` report hook; fatal failures call ``pytest.fail``.
    """

    __test__ = False

    def __init__(self) -> None:
        self.failures: list[str] = []

    def error(self, message: str) -> None:
        self.failures.append(message)

    def fatal(self, message: str) -> None:
        __tracebackhide__ = True
        pytest.fail(message, pytrace=False)


class UnitTestTester:
    """Tester wrapping a :class:`unittest.TestCase`."""

    __test__ = False

    def __init__(self, case: unittest.TestCase) -> None:
        self.case = case
        self.failures: list[str] = []

    def error(self, message: str) -> None:
        if not self.failures:
            self.case.addCleanup(self._fail_collected)
        self.failures.append(message)

    def fatal(self, message: str) -> None:
        self.case.fail(message)

    def _fail_collected(self) -> None:
        self.case.fail("\n".join(self.failures))
