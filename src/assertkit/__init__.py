"""Assertion helpers that report failures through a test's tester."""

from assertkit.checks import (
    equals,
    error,
    fatal,
    fatal_error,
    has_len,
    has_prefix,
    is_false,
    is_true,
    is_type,
    nil,
    no_error,
    not_equals,
    not_nil,
    panics,
)
from assertkit.config import ConfigError, Settings, configure, get_settings, load_config
from assertkit.kinds import Kind, Ref
from assertkit.tester import (
    PytestTester,
    RecordingTester,
    TestAborted,
    Tester,
    UnitTestTester,
)

__all__ = [
    "ConfigError",
    "Kind",
    "PytestTester",
    "RecordingTester",
    "Ref",
    "Settings",
    "TestAborted",
    "Tester",
    "UnitTestTester",
    "configure",
    "equals",
    "error",
    "fatal",
    "fatal_error",
    "get_settings",
    "has_len",
    "has_prefix",
    "is_false",
    "is_true",
    "is_type",
    "load_config",
    "nil",
    "no_error",
    "not_equals",
    "not_nil",
    "panics",
]
