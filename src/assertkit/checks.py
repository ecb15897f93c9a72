"""Assertion checks.

Every check takes the tester to report to as its first argument and accepts
trailing ``*msg`` arguments. When given, they replace the default failure
message and are joined with spaces.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from assertkit.equality import equivalent
from assertkit.kinds import (
    SIZED_KINDS,
    dynamic_type,
    is_nil,
    is_nilable,
    kind_of,
    length,
    type_name,
)
from assertkit.message import build, format_value
from assertkit.tester import Tester

logger = logging.getLogger(__name__)


def _report(t: Tester, check: str, message: str) -> None:
    __tracebackhide__ = True
    logger.info(f"{check} failed: {message}")
    t.error(message)


def _report_fatal(t: Tester, check: str, message: str) -> None:
    __tracebackhide__ = True
    logger.info(f"{check} failed: {message}")
    t.fatal(message)


def is_true(t: Tester, condition: Any, *msg: Any) -> bool:
    """Check that a condition is true."""
    __tracebackhide__ = True
    if not condition:
        _report(t, "is_true", build(msg, "assert condition is not true"))
        return False
    return True


def is_false(t: Tester, condition: Any, *msg: Any) -> bool:
    """Check that a condition is false."""
    __tracebackhide__ = True
    if condition:
        _report(t, "is_false", build(msg, "assert condition is not false"))
        return False
    return True


def fatal(t: Tester, condition: Any, *msg: Any) -> None:
    """Check that a condition is true, or fail the test and stop it."""
    __tracebackhide__ = True
    if not condition:
        _report_fatal(t, "fatal", build(msg, "assert condition is not true"))


def fatal_error(t: Tester, err: BaseException | None, *msg: Any) -> None:
    """Check that ``err`` is None, or fail the test and stop it."""
    __tracebackhide__ = True
    if err is not None:
        _report_fatal(t, "fatal_error", build(msg, "error '%s' not expected", err))


def error(t: Tester, err: BaseException | None, *msg: Any) -> bool:
    """Check that an error is present."""
    __tracebackhide__ = True
    if err is None:
        _report(t, "error", build(msg, "error expected but not found"))
        return False
    return True


def no_error(t: Tester, err: BaseException | None, *msg: Any) -> bool:
    """Check that no error is present."""
    __tracebackhide__ = True
    if err is not None:
        _report(t, "no_error", build(msg, "error '%s' not expected", err))
        return False
    return True


def equals(t: Tester, expected: Any, actual: Any, *msg: Any) -> bool:
    """Check that ``expected`` and ``actual`` are deeply equal.

    A typed nil such as ``Ref.nil(int)`` equals ``None`` and any nil of the
    same type. Values of different types are never equal.
    """
    __tracebackhide__ = True
    if equivalent(expected, actual):
        return True
    _report(
        t,
        "equals",
        build(
            msg,
            "%s and %s are not equal",
            format_value(expected),
            format_value(actual),
        ),
    )
    return False


def not_equals(t: Tester, expected: Any, actual: Any, *msg: Any) -> bool:
    """Check that ``expected`` and ``actual`` are not equal, see :func:`equals`."""
    __tracebackhide__ = True
    if not equivalent(expected, actual):
        return True
    _report(
        t,
        "not_equals",
        build(msg, "%s and %s are equal", format_value(expected), format_value(actual)),
    )
    return False


def nil(t: Tester, value: Any, *msg: Any) -> bool:
    """Check that the value is None or a nil reference."""
    __tracebackhide__ = True
    if is_nilable(value) and is_nil(value):
        return True
    _report(t, "nil", build(msg, "nil expected and found %s", format_value(value)))
    return False


def not_nil(t: Tester, value: Any, *msg: Any) -> bool:
    """Check that the value is not nil.

    Values of kinds that can never hold a nil, like numbers, always pass.
    """
    __tracebackhide__ = True
    if is_nilable(value) and is_nil(value):
        _report(
            t, "not_nil", build(msg, "not nil expected and found %s", format_value(value))
        )
        return False
    return True


def has_len(t: Tester, expected: int, value: Any, *msg: Any) -> bool:
    """Check that ``len(value)`` matches ``expected``.

    Only strings, sequences, mappings, sets and queues have a length; any
    other value fails.
    """
    __tracebackhide__ = True
    kind = kind_of(value)
    if kind not in SIZED_KINDS:
        _report(
            t,
            "has_len",
            build(
                msg,
                "cannot apply len() to '%s' (%s)",
                kind.value,
                format_value(value),
            ),
        )
        return False
    found = length(value)
    if found != expected:
        _report(
            t,
            "has_len",
            build(msg, "len %d expected and found %d", expected, found),
        )
        return False
    return True


def panics(t: Tester, f: Callable[[], Any], *msg: Any) -> bool:
    """Check that calling ``f`` raises an exception."""
    __tracebackhide__ = True
    try:
        f()
    except Exception as e:
        logger.debug(f"panics captured {type(e).__name__}: {e}")
        return True
    _report(t, "panics", build(msg, "function did not panic"))
    return False


def is_type(t: Tester, expected: Any, value: Any, *msg: Any) -> bool:
    """Check that ``value`` has the same dynamic type as ``expected``."""
    __tracebackhide__ = True
    te = dynamic_type(expected)
    tv = dynamic_type(value)
    if te == tv:
        return True
    _report(
        t,
        "is_type",
        build(msg, "type '%s' expected and found '%s'", type_name(te), type_name(tv)),
    )
    return False


def has_prefix(t: Tester, s: str, prefix: str, *msg: Any) -> bool:
    """Check that ``s`` starts with ``prefix``."""
    __tracebackhide__ = True
    if s.startswith(prefix):
        return True
    _report(t, "has_prefix", build(msg, "'%s' is not a prefix of '%s'", prefix, s))
    return False
