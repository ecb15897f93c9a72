"""Failure message resolution, value formatting and caller attribution."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Any

from assertkit.config import get_settings

_PACKAGE = __name__.partition(".")[0]


def resolve(msg: Sequence[Any], default_format: str, *default_args: Any) -> tuple[Any, ...]:
    """Return the override arguments, or the formatted default message.

    Any override argument suppresses the default entirely.
    """
    if len(msg) > 0:
        return tuple(msg)
    if default_args:
        return (default_format % default_args,)
    return (default_format,)


def render(args: Sequence[Any]) -> str:
    return " ".join(str(a) for a in args)


def format_value(value: Any) -> str:
    """``repr`` of ``value``, truncated to the configured length."""
    text = repr(value)
    limit = get_settings().max_value_length
    if len(text) > limit:
        text = text[: limit - 3] + "..."
    return text


def caller_location() -> tuple[str, int] | None:
    """File basename and line of the first frame outside this package.

    Frames that set ``__tracebackhide__`` are passed through as well.
    """
    frame = sys._getframe(1)
    while frame is not None:
        module = frame.f_globals.get("__name__", "")
        internal = module == _PACKAGE or module.startswith(_PACKAGE + ".")
        if not internal and not frame.f_locals.get("__tracebackhide__", False):
            return os.path.basename(frame.f_code.co_filename), frame.f_lineno
        frame = frame.f_back
    return None


def build(msg: Sequence[Any], default_format: str, *default_args: Any) -> str:
    """Resolve and render a failure message, prefixed with the call site."""
    text = render(resolve(msg, default_format, *default_args))
    if get_settings().show_location:
        location = caller_location()
        if location is not None:
            return f"{location[0]}:{location[1]}: {text}"
    return text
