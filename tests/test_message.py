"""Tests for failure message building."""

import sys

from assertkit.config import override
from assertkit.message import build, caller_location, format_value, render, resolve


def test_resolve_keeps_override():
    args = ("%s", "a message")
    assert resolve(args, "default message") == ("%s", "a message")


def test_resolve_uses_default():
    assert resolve((), "default message") == ("default message",)
    assert resolve((), "len %d expected", 3) == ("len 3 expected",)


def test_resolve_default_without_args_is_not_formatted():
    assert resolve((), "100% sure") == ("100% sure",)


def test_render_joins_with_spaces():
    assert render(("got", 3, None)) == "got 3 None"


def test_format_value_truncates():
    with override(max_value_length=10):
        assert format_value("a" * 50) == "'aaaaaa..."
        assert format_value("ab") == "'ab'"


def test_caller_location_is_this_frame():
    location = caller_location()
    line = sys._getframe().f_lineno - 1
    assert location == ("test_message.py", line)


def test_caller_location_skips_hidden_frames():
    def helper():
        __tracebackhide__ = True
        return caller_location()

    location = helper()
    line = sys._getframe().f_lineno - 1
    assert location == ("test_message.py", line)


def test_build_with_and_without_location():
    assert build((), "boom").startswith("test_message.py:")
    with override(show_location=False):
        assert build((), "boom") == "boom"
        assert build(("custom",), "boom") == "custom"
