"""Tests for the pytest plugin."""

import textwrap

PLUGIN = ("-p", "assertkit.plugin")

SOFT_FAILURES = """
    from assertkit import equals, is_true

    def test_soft(tester):
        equals(tester, 1, 2)
        is_true(tester, False)
        equals(tester, "a" * 50, "b")
"""


def test_passing_checks_pass(pytester):
    pytester.makepyfile(
        test_ok="""
        from assertkit import equals, has_prefix

        def test_ok(tester):
            assert equals(tester, [1], [1])
            assert has_prefix(tester, "1234", "12")
        """
    )
    result = pytester.runpytest(*PLUGIN)
    result.assert_outcomes(passed=1)


def test_non_fatal_failures_fail_the_test(pytester):
    pytester.makepyfile(test_soft=SOFT_FAILURES)
    result = pytester.runpytest(*PLUGIN)
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(
        [
            "*test_soft.py:[0-9]*: 1 and 2 are not equal*",
            "*test_soft.py:[0-9]*: assert condition is not true*",
        ]
    )


def test_fatal_stops_the_test(pytester):
    pytester.makepyfile(
        test_fatal="""
        from assertkit import fatal

        def test_fatal(tester):
            fatal(tester, False, "stop here")
            raise RuntimeError("unreachable")
        """
    )
    result = pytester.runpytest(*PLUGIN)
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*stop here*"])
    result.stdout.no_fnmatch_line("*unreachable*")


def test_no_location_option(pytester):
    pytester.makepyfile(test_soft=SOFT_FAILURES)
    result = pytester.runpytest(*PLUGIN, "--assertkit-no-location")
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*1 and 2 are not equal*"])
    result.stdout.no_fnmatch_line("*.py:[0-9]*: 1 and 2 are not equal*")


def test_config_option(pytester):
    config = pytester.makefile(
        ".yaml",
        assertkit=textwrap.dedent("""\
            show_location: false
            max_value_length: 10
        """),
    )
    pytester.makepyfile(test_soft=SOFT_FAILURES)
    result = pytester.runpytest(*PLUGIN, "--assertkit-config", str(config))
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*'aaaaaa... and 'b' are not equal*"])
    result.stdout.no_fnmatch_line("*.py:[0-9]*: 1 and 2 are not equal*")


def test_config_ini_and_log_file(pytester):
    pytester.makefile(".yaml", assertkit="log_file: logs/assertkit.log\n")
    pytester.makeini(
        """
        [pytest]
        assertkit_config = assertkit.yaml
        """
    )
    pytester.makepyfile(test_soft=SOFT_FAILURES)
    result = pytester.runpytest(*PLUGIN)
    result.assert_outcomes(failed=1)

    log = pytester.path / "logs" / "assertkit.log"
    content = log.read_text()
    assert "equals failed:" in content
    assert "is_true failed:" in content


def test_soft_failures_kept_when_test_raises(pytester):
    pytester.makepyfile(
        test_raises="""
        from assertkit import equals

        def test_raises(tester):
            equals(tester, 1, 2)
            raise RuntimeError("boom")
        """
    )
    result = pytester.runpytest(*PLUGIN)
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(
        [
            "*RuntimeError: boom*",
            "*assertkit failures*",
            "*test_raises.py:[0-9]*: 1 and 2 are not equal*",
        ]
    )
