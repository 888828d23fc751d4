"""Tests for the pytest fixtures."""

from raisecheck import ExceptionAssertion


def test_raises_that_fixture_returns_session(raises_that):
    def op():
        raise KeyError("missing")

    session = raises_that(op)
    assert isinstance(session, ExceptionAssertion)
    session.throws_exactly(KeyError).message_equals("missing")


def test_raisecheck_logger_writes_trace(raises_that, raisecheck_logger, tmp_path):
    raises_that(lambda: None).does_not_throw()
    assert "completed without raising" in (tmp_path / "raisecheck.log").read_text()


def test_failed_expectation_reported_as_test_failure(pytester):
    pytester.makepyfile(
        """
        from raisecheck import assert_that

        def test_wrong_type():
            def op():
                raise ValueError("bad")

            assert_that(op).throws_exactly(TypeError)
        """
    )
    result = pytester.runpytest()
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*Expected TypeError to be raised, but got ValueError: bad*"])
