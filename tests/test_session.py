"""Tests for the fluent assertion session."""

import re

import pytest

from raisecheck import (
    ExceptionAssertion,
    ExpectationFailed,
    InvalidArgumentError,
    assert_that,
)

from tests.conftest import DiskFullError, StorageError, chain, raiser


def _nested_failure():
    try:
        try:
            try:
                raise LookupError("state is broken")
            except LookupError as e:
                raise OSError("read failed") from e
        except OSError as e:
            raise RuntimeError("request failed") from e
    except RuntimeError:
        raise


def test_exact_type_then_message_contains():
    def op():
        raise ValueError("must not be null")

    session = assert_that(op)
    result = session.throws_exactly(ValueError).message_contains("must not be null")
    assert result is session


def test_arithmetic_error_with_message():
    assert_that(raiser(ArithmeticError("/ by zero"))).throws_exactly(
        ArithmeticError
    ).with_message("/ by zero")


def test_real_division_by_zero():
    assert_that(lambda: 1 // 0).throws_exactly(ZeroDivisionError).throws_subtype_of(
        ArithmeticError
    ).message_contains("by zero")


def test_nested_chain_recursive_search():
    session = assert_that(_nested_failure).throws_exactly(RuntimeError)
    session.wraps_exactly(OSError).wraps_exactly_recursive(LookupError)

    with pytest.raises(ExpectationFailed, match="anywhere in the cause chain"):
        session.wraps_exactly_recursive(ValueError)


def test_nothing_raised_presence_fails():
    with pytest.raises(ExpectationFailed) as exc_info:
        assert_that(lambda: None).throws_any()
    assert str(exc_info.value) == "Expected an exception, but nothing was raised."
    assert exc_info.value.expected == "an exception"
    assert exc_info.value.actual == "nothing"


def test_nothing_raised_absence_passes():
    session = assert_that(lambda: None)
    assert session.does_not_throw() is session
    assert session.thrown is None


def test_does_not_throw_fails_when_raised():
    with pytest.raises(ExpectationFailed, match="Expected no exception, but got: KeyError: k"):
        assert_that(raiser(KeyError("k"))).does_not_throw()


def test_expectation_failed_is_assertion_error():
    with pytest.raises(AssertionError):
        assert_that(raiser(ValueError())).throws_exactly(TypeError)


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.throws_exactly(ValueError),
        lambda s: s.throws_subtype_of(Exception),
        lambda s: s.wraps_exactly(OSError),
        lambda s: s.wraps_subtype_of_recursive(OSError),
        lambda s: s.message_equals(None),
        lambda s: s.message_contains("x"),
        lambda s: s.message_matches("x"),
        lambda s: s.with_cause(None),
        lambda s: s.cause_message_contains("x"),
    ],
)
def test_every_check_requires_presence(call):
    with pytest.raises(ExpectationFailed, match="nothing was raised"):
        call(assert_that(lambda: None))


def test_subtype_passes_where_exact_fails():
    session = assert_that(raiser(DiskFullError("no space")))
    session.throws_subtype_of(StorageError)
    with pytest.raises(ExpectationFailed, match="Expected tests.conftest.StorageError"):
        session.throws_exactly(StorageError)


def test_first_failure_stops_chain():
    checked = []

    class Probe(ExceptionAssertion):
        def message_contains(self, substring):
            checked.append(substring)
            return super().message_contains(substring)

    session = Probe(ValueError("boom"))
    with pytest.raises(ExpectationFailed):
        session.throws_exactly(TypeError).message_contains("boom")
    assert checked == []


def test_session_inspects_fixed_snapshot():
    calls = []

    def op():
        calls.append(1)
        raise ValueError(f"call {len(calls)}")

    session = assert_that(op)
    session.throws_any().message_equals("call 1").message_contains("call").throws_exactly(ValueError)
    assert calls == [1]


def test_message_equals_none():
    assert_that(raiser(ValueError())).message_equals(None)
    with pytest.raises(ExpectationFailed):
        assert_that(raiser(ValueError("x"))).message_equals(None)


def test_message_matches_pattern():
    assert_that(raiser(ValueError("id=17"))).message_matches(r"id=\d+")
    assert_that(raiser(ValueError("ID=17"))).message_matches(re.compile(r"id=\d+", re.I))


def test_with_cause_and_cause_message():
    exc = chain(RuntimeError("outer"), OSError("disk is full"))
    assert_that(raiser(exc)).with_cause(OSError).cause_message_contains("full")


def test_with_cause_none_passes_without_cause():
    assert_that(raiser(ValueError("alone"))).with_cause(None)


def test_satisfies_declarative_expectations():
    exc = chain(RuntimeError("outer"), OSError("inner"), KeyError("deep"))
    (
        assert_that(raiser(exc))
        .satisfies({"throws_exactly": RuntimeError})
        .satisfies({"wraps_subtype_of": "LookupError", "recursive": True})
        .satisfies({"message_equals": "outer"})
    )


def test_satisfies_reports_failure():
    with pytest.raises(ExpectationFailed, match="Expected message containing 'zzz'"):
        assert_that(raiser(ValueError("abc"))).satisfies({"message_contains": "zzz"})


def test_repr_shows_captured_exception():
    assert repr(assert_that(raiser(ValueError("x")))) == "ExceptionAssertion(thrown=ValueError('x'))"


# --- caller-contract violations ---


def test_assert_that_none_operation():
    with pytest.raises(InvalidArgumentError):
        assert_that(None)


@pytest.mark.parametrize(
    "method",
    [
        "throws_exactly",
        "throws_subtype_of",
        "wraps_exactly",
        "wraps_subtype_of",
        "wraps_exactly_recursive",
        "wraps_subtype_of_recursive",
    ],
)
def test_none_expected_type_is_invalid(method):
    session = assert_that(raiser(ValueError()))
    with pytest.raises(InvalidArgumentError, match="must not be None"):
        getattr(session, method)(None)


def test_non_exception_expected_type_is_invalid():
    with pytest.raises(InvalidArgumentError, match="exception class"):
        assert_that(raiser(ValueError())).throws_exactly(int)


@pytest.mark.parametrize("method", ["message_contains", "message_matches", "cause_message_contains"])
@pytest.mark.parametrize("term", ["", None])
def test_empty_search_term_is_invalid(method, term):
    session = assert_that(raiser(ValueError("x")))
    with pytest.raises(InvalidArgumentError):
        getattr(session, method)(term)


def test_invalid_argument_checked_before_presence():
    with pytest.raises(InvalidArgumentError):
        assert_that(lambda: None).message_contains("")


# --- sessions created while another exception is being handled ---


def _standalone():
    raise ValueError("standalone")


def test_handled_exception_is_not_a_cause():
    try:
        {}["unrelated"]
    except KeyError:
        session = assert_that(_standalone)

    session.throws_exactly(ValueError).with_cause(None)
    with pytest.raises(ExpectationFailed, match="has no cause"):
        session.wraps_exactly(KeyError)
    with pytest.raises(ExpectationFailed, match="empty cause chain"):
        session.wraps_exactly_recursive(KeyError)


def test_explicit_cause_found_while_handling_unrelated_exception():
    def op():
        raise RuntimeError("outer") from OSError("inner")

    try:
        {}["unrelated"]
    except KeyError:
        session = assert_that(op)

    session.with_cause(OSError).wraps_exactly_recursive(OSError)
    with pytest.raises(ExpectationFailed):
        session.wraps_subtype_of_recursive(LookupError)


@pytest.mark.parametrize("pattern", ["(", "[a-", "*x"])
def test_malformed_pattern_is_invalid(pattern):
    session = assert_that(raiser(ValueError("x")))
    with pytest.raises(InvalidArgumentError, match="Invalid regular expression") as exc_info:
        session.message_matches(pattern)
    assert isinstance(exc_info.value.__cause__, re.error)


@pytest.mark.parametrize("method", ["message_contains", "message_matches", "cause_message_contains"])
@pytest.mark.parametrize("term", [5, b"bytes", ["x"]])
def test_non_string_search_term_is_invalid(method, term):
    session = assert_that(raiser(ValueError("5")))
    with pytest.raises(InvalidArgumentError, match="must be a string"):
        getattr(session, method)(term)


def test_compiled_bytes_pattern_is_invalid():
    with pytest.raises(InvalidArgumentError, match="must be a string"):
        assert_that(raiser(ValueError("x"))).message_matches(re.compile(b"x"))
