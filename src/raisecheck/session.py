"""Fluent assertion session over a captured exception."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from pydantic import BaseModel

from raisecheck.assertions.base import AssertionResult
from raisecheck.assertions.cause import (
    check_cause_message_contains,
    check_with_cause,
    check_wraps_exactly,
    check_wraps_exactly_recursive,
    check_wraps_subtype_of,
    check_wraps_subtype_of_recursive,
)
from raisecheck.assertions.evaluate import evaluate_expectation
from raisecheck.assertions.message import (
    check_message_contains,
    check_message_equals,
    check_message_matches,
)
from raisecheck.assertions.presence import check_does_not_throw, check_throws_any
from raisecheck.assertions.type_checks import (
    check_throws_exactly,
    check_throws_subtype_of,
)
from raisecheck.capture import capture
from raisecheck.exceptions import ExpectationFailed, InvalidArgumentError

_logger = logging.getLogger("raisecheck")


def _require_exception_type(expected: Any) -> None:
    if expected is None:
        raise InvalidArgumentError("Expected type must not be None")
    if not (isinstance(expected, type) and issubclass(expected, BaseException)):
        raise InvalidArgumentError(
            f"Expected type must be an exception class, got {expected!r}"
        )


def _require_search_term(term: Any) -> str:
    if term is None:
        raise InvalidArgumentError(
            "Cannot check if the message contains None. This does not make any sense."
        )
    if not isinstance(term, str):
        raise InvalidArgumentError(f"Search term must be a string, got {term!r}")
    if term == "":
        raise InvalidArgumentError(
            "Cannot check if the message contains an empty string. This does not make any sense."
        )
    return term


def _require_pattern(pattern: Any) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        _require_search_term(pattern.pattern)
        return pattern
    try:
        return re.compile(_require_search_term(pattern))
    except re.error as e:
        raise InvalidArgumentError(f"Invalid regular expression {pattern!r}: {e}") from e


class ExceptionAssertion:
    """Chainable checks on the exception raised by a single operation run.

    Every check returns the same session on success and raises
    ExpectationFailed on the first mismatch. All checks except
    ``does_not_throw`` require that something was raised.

    Example::

        assert_that(lambda: int("x")) \\
            .throws_exactly(ValueError) \\
            .message_contains("invalid literal")
    """

    def __init__(self, thrown: BaseException | None, logger: logging.Logger | None = None) -> None:
        self._thrown = thrown
        self._logger = logger or _logger

    @property
    def thrown(self) -> BaseException | None:
        """The captured exception, or None if the operation completed normally."""
        return self._thrown

    def _verify(self, result: AssertionResult) -> ExceptionAssertion:
        __tracebackhide__ = True
        if not result.passed:
            self._logger.debug(f"Expectation {result.name} failed: {result.message}")
            raise ExpectationFailed(result)
        return self

    def _present(self) -> BaseException:
        __tracebackhide__ = True
        thrown = self._thrown
        self._verify(check_throws_any(thrown, logger=self._logger))
        return thrown

    # --- presence ---

    def throws_any(self) -> ExceptionAssertion:
        __tracebackhide__ = True
        return self._verify(check_throws_any(self._thrown, logger=self._logger))

    def does_not_throw(self) -> ExceptionAssertion:
        __tracebackhide__ = True
        return self._verify(check_does_not_throw(self._thrown, logger=self._logger))

    # --- type checks ---

    def throws_exactly(self, expected: type[BaseException]) -> ExceptionAssertion:
        """Pass if the raised exception is exactly ``expected``, not a subclass."""
        __tracebackhide__ = True
        _require_exception_type(expected)
        thrown = self._present()
        return self._verify(check_throws_exactly(thrown, expected, logger=self._logger))

    def throws_subtype_of(self, expected: type[BaseException]) -> ExceptionAssertion:
        __tracebackhide__ = True
        _require_exception_type(expected)
        thrown = self._present()
        return self._verify(check_throws_subtype_of(thrown, expected, logger=self._logger))

    def wraps_exactly(self, expected: type[BaseException]) -> ExceptionAssertion:
        __tracebackhide__ = True
        _require_exception_type(expected)
        thrown = self._present()
        return self._verify(check_wraps_exactly(thrown, expected, logger=self._logger))

    def wraps_subtype_of(self, expected: type[BaseException]) -> ExceptionAssertion:
        __tracebackhide__ = True
        _require_exception_type(expected)
        thrown = self._present()
        return self._verify(check_wraps_subtype_of(thrown, expected, logger=self._logger))

    def wraps_exactly_recursive(self, expected: type[BaseException]) -> ExceptionAssertion:
        """Pass if any exception in the cause chain is exactly ``expected``."""
        __tracebackhide__ = True
        _require_exception_type(expected)
        thrown = self._present()
        return self._verify(check_wraps_exactly_recursive(thrown, expected, logger=self._logger))

    def wraps_subtype_of_recursive(self, expected: type[BaseException]) -> ExceptionAssertion:
        """Pass if any exception in the cause chain is an instance of ``expected``."""
        __tracebackhide__ = True
        _require_exception_type(expected)
        thrown = self._present()
        return self._verify(
            check_wraps_subtype_of_recursive(thrown, expected, logger=self._logger)
        )

    # --- message checks ---

    def message_equals(self, expected: str | None) -> ExceptionAssertion:
        """Pass if the message equals ``expected``; None means "no message"."""
        __tracebackhide__ = True
        thrown = self._present()
        return self._verify(check_message_equals(thrown, expected, logger=self._logger))

    with_message = message_equals

    def message_contains(self, substring: str) -> ExceptionAssertion:
        __tracebackhide__ = True
        _require_search_term(substring)
        thrown = self._present()
        return self._verify(check_message_contains(thrown, substring, logger=self._logger))

    def message_matches(self, pattern: str | re.Pattern[str]) -> ExceptionAssertion:
        """Pass if the whole message matches the regular expression ``pattern``."""
        __tracebackhide__ = True
        regex = _require_pattern(pattern)
        thrown = self._present()
        return self._verify(check_message_matches(thrown, regex, logger=self._logger))

    # --- cause checks ---

    def with_cause(self, expected: type[BaseException] | None) -> ExceptionAssertion:
        """Pass if the direct cause is exactly ``expected``; None requires no cause."""
        __tracebackhide__ = True
        if expected is not None:
            _require_exception_type(expected)
        thrown = self._present()
        return self._verify(check_with_cause(thrown, expected, logger=self._logger))

    def cause_message_contains(self, substring: str) -> ExceptionAssertion:
        __tracebackhide__ = True
        _require_search_term(substring)
        thrown = self._present()
        return self._verify(
            check_cause_message_contains(thrown, substring, logger=self._logger)
        )

    # --- declarative ---

    def satisfies(self, expectation: dict[str, Any] | BaseModel) -> ExceptionAssertion:
        """Evaluate a declarative expectation such as ``{"throws_exactly": KeyError}``."""
        __tracebackhide__ = True
        return self._verify(
            evaluate_expectation(self._thrown, expectation, logger=self._logger)
        )

    def __repr__(self) -> str:
        return f"ExceptionAssertion(thrown={self._thrown!r})"


def assert_that(
    operation: Callable[[], Any],
    *,
    logger: logging.Logger | None = None,
) -> ExceptionAssertion:
    """Run ``operation`` once and return a session for checking what it raised."""
    return ExceptionAssertion(capture(operation, logger=logger), logger=logger)
