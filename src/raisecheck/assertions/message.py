"""Checks on the message of the captured exception."""

from __future__ import annotations

import logging
import re

from raisecheck.assertions.base import AssertionResult, exception_message


def _quote(message: str | None) -> str:
    return "None" if message is None else f"'{message}'"


def check_message_equals(
    thrown: BaseException, expected: str | None, logger: logging.Logger
) -> AssertionResult:
    """Check that the exception message equals ``expected``.

    ``expected=None`` passes only when the exception has no message at all.
    """
    message = exception_message(thrown)
    logger.debug(f"Checking message_equals: {_quote(expected)} against {_quote(message)}")

    passed = message == expected
    logger.debug(f"message_equals passed={passed}")

    return AssertionResult(
        name=f"message_equals:{expected}",
        passed=passed,
        message=(
            f"Message is {_quote(message)}"
            if passed
            else f"Expected message {_quote(expected)} but got {_quote(message)}"
        ),
        expected=_quote(expected),
        actual=_quote(message),
    )


def check_message_contains(
    thrown: BaseException, substring: str, logger: logging.Logger
) -> AssertionResult:
    """Check that the exception message contains ``substring``."""
    message = exception_message(thrown)
    logger.debug(f"Checking message_contains: '{substring}' in {_quote(message)}")

    passed = message is not None and substring in message
    logger.debug(f"message_contains passed={passed}")

    return AssertionResult(
        name=f"message_contains:{substring}",
        passed=passed,
        message=(
            f"Message {_quote(message)} contains '{substring}'"
            if passed
            else f"Expected message containing '{substring}' but got {_quote(message)}"
        ),
        expected=f"containing '{substring}'",
        actual=_quote(message),
    )


def check_message_matches(
    thrown: BaseException, pattern: str | re.Pattern[str], logger: logging.Logger
) -> AssertionResult:
    """Check that the whole exception message matches the regex ``pattern``."""
    regex = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
    message = exception_message(thrown)
    logger.debug(f"Checking message_matches: '{regex.pattern}' against {_quote(message)}")

    passed = message is not None and regex.fullmatch(message) is not None
    logger.debug(f"message_matches passed={passed}")

    return AssertionResult(
        name=f"message_matches:{regex.pattern}",
        passed=passed,
        message=(
            f"Message {_quote(message)} matches '{regex.pattern}'"
            if passed
            else f"Expected message matching regex '{regex.pattern}' but got {_quote(message)}"
        ),
        expected=f"matching '{regex.pattern}'",
        actual=_quote(message),
    )
