"""Presence and absence checks."""

from __future__ import annotations

import logging

from raisecheck.assertions.base import AssertionResult, describe


def check_throws_any(thrown: BaseException | None, logger: logging.Logger) -> AssertionResult:
    """Check that the operation raised something."""
    passed = thrown is not None
    logger.debug(f"Checking throws_any: raised={describe(thrown)}, passed={passed}")

    return AssertionResult(
        name="throws_any",
        passed=passed,
        message=(
            f"Raised {describe(thrown)}"
            if passed
            else "Expected an exception, but nothing was raised."
        ),
        expected="an exception",
        actual=describe(thrown),
    )


def check_does_not_throw(thrown: BaseException | None, logger: logging.Logger) -> AssertionResult:
    """Check that the operation completed without raising."""
    passed = thrown is None
    logger.debug(f"Checking does_not_throw: raised={describe(thrown)}, passed={passed}")

    return AssertionResult(
        name="does_not_throw",
        passed=passed,
        message=(
            "Nothing was raised"
            if passed
            else f"Expected no exception, but got: {describe(thrown)}"
        ),
        expected="nothing",
        actual=describe(thrown),
    )
