"""Exact-type and subtype checks on the captured exception."""

from __future__ import annotations

import logging

from raisecheck.assertions.base import AssertionResult, describe, type_name


def matches_type(exc: BaseException, expected: type[BaseException], exact: bool) -> bool:
    if exact:
        return type(exc) is expected
    return isinstance(exc, expected)


def _check_type(
    thrown: BaseException | None,
    expected: type[BaseException],
    *,
    exact: bool,
    logger: logging.Logger,
) -> AssertionResult:
    kind = "throws_exactly" if exact else "throws_subtype_of"
    expected_name = type_name(expected)
    expected_desc = expected_name if exact else f"a subtype of {expected_name}"
    logger.debug(f"Checking {kind}: {expected_name}")

    if thrown is None:
        logger.debug(f"{kind} failed: nothing was raised")
        return AssertionResult(
            name=f"{kind}:{expected_name}",
            passed=False,
            message=f"Expected {expected_desc} to be raised, but nothing was raised.",
            expected=expected_desc,
            actual="nothing",
        )

    actual_name = type_name(type(thrown))
    passed = matches_type(thrown, expected, exact)
    logger.debug(f"Raised {actual_name}, expected {expected_desc}, passed={passed}")

    return AssertionResult(
        name=f"{kind}:{expected_name}",
        passed=passed,
        message=(
            f"Raised {actual_name}"
            if passed
            else f"Expected {expected_desc} to be raised, but got {describe(thrown)}"
        ),
        expected=expected_desc,
        actual=actual_name,
    )


def check_throws_exactly(
    thrown: BaseException | None, expected: type[BaseException], logger: logging.Logger
) -> AssertionResult:
    """Check that the raised exception is exactly of type ``expected`` (no subclasses)."""
    return _check_type(thrown, expected, exact=True, logger=logger)


def check_throws_subtype_of(
    thrown: BaseException | None, expected: type[BaseException], logger: logging.Logger
) -> AssertionResult:
    """Check that the raised exception is an instance of ``expected`` or a subclass."""
    return _check_type(thrown, expected, exact=False, logger=logger)
