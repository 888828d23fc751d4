"""Checks on the cause chain of the captured exception.

The direct cause of an exception is the exception it explicitly wraps, i.e.
``__cause__`` as set by ``raise ... from ...``. The implicit ``__context__`` is
not followed: it records whatever was being handled when the exception was
raised, including exceptions the caller of ``assert_that`` is handling.
"""

from __future__ import annotations

import logging
from typing import Iterator

from raisecheck.assertions.base import (
    AssertionResult,
    describe,
    exception_message,
    type_name,
)
from raisecheck.assertions.type_checks import matches_type
from raisecheck.exceptions import CyclicCauseChainError


def direct_cause(exc: BaseException) -> BaseException | None:
    """Return the exception ``exc`` directly wraps, or None."""
    return exc.__cause__


def iter_causes(exc: BaseException) -> Iterator[BaseException]:
    """Yield each link of the cause chain of ``exc``, nearest first.

    ``exc`` itself is not yielded. Raises CyclicCauseChainError when a link
    points back to an exception already visited.
    """
    seen = {id(exc)}
    current = direct_cause(exc)
    depth = 1
    while current is not None:
        if id(current) in seen:
            raise CyclicCauseChainError(
                AssertionResult(
                    name="cause_chain",
                    passed=False,
                    message=(
                        f"Cause chain of {describe(exc)} is cyclic: link {depth} "
                        f"({describe(current)}) was already visited"
                    ),
                    expected="a finite cause chain",
                    actual=f"cycle at depth {depth}",
                )
            )
        seen.add(id(current))
        yield current
        current = direct_cause(current)
        depth += 1


def _check_wraps(
    thrown: BaseException,
    expected: type[BaseException],
    *,
    exact: bool,
    logger: logging.Logger,
) -> AssertionResult:
    kind = "wraps_exactly" if exact else "wraps_subtype_of"
    expected_name = type_name(expected)
    expected_desc = expected_name if exact else f"a subtype of {expected_name}"
    logger.debug(f"Checking {kind}: {expected_name} as direct cause of {describe(thrown)}")

    cause = direct_cause(thrown)
    if cause is None:
        logger.debug(f"{kind} failed: no cause")
        return AssertionResult(
            name=f"{kind}:{expected_name}",
            passed=False,
            message=(
                f"Expected a wrapped exception (cause) of type {expected_desc} "
                f"but {describe(thrown)} has no cause"
            ),
            expected=expected_desc,
            actual="no cause",
        )

    actual_name = type_name(type(cause))
    passed = matches_type(cause, expected, exact)
    logger.debug(f"Cause is {actual_name}, passed={passed}")

    return AssertionResult(
        name=f"{kind}:{expected_name}",
        passed=passed,
        message=(
            f"Wraps {actual_name}"
            if passed
            else f"Expected a wrapped exception (cause) of type {expected_desc} but got {describe(cause)}"
        ),
        expected=expected_desc,
        actual=actual_name,
    )


def _check_wraps_recursive(
    thrown: BaseException,
    expected: type[BaseException],
    *,
    exact: bool,
    logger: logging.Logger,
) -> AssertionResult:
    kind = "wraps_exactly_recursive" if exact else "wraps_subtype_of_recursive"
    expected_name = type_name(expected)
    expected_desc = expected_name if exact else f"a subtype of {expected_name}"
    logger.debug(f"Searching cause chain of {describe(thrown)} for {expected_desc}")

    visited: list[str] = []
    for depth, cause in enumerate(iter_causes(thrown), start=1):
        visited.append(type_name(type(cause)))
        if matches_type(cause, expected, exact):
            logger.debug(f"Found {visited[-1]} at depth {depth}")
            return AssertionResult(
                name=f"{kind}:{expected_name}",
                passed=True,
                message=f"Found {visited[-1]} at depth {depth} of the cause chain",
                expected=expected_desc,
                actual=" -> ".join(visited),
            )

    logger.debug(f"{expected_desc} not found in cause chain ({len(visited)} links)")
    chain = " -> ".join(visited) if visited else "empty cause chain"
    return AssertionResult(
        name=f"{kind}:{expected_name}",
        passed=False,
        message=(
            f"Expected a wrapped exception (anywhere in the cause chain) of type "
            f"{expected_desc} but none was found in: {chain}"
        ),
        expected=expected_desc,
        actual=chain,
    )


def check_wraps_exactly(
    thrown: BaseException, expected: type[BaseException], logger: logging.Logger
) -> AssertionResult:
    """Check that the direct cause is exactly of type ``expected``."""
    return _check_wraps(thrown, expected, exact=True, logger=logger)


def check_wraps_subtype_of(
    thrown: BaseException, expected: type[BaseException], logger: logging.Logger
) -> AssertionResult:
    """Check that the direct cause is an instance of ``expected``."""
    return _check_wraps(thrown, expected, exact=False, logger=logger)


def check_wraps_exactly_recursive(
    thrown: BaseException, expected: type[BaseException], logger: logging.Logger
) -> AssertionResult:
    """Check that some link of the cause chain is exactly of type ``expected``."""
    return _check_wraps_recursive(thrown, expected, exact=True, logger=logger)


def check_wraps_subtype_of_recursive(
    thrown: BaseException, expected: type[BaseException], logger: logging.Logger
) -> AssertionResult:
    """Check that some link of the cause chain is an instance of ``expected``."""
    return _check_wraps_recursive(thrown, expected, exact=False, logger=logger)


def check_with_cause(
    thrown: BaseException, expected: type[BaseException] | None, logger: logging.Logger
) -> AssertionResult:
    """Check the direct cause type exactly; ``expected=None`` requires no cause."""
    cause = direct_cause(thrown)
    expected_name = "None" if expected is None else type_name(expected)
    logger.debug(f"Checking with_cause: {expected_name} against {describe(cause)}")

    if expected is None:
        passed = cause is None
        message = "No cause" if passed else f"No cause expected but got: {describe(cause)}"
    elif cause is None:
        passed = False
        message = f"Expected cause of type {expected_name} but there was no cause"
    else:
        passed = type(cause) is expected
        message = (
            f"Cause is {expected_name}"
            if passed
            else f"Expected cause {expected_name} but got {describe(cause)}"
        )
    logger.debug(f"with_cause passed={passed}")

    return AssertionResult(
        name=f"with_cause:{expected_name}",
        passed=passed,
        message=message,
        expected=expected_name if expected is not None else "no cause",
        actual=type_name(type(cause)) if cause is not None else "no cause",
    )


def check_cause_message_contains(
    thrown: BaseException, substring: str, logger: logging.Logger
) -> AssertionResult:
    """Check that the direct cause exists and its message contains ``substring``."""
    cause = direct_cause(thrown)
    message = exception_message(cause) if cause is not None else None
    logger.debug(f"Checking cause_message_contains: '{substring}' in cause {describe(cause)}")

    passed = message is not None and substring in message
    logger.debug(f"cause_message_contains passed={passed}")

    if cause is None:
        actual = "no cause"
    elif message is None:
        actual = f"{type_name(type(cause))} without message"
    else:
        actual = f"'{message}'"

    return AssertionResult(
        name=f"cause_message_contains:{substring}",
        passed=passed,
        message=(
            f"Cause message contains '{substring}'"
            if passed
            else f"Expected cause message to contain '{substring}' but got: {actual}"
        ),
        expected=f"containing '{substring}'",
        actual=actual,
    )
