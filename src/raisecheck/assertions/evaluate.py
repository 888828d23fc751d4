"""Dispatch declarative expectations to the matching check function."""

from __future__ import annotations

import logging
from typing import Any

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
from raisecheck.expectations import parse_expectation


def evaluate_expectation(
    thrown: BaseException | None,
    expectation: dict[str, Any] | BaseModel,
    *,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Evaluate one expectation against a captured exception.

    Supported formats:
        {"throws_any": True}
        {"does_not_throw": True}
        {"throws_exactly": ValueError}
        {"throws_subtype_of": "OSError"}
        {"wraps_exactly": KeyError, "recursive": True}
        {"wraps_subtype_of": LookupError}
        {"with_cause": None}
        {"message_equals": "boom"}
        {"message_contains": "boom"}
        {"message_matches": r"bo+m"}
        {"cause_message_contains": "disk"}

    Every expectation except ``does_not_throw`` fails when nothing was raised.

    Raises ValueError for an empty dict or an invalid expectation.
    """
    if not expectation:
        raise ValueError("Empty expectation dict")

    if logger is None:
        logger = logging.getLogger(__name__)

    data = parse_expectation(expectation).model_dump()
    kind = next(k for k in data if k != "recursive")
    value = data[kind]

    if kind == "does_not_throw":
        return check_does_not_throw(thrown, logger=logger)
    if kind == "throws_exactly":
        return check_throws_exactly(thrown, value, logger=logger)
    if kind == "throws_subtype_of":
        return check_throws_subtype_of(thrown, value, logger=logger)

    presence = check_throws_any(thrown, logger=logger)
    if kind == "throws_any" or not presence.passed:
        return presence

    if kind == "wraps_exactly":
        if data["recursive"]:
            return check_wraps_exactly_recursive(thrown, value, logger=logger)
        return check_wraps_exactly(thrown, value, logger=logger)
    if kind == "wraps_subtype_of":
        if data["recursive"]:
            return check_wraps_subtype_of_recursive(thrown, value, logger=logger)
        return check_wraps_subtype_of(thrown, value, logger=logger)
    if kind == "with_cause":
        return check_with_cause(thrown, value, logger=logger)
    if kind == "message_equals":
        return check_message_equals(thrown, value, logger=logger)
    if kind == "message_contains":
        return check_message_contains(thrown, value, logger=logger)
    if kind == "message_matches":
        return check_message_matches(thrown, value, logger=logger)
    if kind == "cause_message_contains":
        return check_cause_message_contains(thrown, value, logger=logger)

    raise ValueError(f"Unknown expectation type: '{kind}'")
