"""Fluent assertions on the exceptions raised by a piece of code."""

import logging

from raisecheck.assertions import AssertionResult, direct_cause, evaluate_expectation, iter_causes
from raisecheck.capture import capture
from raisecheck.exceptions import (
    CyclicCauseChainError,
    ExpectationFailed,
    InvalidArgumentError,
    RaiseCheckError,
)
from raisecheck.session import ExceptionAssertion, assert_that

logging.getLogger("raisecheck").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AssertionResult",
    "CyclicCauseChainError",
    "ExceptionAssertion",
    "ExpectationFailed",
    "InvalidArgumentError",
    "RaiseCheckError",
    "assert_that",
    "capture",
    "direct_cause",
    "evaluate_expectation",
    "iter_causes",
]
