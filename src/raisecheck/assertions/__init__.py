"""Check functions evaluating expectations against a captured exception."""

from raisecheck.assertions.base import AssertionResult
from raisecheck.assertions.cause import direct_cause, iter_causes
from raisecheck.assertions.evaluate import evaluate_expectation

__all__ = ["AssertionResult", "direct_cause", "evaluate_expectation", "iter_causes"]
