"""Error hierarchy for raisecheck."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raisecheck.assertions.base import AssertionResult


class RaiseCheckError(Exception):
    """Base class for errors caused by misusing raisecheck itself."""


class InvalidArgumentError(RaiseCheckError, ValueError):
    """Raised when a check is called with an argument that makes no sense.

    This signals a badly written test (no operation, no expected type, an
    empty search term), not a failed expectation.
    """


class ExpectationFailed(AssertionError):
    """Raised when the captured exception does not satisfy an expectation."""

    def __init__(self, result: AssertionResult) -> None:
        super().__init__(result.message)
        self.result = result

    @property
    def expected(self) -> str:
        return self.result.expected

    @property
    def actual(self) -> str:
        return self.result.actual


class CyclicCauseChainError(ExpectationFailed):
    """Raised when a cause chain links back to an exception already visited."""
