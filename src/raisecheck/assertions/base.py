"""Base data structures and helpers shared by the check functions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AssertionResult:
    """Result of evaluating a single expectation against a captured exception.

    Attributes:
        name: Identifier for the check (e.g. "throws_exactly:ValueError").
        passed: Whether the captured exception satisfied the expectation.
        message: Human-readable detail about the result. For failures this is
            the text surfaced to the test runner.
        expected: Short description of what the check looked for.
        actual: Short description of what was observed.
    """

    name: str
    passed: bool
    message: str
    expected: str = ""
    actual: str = ""


def type_name(cls: type) -> str:
    """Return a readable, qualified name for an exception class."""
    module = cls.__module__
    if module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def describe(exc: BaseException | None) -> str:
    """Describe an exception as "Type: message" (or just "Type")."""
    if exc is None:
        return "nothing"
    message = exception_message(exc)
    if message is None:
        return type_name(type(exc))
    return f"{type_name(type(exc))}: {message}"


def exception_message(exc: BaseException) -> str | None:
    """Return the human-readable message of an exception, or None if it has none.

    An exception raised without arguments (or with a single ``None``) has no
    message. A single argument is used as-is; multiple arguments fall back to
    ``str(exc)`` so that e.g. ``OSError`` keeps its "[Errno N] ..." form.
    """
    args = exc.args
    if not args:
        return None
    if len(args) == 1:
        return None if args[0] is None else str(args[0])
    return str(exc)
