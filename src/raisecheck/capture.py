"""Run an operation once and capture whatever it raises."""

from __future__ import annotations

import logging
from typing import Any, Callable

from raisecheck.assertions.base import describe
from raisecheck.exceptions import InvalidArgumentError

_logger = logging.getLogger(__name__)


def capture(
    operation: Callable[[], Any],
    logger: logging.Logger | None = None,
) -> BaseException | None:
    """Invoke ``operation`` exactly once and return the exception it raised.

    Returns None when the operation completes normally. The raised exception
    is returned unchanged, so ``capture(f) is err`` holds for whatever ``f``
    raised. Every ``BaseException`` is captured, including ``SystemExit`` and
    ``KeyboardInterrupt``.

    Raises InvalidArgumentError if ``operation`` is None or not callable.
    """
    if operation is None:
        raise InvalidArgumentError(
            "Cannot capture the result of the operation, because it is None"
        )
    if not callable(operation):
        raise InvalidArgumentError(
            f"Cannot capture the result of {operation!r}, because it is not callable"
        )

    if logger is None:
        logger = _logger

    name = getattr(operation, "__qualname__", repr(operation))
    logger.debug(f"Capturing exceptions raised by {name}")

    try:
        operation()
    except BaseException as exc:  # noqa: BLE001
        logger.debug(f"{name} raised {describe(exc)}")
        return exc

    logger.debug(f"{name} completed without raising")
    return None
