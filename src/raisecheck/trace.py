"""Per-test trace files recording every capture and check raisecheck performs."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

TRACE_PREFIX = "raisecheck.trace"

_FORMAT = "%(asctime)s %(levelname)-5s %(message)s"


def open_trace(debug_file: Path, name: str, *, echo: bool = False) -> logging.Logger:
    """Return a logger under ``raisecheck.trace`` that writes to ``debug_file``.

    Pass the logger to ``assert_that(..., logger=...)`` and the capture outcome
    plus every check with its pass/fail verdict end up in ``debug_file``. With
    ``echo=True`` the same lines also go to stderr.

    Raises RuntimeError if a trace with this name is already open.
    """
    logger = logging.getLogger(f"{TRACE_PREFIX}.{name}")
    if logger.handlers:
        raise RuntimeError(
            f"Trace '{name}' already exists; close it before opening another "
            "trace with the same name"
        )

    logger.setLevel(logging.DEBUG)
    debug_file.parent.mkdir(parents=True, exist_ok=True)

    handlers: list[logging.Handler] = [logging.FileHandler(debug_file, mode="a")]
    if echo:
        handlers.append(logging.StreamHandler(sys.stderr))
    formatter = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def close_trace(logger: logging.Logger) -> None:
    """Flush and detach every handler of a trace logger so the name can be reused."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
