"""pytest fixtures for raisecheck, registered through the ``pytest11`` entry point."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

import pytest

from raisecheck.session import ExceptionAssertion, assert_that
from raisecheck.trace import close_trace, open_trace


@pytest.fixture
def raisecheck_logger(request, tmp_path) -> Iterator[logging.Logger]:
    """Trace logger writing capture and check records to tmp_path/raisecheck.log."""
    logger = open_trace(tmp_path / "raisecheck.log", request.node.name)
    yield logger
    close_trace(logger)


@pytest.fixture
def raises_that(raisecheck_logger) -> Callable[[Callable[[], Any]], ExceptionAssertion]:
    """Return ``assert_that`` bound to the per-test trace logger."""

    def _assert_that(operation: Callable[[], Any]) -> ExceptionAssertion:
        return assert_that(operation, logger=raisecheck_logger)

    return _assert_that
