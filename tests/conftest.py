"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers and reset levels of raisecheck loggers so tests do not leak logging state."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("raisecheck")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if isinstance(handler, logging.NullHandler):
                continue
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Exception fixtures
# ---------------------------------------------------------------------------


class StorageError(Exception):
    """Domain error used to build wrapped cause chains."""


class DiskFullError(StorageError):
    pass


def chain(*errors: BaseException) -> BaseException:
    """Link errors outermost-first with explicit ``__cause__`` and return the outermost."""
    for outer, inner in zip(errors, errors[1:]):
        outer.__cause__ = inner
    return errors[0]


def raiser(exc: BaseException):
    """Return a zero-argument operation that raises ``exc``."""

    def _op():
        raise exc

    return _op


@pytest.fixture
def logger():
    log = logging.getLogger("raisecheck.tests")
    log.setLevel(logging.DEBUG)
    return log
