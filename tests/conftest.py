"""Pytest configuration and fixtures."""

import io
import logging

import pytest

from testy.reporting.console import ConsoleReporter


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up testy loggers after each test to prevent name collisions."""
    yield

    # Remove all testy loggers from registry
    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("testy")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def streams():
    """In-memory (out, err) pair for console reporting."""
    return io.StringIO(), io.StringIO()


@pytest.fixture
def console(streams):
    out, err = streams
    return ConsoleReporter(out=out, err=err)
