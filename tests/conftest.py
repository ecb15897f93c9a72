"""Pytest configuration and fixtures."""

import logging

import pytest

from assertkit import RecordingTester, Settings, configure

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def reset_settings():
    """Restore default settings after each test."""
    yield
    configure(Settings())


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from assertkit loggers after each test.

    Loggers stay registered: check modules hold references to them.
    """
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("assertkit")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def t():
    """Tester double that records reports instead of failing the test."""
    return RecordingTester()
