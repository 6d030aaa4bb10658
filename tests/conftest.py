"""Pytest configuration shared by the applyable tests."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo configure_logging() so tests do not leak handlers or structlog config."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
