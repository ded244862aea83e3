"""Global pytest fixtures for monthspan."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from monthspan import config


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every environment variable monthspan reads.

    Returns the monkeypatch so tests can set the ones they need.
    """
    for name in (config.LOG_LEVEL_ENV, config.DEBUG_ENV, config.NO_COLOR_ENV):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logging() -> Iterator[logging.Logger]:
    """Snapshot the root logger and restore its handlers and level afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
