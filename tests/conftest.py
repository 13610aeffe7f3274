"""Shared fixtures for the wildglob test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from wildglob.pattern import purge


@pytest.fixture(autouse=True)
def _clear_pattern_cache() -> Iterator[None]:
    """Each test starts with an empty compiled-pattern cache."""
    purge()
    yield
    purge()


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the wildglob loggers."""
    caplog.set_level(logging.DEBUG, logger="wildglob")
    return caplog
