"""Shared test fixtures."""

from __future__ import annotations

import pytest

from resource_path._config import PathPolicy


@pytest.fixture
def posix() -> PathPolicy:
    """Policy without drive letters."""
    return PathPolicy(drives=False)


@pytest.fixture
def windows() -> PathPolicy:
    """Policy with drive letters."""
    return PathPolicy(drives=True)
