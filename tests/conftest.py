"""Shared pytest configuration."""
from __future__ import annotations

import pytest


@pytest.fixture
def anyio_backend() -> str:
    """Restrict anyio tests to the asyncio backend for deterministic behaviour."""

    return "asyncio"
