"""Shared fixtures for the valkit test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from valkit.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Every test reads ``VALKIT_*`` variables from its own environment."""
    reset_settings()
    yield
    reset_settings()
