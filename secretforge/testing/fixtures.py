"""Pytest fixtures for SecretForge."""

from __future__ import annotations

import pytest

from ..app import SecretTracker
from ..config import SecretForgeConfig


@pytest.fixture()
def memory_tracker() -> SecretTracker:
    """Tracker with an empty catalog and default rules."""
    return SecretTracker(SecretForgeConfig())
