"""Testing utilities for SecretForge."""

from .factory import CardFactory, EntityFactory
from .fixtures import memory_tracker

__all__ = [
    "CardFactory",
    "EntityFactory",
    "memory_tracker",
]
