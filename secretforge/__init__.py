"""SecretForge public API."""

from .app import SecretTracker
from .config import SecretForgeConfig
from .domain import CandidateCard, ObservedEntity, SecretsManager

__all__ = [
    "CandidateCard",
    "ObservedEntity",
    "SecretForgeConfig",
    "SecretTracker",
    "SecretsManager",
]
