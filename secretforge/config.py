"""Configuration models for SecretForge."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .domain.entities import GameType
from .domain.rules import (
    DEFAULT_CARD_LIMIT_MODES,
    DEFAULT_WILD_ONLY_SETS,
    DeckRules,
    LimitedModeRuleset,
)


@dataclass(slots=True)
class SecretForgeConfig:
    """Top-level configuration container."""

    rules: DeckRules = field(default_factory=DeckRules)
    arena: LimitedModeRuleset = field(default_factory=LimitedModeRuleset)
    duels: LimitedModeRuleset = field(default_factory=LimitedModeRuleset)
    catalog_path: str | None = None

    @classmethod
    def from_env(cls) -> "SecretForgeConfig":
        """Create config from environment variables prefixed with SECRETFORGE_."""
        prefix = "SECRETFORGE_"

        mode_names = _parse_list(os.getenv(f"{prefix}CARD_LIMIT_MODES"))
        try:
            card_limit_modes = (
                tuple(GameType[name.upper()] for name in mode_names)
                if mode_names
                else DEFAULT_CARD_LIMIT_MODES
            )
        except KeyError as exc:
            raise ValueError(f"Unknown game type in {prefix}CARD_LIMIT_MODES: {exc}") from exc

        rules = DeckRules(
            starting_entity_limit=int(os.getenv(f"{prefix}STARTING_ENTITY_LIMIT", "68")),
            card_limit_modes=card_limit_modes,
            wild_only_sets=_parse_list(os.getenv(f"{prefix}WILD_ONLY_SETS"))
            or DEFAULT_WILD_ONLY_SETS,
        )

        return cls(
            rules=rules,
            arena=LimitedModeRuleset.of(
                current_sets=_parse_list(os.getenv(f"{prefix}ARENA_SETS")),
                banned_secrets=_parse_list(os.getenv(f"{prefix}ARENA_BANNED")),
                exclusive_secrets=_parse_list(os.getenv(f"{prefix}ARENA_EXCLUSIVE")),
            ),
            duels=LimitedModeRuleset.of(
                current_sets=_parse_list(os.getenv(f"{prefix}DUELS_SETS")),
                banned_secrets=_parse_list(os.getenv(f"{prefix}DUELS_BANNED")),
            ),
            catalog_path=os.getenv(f"{prefix}CATALOG_PATH") or None,
        )


def _parse_list(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(item.strip() for item in raw.split(",") if item.strip())
