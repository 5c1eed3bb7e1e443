"""Deck-construction and limited-mode rules consulted by the candidate pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Protocol, Sequence

from .entities import Format, GameType

DEFAULT_WILD_ONLY_SETS: tuple[str, ...] = (
    "NAXX",
    "GVG",
    "BRM",
    "TGT",
    "LOE",
    "OG",
    "KARA",
    "GANGS",
    "UNGORO",
    "ICECROWN",
    "LOOTAPALOOZA",
    "GILNEAS",
    "BOOMSDAY",
    "TROLL",
    "DALARAN",
    "ULDUM",
    "DRAGONS",
    "BLACK_TEMPLE",
    "SCHOLOMANCE",
    "DARKMOON_FAIRE",
)

DEFAULT_CARD_LIMIT_MODES: tuple[GameType, ...] = (
    GameType.RANKED,
    GameType.CASUAL,
    GameType.FRIENDLY,
    GameType.VS_AI,
)

# Set assigned to catalog entries that carry no set information.
BLANK_SET = "BLANK"


@dataclass(slots=True)
class DeckRules:
    """Constructed-play rules: copy limits and format rotation."""

    # Entities below this id belong to the opponent's starting deck.
    starting_entity_limit: int = 68
    card_limit_modes: Sequence[GameType] = DEFAULT_CARD_LIMIT_MODES
    wild_only_sets: Sequence[str] = DEFAULT_WILD_ONLY_SETS

    def enforces_card_limit(self, game_type: GameType) -> bool:
        return game_type in self.card_limit_modes

    def is_restricted(self, fmt: Format) -> bool:
        return fmt is Format.STANDARD


@dataclass(frozen=True, slots=True)
class LimitedModeRuleset:
    """Currently active card pool of a draft mode (arena or duels)."""

    current_sets: AbstractSet[str] = field(default_factory=frozenset)
    banned_secrets: AbstractSet[str] = field(default_factory=frozenset)
    # Secrets that only exist inside this mode.
    exclusive_secrets: AbstractSet[str] = field(default_factory=frozenset)

    @classmethod
    def of(
        cls,
        current_sets: Sequence[str] = (),
        banned_secrets: Sequence[str] = (),
        exclusive_secrets: Sequence[str] = (),
    ) -> "LimitedModeRuleset":
        return cls(
            current_sets=frozenset(current_sets),
            banned_secrets=frozenset(banned_secrets),
            exclusive_secrets=frozenset(exclusive_secrets),
        )

    def allows(self, card_id: str, card_set: str | None) -> bool:
        if (card_set or BLANK_SET) not in self.current_sets:
            return False
        return not self.banned_secrets or card_id not in self.banned_secrets


class RulesetProvider(Protocol):
    """Read-only source of a draft mode's current ruleset."""

    def current(self) -> LimitedModeRuleset: ...


@dataclass(slots=True)
class StaticRulesetProvider:
    """Holds a ruleset the host may swap out; call ``refresh`` afterwards."""

    ruleset: LimitedModeRuleset = field(default_factory=LimitedModeRuleset)

    def current(self) -> LimitedModeRuleset:
        return self.ruleset

    def update(self, ruleset: LimitedModeRuleset) -> None:
        self.ruleset = ruleset
