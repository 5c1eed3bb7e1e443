"""Read-only snapshots of game-client objects and match state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Sequence


class GameType(str, Enum):
    RANKED = "ranked"
    CASUAL = "casual"
    FRIENDLY = "friendly"
    VS_AI = "vs_ai"
    ARENA = "arena"
    DUELS = "duels"
    DUELS_PAID = "duels_paid"
    OTHER = "other"

    @property
    def is_duels(self) -> bool:
        return self in (GameType.DUELS, GameType.DUELS_PAID)


class Format(str, Enum):
    STANDARD = "standard"
    WILD = "wild"


@dataclass(frozen=True, slots=True)
class ObservedEntity:
    """Snapshot of a hidden-capable game object taken at the event boundary."""

    entity_id: int
    card_id: str | None = None
    is_secret: bool = False
    player_class: str | None = None
    created: bool = False

    @property
    def has_card_id(self) -> bool:
        return bool(self.card_id)

    def __str__(self) -> str:
        return (
            f"[id={self.entity_id} cardId={self.card_id or '?'} "
            f"class={self.player_class or '?'} created={self.created}]"
        )


class GameState(Protocol):
    """What the manager needs to know about the current match."""

    @property
    def game_type(self) -> GameType: ...

    @property
    def format(self) -> Format: ...

    @property
    def opponent_revealed_entities(self) -> Sequence[ObservedEntity]: ...


@dataclass(slots=True)
class MatchState:
    """Mutable in-memory game state updated by the host."""

    game_type: GameType = GameType.RANKED
    format: Format = Format.WILD
    opponent_revealed_entities: list[ObservedEntity] = field(default_factory=list)

    def reveal(self, entity: ObservedEntity) -> None:
        """Record or replace an opponent entity that became visible."""
        for idx, existing in enumerate(self.opponent_revealed_entities):
            if existing.entity_id == entity.entity_id:
                self.opponent_revealed_entities[idx] = entity
                return
        self.opponent_revealed_entities.append(entity)

    def clear(self) -> None:
        self.opponent_revealed_entities.clear()
