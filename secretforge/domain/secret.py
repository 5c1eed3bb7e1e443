"""Belief state for a single face-down secret."""

from __future__ import annotations

from typing import Iterable, Mapping

from .entities import ObservedEntity


class Secret:
    """One hidden opponent secret and the cards it has been proven not to be.

    ``excluded`` maps every candidate card id to ``True`` once the secret is
    known not to be that card. Entries are toggled but never added or removed;
    ids outside the seeded candidates are ignored.
    """

    __slots__ = ("entity", "excluded")

    def __init__(
        self,
        entity: ObservedEntity,
        candidates: Iterable[str] = (),
        *,
        restored: Mapping[str, bool] | None = None,
    ) -> None:
        self.entity = entity
        self.excluded: dict[str, bool] = {card_id: False for card_id in candidates}
        if restored:
            self.excluded.update(restored)

    @property
    def entity_id(self) -> int:
        return self.entity.entity_id

    def exclude(self, card_id: str) -> None:
        if card_id in self.excluded:
            self.excluded[card_id] = True

    def include(self, card_id: str) -> None:
        if card_id in self.excluded:
            self.excluded[card_id] = False

    def is_excluded(self, card_id: str) -> bool:
        return self.excluded.get(card_id, False)

    def candidates(self) -> list[str]:
        return [card_id for card_id, excluded in self.excluded.items() if not excluded]

    def __repr__(self) -> str:
        return f"Secret(entity_id={self.entity_id}, candidates={self.candidates()!r})"
