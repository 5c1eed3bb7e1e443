"""Card metadata and the read-only catalog consulted by the tracker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(slots=True)
class CardMetadata:
    """Static definition of a collectible card."""

    card_id: str
    name: str
    card_set: str | None = None
    player_class: str | None = None
    is_secret: bool = False
    max_copies: int = 2


class CardCatalog:
    """Registry of cards keyed by card id."""

    def __init__(self) -> None:
        self._cards: dict[str, CardMetadata] = {}

    def register_card(self, card: CardMetadata) -> None:
        if card.card_id in self._cards:
            raise ValueError(f"Card {card.card_id} already registered")
        self._cards[card.card_id] = card

    def register_cards(self, cards: Iterable[CardMetadata]) -> None:
        for card in cards:
            self.register_card(card)

    def get_card(self, card_id: str) -> CardMetadata:
        try:
            return self._cards[card_id]
        except KeyError as exc:
            raise KeyError(f"Card {card_id} not found") from exc

    def lookup(self, card_id: str) -> CardMetadata | None:
        return self._cards.get(card_id)

    def secrets_for_class(self, player_class: str) -> list[str]:
        """Secret card ids playable by ``player_class``, in registration order."""
        return [
            card.card_id
            for card in self._cards.values()
            if card.is_secret and card.player_class == player_class
        ]

    def iter_cards(self) -> Iterable[CardMetadata]:
        return self._cards.values()

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._cards

    def __len__(self) -> int:
        return len(self._cards)
