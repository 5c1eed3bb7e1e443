"""Replay a short match against a Mage and print the candidate list after each event."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.table import Table

from secretforge import ObservedEntity, SecretForgeConfig, SecretTracker
from secretforge.domain import CandidateCard, Format, GameType
from secretforge.loaders import load_catalog_from_json

console = Console()


def show(cards: Sequence[CandidateCard]) -> None:
    table = Table("Card", "Set", "Count")
    for card in cards:
        table.add_row(card.card.name, card.card_set or "-", str(card.count))
    console.print(table)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    tracker = SecretTracker(SecretForgeConfig.from_env())
    load_catalog_from_json(tracker, Path(__file__).with_name("catalog") / "secrets.json")
    tracker.game.game_type = GameType.RANKED
    tracker.game.format = Format.STANDARD
    tracker.on_secrets_changed(show)

    tracker.secrets.reset()
    first = ObservedEntity(entity_id=31, is_secret=True, player_class="MAGE")
    second = ObservedEntity(entity_id=44, is_secret=True, player_class="MAGE")
    tracker.secrets.new_secret(first)
    tracker.secrets.new_secret(second)

    # A spell was cast and nothing happened.
    tracker.secrets.exclude_many(["EX1_287", "CORE_tt_010"])

    revealed = ObservedEntity(entity_id=31, card_id="EX1_289", is_secret=True, player_class="MAGE")
    tracker.game.reveal(revealed)
    tracker.secrets.remove_secret(revealed)


if __name__ == "__main__":
    main()
