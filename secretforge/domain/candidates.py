"""Turn the live secrets' belief state into the published candidate list.

Counts are recomputed from scratch on every call. The pipeline runs in
three stages:

1. aggregate the per-secret exclusion maps into one count per card id,
   preserving the order in which card ids were first seen;
2. zero the count of any card the opponent has already played every
   allowed original copy of, when the game mode enforces copy limits;
3. drop cards that are not legal in the current mode (draft card pools,
   mode-exclusive secrets, format rotation).

Card ids the catalog does not know are dropped from the output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .cards import CardCatalog, CardMetadata
from .entities import GameState, GameType
from .rules import DeckRules, LimitedModeRuleset
from .secret import Secret

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CandidateCard:
    """A card some live secret could still be, with its adjusted count."""

    card: CardMetadata
    count: int

    @property
    def card_id(self) -> str:
        return self.card.card_id

    @property
    def card_set(self) -> str | None:
        return self.card.card_set


def aggregate_counts(secrets: Sequence[Secret]) -> dict[str, int]:
    """Number of live secrets for which each card id is still a candidate."""
    counts: dict[str, int] = {}
    for secret in secrets:
        for card_id, excluded in secret.excluded.items():
            counts[card_id] = counts.get(card_id, 0) + (0 if excluded else 1)
    return counts


def created_candidates(secrets: Sequence[Secret]) -> set[str]:
    """Card ids still possible for secrets that were created mid-game.

    Created copies do not count against the opponent's deck limit.
    """
    return {
        card_id
        for secret in secrets
        if secret.entity.created
        for card_id, excluded in secret.excluded.items()
        if not excluded
    }


def played_all_copies(
    card_id: str,
    game: GameState,
    rules: DeckRules,
    max_copies: int = 2,
) -> bool:
    """True when ``max_copies`` original copies of ``card_id`` have been revealed.

    With the usual deck limit this is the played-twice rule; single-copy
    cards hit it after one.
    """
    copies = sum(
        1
        for entity in game.opponent_revealed_entities
        if entity.entity_id < rules.starting_entity_limit
        and entity.is_secret
        and entity.has_card_id
        and entity.card_id == card_id
        and not entity.created
    )
    return copies >= max_copies


def adjust_counts(
    counts: dict[str, int],
    secrets: Sequence[Secret],
    game: GameState,
    catalog: CardCatalog,
    rules: DeckRules,
) -> dict[str, int]:
    if not rules.enforces_card_limit(game.game_type):
        return dict(counts)
    exempt = created_candidates(secrets)
    adjusted: dict[str, int] = {}
    for card_id, count in counts.items():
        metadata = catalog.lookup(card_id)
        max_copies = metadata.max_copies if metadata is not None else 2
        if card_id not in exempt and played_all_copies(card_id, game, rules, max_copies):
            logger.debug("Opponent already played %d copies of %s", max_copies, card_id)
            adjusted[card_id] = 0
        else:
            adjusted[card_id] = count
    return adjusted


def _filter_limited(cards: list[CandidateCard], ruleset: LimitedModeRuleset) -> list[CandidateCard]:
    return [card for card in cards if ruleset.allows(card.card_id, card.card_set)]


def _filter_constructed(
    cards: list[CandidateCard],
    game: GameState,
    rules: DeckRules,
    arena: LimitedModeRuleset,
) -> list[CandidateCard]:
    if arena.exclusive_secrets:
        cards = [card for card in cards if card.card_id not in arena.exclusive_secrets]
    if rules.is_restricted(game.format):
        cards = [card for card in cards if card.card_set not in rules.wild_only_sets]
    return cards


def filter_by_mode(
    cards: list[CandidateCard],
    game: GameState,
    rules: DeckRules,
    arena: LimitedModeRuleset,
    duels: LimitedModeRuleset,
) -> list[CandidateCard]:
    if game.game_type is GameType.ARENA:
        cards = _filter_limited(cards, arena)
    else:
        cards = _filter_constructed(cards, game, rules, arena)

    if game.game_type.is_duels:
        cards = _filter_limited(cards, duels)
    return cards


def build_candidate_list(
    secrets: Sequence[Secret],
    game: GameState,
    catalog: CardCatalog,
    rules: DeckRules,
    arena: LimitedModeRuleset,
    duels: LimitedModeRuleset,
) -> list[CandidateCard]:
    """Run the full pipeline for the given live secrets."""
    counts = adjust_counts(aggregate_counts(secrets), secrets, game, catalog, rules)

    cards: list[CandidateCard] = []
    for card_id, count in counts.items():
        metadata = catalog.lookup(card_id)
        if metadata is None:
            logger.warning("Dropping unknown secret card id %s", card_id)
            continue
        cards.append(CandidateCard(card=metadata, count=count))

    result = filter_by_mode(cards, game, rules, arena, duels)
    logger.debug(
        "Candidate list for %s/%s: %d cards from %d secrets",
        game.game_type.value,
        game.format.value,
        len(result),
        len(secrets),
    )
    return result
