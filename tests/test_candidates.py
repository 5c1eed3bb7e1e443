import pytest

from secretforge.domain.candidates import (
    aggregate_counts,
    build_candidate_list,
    created_candidates,
    played_all_copies,
)
from secretforge.domain.cards import CardCatalog, CardMetadata
from secretforge.domain.entities import Format, GameType, MatchState, ObservedEntity
from secretforge.domain.rules import DeckRules, LimitedModeRuleset
from secretforge.domain.secret import Secret

EMPTY = LimitedModeRuleset()


@pytest.fixture()
def catalog():
    catalog = CardCatalog()
    catalog.register_cards(
        [
            CardMetadata(card_id="A", name="Alpha", card_set="SET_A", player_class="MAGE", is_secret=True),
            CardMetadata(card_id="B", name="Beta", card_set="SET_B", player_class="MAGE", is_secret=True),
            CardMetadata(card_id="W", name="Wild", card_set="NAXX", player_class="MAGE", is_secret=True),
            CardMetadata(card_id="N", name="No Set", card_set=None, player_class="MAGE", is_secret=True),
        ]
    )
    return catalog


def _secret(entity_id, excluded, *, created=False):
    entity = ObservedEntity(entity_id=entity_id, is_secret=True, player_class="MAGE", created=created)
    return Secret(entity, restored=excluded)


def _played(entity_id, card_id, *, created=False):
    return ObservedEntity(entity_id=entity_id, card_id=card_id, is_secret=True, created=created)


def _run(secrets, game, catalog, *, rules=None, arena=EMPTY, duels=EMPTY):
    cards = build_candidate_list(secrets, game, catalog, rules or DeckRules(), arena, duels)
    return [(card.card_id, card.count) for card in cards]


def test_two_secrets_with_crossed_exclusions(catalog):
    secrets = [_secret(1, {"A": False, "B": True}), _secret(2, {"A": True, "B": False})]
    game = MatchState(game_type=GameType.CASUAL, format=Format.WILD)

    assert _run(secrets, game, catalog) == [("A", 1), ("B", 1)]


def test_aggregate_preserves_first_seen_order():
    secrets = [_secret(1, {"B": False, "A": True}), _secret(2, {"C": False, "A": False})]
    assert list(aggregate_counts(secrets).items()) == [("B", 1), ("A", 1), ("C", 1)]


def test_played_twice_counts_only_original_deck_secrets():
    rules = DeckRules()
    game = MatchState(
        opponent_revealed_entities=[
            _played(10, "A"),
            _played(20, "A", created=True),
            _played(80, "A"),
            ObservedEntity(entity_id=30, card_id="A", is_secret=False),
        ]
    )
    assert not played_all_copies("A", game, rules)

    game.reveal(_played(40, "A"))
    assert played_all_copies("A", game, rules)


def test_card_limit_zeroes_third_copy(catalog):
    secrets = [_secret(50, {"A": False, "B": False}), _secret(51, {"A": False, "B": False})]
    game = MatchState(
        game_type=GameType.RANKED,
        format=Format.WILD,
        opponent_revealed_entities=[_played(10, "A"), _played(20, "A")],
    )

    assert _run(secrets, game, catalog) == [("A", 0), ("B", 2)]


def test_card_limit_skips_cards_a_created_secret_could_be(catalog):
    secrets = [
        _secret(50, {"A": False, "B": False}),
        _secret(70, {"A": False, "B": False}, created=True),
    ]
    game = MatchState(
        game_type=GameType.RANKED,
        format=Format.WILD,
        opponent_revealed_entities=[_played(10, "A"), _played(20, "A")],
    )

    assert created_candidates(secrets) == {"A", "B"}
    assert _run(secrets, game, catalog) == [("A", 2), ("B", 2)]


def test_card_limit_only_in_constructed_modes(catalog):
    secrets = [_secret(50, {"A": False})]
    game = MatchState(
        game_type=GameType.OTHER,
        opponent_revealed_entities=[_played(10, "A"), _played(20, "A")],
    )
    assert _run(secrets, game, catalog) == [("A", 1)]


def test_arena_keeps_only_current_sets(catalog):
    secrets = [_secret(50, {"A": False, "B": False, "N": False})]
    game = MatchState(game_type=GameType.ARENA)
    arena = LimitedModeRuleset.of(current_sets=["SET_A"])

    assert _run(secrets, game, catalog, arena=arena) == [("A", 1)]


def test_arena_card_without_set_needs_blank_set(catalog):
    secrets = [_secret(50, {"N": False})]
    game = MatchState(game_type=GameType.ARENA)
    arena = LimitedModeRuleset.of(current_sets=["BLANK"])

    assert _run(secrets, game, catalog, arena=arena) == [("N", 1)]


def test_arena_drops_banned_secrets(catalog):
    secrets = [_secret(50, {"A": False, "B": False})]
    game = MatchState(game_type=GameType.ARENA)
    arena = LimitedModeRuleset.of(current_sets=["SET_A", "SET_B"], banned_secrets=["B"])

    assert _run(secrets, game, catalog, arena=arena) == [("A", 1)]


def test_constructed_drops_arena_exclusive_secrets(catalog):
    secrets = [_secret(50, {"A": False, "B": False})]
    game = MatchState(game_type=GameType.RANKED, format=Format.WILD)
    arena = LimitedModeRuleset.of(current_sets=["SET_A"], exclusive_secrets=["B"])

    assert _run(secrets, game, catalog, arena=arena) == [("A", 1)]


def test_standard_drops_wild_only_sets(catalog):
    secrets = [_secret(50, {"A": False, "W": False})]

    standard = MatchState(game_type=GameType.RANKED, format=Format.STANDARD)
    wild = MatchState(game_type=GameType.RANKED, format=Format.WILD)

    assert _run(secrets, standard, catalog) == [("A", 1)]
    assert _run(secrets, wild, catalog) == [("A", 1), ("W", 1)]


def test_duels_applies_its_own_ruleset(catalog):
    secrets = [_secret(50, {"A": False, "B": False, "W": False})]
    duels = LimitedModeRuleset.of(current_sets=["SET_A", "NAXX"], banned_secrets=["W"])

    for game_type in (GameType.DUELS, GameType.DUELS_PAID):
        game = MatchState(game_type=game_type, format=Format.WILD)
        assert _run(secrets, game, catalog, duels=duels) == [("A", 1)]


def test_unknown_cards_are_dropped(catalog):
    secrets = [_secret(50, {"A": False, "MISSING": False})]
    game = MatchState(game_type=GameType.CASUAL)

    assert _run(secrets, game, catalog) == [("A", 1)]


def test_no_secrets_yields_empty_list(catalog):
    assert _run([], MatchState(), catalog) == []


def test_single_copy_card_is_zeroed_after_one_play():
    catalog = CardCatalog()
    catalog.register_cards(
        [
            CardMetadata(card_id="L", name="Legend", card_set="SET_A", is_secret=True, max_copies=1),
            CardMetadata(card_id="A", name="Alpha", card_set="SET_A", is_secret=True),
        ]
    )
    secrets = [_secret(50, {"L": False, "A": False})]
    game = MatchState(
        game_type=GameType.RANKED,
        opponent_revealed_entities=[_played(10, "L"), _played(11, "A")],
    )

    assert _run(secrets, game, catalog) == [("L", 0), ("A", 1)]
