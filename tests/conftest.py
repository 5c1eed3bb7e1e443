import pytest

from secretforge import SecretForgeConfig, SecretTracker
from secretforge.domain.cards import CardMetadata
from secretforge.domain.events import SECRETS_CHANGED
from secretforge.testing import EntityFactory, memory_tracker  # noqa: F401

MAGE_SECRETS = (
    ("EX1_287", "Counterspell", "EXPERT1"),
    ("EX1_289", "Ice Barrier", "EXPERT1"),
    ("EX1_294", "Mirror Entity", "EXPERT1"),
    ("FP1_018", "Duplicate", "NAXX"),
)


@pytest.fixture()
def tracker() -> SecretTracker:
    tracker = SecretTracker(SecretForgeConfig())
    for card_id, name, card_set in MAGE_SECRETS:
        tracker.catalog.register_card(
            CardMetadata(
                card_id=card_id,
                name=name,
                card_set=card_set,
                player_class="MAGE",
                is_secret=True,
            )
        )
    tracker.catalog.register_card(
        CardMetadata(
            card_id="EX1_130",
            name="Noble Sacrifice",
            card_set="EXPERT1",
            player_class="PALADIN",
            is_secret=True,
        )
    )
    return tracker


@pytest.fixture()
def entities() -> EntityFactory:
    return EntityFactory(player_class="MAGE")


@pytest.fixture()
def notifications(tracker):
    received = []
    tracker.event_bus.subscribe(SECRETS_CHANGED, lambda payload: received.append(list(payload.cards)))
    return received
