"""Top level application object for SecretForge hosts."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .config import SecretForgeConfig
from .domain.candidates import CandidateCard
from .domain.cards import CardCatalog
from .domain.entities import GameState, MatchState
from .domain.events import SECRETS_CHANGED, EventBus, SecretsChanged
from .domain.fast_combat import FastCombatReconciler
from .domain.manager import SecretsManager
from .domain.rules import StaticRulesetProvider


class SecretTracker:
    """Central dependency container wiring the manager to its collaborators."""

    def __init__(
        self,
        config: SecretForgeConfig,
        *,
        catalog: CardCatalog | None = None,
        game: GameState | None = None,
        event_bus: EventBus | None = None,
        reconciler: FastCombatReconciler | None = None,
    ) -> None:
        self.config = config
        self.catalog = catalog or CardCatalog()
        self.game = game if game is not None else MatchState()
        self.event_bus = event_bus or EventBus()
        self.arena = StaticRulesetProvider(config.arena)
        self.duels = StaticRulesetProvider(config.duels)

        self.secrets = SecretsManager(
            self.game,
            self.catalog,
            self.event_bus,
            rules=config.rules,
            arena=self.arena,
            duels=self.duels,
            reconciler=reconciler,
        )

    def on_secrets_changed(self, listener: Callable[[Sequence[CandidateCard]], None]) -> None:
        """Subscribe ``listener`` to every recomputed candidate list."""

        def _forward(payload: SecretsChanged) -> None:
            listener(payload.cards)

        self.event_bus.subscribe(SECRETS_CHANGED, _forward)

    def snapshot(self) -> dict[str, Any]:
        """Export current state for debugging."""
        return {
            "game_type": self.game.game_type.value,
            "format": self.game.format.value,
            "cards": len(self.catalog),
            "secrets": [
                {"entity_id": secret.entity_id, "candidates": secret.candidates()}
                for secret in self.secrets.secrets
            ],
            "published": [(card.card_id, card.count) for card in self.secrets.published],
        }
