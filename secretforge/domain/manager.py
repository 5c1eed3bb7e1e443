"""Lifecycle and exclusion logic for the opponent's live secrets."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Sequence

from .candidates import CandidateCard, build_candidate_list
from .cards import CardCatalog
from .entities import GameState, ObservedEntity
from .events import SECRET_ADDED, SECRETS_CHANGED, EventBus, SecretAdded, SecretsChanged
from .exceptions import ReentrantUpdate
from .fast_combat import FastCombatReconciler, NoFastCombat
from .rules import DeckRules, RulesetProvider, StaticRulesetProvider
from .secret import Secret

logger = logging.getLogger(__name__)


class SecretsManager:
    """Track which cards the opponent's face-down secrets could still be.

    Exclusions are global: learning that one secret is not card X narrows
    every live secret, because which secret belongs to which hidden object
    is unknown. Every state change recomputes the candidate list and
    publishes it on ``secrets.changed``.

    Listeners must not call back into the manager while a publish is
    running; doing so raises :class:`ReentrantUpdate`.
    """

    def __init__(
        self,
        game: GameState,
        catalog: CardCatalog,
        event_bus: EventBus,
        *,
        rules: DeckRules | None = None,
        arena: RulesetProvider | None = None,
        duels: RulesetProvider | None = None,
        reconciler: FastCombatReconciler | None = None,
    ) -> None:
        self._game = game
        self._catalog = catalog
        self._event_bus = event_bus
        self._rules = rules or DeckRules()
        self._arena = arena or StaticRulesetProvider()
        self._duels = duels or StaticRulesetProvider()
        self._reconciler = reconciler or NoFastCombat()
        self._secrets: list[Secret] = []
        self._saved_secrets: dict[str, dict[str, bool]] = {}
        self._published: list[CandidateCard] = []
        self._lock = threading.RLock()
        self._publishing = False

    @property
    def secrets(self) -> tuple[Secret, ...]:
        return tuple(self._secrets)

    @property
    def saved_secrets(self) -> dict[str, dict[str, bool]]:
        return {card_id: dict(excluded) for card_id, excluded in self._saved_secrets.items()}

    @property
    def published(self) -> list[CandidateCard]:
        """Last list delivered to ``secrets.changed`` listeners."""
        return list(self._published)

    @property
    def has_active_secrets(self) -> bool:
        return bool(self._secrets)

    def reset(self) -> None:
        with self._mutation("reset"):
            self._secrets.clear()
            self._saved_secrets.clear()
            self._reconciler.clear()
            self._publish([])

    def refresh(self) -> None:
        with self._mutation("refresh"):
            self._publish(self.get_secret_list())

    def new_secret(self, entity: ObservedEntity | None) -> bool:
        if entity is None or not entity.is_secret or not entity.player_class:
            return False
        with self._mutation("new_secret"):
            if self._find(entity.entity_id) is not None:
                logger.info("Secret already tracked: %s", entity)
                return False
            restored = None
            if entity.has_card_id:
                self.exclude(entity.card_id, publish=False)
                restored = self._saved_secrets.pop(entity.card_id, None)
            secret = Secret(
                entity,
                self._catalog.secrets_for_class(entity.player_class),
                restored=restored,
            )
            self._secrets.append(secret)
            self.refresh()
            logger.info("New secret %s", entity)
            # Listeners see the secret only once the list including it is published.
            self._emit(SECRET_ADDED, SecretAdded(secret))
            return True

    def remove_secret(self, entity: ObservedEntity | None) -> bool:
        if entity is None:
            return False
        with self._mutation("remove_secret"):
            secret = self._find(entity.entity_id)
            if secret is None:
                logger.info("Secret not found: %s", entity)
                return False

            for card_id in self._reconciler.reconcile(entity, self._secrets):
                self.exclude(card_id, publish=False)

            self._secrets.remove(secret)
            card_id = entity.card_id if entity.has_card_id else secret.entity.card_id
            if card_id:
                self.exclude(card_id, publish=False)
                self._saved_secrets.pop(card_id, None)
            self.refresh()
            logger.info("Removed secret %s", entity)
            return True

    def save_secret(self, entity: ObservedEntity | None) -> bool:
        """Remember a known secret's exclusions so a replayed copy starts from them."""
        if entity is None:
            return False
        with self._mutation("save_secret"):
            secret = self._find(entity.entity_id)
            card_id = entity.card_id or (secret.entity.card_id if secret else None)
            if secret is None or not card_id:
                return False
            self._saved_secrets[card_id] = dict(secret.excluded)
            return True

    def exclude_many(self, card_ids: Sequence[str]) -> None:
        with self._mutation("exclude_many"):
            applied = [card_id for card_id in card_ids if self.exclude(card_id, publish=False)]
            if applied:
                self.refresh()

    def exclude(self, card_id: str | None, publish: bool = True) -> bool:
        if not card_id:
            return False
        with self._mutation("exclude"):
            for secret in self._secrets:
                secret.exclude(card_id)
            logger.info("Excluded secret %s", card_id)
            if publish:
                self.refresh()
            return True

    def toggle(self, card_id: str | None) -> None:
        """Manually rule ``card_id`` in or out for every live secret."""
        if not card_id:
            return
        with self._mutation("toggle"):
            if any(secret.is_excluded(card_id) for secret in self._secrets):
                for secret in self._secrets:
                    secret.include(card_id)
            else:
                self.exclude(card_id, publish=False)
            self.refresh()

    def get_secret_list(self) -> list[CandidateCard]:
        with self._lock:
            return build_candidate_list(
                self._secrets,
                self._game,
                self._catalog,
                self._rules,
                self._arena.current(),
                self._duels.current(),
            )

    def _find(self, entity_id: int) -> Secret | None:
        return next((s for s in self._secrets if s.entity_id == entity_id), None)

    def _publish(self, cards: list[CandidateCard]) -> None:
        self._published = list(cards)
        self._emit(SECRETS_CHANGED, SecretsChanged(cards=tuple(cards)))

    def _emit(self, event_name: str, payload: SecretsChanged | SecretAdded) -> None:
        self._publishing = True
        try:
            self._event_bus.publish(event_name, payload)
        finally:
            self._publishing = False

    @contextmanager
    def _mutation(self, operation: str) -> Iterator[None]:
        with self._lock:
            if self._publishing:
                raise ReentrantUpdate(operation)
            yield
