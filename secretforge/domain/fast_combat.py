"""Strategies reconciling secrets that trigger during fast combat."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .entities import ObservedEntity
from .secret import Secret


class FastCombatReconciler(ABC):
    """Decide what the remaining secrets learn when one of them triggers."""

    @abstractmethod
    def reconcile(self, trigger: ObservedEntity, secrets: Sequence[Secret]) -> list[str]:
        """Return card ids to exclude before ``trigger`` is removed."""

    def clear(self) -> None:
        """Forget any per-combat state."""


@dataclass(slots=True)
class NoFastCombat(FastCombatReconciler):
    """Default behaviour: a triggered secret teaches the others nothing."""

    def reconcile(self, trigger: ObservedEntity, secrets: Sequence[Secret]) -> list[str]:
        return []


@dataclass(slots=True)
class DeferredExclusionReconciler(FastCombatReconciler):
    """Hold exclusions from a combat step until the step resolves.

    The game client may reveal a triggered secret before the attack that
    triggered it is reported. Exclusions derived from that attack are
    deferred here; when a secret is removed mid-combat they are applied to
    the survivors so the published list never shows the stale candidates.
    """

    pending: list[str] = field(default_factory=list)

    def defer(self, card_ids: Iterable[str]) -> None:
        for card_id in card_ids:
            if card_id and card_id not in self.pending:
                self.pending.append(card_id)

    def reconcile(self, trigger: ObservedEntity, secrets: Sequence[Secret]) -> list[str]:
        if not self.pending:
            return []
        survivors = [secret for secret in secrets if secret.entity_id != trigger.entity_id]
        if not survivors:
            self.pending.clear()
            return []
        exclusions = [card_id for card_id in self.pending if card_id != trigger.card_id]
        self.pending.clear()
        return exclusions

    def flush(self) -> list[str]:
        """Return and forget all pending exclusions (combat resolved without a trigger)."""
        exclusions = list(self.pending)
        self.pending.clear()
        return exclusions

    def clear(self) -> None:
        self.pending.clear()
