"""Domain event dispatch."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, DefaultDict, Iterable, Protocol, Sequence

if TYPE_CHECKING:
    from .candidates import CandidateCard
    from .secret import Secret

SECRETS_CHANGED = "secrets.changed"
SECRET_ADDED = "secret.added"


class EventPayload(Protocol):
    """Marker protocol for event payloads."""


EventListener = Callable[[EventPayload], None]


@dataclass(frozen=True, slots=True)
class SecretsChanged:
    cards: Sequence["CandidateCard"]


@dataclass(frozen=True, slots=True)
class SecretAdded:
    secret: "Secret"


class EventBus:
    """Synchronous pub-sub; listeners run in subscription order."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, list[EventListener]] = defaultdict(list)

    def subscribe(self, event_name: str, listener: EventListener) -> None:
        self._listeners[event_name].append(listener)

    def unsubscribe(self, event_name: str, listener: EventListener) -> None:
        listeners = self._listeners.get(event_name)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def publish(self, event_name: str, payload: EventPayload) -> None:
        for listener in list(self._listeners.get(event_name, ())):
            listener(payload)

    def clear(self) -> None:
        self._listeners.clear()

    def listeners(self, event_name: str) -> Iterable[EventListener]:
        return tuple(self._listeners.get(event_name, ()))
