"""Event Publisher port - interface for publishing state changes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class TranslationEvent:
    """State change published by the translation engine."""
    stage: str  # "started", "completed", "cache_hit", "dictionary"
    message: str
    text: str | None = None


@runtime_checkable
class EventPublisher(Protocol):
    """Port for publishing engine events."""

    def publish(self, event: TranslationEvent) -> None:
        """Publish an event."""
        ...

    def subscribe(self, callback: Callable[[TranslationEvent], None]) -> None:
        """Subscribe to events."""
        ...


class SimpleEventPublisher:
    """Simple synchronous event publisher."""

    def __init__(self):
        self._subscribers: list[Callable[[TranslationEvent], None]] = []

    def publish(self, event: TranslationEvent) -> None:
        for callback in self._subscribers:
            callback(event)

    def subscribe(self, callback: Callable[[TranslationEvent], None]) -> None:
        self._subscribers.append(callback)
