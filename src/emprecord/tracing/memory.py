"""Bounded in-memory lifecycle log."""

from __future__ import annotations

from collections import deque

from emprecord.tracing.models import LifecycleEvent, LifecycleKind


class InMemoryLifecycleLog:
    """Keeps the most recent lifecycle events in memory.

    Args:
        max_events: Oldest events are evicted once this many are stored.
    """

    def __init__(self, max_events: int = 1000):
        if max_events <= 0:
            raise ValueError(f"max_events must be positive, got {max_events}")
        self._events: deque[LifecycleEvent] = deque(maxlen=max_events)

    def on_event(self, event: LifecycleEvent) -> None:
        self._events.append(event)

    @property
    def events(self) -> list[LifecycleEvent]:
        """Stored events, oldest first."""
        return list(self._events)

    def of_kind(self, kind: LifecycleKind) -> list[LifecycleEvent]:
        """Stored events of one kind, oldest first."""
        return [event for event in self._events if event.kind is kind]

    def clear(self) -> None:
        """Drop all stored events."""
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
