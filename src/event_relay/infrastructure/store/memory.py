"""Thread-safe in-memory outstanding-event store."""
from __future__ import annotations

import threading

from event_relay.domain.entities.event import Event


class InMemoryOutstandingStore:
    """Implements application.repositories.outstanding.OutstandingStore.

    Every access goes through one lock, so the store can be shared by the
    event loop and any worker threads without losing or tearing updates.
    """

    def __init__(self) -> None:
        self._events: dict[str, Event] = {}
        self._lock = threading.Lock()

    def put(self, event: Event) -> None:
        with self._lock:
            self._events[event.id] = event

    def remove(self, event_id: str) -> Event | None:
        # pop under the lock: only the first concurrent caller sees the event
        with self._lock:
            return self._events.pop(event_id, None)

    def values(self) -> list[Event]:
        with self._lock:
            return list(self._events.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def __contains__(self, event_id: object) -> bool:
        with self._lock:
            return event_id in self._events
