from __future__ import annotations

from typing import Protocol

from event_relay.domain.entities.event import Event


class OutstandingStore(Protocol):
    """Events emitted but not yet acknowledged, keyed by event id."""

    def put(self, event: Event) -> None: ...

    def remove(self, event_id: str) -> Event | None: ...

    def values(self) -> list[Event]: ...

    def __len__(self) -> int: ...
