from __future__ import annotations

from typing import Protocol

from event_relay.domain.entities.event import Event


class BacklogSource(Protocol):
    """Upstream of newly available work; each call returns the next burst."""

    def next_batch(self) -> list[Event]: ...
