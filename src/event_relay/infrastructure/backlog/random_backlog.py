"""Stand-in upstream that drips a small burst of text events per call."""
from __future__ import annotations

import random

from event_relay.application.ports.clock import Clock, SystemClock
from event_relay.domain.entities.event import Event
from event_relay.domain.value_objects.ids import new_event_id

_ORDINALS = ("First", "Second", "Third")
BATCH_SIZES = (2, 3)


class RandomBacklog:
    """Implements application.ports.backlog.BacklogSource."""

    def __init__(self, clock: Clock | None = None, rng: random.Random | None = None) -> None:
        self._clock = clock or SystemClock()
        self._rng = rng or random.Random()

    def next_batch(self) -> list[Event]:
        now = self._clock.now().isoformat()
        size = self._rng.choice(BATCH_SIZES)
        return [
            Event(id=new_event_id(), description=f"{ordinal} message at {now}")
            for ordinal in _ORDINALS[:size]
        ]
