from __future__ import annotations

from typing import Protocol

from event_relay.application.dto.ack import AckResult
from event_relay.domain.entities.event import Event


class ProducerClient(Protocol):
    """Remote side of the delivery protocol as seen by the consumer.

    Both calls raise ``TransportError`` when the producer cannot be reached
    or answers with something unusable.
    """

    async def list_outstanding(self) -> list[Event]: ...

    async def acknowledge(self, event_id: str) -> AckResult: ...
