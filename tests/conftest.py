"""Shared test fixtures."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

import pytest

from event_relay.application.dto.ack import AckResult
from event_relay.application.exceptions import TransportError
from event_relay.domain.entities.event import Event
from event_relay.infrastructure.store.memory import InMemoryOutstandingStore


def make_event(event_id: str | None = None, description: str = "hello") -> Event:
    return Event(id=event_id or str(uuid.uuid4()), description=description)


@dataclass
class FixedClock:
    _now: datetime = field(default_factory=lambda: datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc))

    def now(self) -> datetime:
        return self._now


@dataclass
class FixedBacklog:
    """Hands out pre-built batches in order, then empty batches."""
    batches: list[list[Event]] = field(default_factory=list)
    calls: int = 0

    def next_batch(self) -> list[Event]:
        self.calls += 1
        if not self.batches:
            return []
        return self.batches.pop(0)


@dataclass
class FakeProducerClient:
    """In-process producer backed by a real store, with failure injection."""
    store: InMemoryOutstandingStore = field(default_factory=InMemoryOutstandingStore)
    fail_list: bool = False
    fail_ack_ids: set[str] = field(default_factory=set)
    list_calls: int = 0
    ack_calls: list[str] = field(default_factory=list)

    async def list_outstanding(self) -> list[Event]:
        self.list_calls += 1
        if self.fail_list:
            raise TransportError("connection refused")
        return self.store.values()

    async def acknowledge(self, event_id: str) -> AckResult:
        self.ack_calls.append(event_id)
        if event_id in self.fail_ack_ids:
            raise TransportError("read timeout")
        removed = self.store.remove(event_id)
        return AckResult(id=event_id, acknowledged=removed is not None)


@pytest.fixture
def store() -> InMemoryOutstandingStore:
    return InMemoryOutstandingStore()


@pytest.fixture
def producer(store) -> FakeProducerClient:
    return FakeProducerClient(store=store)
