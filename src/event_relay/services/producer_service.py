from __future__ import annotations

import logging

from event_relay.application.dto.ack import AckResult
from event_relay.application.ports.backlog import BacklogSource
from event_relay.application.repositories.outstanding import OutstandingStore
from event_relay.domain.entities.event import Event

logger = logging.getLogger(__name__)


def generate_batch(store: OutstandingStore, backlog: BacklogSource) -> list[Event]:
    """Pull the next burst from the backlog and make it outstanding."""
    events = backlog.next_batch()
    for event in events:
        store.put(event)
    logger.info("just added %s to the results", events)
    return events


def list_outstanding(store: OutstandingStore) -> list[Event]:
    """Snapshot of every unacknowledged event.

    Non-destructive: events stay outstanding until acknowledged, so
    repeated calls redeliver them.
    """
    events = store.values()
    logger.info("there are %d outstanding messages", len(events))
    return events


def acknowledge(store: OutstandingStore, event_id: str) -> AckResult:
    """Remove an event from the outstanding pool.

    Returns acknowledged=False for ids that were already acknowledged or
    never existed; both are normal outcomes of duplicate delivery.
    """
    removed = store.remove(event_id)
    if removed is None:
        logger.info("message %s is not outstanding, nothing to remove", event_id)
        return AckResult(id=event_id, acknowledged=False)
    logger.info("removing message %s from the unhandled messages", event_id)
    return AckResult(id=event_id, acknowledged=True)
