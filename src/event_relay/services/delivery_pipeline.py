"""One poll cycle: fetch the outstanding snapshot, process and acknowledge each event."""
from __future__ import annotations

import asyncio
import inspect
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from event_relay.application.exceptions import TransportError
from event_relay.application.ports.producer import ProducerClient
from event_relay.domain.entities.event import Event
from event_relay.domain.value_objects.enums import DeliveryOutcome
from event_relay.logging_config import cycle_id_ctx

logger = logging.getLogger(__name__)

# The return value is ignored: an event is acknowledged once its handler
# returns (or its awaitable completes) without raising.
EventHandler = Callable[[Event], Awaitable[Any] | Any]


def log_event(event: Event) -> Event:
    """Default handler: log the delivery and pass the event through."""
    logger.info("got a new message [%s]", event)
    return event


@dataclass
class CycleReport:
    cycle_id: str
    trigger: Any = None
    fetch_failed: bool = False
    fetched: int = 0
    outcomes: dict[str, DeliveryOutcome] = field(default_factory=dict)

    def count(self, outcome: DeliveryOutcome) -> int:
        return sum(1 for o in self.outcomes.values() if o == outcome)

    @property
    def acknowledged_ids(self) -> list[str]:
        return [
            event_id
            for event_id, outcome in self.outcomes.items()
            if outcome == DeliveryOutcome.ACKNOWLEDGED
        ]


class DeliveryPipeline:
    """Fetch → split → process → acknowledge, isolated per event.

    Transport and processing failures never escape ``run_cycle``: a failed
    fetch aborts the cycle, and a failed process or ack step leaves that
    event outstanding on the producer so the next poll redelivers it.
    """

    def __init__(
        self,
        client: ProducerClient,
        handler: EventHandler = log_event,
        *,
        max_concurrency: int = 1,
    ) -> None:
        self._client = client
        self._handler = handler
        self._max_concurrency = max(1, max_concurrency)

    async def run_cycle(self, trigger: Any = None) -> CycleReport:
        report = CycleReport(cycle_id=uuid.uuid4().hex[:12], trigger=trigger)
        token = cycle_id_ctx.set(report.cycle_id)
        try:
            try:
                events = await self._client.list_outstanding()
            except TransportError as exc:
                logger.warning("Fetch failed, retrying on next poll: %s", exc.detail)
                report.fetch_failed = True
                return report
            except Exception:
                logger.exception("Fetch failed, retrying on next poll")
                report.fetch_failed = True
                return report

            report.fetched = len(events)
            if events:
                sem = asyncio.Semaphore(self._max_concurrency)
                results = await asyncio.gather(
                    *(self._deliver_guarded(sem, event) for event in events)
                )
                # a redelivered duplicate inside one snapshot keeps its first outcome
                for event, outcome in zip(events, results):
                    report.outcomes.setdefault(event.id, outcome)

            self._log_summary(report)
            return report
        finally:
            cycle_id_ctx.reset(token)

    async def _deliver_guarded(self, sem: asyncio.Semaphore, event: Event) -> DeliveryOutcome:
        async with sem:
            return await self._deliver(event)

    async def _deliver(self, event: Event) -> DeliveryOutcome:
        try:
            result = self._handler(event)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Processing failed for message %s, leaving it outstanding", event.id)
            return DeliveryOutcome.PROCESSING_FAILED

        try:
            ack = await self._client.acknowledge(event.id)
        except TransportError as exc:
            logger.warning("Ack failed for message %s, it will be redelivered: %s", event.id, exc.detail)
            return DeliveryOutcome.ACK_FAILED
        except Exception:
            logger.exception("Ack failed for message %s, it will be redelivered", event.id)
            return DeliveryOutcome.ACK_FAILED

        if not ack.acknowledged:
            logger.debug("Message %s was already acknowledged", event.id)
            return DeliveryOutcome.ALREADY_ACKNOWLEDGED
        return DeliveryOutcome.ACKNOWLEDGED

    @staticmethod
    def _log_summary(report: CycleReport) -> None:
        if not report.fetched:
            logger.debug("Nothing outstanding")
            return
        logger.info(
            "Cycle done: fetched=%d acknowledged=%d duplicate=%d processing_failed=%d ack_failed=%d",
            report.fetched,
            report.count(DeliveryOutcome.ACKNOWLEDGED),
            report.count(DeliveryOutcome.ALREADY_ACKNOWLEDGED),
            report.count(DeliveryOutcome.PROCESSING_FAILED),
            report.count(DeliveryOutcome.ACK_FAILED),
        )
