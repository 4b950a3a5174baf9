"""Delivery worker: polls the producer, processes and acknowledges outstanding events."""
from __future__ import annotations

import asyncio
import logging

import httpx

from event_relay.config import settings
from event_relay.infrastructure.http.producer_client import HttpProducerClient
from event_relay.logging_config import configure_logging
from event_relay.services.delivery_pipeline import DeliveryPipeline, EventHandler, log_event
from event_relay.workers.poller import ConsumerPoller

logger = logging.getLogger(__name__)


async def run_delivery_worker(
    handler: EventHandler = log_event,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    async with httpx.AsyncClient(
        base_url=settings.PRODUCER_BASE_URL,
        timeout=settings.HTTP_TIMEOUT,
        transport=transport,
    ) as http:
        pipeline = DeliveryPipeline(
            HttpProducerClient(http),
            handler,
            max_concurrency=settings.DELIVERY_CONCURRENCY,
        )
        poller = ConsumerPoller(pipeline.run_cycle, interval=settings.POLL_INTERVAL)

        logger.info(
            "Delivery worker started (producer=%s, poll=%.1fs, concurrency=%d)",
            settings.PRODUCER_BASE_URL,
            settings.POLL_INTERVAL,
            settings.DELIVERY_CONCURRENCY,
        )
        await poller.run_forever()


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    try:
        asyncio.run(run_delivery_worker())
    except KeyboardInterrupt:
        logger.info("Delivery worker stopped")


if __name__ == "__main__":
    main()
