"""httpx client for the producer's list/ack endpoints."""
from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
import pydantic
from pydantic import TypeAdapter

from event_relay.api.middleware.cycle_id import HEADER as CYCLE_HEADER
from event_relay.api.v1.schemas.event import AckResponse, EventResponse
from event_relay.application.dto.ack import AckResult
from event_relay.application.exceptions import TransportError
from event_relay.domain.entities.event import Event
from event_relay.logging_config import NO_CYCLE, cycle_id_ctx

logger = logging.getLogger(__name__)

_EVENT_LIST = TypeAdapter(list[EventResponse])


class HttpProducerClient:
    """Implements application.ports.producer.ProducerClient."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def list_outstanding(self) -> list[Event]:
        body = await self._get("/messages")
        try:
            items = _EVENT_LIST.validate_json(body)
        except pydantic.ValidationError as exc:
            raise TransportError(f"malformed message list: {exc}") from exc
        return [Event(id=item.id, description=item.description) for item in items]

    async def acknowledge(self, event_id: str) -> AckResult:
        body = await self._get(f"/ack/{quote(event_id, safe='')}")
        try:
            resp = AckResponse.model_validate_json(body)
        except pydantic.ValidationError as exc:
            raise TransportError(f"malformed ack response: {exc}") from exc
        return AckResult(id=resp.id, acknowledged=resp.acknowledged)

    async def _get(self, path: str) -> bytes:
        headers: dict[str, str] = {}
        cycle_id = cycle_id_ctx.get()
        if cycle_id != NO_CYCLE:
            headers[CYCLE_HEADER] = cycle_id
        try:
            response = await self._client.get(path, headers=headers)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportError(f"GET {path}: {exc!r}") from exc
        logger.debug("GET %s -> %d", path, response.status_code)
        return response.content
