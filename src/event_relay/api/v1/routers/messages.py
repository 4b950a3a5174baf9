from __future__ import annotations

from fastapi import APIRouter

from event_relay.api.deps import EventIdDep, StoreDep
from event_relay.api.v1.schemas.event import AckResponse, EventResponse
from event_relay.services import producer_service

router = APIRouter(tags=["messages"])


@router.get("/messages", response_model=list[EventResponse])
async def list_messages(store: StoreDep) -> list[EventResponse]:
    events = producer_service.list_outstanding(store)
    return [EventResponse.model_validate(e, from_attributes=True) for e in events]


@router.get("/ack/{event_id:path}", response_model=AckResponse)
async def ack_message(event_id: EventIdDep, store: StoreDep) -> AckResponse:
    result = producer_service.acknowledge(store, event_id)
    return AckResponse.model_validate(result, from_attributes=True)
