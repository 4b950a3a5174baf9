"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from event_relay.application.exceptions import ValidationError
from event_relay.application.repositories.outstanding import OutstandingStore


def get_store(request: Request) -> OutstandingStore:
    return request.app.state.store


StoreDep = Annotated[OutstandingStore, Depends(get_store)]


def valid_event_id(event_id: str) -> str:
    if not event_id or not event_id.strip():
        raise ValidationError("the id must be non-empty")
    return event_id


EventIdDep = Annotated[str, Depends(valid_event_id)]
