from __future__ import annotations

from pydantic import BaseModel


class EventResponse(BaseModel):
    id: str
    description: str

    model_config = {"from_attributes": True}


class AckResponse(BaseModel):
    id: str
    acknowledged: bool

    model_config = {"from_attributes": True}
