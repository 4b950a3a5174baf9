from __future__ import annotations

import uuid
from typing import NewType

EventId = NewType("EventId", str)


def new_event_id() -> EventId:
    """Fresh random id; ids are never recycled after acknowledgment."""
    return EventId(str(uuid.uuid4()))
