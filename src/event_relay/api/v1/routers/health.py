from __future__ import annotations

from fastapi import APIRouter

from event_relay.api.deps import StoreDep

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz(store: StoreDep) -> dict[str, str | int]:
    return {"status": "ok", "outstanding": len(store)}
