from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from event_relay.logging_config import cycle_id_ctx

HEADER = "X-Delivery-Cycle"


class CycleIdMiddleware(BaseHTTPMiddleware):
    """Bind the caller's delivery cycle id to producer-side log records."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        cycle_id = request.headers.get(HEADER)
        if not cycle_id:
            return await call_next(request)
        token = cycle_id_ctx.set(cycle_id)
        try:
            response = await call_next(request)
            response.headers[HEADER] = cycle_id
            return response
        finally:
            cycle_id_ctx.reset(token)
