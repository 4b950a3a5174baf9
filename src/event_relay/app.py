from __future__ import annotations

import functools
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from event_relay.api.middleware.cycle_id import CycleIdMiddleware
from event_relay.api.v1.routers import health, messages
from event_relay.application.exceptions import ValidationError
from event_relay.application.ports.backlog import BacklogSource
from event_relay.application.repositories.outstanding import OutstandingStore
from event_relay.config import settings
from event_relay.infrastructure.backlog.random_backlog import RandomBacklog
from event_relay.infrastructure.store.memory import InMemoryOutstandingStore
from event_relay.services import producer_service
from event_relay.workers.backlog_generator import BacklogGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    generator: BacklogGenerator | None = None
    if app.state.generate:
        generator = BacklogGenerator(
            functools.partial(producer_service.generate_batch, app.state.store, app.state.backlog),
            interval=settings.GENERATION_INTERVAL,
        )
        await generator.start()
    else:
        logger.info("Backlog generation disabled")

    yield

    if generator is not None:
        await generator.stop()


def create_app(
    store: OutstandingStore | None = None,
    backlog: BacklogSource | None = None,
    generate: bool | None = None,
) -> FastAPI:
    app = FastAPI(
        title="Event Relay Producer",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else InMemoryOutstandingStore()
    app.state.backlog = backlog or RandomBacklog()
    app.state.generate = settings.GENERATION_ENABLED if generate is None else generate

    app.add_middleware(CycleIdMiddleware)

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(messages.router)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation(_req: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.detail})
