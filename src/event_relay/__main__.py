"""Entrypoint: python -m event_relay"""
from __future__ import annotations

import uvicorn

from event_relay.config import settings
from event_relay.logging_config import configure_logging


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "event_relay.app:create_app",
        factory=True,
        host=settings.PRODUCER_HOST,
        port=settings.PRODUCER_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
