"""Logging setup shared by the producer service and the delivery worker."""
from __future__ import annotations

import logging
from contextvars import ContextVar

NO_CYCLE = "-"

cycle_id_ctx: ContextVar[str] = ContextVar("cycle_id", default=NO_CYCLE)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(cycle_id)s]: %(message)s"


class CycleIdFilter(logging.Filter):
    """Stamp each record with the delivery cycle it belongs to."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "cycle_id"):
            record.cycle_id = cycle_id_ctx.get()
        return True


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, CycleIdFilter) for f in handler.filters):
            handler.addFilter(CycleIdFilter())
