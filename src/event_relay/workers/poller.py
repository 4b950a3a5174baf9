"""Fixed-delay poller that drives one delivery cycle at a time."""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)

CycleFn = Callable[[Any], Awaitable[Any]]


def _now_ms() -> int:
    return int(time.time() * 1000)


class ConsumerPoller:
    """Ticks ``cycle`` with a timestamp token, waiting ``interval`` after each run.

    The delay is measured from the end of a cycle, so an overrunning cycle
    pushes the next tick back instead of overlapping it. ``tick()`` is a
    single slot: a trigger that arrives while a cycle is in flight is
    dropped.
    """

    def __init__(
        self,
        cycle: CycleFn,
        *,
        interval: float,
        trigger: Callable[[], Any] = _now_ms,
    ) -> None:
        self._cycle = cycle
        self._interval = interval
        self._trigger = trigger
        self._slot = asyncio.Lock()
        self._task: asyncio.Task[None] | None = None

    @property
    def in_flight(self) -> bool:
        return self._slot.locked()

    async def tick(self) -> Any:
        if self._slot.locked():
            logger.debug("Previous cycle still in flight, skipping tick")
            return None
        async with self._slot:
            try:
                return await self._cycle(self._trigger())
            except Exception:
                logger.exception("Delivery cycle error")
                return None

    async def run_forever(self) -> None:
        while True:
            await self.tick()
            await asyncio.sleep(self._interval)

    async def start(self) -> None:
        self._task = asyncio.create_task(self.run_forever(), name="consumer-poller")
        logger.info("Consumer poller started (interval=%.2fs)", self._interval)

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
            logger.info("Consumer poller stopped")
