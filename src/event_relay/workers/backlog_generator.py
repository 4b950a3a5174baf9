"""Producer-side background task that keeps new work flowing into the store."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class BacklogGenerator:
    """Calls ``generate`` immediately and then at a fixed rate.

    Runs on its own task, independent of request handling. An overrunning
    call shifts the schedule instead of bursting to catch up.
    """

    def __init__(self, generate: Callable[[], Any], *, interval: float) -> None:
        self._generate = generate
        self._interval = interval
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        self._task = asyncio.create_task(self._run(), name="backlog-generator")
        logger.info("Backlog generator started (interval=%.1fs)", self._interval)

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
            logger.info("Backlog generator stopped")

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_run = loop.time()
        while True:
            try:
                self._generate()
            except Exception:
                logger.exception("Backlog generation failed")
            next_run = max(next_run + self._interval, loop.time())
            await asyncio.sleep(next_run - loop.time())
