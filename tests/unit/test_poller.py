from __future__ import annotations

import asyncio

import pytest

from event_relay.workers.poller import ConsumerPoller


@pytest.mark.asyncio
async def test_tick_passes_trigger_token():
    received: list[int] = []

    async def cycle(trigger: int) -> str:
        received.append(trigger)
        return "done"

    poller = ConsumerPoller(cycle, interval=0.01, trigger=lambda: 42)

    assert await poller.tick() == "done"
    assert received == [42]


@pytest.mark.asyncio
async def test_tick_is_dropped_while_cycle_in_flight():
    release = asyncio.Event()
    runs = 0

    async def cycle(_trigger) -> None:
        nonlocal runs
        runs += 1
        await release.wait()

    poller = ConsumerPoller(cycle, interval=0.01)
    first = asyncio.create_task(poller.tick())
    await asyncio.sleep(0)
    assert poller.in_flight

    assert await poller.tick() is None
    release.set()
    await first

    assert runs == 1
    assert not poller.in_flight


@pytest.mark.asyncio
async def test_failing_cycle_does_not_stop_polling():
    calls = 0

    async def cycle(_trigger) -> None:
        nonlocal calls
        calls += 1
        raise RuntimeError("boom")

    poller = ConsumerPoller(cycle, interval=0.001)
    await poller.start()
    await asyncio.sleep(0.05)
    await poller.stop()

    assert calls >= 2


@pytest.mark.asyncio
async def test_cycles_never_overlap_and_wait_after_completion():
    active = 0
    overlaps = 0
    ends: list[float] = []
    starts: list[float] = []
    loop = asyncio.get_running_loop()

    async def cycle(_trigger) -> None:
        nonlocal active, overlaps
        active += 1
        if active > 1:
            overlaps += 1
        starts.append(loop.time())
        await asyncio.sleep(0.02)
        ends.append(loop.time())
        active -= 1

    poller = ConsumerPoller(cycle, interval=0.01)
    await poller.start()
    await asyncio.sleep(0.15)
    await poller.stop()

    assert overlaps == 0
    assert len(starts) >= 2
    for prev_end, next_start in zip(ends, starts[1:]):
        assert next_start - prev_end >= 0.009


@pytest.mark.asyncio
async def test_stop_without_start_is_noop():
    async def cycle(_trigger) -> None:
        return None

    await ConsumerPoller(cycle, interval=1).stop()
