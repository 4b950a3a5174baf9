"""Delivery worker and console-script entrypoints."""
from __future__ import annotations

import asyncio

import httpx
import pytest

import event_relay.__main__ as producer_entry
from event_relay.app import create_app
from event_relay.config import settings
from event_relay.domain.entities.event import Event
from event_relay.workers import delivery_worker
from tests.conftest import make_event


@pytest.mark.asyncio
async def test_worker_drains_producer(store):
    for i in range(3):
        store.put(make_event(f"e{i}"))
    transport = httpx.ASGITransport(app=create_app(store=store, generate=False))
    handled: list[Event] = []

    task = asyncio.create_task(
        delivery_worker.run_delivery_worker(handled.append, transport=transport)
    )
    try:
        for _ in range(200):
            if len(store) == 0:
                break
            await asyncio.sleep(0.01)
    finally:
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    assert len(store) == 0
    assert {e.id for e in handled} == {"e0", "e1", "e2"}


def test_consumer_main_runs_worker(monkeypatch):
    calls: list[str] = []

    async def fake_worker() -> None:
        calls.append("ran")

    monkeypatch.setattr(delivery_worker, "run_delivery_worker", fake_worker)

    delivery_worker.main()

    assert calls == ["ran"]


def test_producer_main_starts_uvicorn(monkeypatch):
    captured: dict = {}

    def fake_run(app, **kwargs) -> None:
        captured["app"] = app
        captured.update(kwargs)

    monkeypatch.setattr(producer_entry.uvicorn, "run", fake_run)

    producer_entry.main()

    assert captured["app"] == "event_relay.app:create_app"
    assert captured["factory"] is True
    assert captured["port"] == settings.PRODUCER_PORT
