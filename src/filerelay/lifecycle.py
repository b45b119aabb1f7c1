"""Lifespan wiring for the background expiration task."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator

from fastapi import FastAPI

from .storage.expiration import ExpirationManager, run_periodic_expiration

logger = logging.getLogger(__name__)


async def start_expiration(app: FastAPI) -> None:
    if getattr(app.state, "disable_expiration_task", False):
        logger.info("Expiration task startup skipped: disabled via app state")
        return
    manager: ExpirationManager = app.state.expiration_manager
    manager.sweep()
    shutdown_event = asyncio.Event()
    task = asyncio.create_task(
        run_periodic_expiration(
            manager=manager,
            shutdown_event=shutdown_event,
            interval_seconds=app.state.config.expiration_interval_seconds,
        ),
        name="filerelay-expiration",
    )
    app.state.expiration_task = task
    app.state.expiration_shutdown_event = shutdown_event


async def stop_expiration(app: FastAPI) -> None:
    shutdown_event = getattr(app.state, "expiration_shutdown_event", None)
    if shutdown_event is not None:
        shutdown_event.set()
    task: asyncio.Task[None] | None = getattr(app.state, "expiration_task", None)
    if task is not None:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
    app.state.expiration_task = None
    app.state.expiration_shutdown_event = None

    manager: ExpirationManager | None = getattr(app.state, "expiration_manager", None)
    if manager is not None:
        evicted = manager.sweep()
        logger.info("Shutdown sweep evicted %s expired objects", len(evicted))


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    await start_expiration(app)
    try:
        yield
    finally:
        await stop_expiration(app)
        store = getattr(app.state, "object_store", None)
        if store is not None:
            released = store.clear()
            logger.info("Released %s objects on shutdown", released)


__all__ = ["lifespan", "start_expiration", "stop_expiration"]
