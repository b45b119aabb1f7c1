"""Deadline tracking and eviction of expired objects."""

from __future__ import annotations

import asyncio
import heapq
import logging
import threading
from datetime import datetime, timezone
from typing import Callable

from .object_store import ObjectStore
from .storage_models import StoredObject

logger = logging.getLogger(__name__)

EXPIRATION_SWEEP_INTERVAL_SECONDS = 2.0
MIN_SWEEP_INTERVAL_SECONDS = 0.5


def _default_clock() -> datetime:
    return datetime.now(timezone.utc)


class ExpirationManager:
    """Evict stored objects once their ``expires_at`` has passed.

    Deadlines are kept in a min-heap so each tick only touches what is due.
    Entries are never cancelled: removal in the store is idempotent, so a
    deadline for an object that was already evicted on read is simply
    dropped.
    """

    def __init__(
        self,
        store: ObjectStore,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._clock = clock or _default_clock
        self._lock = threading.Lock()
        self._deadlines: list[tuple[datetime, str]] = []

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._deadlines)

    def register(self, obj: StoredObject) -> None:
        with self._lock:
            heapq.heappush(self._deadlines, (obj.expires_at, obj.id))

    def evict_due(self, now: datetime | None = None) -> list[str]:
        """Remove every object whose deadline lies before ``now``."""
        current = now or self._clock()
        due: list[str] = []
        with self._lock:
            while self._deadlines and self._deadlines[0][0] < current:
                _, object_id = heapq.heappop(self._deadlines)
                due.append(object_id)

        evicted = [object_id for object_id in due if self._store.remove(object_id)]
        for object_id in evicted:
            logger.info("storage.expiration.evicted", extra={"object_id": object_id})
        return evicted

    def sweep(self, now: datetime | None = None) -> list[str]:
        """Scan the whole store and drop expired objects (housekeeping)."""
        current = now or self._clock()
        evicted = [
            object_id
            for object_id, obj in self._store.all()
            if obj.is_expired(current) and self._store.remove(object_id)
        ]
        if evicted:
            logger.info(
                "storage.expiration.swept",
                extra={"evicted": len(evicted), "remaining": len(self._store)},
            )
        return evicted


async def run_periodic_expiration(
    *,
    manager: ExpirationManager,
    shutdown_event: asyncio.Event,
    interval_seconds: float = EXPIRATION_SWEEP_INTERVAL_SECONDS,
    clock: Callable[[], datetime] | None = None,
) -> None:
    """Evict due objects every ``interval_seconds`` until shutdown."""

    interval = max(MIN_SWEEP_INTERVAL_SECONDS, float(interval_seconds))
    while not shutdown_event.is_set():
        try:
            manager.evict_due(now=clock() if clock else None)
        except Exception:  # pragma: no cover - defensive logging
            logger.exception("storage.expiration.iteration_failed")
        try:
            await asyncio.wait_for(shutdown_event.wait(), timeout=interval)
        except asyncio.TimeoutError:
            continue


__all__ = [
    "EXPIRATION_SWEEP_INTERVAL_SECONDS",
    "ExpirationManager",
    "run_periodic_expiration",
]
