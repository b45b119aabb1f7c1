"""In-memory object store with a secondary short code index."""

from __future__ import annotations

import logging
import threading

from .storage_errors import DuplicateCodeError, ObjectNotFoundError
from .storage_models import StoredObject

logger = logging.getLogger(__name__)


class ObjectStore:
    """Hold ``id -> StoredObject`` and ``short_code -> id`` behind one lock.

    The store is policy-free: it never looks at ``expires_at``. Expiry is
    enforced by :class:`~src.filerelay.relay.relay_service.RelayService`
    and :class:`~src.filerelay.storage.expiration.ExpirationManager`.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._objects: dict[str, StoredObject] = {}
        self._codes: dict[str, str] = {}

    def put(self, obj: StoredObject) -> None:
        """Insert both index entries or raise ``DuplicateCodeError``."""
        with self._lock:
            if obj.short_code in self._codes:
                raise DuplicateCodeError(obj.short_code)
            if obj.id in self._objects:
                raise ValueError(f"Object id already stored: {obj.id}")
            self._objects[obj.id] = obj
            self._codes[obj.short_code] = obj.id
        logger.debug(
            "storage.object.stored",
            extra={"object_id": obj.id, "short_code": obj.short_code},
        )

    def get_by_code(self, short_code: str) -> StoredObject:
        with self._lock:
            object_id = self._codes.get(short_code)
            if object_id is None:
                raise ObjectNotFoundError(short_code)
            return self._objects[object_id]

    def remove(self, object_id: str) -> bool:
        """Drop the object and its code entry; absent ids are a no-op."""
        with self._lock:
            obj = self._objects.pop(object_id, None)
            if obj is None:
                return False
            self._codes.pop(obj.short_code, None)
        logger.debug(
            "storage.object.removed",
            extra={"object_id": object_id, "short_code": obj.short_code},
        )
        return True

    def all(self) -> list[tuple[str, StoredObject]]:
        """Return a snapshot of every stored object."""
        with self._lock:
            return list(self._objects.items())

    def clear(self) -> int:
        with self._lock:
            count = len(self._objects)
            self._objects.clear()
            self._codes.clear()
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._objects)

    def __contains__(self, short_code: object) -> bool:
        with self._lock:
            return short_code in self._codes


__all__ = ["ObjectStore"]
