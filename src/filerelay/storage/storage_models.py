"""Stored object data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class StoredObject:
    """One uploaded file kept in memory until ``expires_at``."""

    id: str
    short_code: str
    payload: bytes
    content_type: str
    original_name: str
    size: int
    created_at: datetime
    expires_at: datetime
    previewable: bool

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
