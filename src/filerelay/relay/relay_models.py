"""Data structures for the relay service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from urllib.parse import quote


class FailureReason(StrEnum):
    """Machine-stable error strings returned to clients."""

    NO_FILE = "no_file"
    UNSUPPORTED_TYPE = "unsupported_type"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    NOT_PREVIEWABLE = "not_previewable"
    INTERNAL_ERROR = "internal_error"


class Disposition(StrEnum):
    ATTACHMENT = "attachment"
    INLINE = "inline"


@dataclass(frozen=True, slots=True)
class ShareInfo:
    """Outcome of a successful upload."""

    short_code: str
    download_path: str
    preview_path: str | None
    original_name: str
    size: int
    previewable: bool
    expires_at: datetime


@dataclass(frozen=True, slots=True)
class FilePayload:
    """Bytes and headers needed to serve a stored file."""

    payload: bytes
    content_type: str
    original_name: str
    disposition: Disposition

    @property
    def content_disposition(self) -> str:
        safe_name = self.original_name.replace("\\", "_").replace('"', "'")
        header = f'{self.disposition.value}; filename="{safe_name}"'
        if safe_name.isascii():
            return header
        fallback = safe_name.encode("ascii", "replace").decode("ascii")
        encoded = quote(self.original_name, safe="")
        return (
            f'{self.disposition.value}; filename="{fallback}"; '
            f"filename*=UTF-8''{encoded}"
        )
