"""Fixed relay limits: TTL, size cap and the content-type allow-list."""

from __future__ import annotations

from datetime import timedelta

OBJECT_TTL = timedelta(hours=3)
MAX_PAYLOAD_BYTES = 10 * 1024 * 1024  # 10 MiB
MAX_CODE_ATTEMPTS = 8
UPLOAD_CHUNK_SIZE = 1 * 1024 * 1024  # 1 MiB
DEFAULT_FILENAME = "upload"

ALLOWED_CONTENT_TYPES: frozenset[str] = frozenset(
    {
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/webp",
        "video/mp4",
        "video/webm",
        "audio/mpeg",
        "audio/wav",
        "text/plain",
        "application/pdf",
    }
)

PREVIEWABLE_TOP_LEVEL_TYPES = ("image/", "video/", "audio/", "text/")
PREVIEWABLE_EXACT_TYPES = frozenset({"application/pdf"})


def is_allowed(content_type: str | None) -> bool:
    return content_type in ALLOWED_CONTENT_TYPES


def is_previewable(content_type: str) -> bool:
    """Return True when browsers can render ``content_type`` inline."""
    return content_type.startswith(PREVIEWABLE_TOP_LEVEL_TYPES) or (
        content_type in PREVIEWABLE_EXACT_TYPES
    )


def download_path(short_code: str) -> str:
    return f"/api/download/{short_code}"


def preview_path(short_code: str) -> str:
    return f"/api/preview/{short_code}"


__all__ = [
    "ALLOWED_CONTENT_TYPES",
    "DEFAULT_FILENAME",
    "MAX_CODE_ATTEMPTS",
    "MAX_PAYLOAD_BYTES",
    "OBJECT_TTL",
    "UPLOAD_CHUNK_SIZE",
    "download_path",
    "is_allowed",
    "is_previewable",
    "preview_path",
]
