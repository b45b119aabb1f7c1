"""Buffer multipart uploads in memory with an early size cut-off."""

from __future__ import annotations

import logging

from fastapi import UploadFile

from .relay_errors import PayloadTooLargeError
from .relay_policy import MAX_PAYLOAD_BYTES, UPLOAD_CHUNK_SIZE

logger = logging.getLogger(__name__)


async def read_upload(
    upload: UploadFile,
    *,
    limit_bytes: int = MAX_PAYLOAD_BYTES,
    chunk_size: int = UPLOAD_CHUNK_SIZE,
) -> bytes:
    """Read ``upload`` fully, stopping as soon as ``limit_bytes`` is exceeded."""
    buffer = bytearray()
    try:
        while True:
            chunk = await upload.read(chunk_size)
            if not chunk:
                break
            buffer.extend(chunk)
            if len(buffer) > limit_bytes:
                logger.warning(
                    "relay.upload.payload_too_large",
                    extra={"size_bytes": len(buffer), "limit_bytes": limit_bytes},
                )
                raise PayloadTooLargeError()
    finally:
        await upload.close()
    return bytes(buffer)


__all__ = ["read_upload"]
