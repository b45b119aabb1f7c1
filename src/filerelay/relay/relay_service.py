"""Facade combining code generation, storage and expiration."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable

from ..storage.code_generator import CodeGenerator
from ..storage.expiration import ExpirationManager
from ..storage.object_store import ObjectStore
from ..storage.storage_errors import DuplicateCodeError, ObjectNotFoundError
from ..storage.storage_models import StoredObject
from . import relay_policy as policy
from .relay_errors import (
    ExpiredError,
    NotFoundError,
    NotPreviewableError,
    PayloadTooLargeError,
    RelayInternalError,
    UnsupportedTypeError,
)
from .relay_models import Disposition, FilePayload, ShareInfo

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalise_code(code: str) -> str:
    return code.strip().upper()


def _normalise_name(original_name: str | None) -> str:
    name = "".join(ch for ch in (original_name or "") if ch.isprintable()).strip()
    return name or policy.DEFAULT_FILENAME


def _share_info(obj: StoredObject) -> ShareInfo:
    return ShareInfo(
        short_code=obj.short_code,
        download_path=policy.download_path(obj.short_code),
        preview_path=policy.preview_path(obj.short_code) if obj.previewable else None,
        original_name=obj.original_name,
        size=obj.size,
        previewable=obj.previewable,
        expires_at=obj.expires_at,
    )


class RelayService:
    """Accept uploads, hand out share codes and serve files back."""

    def __init__(
        self,
        *,
        store: ObjectStore,
        expiration: ExpirationManager,
        code_generator: CodeGenerator | None = None,
        clock: Callable[[], datetime] | None = None,
        max_code_attempts: int = policy.MAX_CODE_ATTEMPTS,
    ) -> None:
        self.store = store
        self.expiration = expiration
        self.code_generator = code_generator or CodeGenerator()
        self._clock = clock or utcnow
        self.max_code_attempts = max_code_attempts

    def upload(
        self,
        payload: bytes,
        content_type: str | None,
        original_name: str | None,
    ) -> ShareInfo:
        """Validate and store ``payload``; return how to share it."""
        if content_type is None or not policy.is_allowed(content_type):
            logger.warning(
                "relay.upload.unsupported_type",
                extra={"content_type": content_type},
            )
            raise UnsupportedTypeError()

        size = len(payload)
        if size > policy.MAX_PAYLOAD_BYTES:
            logger.warning(
                "relay.upload.payload_too_large",
                extra={"size_bytes": size, "limit_bytes": policy.MAX_PAYLOAD_BYTES},
            )
            raise PayloadTooLargeError()

        name = _normalise_name(original_name)
        previewable = policy.is_previewable(content_type)
        object_id = uuid.uuid4().hex
        created_at = self._clock()
        expires_at = created_at + policy.OBJECT_TTL

        for attempt in range(1, self.max_code_attempts + 1):
            obj = StoredObject(
                id=object_id,
                short_code=self.code_generator.generate(),
                payload=bytes(payload),
                content_type=content_type,
                original_name=name,
                size=size,
                created_at=created_at,
                expires_at=expires_at,
                previewable=previewable,
            )
            try:
                self.store.put(obj)
            except DuplicateCodeError:
                logger.debug(
                    "relay.upload.code_collision",
                    extra={"short_code": obj.short_code, "attempt": attempt},
                )
                continue
            break
        else:
            logger.error(
                "relay.upload.code_attempts_exhausted",
                extra={"attempts": self.max_code_attempts},
            )
            raise RelayInternalError("Could not allocate a share code")

        self.expiration.register(obj)
        logger.info(
            "relay.upload.stored",
            extra={
                "object_id": obj.id,
                "short_code": obj.short_code,
                "original_name": obj.original_name,
                "size_bytes": obj.size,
                "content_type": obj.content_type,
                "expires_at": obj.expires_at.isoformat(),
            },
        )
        return _share_info(obj)

    def download(self, code: str) -> FilePayload:
        obj = self._resolve(code, action="download")
        return FilePayload(
            payload=obj.payload,
            content_type=obj.content_type,
            original_name=obj.original_name,
            disposition=Disposition.ATTACHMENT,
        )

    def preview(self, code: str) -> FilePayload:
        obj = self._resolve(code, action="preview")
        if not obj.previewable:
            logger.info(
                "relay.preview.not_previewable",
                extra={"short_code": obj.short_code, "content_type": obj.content_type},
            )
            raise NotPreviewableError()
        return FilePayload(
            payload=obj.payload,
            content_type=obj.content_type,
            original_name=obj.original_name,
            disposition=Disposition.INLINE,
        )

    def describe(self, code: str) -> ShareInfo:
        """Return share metadata for a live code without the payload."""
        return _share_info(self._resolve(code, action="describe"))

    def _resolve(self, code: str, *, action: str) -> StoredObject:
        short_code = normalise_code(code)
        try:
            obj = self.store.get_by_code(short_code)
        except ObjectNotFoundError:
            logger.info(
                f"relay.{action}.not_found", extra={"short_code": short_code}
            )
            raise NotFoundError() from None

        if obj.is_expired(self._clock()):
            self.store.remove(obj.id)
            logger.info(
                f"relay.{action}.expired",
                extra={"short_code": short_code, "object_id": obj.id},
            )
            raise ExpiredError()
        return obj


__all__ = ["RelayService", "normalise_code", "utcnow"]
