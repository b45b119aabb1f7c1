"""Domain-specific exceptions for the relay service."""

from __future__ import annotations

from fastapi import status

from .relay_models import FailureReason


class RelayError(Exception):
    """Base class for client-facing relay errors."""

    failure_reason: FailureReason = FailureReason.INTERNAL_ERROR
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Unexpected failure"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class NoFileError(RelayError):
    """Raised when the upload request carries no file."""

    failure_reason = FailureReason.NO_FILE
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "No file selected"


class UnsupportedTypeError(RelayError):
    """Raised when Content-Type is not on the allow-list."""

    failure_reason = FailureReason.UNSUPPORTED_TYPE
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = (
        "File type not allowed. Supported: images, videos, audio, text, PDF"
    )


class PayloadTooLargeError(RelayError):
    """Raised when the uploaded file exceeds the size cap."""

    failure_reason = FailureReason.PAYLOAD_TOO_LARGE
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "File exceeds the 10 MiB limit"


class NotFoundError(RelayError):
    """Raised when no live object matches the share code."""

    failure_reason = FailureReason.NOT_FOUND
    http_status = status.HTTP_404_NOT_FOUND
    default_message = "File not found"


class ExpiredError(RelayError):
    """Raised when the object behind a share code has expired."""

    failure_reason = FailureReason.EXPIRED
    http_status = status.HTTP_410_GONE
    default_message = "File has expired"


class NotPreviewableError(RelayError):
    """Raised when inline preview is requested for a non-previewable type."""

    failure_reason = FailureReason.NOT_PREVIEWABLE
    http_status = status.HTTP_403_FORBIDDEN
    default_message = "File cannot be previewed"


class RelayInternalError(RelayError):
    """Raised for unexpected failures, including exhausted code retries."""
