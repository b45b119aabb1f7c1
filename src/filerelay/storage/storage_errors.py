"""Exceptions raised by the in-memory object store."""


class StorageError(Exception):
    """Base class for object store errors."""


class DuplicateCodeError(StorageError):
    """Raised when a short code is already held by a live object."""

    def __init__(self, short_code: str) -> None:
        super().__init__(f"Short code already in use: {short_code}")
        self.short_code = short_code


class ObjectNotFoundError(StorageError, KeyError):
    """Raised when no live object matches the requested key."""
