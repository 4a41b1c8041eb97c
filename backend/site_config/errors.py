"""Exceptions raised inside the site configuration service."""

from __future__ import annotations


class StorageError(Exception):
    """Raised by a storage backend when an item cannot be read or written."""


class StorageUnavailable(StorageError):
    """Raised when the underlying store cannot be reached at all."""


class StorageQuotaExceeded(StorageError):
    """Raised when a write would push the store past its size limit."""

    def __init__(self, key: str, required: int, quota: int) -> None:
        super().__init__(
            f"writing {key!r} needs {required} bytes, quota is {quota} bytes"
        )
        self.key = key
        self.required = required
        self.quota = quota
