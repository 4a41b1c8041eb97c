"""Fault-tolerant wrapper around a storage backend."""

from __future__ import annotations

import logging

from .backends import StorageBackend

logger = logging.getLogger(__name__)


class StoreAdapter:
    """Read, write and remove string records without raising.

    Quota errors, unavailable storage and corrupted state are logged as
    warnings and reported as ``None``/``False`` to the caller.
    """

    def __init__(self, backend: StorageBackend) -> None:
        self.backend = backend

    def read(self, key: str) -> str | None:
        try:
            return self.backend.get_item(key)
        except Exception as exc:
            logger.warning("Reading %r from the store failed: %s", key, exc)
            return None

    def write(self, key: str, value: str) -> bool:
        try:
            self.backend.set_item(key, value)
        except Exception as exc:
            logger.warning("Writing %r to the store failed: %s", key, exc)
            return False
        return True

    def remove(self, key: str) -> bool:
        try:
            self.backend.remove_item(key)
        except Exception as exc:
            logger.warning("Removing %r from the store failed: %s", key, exc)
            return False
        return True
