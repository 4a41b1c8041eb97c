"""Local key/value store used to persist the site configuration."""

from .adapter import StoreAdapter
from .backends import DEFAULT_QUOTA_BYTES, DatabaseStorage, MemoryStorage, StorageBackend

__all__ = [
    "DEFAULT_QUOTA_BYTES",
    "DatabaseStorage",
    "MemoryStorage",
    "StorageBackend",
    "StoreAdapter",
]
