"""Storage backends for the local key/value store."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageQuotaExceeded, StorageUnavailable
from ..extensions import db
from ..models.settings import AppSetting

DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024


@runtime_checkable
class StorageBackend(Protocol):
    """String-keyed synchronous store; any method may raise."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value or ``None``."""

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""

    def remove_item(self, key: str) -> None:
        """Delete ``key``; missing keys are ignored."""


def _entry_size(key: str, value: str) -> int:
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))


class MemoryStorage:
    """In-process backend, used by tests and one-off scripts."""

    def __init__(self, quota_bytes: int = DEFAULT_QUOTA_BYTES) -> None:
        self.quota_bytes = quota_bytes
        self.items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        used = sum(
            _entry_size(other, stored)
            for other, stored in self.items.items()
            if other != key
        )
        required = used + _entry_size(key, value)
        if required > self.quota_bytes:
            raise StorageQuotaExceeded(key, required, self.quota_bytes)
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class DatabaseStorage:
    """Backend on the ``app_settings`` table; needs an application context."""

    def __init__(self, quota_bytes: int = DEFAULT_QUOTA_BYTES) -> None:
        self.quota_bytes = quota_bytes

    def get_item(self, key: str) -> str | None:
        try:
            setting = db.session.get(AppSetting, key)
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StorageUnavailable(str(exc)) from exc
        return setting.value if setting is not None else None

    def set_item(self, key: str, value: str) -> None:
        try:
            others = db.session.query(AppSetting.key, AppSetting.value).filter(
                AppSetting.key != key
            )
            used = sum(_entry_size(other, stored or "") for other, stored in others)
            required = used + _entry_size(key, value)
            if required > self.quota_bytes:
                raise StorageQuotaExceeded(key, required, self.quota_bytes)

            setting = db.session.get(AppSetting, key)
            if setting is None:
                db.session.add(AppSetting(key=key, value=value))
            else:
                setting.value = value
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StorageUnavailable(str(exc)) from exc

    def remove_item(self, key: str) -> None:
        try:
            db.session.query(AppSetting).filter_by(key=key).delete()
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StorageUnavailable(str(exc)) from exc
