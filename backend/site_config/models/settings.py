"""Key/value records backing the site configuration store."""

from __future__ import annotations

from datetime import datetime, timezone

from ..extensions import db


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AppSetting(db.Model):
    """One persisted record of the local key/value store."""

    __tablename__ = "app_settings"

    key = db.Column(db.String(64), primary_key=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(
        db.DateTime,
        default=_utcnow,
        onupdate=_utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:  # pragma: no cover - repr not critical for tests
        return f"<AppSetting {self.key}>"
