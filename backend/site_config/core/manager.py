"""Public API of the site configuration: load, save, update and reset."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Final

from ..images import ImageProber
from ..store import StoreAdapter
from .migration import decode_blob, migrate
from .schema import (
    CONFIG_VERSION,
    LEGACY_REWRITES,
    LegacyRewrite,
    SiteConfig,
    check_rewrites,
    default_config,
    default_values,
)

logger = logging.getLogger(__name__)

CONFIG_KEY: Final[str] = "site-config"
VERSION_KEY: Final[str] = "site-config-version"


class ConfigManager:
    """Persist the site configuration through a :class:`StoreAdapter`.

    Every operation has a total contract: storage and parsing faults are
    logged and turned into defaults or a ``False`` result, never raised.
    """

    def __init__(
        self,
        store: StoreAdapter,
        prober: ImageProber | None = None,
        *,
        version: str = CONFIG_VERSION,
        rewrites: Iterable[LegacyRewrite] = LEGACY_REWRITES,
    ) -> None:
        self.store = store
        self.prober = prober
        self.version = version
        self.rewrites = tuple(rewrites)
        check_rewrites(self.rewrites)

    def defaults(self) -> SiteConfig:
        return default_config()

    def load(self) -> SiteConfig:
        """Return the stored configuration, migrating it first when needed."""

        try:
            stored_version = self.store.read(VERSION_KEY)
            blob = decode_blob(self.store.read(CONFIG_KEY))
            return self._reconcile(blob, stored_version)
        except Exception:
            logger.exception("Loading the site configuration failed, using defaults")
            return default_config()

    def save(self, config: SiteConfig | Mapping[str, Any]) -> bool:
        """Merge ``config`` over the defaults and write it; return success."""

        if isinstance(config, SiteConfig):
            record = config
        else:
            record = SiteConfig.from_mapping(config)
        return self._write_record(record)

    def update(self, updates: Mapping[str, Any]) -> bool:
        """Apply a partial mapping on top of the current configuration."""

        return self.save(self.load().merged(updates))

    def reset(self) -> bool:
        """Drop the stored configuration; the version token is kept."""

        return self.store.remove(CONFIG_KEY)

    def force_refresh(self) -> SiteConfig:
        """Discard the stored configuration and start again from the defaults."""

        self.store.remove(CONFIG_KEY)
        self.store.write(VERSION_KEY, self.version)
        return self.load()

    def export_snapshot(self) -> dict[str, Any]:
        return {"version": self.version, "config": self.load().as_dict()}

    def import_snapshot(self, snapshot: Mapping[str, Any]) -> bool:
        """Store a snapshot, migrating it from the version it was exported at.

        Raises ``ValueError`` when the snapshot is malformed.
        """

        config = snapshot.get("config")
        if not isinstance(config, Mapping):
            raise ValueError("config must be an object")
        version = snapshot.get("version")
        if version is not None and not isinstance(version, (str, int, float)):
            raise ValueError("version must be a string or a number")

        result = migrate(
            dict(config),
            None if version is None else str(version),
            self.version,
            default_values(),
            self.rewrites,
        )
        if not self._write_record(SiteConfig.from_mapping(result.values)):
            return False
        return self.store.write(VERSION_KEY, self.version)

    async def resolve_profile_image(self, config: SiteConfig | None = None) -> str:
        """Return the image the page should show for ``config``.

        URLs following the numbered naming convention are resolved to the
        newest numbered file; anything else is used as configured.
        """

        config = config or self.load()
        url = config.profile_image_url
        if not url or self.prober is None or not self.prober.follows_convention(url):
            return url
        return await self.prober.resolve_latest_numbered_image()

    def _reconcile(self, blob: dict[str, Any] | None, stored_version: str | None) -> SiteConfig:
        result = migrate(blob, stored_version, self.version, default_values(), self.rewrites)
        config = SiteConfig.from_mapping(result.values)
        if result.dirty:
            logger.info(
                "Persisting reconciled site configuration (stored version %s, current %s)",
                stored_version,
                self.version,
            )
            # The version token is only advanced once the record itself is
            # stored, otherwise the next load migrates again.
            if not self._write_record(config):
                return config
        if result.write_version:
            self.store.write(VERSION_KEY, self.version)
        return config

    def _write_record(self, config: SiteConfig) -> bool:
        payload = json.dumps(config.as_dict(), ensure_ascii=False)
        return self.store.write(CONFIG_KEY, payload)
