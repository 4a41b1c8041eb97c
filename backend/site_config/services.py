"""Wiring of the configuration manager into the Flask application."""

from __future__ import annotations

from flask import Flask, current_app

from .core import ConfigManager
from .images import HttpImageChecker, ImageChecker, ImageProber, StaticFolderImageChecker
from .store import DatabaseStorage, StoreAdapter

_EXTENSION_KEY = "site_config"


def _build_checker(app: Flask) -> ImageChecker:
    timeout = float(app.config.get("IMAGE_PROBE_TIMEOUT", 2))
    base_url = app.config.get("IMAGE_BASE_URL") or ""
    if base_url:
        return HttpImageChecker(base_url, timeout=timeout)
    root = app.config.get("IMAGE_ROOT") or app.static_folder or "."
    return StaticFolderImageChecker(root)


def build_config_manager(app: Flask) -> ConfigManager:
    """Create the manager for ``app`` from its configuration."""

    store = StoreAdapter(
        DatabaseStorage(quota_bytes=int(app.config.get("STORE_QUOTA_BYTES", 5 * 1024 * 1024)))
    )
    prober = ImageProber(
        store,
        _build_checker(app),
        max_index=int(app.config.get("IMAGE_PROBE_MAX", 20)),
        ttl=float(app.config.get("IMAGE_CACHE_TTL_HOURS", 24)) * 60 * 60,
        timeout=float(app.config.get("IMAGE_PROBE_TIMEOUT", 2)),
    )
    return ConfigManager(store, prober)


def init_app(app: Flask) -> ConfigManager:
    manager = build_config_manager(app)
    app.extensions[_EXTENSION_KEY] = manager
    return manager


def get_config_manager(app: Flask | None = None) -> ConfigManager:
    """Return the manager registered on ``app`` (the current app by default)."""

    app = app or current_app
    if _EXTENSION_KEY not in app.extensions:
        return init_app(app)
    return app.extensions[_EXTENSION_KEY]
