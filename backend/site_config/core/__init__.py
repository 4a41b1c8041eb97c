"""Configuration schema, migration and the public load/save API."""

from .manager import CONFIG_KEY, VERSION_KEY, ConfigManager
from .schema import (
    CONFIG_VERSION,
    LEGACY_REWRITES,
    LegacyRewrite,
    SiteConfig,
    default_config,
    default_values,
)

__all__ = [
    "CONFIG_KEY",
    "CONFIG_VERSION",
    "ConfigManager",
    "LEGACY_REWRITES",
    "LegacyRewrite",
    "SiteConfig",
    "VERSION_KEY",
    "default_config",
    "default_values",
]
