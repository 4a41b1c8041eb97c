"""Configuration for the site configuration service."""

from __future__ import annotations

import os


class Config:
    """Base configuration for the Flask application."""

    SQLALCHEMY_DATABASE_URI: str = os.getenv("DATABASE_URL", "sqlite:///site_config.db")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    CORS_ALLOWED_ORIGINS: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:8000")
    DB_INIT_MAX_RETRIES: int = int(os.getenv("DB_INIT_MAX_RETRIES", "30"))
    DB_INIT_RETRY_DELAY: float = float(os.getenv("DB_INIT_RETRY_DELAY", "2"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Size limit of the key/value store, in bytes.
    STORE_QUOTA_BYTES: int = int(os.getenv("STORE_QUOTA_BYTES", str(5 * 1024 * 1024)))

    # Images are probed over HTTP when IMAGE_BASE_URL is set, otherwise on disk
    # below IMAGE_ROOT (the application's static folder when empty).
    IMAGE_BASE_URL: str = os.getenv("IMAGE_BASE_URL", "")
    IMAGE_ROOT: str = os.getenv("IMAGE_ROOT", "")
    IMAGE_PROBE_MAX: int = int(os.getenv("IMAGE_PROBE_MAX", "20"))
    IMAGE_PROBE_TIMEOUT: float = float(os.getenv("IMAGE_PROBE_TIMEOUT", "2"))
    IMAGE_CACHE_TTL_HOURS: float = float(os.getenv("IMAGE_CACHE_TTL_HOURS", "24"))
    PROFILE_IMAGE_RATE_LIMIT: str = os.getenv("PROFILE_IMAGE_RATE_LIMIT", "30 per minute")
    PAGE_RATE_LIMIT: str = os.getenv("PAGE_RATE_LIMIT", "120 per minute")
