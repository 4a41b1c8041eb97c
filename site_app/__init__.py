"""Compatibility package that exposes the backend Flask application factory."""

from backend.site_config import Config, create_app

__all__ = ["Config", "create_app"]
