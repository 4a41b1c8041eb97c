"""Database models for the site configuration service."""

from .settings import AppSetting

__all__ = ["AppSetting"]
