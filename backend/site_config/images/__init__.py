"""Profile image discovery."""

from .checkers import HttpImageChecker, ImageChecker, StaticFolderImageChecker
from .prober import IMAGE_CACHE_KEY, IMAGE_CACHE_TIME_KEY, ImageProber

__all__ = [
    "HttpImageChecker",
    "IMAGE_CACHE_KEY",
    "IMAGE_CACHE_TIME_KEY",
    "ImageChecker",
    "ImageProber",
    "StaticFolderImageChecker",
]
