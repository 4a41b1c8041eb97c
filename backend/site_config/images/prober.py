"""Find the highest numbered variant of a profile image, with a result cache."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from pathlib import PurePosixPath
from typing import Final

from ..store import StoreAdapter
from .checkers import ImageChecker

logger = logging.getLogger(__name__)

IMAGE_CACHE_KEY: Final[str] = "site-image-cache"
IMAGE_CACHE_TIME_KEY: Final[str] = "site-image-cache-time"

DEFAULT_IMAGE_BASE: Final[str] = "assets/images/pfp"
DEFAULT_IMAGE_EXTENSION: Final[str] = "jpg"
DEFAULT_PLACEHOLDER: Final[str] = "assets/images/placeholder-profile.svg"
DEFAULT_MAX_INDEX: Final[int] = 20
DEFAULT_CACHE_TTL: Final[float] = 24 * 60 * 60


class ImageProber:
    """Resolve ``<base><N>.<extension>`` to the highest ``N`` that loads.

    Candidates are probed one after another from ``max_index`` down to 1 and
    the first hit wins. The result (or the placeholder when nothing loads) is
    cached together with its timestamp; a cached path younger than ``ttl``
    seconds is re-validated with a single probe before it is reused.
    """

    def __init__(
        self,
        store: StoreAdapter,
        checker: ImageChecker,
        *,
        base: str = DEFAULT_IMAGE_BASE,
        extension: str = DEFAULT_IMAGE_EXTENSION,
        max_index: int = DEFAULT_MAX_INDEX,
        placeholder: str = DEFAULT_PLACEHOLDER,
        ttl: float = DEFAULT_CACHE_TTL,
        timeout: float = 2.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.checker = checker
        self.base = base
        self.extension = extension
        self.max_index = max_index
        self.placeholder = placeholder
        self.ttl = ttl
        self.timeout = timeout
        self.clock = clock

    def follows_convention(self, url: str) -> bool:
        """Whether ``url`` points at the numbered image family (``pfp.jpg``, ``pfp3.jpg``)."""

        stem = PurePosixPath(self.base).name
        return bool(stem) and stem in PurePosixPath(url).name

    def candidate_path(self, index: int) -> str:
        return f"{self.base}{index}.{self.extension}"

    def candidate_paths(self) -> list[str]:
        return [self.candidate_path(index) for index in range(self.max_index, 0, -1)]

    async def resolve_latest_numbered_image(self) -> str:
        """Return the newest numbered image path, or the placeholder."""

        try:
            cached = await self._valid_cached_path()
            if cached is not None:
                return cached

            found = None
            for path in self.candidate_paths():
                if await self.probe(path):
                    found = path
                    break
        except Exception:
            logger.exception("Resolving the latest numbered image failed")
            return self.placeholder

        if found is None:
            logger.info("No numbered image found below %s, using placeholder", self.base)
            found = self.placeholder
        self._write_cache(found)
        return found

    async def probe(self, path: str) -> bool:
        """Check one candidate; errors and timeouts count as missing."""

        try:
            return bool(await asyncio.wait_for(self.checker.exists(path), self.timeout))
        except asyncio.TimeoutError:
            logger.debug("Image probe for %s timed out after %ss", path, self.timeout)
        except Exception as exc:
            logger.debug("Image probe for %s failed: %s", path, exc)
        return False

    def clear_cache(self) -> bool:
        removed_path = self.store.remove(IMAGE_CACHE_KEY)
        removed_time = self.store.remove(IMAGE_CACHE_TIME_KEY)
        return removed_path and removed_time

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    async def _valid_cached_path(self) -> str | None:
        cached = self.store.read(IMAGE_CACHE_KEY)
        cached_at = self.store.read(IMAGE_CACHE_TIME_KEY)
        if not cached or not cached_at:
            return None
        try:
            age_ms = self._now_ms() - int(cached_at)
        except ValueError:
            logger.warning("Ignoring image cache with bad timestamp %r", cached_at)
            return None
        if age_ms >= self.ttl * 1000:
            return None
        if await self.probe(cached):
            return cached
        return None

    def _write_cache(self, path: str) -> None:
        if self.store.write(IMAGE_CACHE_KEY, path):
            self.store.write(IMAGE_CACHE_TIME_KEY, str(self._now_ms()))
