"""Existence checks for image assets."""

from __future__ import annotations

import asyncio
import logging
import threading
from pathlib import Path
from typing import Protocol, runtime_checkable
from urllib.parse import urljoin

import requests

logger = logging.getLogger(__name__)


@runtime_checkable
class ImageChecker(Protocol):
    """Answer whether an image asset can be loaded."""

    async def exists(self, path: str) -> bool:
        """Return ``True`` when ``path`` resolves to a loadable image."""


class HttpImageChecker:
    """Load images over HTTP with ``requests`` in the default executor.

    A ``requests.Session`` is not thread-safe, so executor threads take turns
    on the shared session.
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float = 2.0,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.session = session or requests.Session()
        self.timeout = timeout
        self._session_lock = threading.Lock()

    async def exists(self, path: str) -> bool:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._fetch, path)

    def _fetch(self, path: str) -> bool:
        url = urljoin(self.base_url, path)
        try:
            with self._session_lock, self.session.get(
                url, stream=True, timeout=self.timeout
            ) as response:
                if not 200 <= response.status_code < 300:
                    return False
                content_type = response.headers.get("Content-Type", "")
                return not content_type or content_type.startswith("image/")
        except requests.RequestException as exc:
            logger.debug("Image probe for %s failed: %s", url, exc)
            return False


class StaticFolderImageChecker:
    """Look images up below a local directory, such as the static folder."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).resolve()

    async def exists(self, path: str) -> bool:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._is_file, path)

    def _is_file(self, path: str) -> bool:
        candidate = (self.root / path.lstrip("/")).resolve()
        if candidate != self.root and self.root not in candidate.parents:
            return False
        return candidate.is_file()
