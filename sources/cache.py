"""
Remote image caching.

Downloaded images are stored on disk under a filename derived from their URL
so the same URL is never fetched twice. Entries are never expired; remove the
file (or pass use_cache=False) to force a fresh download.
"""

from __future__ import annotations

import asyncio
import logging
import os
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from config import CACHE_KEY_HEX_LENGTH
from utils import download_image

from .errors import DownloadError
from .reference import RemoteReference

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], bytes]


def get_cache_filename(url: RemoteReference) -> str:
    """Derive the cache filename for a URL.

    The name is ``{host}_{hex}__{basename}`` where ``hex`` is the first 32
    characters of the hex-encoded UTF-8 bytes of the full URL and
    ``basename`` is the last segment of the URL path.

    Args:
        url: Remote image reference.

    Returns:
        Filename (no directory part), e.g.
        ``example.com_68747470733a2f2f6578616d706c652e__sample.jpg``.
    """
    url_hex = url.href.encode("utf-8").hex()[:CACHE_KEY_HEX_LENGTH]
    basename = url.pathname.split("/")[-1]
    return f"{url.host}_{url_hex}__{basename}"


@dataclass
class FetchResult:
    """Outcome of a fetch.

    Attributes:
        data: Raw image bytes.
        cache_hit: True if the bytes came from the cache.
        cache_path: Cache file probed or written (None when the cache was bypassed).
        warnings: Best-effort failures that did not fail the fetch.
    """

    data: bytes
    cache_hit: bool = False
    cache_path: Path | None = None
    warnings: list[str] = field(default_factory=list)


def _read_cached(cache_path: Path) -> bytes | None:
    """Return a cached entry, or None if it is missing or unreadable."""
    try:
        return cache_path.read_bytes()
    except OSError:
        return None


def _store(cache_dir: Path, cache_path: Path, data: bytes) -> None:
    """Write a cache entry in one step so readers never see a partial file."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    tmp_path = cache_dir / f".{uuid.uuid4().hex}.part"
    try:
        with open(tmp_path, "xb") as f:
            f.write(data)
        os.replace(tmp_path, cache_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


class RemoteImageCache:
    """Download images through a permanent, URL-keyed disk cache.

    Args:
        cache_dir: Directory holding cached images. Created on first store.
        fetcher: Callable that downloads a URL and returns its bytes. It runs
            in a worker thread. Defaults to a requests GET.
    """

    def __init__(self, cache_dir: str | Path, fetcher: Fetcher = download_image):
        self.cache_dir = Path(cache_dir)
        self.fetcher = fetcher

    def cache_path_for(self, url: RemoteReference) -> Path:
        return (self.cache_dir / get_cache_filename(url)).resolve()

    async def fetch(self, url: RemoteReference, use_cache: bool = True) -> FetchResult:
        """Return the bytes for a URL, from cache when possible.

        Args:
            url: Remote image reference.
            use_cache: If False, the cache directory is neither read nor written.

        Returns:
            FetchResult with the image bytes.

        Raises:
            DownloadError: If the download fails. Not retried.
        """
        cache_path = self.cache_path_for(url) if use_cache else None

        if cache_path is not None:
            cached = await asyncio.to_thread(_read_cached, cache_path)
            if cached is not None:
                logger.info("Image Downloaded (cache) (%s)", url.href)
                return FetchResult(data=cached, cache_hit=True, cache_path=cache_path)

        try:
            data = await asyncio.to_thread(self.fetcher, url.href)
        except Exception as e:
            logger.error("Failed to download image (%s): %s", url.href, e)
            raise DownloadError(url.href, str(e)) from e

        logger.info("Image Downloaded (%s)", url.href)
        result = FetchResult(data=data, cache_hit=False, cache_path=cache_path)

        if cache_path is not None:
            try:
                await asyncio.to_thread(_store, self.cache_dir, cache_path, data)
            except OSError as e:
                message = f"Unable to cache image ({url.href}) -> ({cache_path}): {e}"
                logger.warning("%s", message)
                result.warnings.append(message)

        return result
