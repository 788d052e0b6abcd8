"""
Image source resolution.

Entry point for getting image bytes from "something the user typed": a URL
goes through the remote cache, anything else is read from disk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from config import get_cache_dir

from .cache import FetchResult, RemoteImageCache
from .errors import LoadError
from .local import read_local_image
from .reference import ImageSource, RemoteReference, parse_image_reference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadImageOptions:
    """Options for load_image.

    Attributes:
        allow_cache: Use the remote cache for URLs. None means the default (True).
    """

    allow_cache: bool | None = None


async def load_image_result(
    source: ImageSource,
    options: LoadImageOptions | None = None,
    *,
    cache: RemoteImageCache | None = None,
) -> FetchResult:
    """Load an image from a URL or a local path and report how it was obtained.

    Args:
        source: URL string, parsed URL, filesystem path, or ImageReference.
        options: Load options. allow_cache defaults to True.
        cache: Remote cache to use for URLs. Defaults to one rooted at
            config.get_cache_dir().

    Returns:
        FetchResult with the image bytes. Local reads are never cache hits.

    Raises:
        LoadError: If a local file cannot be read.
        DownloadError: If a remote image cannot be downloaded.
    """
    options = options or LoadImageOptions()
    reference = parse_image_reference(source)

    if isinstance(reference, RemoteReference):
        if cache is None:
            cache = RemoteImageCache(get_cache_dir())
        allow_cache = True if options.allow_cache is None else options.allow_cache
        return await cache.fetch(reference, use_cache=allow_cache)

    try:
        data = await read_local_image(reference.path)
    except LoadError as e:
        logger.error("Failed to load image (%s): %s", e.path, e.reason)
        raise
    logger.info("Image Loaded (%s)", reference.path)
    return FetchResult(data=data)


async def load_image(
    source: ImageSource,
    options: LoadImageOptions | None = None,
    *,
    cache: RemoteImageCache | None = None,
) -> bytes:
    """Load a local or remote image and return its raw bytes.

    See load_image_result for arguments and errors.
    """
    result = await load_image_result(source, options, cache=cache)
    return result.data
