"""
Image source adapters.

This module provides the ways an image can reach the pipeline:
- Remote URLs, downloaded through a permanent on-disk cache
- Local files

Every source yields raw, undecoded image bytes.
"""

from .cache import FetchResult, RemoteImageCache, get_cache_filename
from .errors import DownloadError, ImageSourceError, LoadError
from .local import read_local_image
from .reference import (
    ImageReference,
    ImageSource,
    LocalReference,
    RemoteReference,
    parse_image_reference,
)
from .resolver import LoadImageOptions, load_image, load_image_result

__all__ = [
    "FetchResult",
    "RemoteImageCache",
    "get_cache_filename",
    "DownloadError",
    "ImageSourceError",
    "LoadError",
    "read_local_image",
    "ImageReference",
    "ImageSource",
    "LocalReference",
    "RemoteReference",
    "parse_image_reference",
    "LoadImageOptions",
    "load_image",
    "load_image_result",
]
