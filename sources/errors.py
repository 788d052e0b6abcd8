"""Errors raised while acquiring image bytes."""

from __future__ import annotations

from pathlib import Path


class ImageSourceError(Exception):
    """Base class for image acquisition failures."""


class LoadError(ImageSourceError):
    """A local image file could not be read.

    Attributes:
        path: Absolute path that was read.
    """

    def __init__(self, path: Path | str, reason: str | None = None):
        self.path = Path(path)
        self.reason = reason
        message = f"Failed to load image ({self.path})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DownloadError(ImageSourceError):
    """A remote image could not be downloaded.

    Attributes:
        url: Full URL that was requested.
    """

    def __init__(self, url: str, reason: str | None = None):
        self.url = url
        self.reason = reason
        message = f"Failed to download image ({url})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
