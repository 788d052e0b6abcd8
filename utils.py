"""Shared utility functions for channel extraction."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import requests

from config import HTTP_TIMEOUT

logger = logging.getLogger(__name__)


def download_image(url: str, timeout: int = HTTP_TIMEOUT) -> bytes:
    """Download an image and return its bytes.

    Raises:
        requests.RequestException: On network errors and non-2xx responses.
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.content


def format_filesize(num_bytes: int) -> str:
    """Format a byte count as kilobytes (1 KB = 1000 bytes)."""
    return f"{num_bytes / 1000} KB"


def _write_file(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


async def save_image(image_path: str | Path, image_data: bytes) -> bool:
    """Save image bytes to disk.

    The path is resolved to an absolute path and missing parent directories
    are created. A failed write is logged and reported through the return
    value rather than raised.

    Args:
        image_path: Destination file path.
        image_data: Encoded image bytes.

    Returns:
        True on success, False if the file could not be written.
    """
    resolved_path = Path(image_path).expanduser().resolve()

    logger.info(
        "Saving image...\n\tResolved Path %s\n\tFilesize %s",
        resolved_path,
        format_filesize(len(image_data)),
    )

    try:
        await asyncio.to_thread(_write_file, resolved_path, image_data)
    except OSError as e:
        logger.error("Failed to save image (%s): %s", resolved_path, e)
        return False

    logger.info("Image saved (%s)", resolved_path)
    return True
