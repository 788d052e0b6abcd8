"""
Local image reading.

Reads image files from the local filesystem without blocking the event loop.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .errors import LoadError


async def read_local_image(path: str | Path) -> bytes:
    """Read an image file as raw bytes.

    Args:
        path: Path to the image file. Resolved to an absolute path.

    Returns:
        File contents. The image format is not validated.

    Raises:
        LoadError: If the file is missing, is a directory, or is unreadable.
    """
    file_path = Path(path).expanduser().resolve()
    try:
        return await asyncio.to_thread(file_path.read_bytes)
    except OSError as e:
        raise LoadError(file_path, e.strerror or str(e)) from e
