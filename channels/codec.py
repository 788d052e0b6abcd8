"""
Encoding and decoding between image files and raw pixel buffers.
"""

from __future__ import annotations

import io

import numpy as np
from PIL import Image

from config import JPEG_QUALITY

from .types import MODE_CHANNELS, RawImage


def decode_raw(image_data: bytes) -> RawImage:
    """Decode encoded image bytes into a flat interleaved pixel buffer.

    L, LA, RGB and RGBA images keep their channels. Any other mode
    (palette, CMYK, 16-bit, ...) is converted to RGB first.

    Raises:
        PIL.UnidentifiedImageError: If the bytes are not a readable image.
    """
    with Image.open(io.BytesIO(image_data)) as image:
        if image.mode not in MODE_CHANNELS:
            image = image.convert("RGB")
        pixels = np.asarray(image, dtype=np.uint8).reshape(-1)
        return RawImage(
            pixels=pixels.copy(),
            width=image.width,
            height=image.height,
            channels=MODE_CHANNELS[image.mode],
        )


def to_pil(image: RawImage) -> Image.Image:
    """Build a PIL image from a RawImage."""
    buffer = np.ascontiguousarray(image.pixels, dtype=np.uint8)
    if image.channels == 1:
        shape = (image.height, image.width)
    else:
        shape = (image.height, image.width, image.channels)
    return Image.fromarray(buffer.reshape(shape))


def encode_jpeg(image: RawImage, quality: int = JPEG_QUALITY) -> bytes:
    """Encode a RawImage as JPEG.

    JPEG has no alpha: LA is written as L and RGBA as RGB.
    """
    pil_image = to_pil(image)
    if pil_image.mode == "LA":
        pil_image = pil_image.convert("L")
    elif pil_image.mode == "RGBA":
        pil_image = pil_image.convert("RGB")

    output = io.BytesIO()
    pil_image.save(output, format="JPEG", quality=quality)
    return output.getvalue()
