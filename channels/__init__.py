"""
Channel extraction module.

Decodes images into flat interleaved pixel buffers, keeps a single colour
channel, and re-encodes the result.

Key components:
- types: RawImage, the flat pixel buffer plus its dimensions
- codec: decode_raw() / encode_jpeg() built on Pillow
- extraction: extract_channel(), the per-index channel filter
"""

from .types import RawImage
from .codec import decode_raw, encode_jpeg, to_pil
from .extraction import channel_mask, extract_channel

__all__ = [
    "RawImage",
    "decode_raw",
    "encode_jpeg",
    "to_pil",
    "channel_mask",
    "extract_channel",
]
