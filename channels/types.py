"""
Type definitions for the channels module.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

# Channel count per PIL mode for modes that are decoded as-is
MODE_CHANNELS = {
    "L": 1,
    "LA": 2,
    "RGB": 3,
    "RGBA": 4,
}

CHANNEL_MODES = {channels: mode for mode, channels in MODE_CHANNELS.items()}


@dataclass(frozen=True)
class RawImage:
    """An image as an interleaved, flat 8-bit pixel buffer.

    Pixel ``p`` channel ``c`` lives at ``pixels[p * channels + c]``.

    Attributes:
        pixels: 1D uint8 array of length width * height * channels
        width: Image width in pixels
        height: Image height in pixels
        channels: Interleaved channels per pixel (1-4)
    """

    pixels: np.ndarray
    width: int
    height: int
    channels: int

    def __post_init__(self):
        expected = self.width * self.height * self.channels
        if self.pixels.ndim != 1 or self.pixels.size != expected:
            raise ValueError(
                f"Pixel buffer has shape {self.pixels.shape}, expected ({expected},) "
                f"for {self.width}x{self.height}x{self.channels}"
            )

    @property
    def mode(self) -> str:
        """PIL mode matching the channel count."""
        return CHANNEL_MODES[self.channels]

    def with_pixels(self, pixels: np.ndarray) -> RawImage:
        """Return a copy of this image with a different pixel buffer."""
        return RawImage(
            pixels=pixels,
            width=self.width,
            height=self.height,
            channels=self.channels,
        )
