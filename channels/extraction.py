"""
Single channel extraction.

A per-index map over an interleaved pixel buffer: every element whose
channel index matches the target is kept, every other element is zeroed.
Pure: the input array is never modified.
"""

import numpy as np


def channel_mask(size: int, channels: int, target_channel: int) -> np.ndarray:
    """Boolean mask selecting the target channel in a flat buffer of `size` elements."""
    return np.arange(size) % channels == target_channel


def extract_channel(pixels: np.ndarray, channels: int, target_channel: int) -> np.ndarray:
    """Zero out every channel except `target_channel`.

    Args:
        pixels: Flat interleaved pixel buffer (any numeric dtype).
        channels: Number of interleaved channels per pixel.
        target_channel: Channel index to keep, 0 <= target_channel < channels.

    Returns:
        New array, same shape and dtype, with only the target channel kept.

    Raises:
        TypeError: If pixels is not a numpy array.
        ValueError: If the buffer is not 1D, or channels/target_channel are out of range.

    Examples:
        >>> extract_channel(np.array([1, 2, 3, 4, 5, 6], dtype=np.uint8), 3, 0)
        array([1, 0, 0, 4, 0, 0], dtype=uint8)
    """
    if not isinstance(pixels, np.ndarray):
        raise TypeError(f"Expected numpy.ndarray, got {type(pixels).__name__}")

    if pixels.ndim != 1:
        raise ValueError(f"Pixel buffer must be 1D, got shape {pixels.shape}")

    if channels < 1:
        raise ValueError(f"channels must be at least 1, got {channels}")

    if not 0 <= target_channel < channels:
        raise ValueError(
            f"target_channel must be in [0, {channels}), got {target_channel}"
        )

    mask = channel_mask(pixels.size, channels, target_channel)
    return np.where(mask, pixels, np.zeros_like(pixels))
