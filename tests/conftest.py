"""Pytest configuration: fast by default.

Tests that reach the network are skipped unless --slow is passed.
Run the full suite:   pytest --slow
Run fast tests only:  pytest          (default)
"""
import io

import numpy as np
import pytest
from PIL import Image


def pytest_addoption(parser):
    parser.addoption(
        "--slow",
        action="store_true",
        default=False,
        help="Run slow tests that download real images",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--slow"):
        return  # run everything
    skip_slow = pytest.mark.skip(reason="slow test skipped, pass --slow to include")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


class FakeFetcher:
    """Stands in for download_image: records URLs and returns canned bytes."""

    def __init__(self, data: bytes = b"remote-bytes", error: Exception | None = None):
        self.data = data
        self.error = error
        self.calls: list[str] = []

    def __call__(self, url: str) -> bytes:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.data


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "imgcache"


@pytest.fixture
def rgb_jpeg_bytes():
    """A small solid-colour RGB JPEG."""
    image = Image.fromarray(np.full((8, 12, 3), (200, 100, 50), dtype=np.uint8))
    output = io.BytesIO()
    image.save(output, format="JPEG", quality=100)
    return output.getvalue()


@pytest.fixture
def rgb_png_bytes():
    """A small RGB PNG with distinct values per channel (lossless)."""
    pixels = np.zeros((4, 5, 3), dtype=np.uint8)
    pixels[..., 0] = 10
    pixels[..., 1] = 20
    pixels[..., 2] = 30
    output = io.BytesIO()
    Image.fromarray(pixels).save(output, format="PNG")
    return output.getvalue()


@pytest.fixture
def make_fetcher():
    """Factory for FakeFetcher instances with custom data or errors."""
    return FakeFetcher
