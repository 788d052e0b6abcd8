"""Central configuration for channel extraction.

All tunable values are defined here with descriptive names. Paths that
depend on the machine can be overridden from the environment or from the
command line.
"""

import os
from pathlib import Path

# =============================================================================
# IMAGE SOURCES
# =============================================================================

# Image used when no source is given on the command line
DEFAULT_IMAGE_URL = "https://www.juliebergan.no/sites/g/files/g2000006326/f/sample-4.jpg"

# Seconds to wait for a remote image before giving up (passed to requests)
HTTP_TIMEOUT = 30

# =============================================================================
# REMOTE IMAGE CACHE
# =============================================================================

# Environment variable that overrides the cache directory
CACHE_DIR_ENV = "IMGCACHE_DIR"

# Downloaded images are kept here forever, keyed by URL
DEFAULT_CACHE_DIR = Path(__file__).parent / ".imgcache"

# Number of hex characters of the encoded URL kept in a cache filename
CACHE_KEY_HEX_LENGTH = 32


def get_cache_dir() -> Path:
    """Return the cache directory, honouring the IMGCACHE_DIR override."""
    override = os.environ.get(CACHE_DIR_ENV)
    if override:
        return Path(override).expanduser().resolve()
    return DEFAULT_CACHE_DIR


# =============================================================================
# CHANNEL EXTRACTION
# =============================================================================

# Channel kept by default (0 = red for RGB images)
DEFAULT_TARGET_CHANNEL = 0

# JPEG quality for re-encoded output (1-100)
JPEG_QUALITY = 100

# =============================================================================
# OUTPUT
# =============================================================================

# Relative directory the input and output images are written to
OUTPUT_DIR = Path("data")

INPUT_IMAGE_NAME = "extractChannel-Input.jpg"
OUTPUT_IMAGE_NAME = "extractChannel-Output.jpg"
