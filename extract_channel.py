#!/usr/bin/env python3
"""
Keep a single colour channel of an image.

Usage:
    extract-channel                          # sample image, red channel
    extract-channel photo.jpg -c 2           # local file, blue channel
    extract-channel https://host/x.jpg -o out --no-cache

The input image and the filtered result are written to the output directory
as extractChannel-Input.jpg and extractChannel-Output.jpg.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import UnidentifiedImageError

import config
from channels import decode_raw, encode_jpeg, extract_channel
from logging_utils import add_logging_args, configure_logging
from sources import ImageSourceError, LoadImageOptions, RemoteImageCache, load_image
from utils import save_image

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """Paths written by a run.

    Attributes:
        input_path: Where the original image bytes were saved
        output_path: Where the filtered JPEG was saved
        saved: True if both files were written
    """

    input_path: Path
    output_path: Path
    saved: bool


async def run(
    source: str,
    target_channel: int = config.DEFAULT_TARGET_CHANNEL,
    output_dir: Path = config.OUTPUT_DIR,
    allow_cache: bool = True,
    cache: RemoteImageCache | None = None,
) -> ExtractionResult:
    """Load an image, keep one channel, and write input and output to disk.

    Raises:
        ImageSourceError: If the image cannot be loaded.
        ValueError: If target_channel is out of range for the image.
    """
    image_data = await load_image(
        source,
        LoadImageOptions(allow_cache=allow_cache),
        cache=cache,
    )

    raw = decode_raw(image_data)
    logger.debug(
        "Decoded %sx%s image with %s channels", raw.width, raw.height, raw.channels
    )

    filtered = raw.with_pixels(extract_channel(raw.pixels, raw.channels, target_channel))
    output_data = encode_jpeg(filtered, quality=config.JPEG_QUALITY)

    input_path = Path(output_dir) / config.INPUT_IMAGE_NAME
    output_path = Path(output_dir) / config.OUTPUT_IMAGE_NAME
    saved_input = await save_image(input_path, image_data)
    saved_output = await save_image(output_path, output_data)

    return ExtractionResult(
        input_path=input_path,
        output_path=output_path,
        saved=saved_input and saved_output,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extract-channel",
        description="Keep a single colour channel of a local or remote image",
    )
    add_logging_args(parser)
    parser.add_argument(
        "source",
        nargs="?",
        default=config.DEFAULT_IMAGE_URL,
        help="Image URL or local file path (default: sample image)",
    )
    parser.add_argument(
        "-c", "--channel",
        type=int,
        default=config.DEFAULT_TARGET_CHANNEL,
        help="Channel index to keep (default: %(default)s)",
    )
    parser.add_argument(
        "-o", "--output-dir",
        type=Path,
        default=config.OUTPUT_DIR,
        help="Directory for the input and output images (default: %(default)s)",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Always download remote images and do not store them",
    )
    parser.add_argument(
        "--cache-dir",
        type=Path,
        help=f"Remote image cache directory (default: ${config.CACHE_DIR_ENV} or .imgcache)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.verbose, args.quiet)

    cache_dir = args.cache_dir or config.get_cache_dir()
    cache = RemoteImageCache(cache_dir)

    try:
        result = asyncio.run(
            run(
                args.source,
                target_channel=args.channel,
                output_dir=args.output_dir,
                allow_cache=not args.no_cache,
                cache=cache,
            )
        )
    except ImageSourceError as e:
        # Already logged where it was raised
        logger.debug("Aborting: %s", e)
        return 1
    except UnidentifiedImageError as e:
        logger.error("Not a readable image: %s", e)
        return 1
    except ValueError as e:
        logger.error("Invalid channel: %s", e)
        return 1

    return 0 if result.saved else 1


if __name__ == "__main__":
    raise SystemExit(main())
