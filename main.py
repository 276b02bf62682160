"""
Main entry point for the Video Tools command line.

This script parses command-line arguments, configures logging, and runs the
requested `VideoTools` workflow (compress or probe) on a single file.
"""

import asyncio
import json
import sys
from datetime import datetime

from loguru import logger

from video_tools.cli import get_args
from video_tools.config.common import LOGGER_FORMAT
from video_tools.domain.exceptions import VideoToolsException
from video_tools.domain.media import CompressionOptions
from video_tools.services.video_tools import VideoTools
from video_tools.utils.format_utils import format_elapsed, formatted_size


async def run_compress(args) -> int:
    tools = VideoTools(args.path)
    options = CompressionOptions(
        quality=args.quality,
        speed=args.speed,
        bitrate=args.bitrate,
        output_file_path=args.output,
    )
    start = datetime.now()
    result = await tools.compress(options)
    elapsed = format_elapsed(datetime.now() - start)
    if result.rc != 0:
        logger.error(f"FFmpeg exited with rc={result.rc} after {elapsed}.")
        return result.rc
    logger.success(f"Compressed to {result.output_file_path} in {elapsed}.")
    return 0


async def run_probe(args) -> int:
    tools = VideoTools(args.path)
    details = await tools.get_details(force=args.force)
    logger.info(
        f"{args.path}: {details.width}x{details.height}, {formatted_size(details.size)}"
    )
    print(json.dumps(dict(details), indent=2, default=str))
    return 0


def main() -> int:
    args = get_args()

    logger.remove()
    logger.add(sys.stderr, level=args.log_level, format=LOGGER_FORMAT)
    logger.debug(f"Parsed arguments: {args}")

    runner = run_compress if args.command == "compress" else run_probe
    try:
        return asyncio.run(runner(args))
    except VideoToolsException as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
