"""
Generates output paths in the scratch directory.

When a compression is requested without an explicit output path, the output is
written to a uniquely named file in `CACHE_DIR`. The file itself is not created
here: FFmpeg refuses to overwrite an existing file unless told to, so only a free
name is reserved.
"""

import random
import string
from pathlib import Path
from typing import Optional

from loguru import logger

from ..config.common import CACHE_DIR, GENERATED_FILE_RANDOM_LENGTH

MAX_NAME_ATTEMPTS = 10


def generate_random_string(length: int = GENERATED_FILE_RANDOM_LENGTH) -> str:
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


async def generate_file(extension: str, cache_dir: Optional[Path] = None) -> Optional[str]:
    """
    Returns an unused file path with the given extension in the scratch directory.

    Args:
        extension: The extension of the file, without the leading dot.
        cache_dir: Overrides the configured scratch directory.

    Returns:
        The absolute path as a string, or None when the directory cannot be created
        or no free name was found.
    """
    directory = (cache_dir or CACHE_DIR).resolve()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create scratch directory {directory}: {e}")
        return None

    for _ in range(MAX_NAME_ATTEMPTS):
        candidate = directory / f"{generate_random_string()}.{extension}"
        if not candidate.exists():
            logger.debug(f"Generated output file path: {candidate}")
            return str(candidate)

    logger.error(f"No free file name found in {directory} after {MAX_NAME_ATTEMPTS} attempts.")
    return None
