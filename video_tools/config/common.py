"""
Common configuration settings used throughout the application.

This module contains globally shared configuration settings and constants that are
used across the whole Video Tools package. It centralizes parameters for logging,
scratch-file management, engine behavior and the user-facing error messages.
It also handles the loading of user-specific configurations from an external
YAML file, allowing for easy customization without modifying the source code.
"""
import tempfile
from pathlib import Path

import yaml
from loguru import logger

# --- User-Defined Configuration ---
# This block loads user-specific settings from a 'config.user.yaml' file located
# at the project root. This allows users to point the engine at a specific FFmpeg
# build, move the scratch directory, or bound engine calls with a timeout.

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = PROJECT_ROOT / "config.user.yaml"

# The directory containing the FFmpeg and ffprobe executables. If not provided or
# None, the executables are looked up in the system's PATH.
MODULE_PATH: Path | None = None

# The scratch directory where output files are generated when the caller does not
# supply an explicit output path.
CACHE_DIR: Path = Path(tempfile.gettempdir()) / "video_tools_cache"

# Upper bound in seconds for a single engine command. None means engine calls
# are never timed out.
ENGINE_TIMEOUT: float | None = None


def load_user_config(config_path: Path) -> dict:
    """
    Reads the user configuration file and returns its content as a dictionary.

    A missing file is not an error; an unreadable or malformed file is logged and
    treated as empty so that the defaults above stay in effect.
    """
    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Using default settings.")
        return {}
    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return {}
    return user_config if isinstance(user_config, dict) else {}


_user_config = load_user_config(USER_CONFIG_PATH)

_paths_config = _user_config.get("paths") or {}
if _paths_config.get("ffmpeg_dir"):
    MODULE_PATH = Path(_paths_config["ffmpeg_dir"])
if _paths_config.get("cache_dir"):
    CACHE_DIR = Path(_paths_config["cache_dir"])

_engine_config = _user_config.get("engine") or {}
if _engine_config.get("timeout") is not None:
    try:
        ENGINE_TIMEOUT = float(_engine_config["timeout"])
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid engine timeout: {_engine_config['timeout']!r}")


# --- Logging Configuration ---

# The format string for the Loguru logger. It defines the structure and appearance
# of log messages, including timestamp, level, module name, and the message itself.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


# --- Scratch File Management ---

# The length of the random string used as the name of generated output files.
# This prevents filename collisions when several compressions run at the same time.
GENERATED_FILE_RANDOM_LENGTH = 16


# --- Messages ---
# Human-readable messages surfaced to callers. INCORRECT_INPUT_PATH doubles as the
# sentinel extension of an asset whose path has no usable suffix.

INCORRECT_INPUT_PATH = "Incorrect input path. Please provide a valid one"
INCORRECT_OUTPUT_PATH = "Incorrect output path. Please provide a valid one"
ERROR_OCCUR_WHILE_GENERATING_OUTPUT_FILE = "An error occur while generating output file"
