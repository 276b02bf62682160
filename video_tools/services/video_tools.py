"""
The `VideoTools` handle: compression and probing around a single media file.

A `VideoTools` instance owns one asset (its path, the extension derived from the
path, and the cached probe result). All engine traffic goes through the class-level
`engine`, which is shared process-wide; see `services.engine` for its single-slot
semantics.
"""

import json
from typing import Any, Awaitable, Callable, Dict, Optional

from loguru import logger

from ..config.common import (
    ERROR_OCCUR_WHILE_GENERATING_OUTPUT_FILE,
    INCORRECT_INPUT_PATH,
    INCORRECT_OUTPUT_PATH,
)
from ..config.video import CRF_FLAG
from ..domain.exceptions import (
    InvalidArgumentTypeException,
    InvalidInputPathException,
    InvalidOptionsException,
    OutputPathUnavailableException,
    ProbeParseException,
    VideoToolsException,
)
from ..domain.media import CompressionOptions, CompressResult, InputCheck, MediaDetails
from ..utils.format_utils import get_extension
from ..utils.option_utils import (
    find_incorrect_option,
    get_compression_options_resolution,
    is_options_value_correct,
)
from .cache_manager import generate_file
from .command_builder import build_compress_command, build_size_probe_command
from .engine import FFmpegEngine, default_engine

DEFAULT_COMPRESS_OPTIONS = CompressionOptions()

OutputFileGenerator = Callable[[str], Awaitable[Optional[str]]]


def _to_number(value: Any) -> int | float:
    number = float(value)
    return int(number) if number.is_integer() else number


def parse_size_probe_output(raw: str) -> Dict[str, int | float]:
    """
    Extracts the container size and first video stream dimensions from size probe output.

    Args:
        raw: The JSON printed by the size probe, e.g.
             '{"streams": [{"width": 640, "height": 360}], "format": {"size": "15804433"}}'.

    Returns:
        A dictionary with numeric `size`, `width` and `height`.

    Raises:
        ProbeParseException: If the output is not JSON or lacks one of the fields.
    """
    try:
        media_info = json.loads(raw)
        return {
            "size": _to_number(media_info["format"]["size"]),
            "width": _to_number(media_info["streams"][0]["width"]),
            "height": _to_number(media_info["streams"][0]["height"]),
        }
    except json.JSONDecodeError as e:
        raise ProbeParseException(f"Size probe output is not valid JSON: {e}") from e
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise ProbeParseException(f"Size probe output lacks size or dimensions: {e!r}") from e


class VideoTools:
    """
    Compresses and probes one media file through the FFmpeg engine.

    Attributes:
        full_path (str): The path of the media file.
        extension (str): The extension of `full_path`, or `INCORRECT_INPUT_PATH`
                         when the path has none.
        media_details (MediaDetails | None): Cached probe result for `full_path`.
        output_file_generator: Coroutine function returning a scratch output path
                               for a given extension, or None on failure.
    """

    engine: FFmpegEngine = default_engine

    def __init__(self, video_path: str, output_file_generator: OutputFileGenerator = generate_file):
        self.full_path = video_path
        self.extension = get_extension(video_path)
        self.media_details: Optional[MediaDetails] = None
        self.output_file_generator = output_file_generator

    def set_video_path(self, video_path: str):
        """Points the handle at another file. The cache is dropped only if the path changes."""
        if video_path != self.full_path:
            self.media_details = None
            self.full_path = video_path
            self.extension = get_extension(video_path)

    def has_correct_input_file(self) -> bool:
        return self.extension != INCORRECT_INPUT_PATH

    def is_input_file_correct(self) -> InputCheck:
        if not self.has_correct_input_file():
            return InputCheck(is_correct=False, message=INCORRECT_INPUT_PATH)
        return InputCheck(is_correct=True, message="")

    async def compress(self, options: Optional[CompressionOptions] = None) -> CompressResult:
        """
        Compresses the video with libx264.

        The input path, the options and the output path are checked in that order,
        and nothing is generated or executed until all three pass.

        Args:
            options: Compression parameters. Defaults to medium quality and the
                     "veryslow" preset, written to a generated scratch file.

        Returns:
            The engine's return code and the path of the output file.

        Raises:
            InvalidInputPathException: If the asset's path has no extension.
            InvalidOptionsException: If quality or speed is not a legal value.
            OutputPathUnavailableException: If no output path could be obtained.
            EngineExecutionException: If the engine could not run the command.
        """
        if options is None:
            options = DEFAULT_COMPRESS_OPTIONS

        input_check = self.is_input_file_correct()
        if not input_check.is_correct:
            logger.error(f"Cannot compress '{self.full_path}': {input_check.message}")
            raise InvalidInputPathException(input_check.message)

        is_correct, message = is_options_value_correct(options)
        if not is_correct:
            field, allowed_values = find_incorrect_option(options)
            logger.error(f"Cannot compress '{self.full_path}': {message}")
            raise InvalidOptionsException(message, field=field, allowed_values=allowed_values)

        output_file_path = await self._resolve_output_file_path(options)

        crf = get_compression_options_resolution(options.quality)[CRF_FLAG]
        command = build_compress_command(
            self.full_path, crf, options.speed, options.bitrate, output_file_path
        )
        logger.info(f"Compressing {self.full_path} -> {output_file_path} (crf {crf})")
        rc = await self.execute(command)
        return CompressResult(rc=rc, output_file_path=output_file_path)

    async def _resolve_output_file_path(self, options: CompressionOptions) -> str:
        if options.output_file_path:
            if get_extension(options.output_file_path) == INCORRECT_INPUT_PATH:
                logger.error(f"Output path '{options.output_file_path}' has no extension.")
                raise OutputPathUnavailableException(INCORRECT_OUTPUT_PATH, caller_supplied=True)
            return options.output_file_path

        try:
            output_file_path = await self.output_file_generator(self.extension)
        except Exception as e:
            logger.error(f"Output file generation failed for extension '{self.extension}': {e}")
            raise OutputPathUnavailableException(
                ERROR_OCCUR_WHILE_GENERATING_OUTPUT_FILE, caller_supplied=False
            ) from e
        if not output_file_path:
            raise OutputPathUnavailableException(
                ERROR_OCCUR_WHILE_GENERATING_OUTPUT_FILE, caller_supplied=False
            )
        return output_file_path

    async def get_details(self, force: bool = False) -> MediaDetails:
        """
        Returns the media details of the video, probing it when needed.

        A cached result is returned as is unless `force` is True. Probing takes
        two engine calls. ffprobe run with "-v error" is the only reliable source
        of container size and stream dimensions in this engine family, so a size
        probe is run first and its JSON output is read back. The full
        media-information probe follows, and the size fields of the first call
        override those of the second. Any engine version change needs this
        behavior re-checked.

        Args:
            force: Re-probe even when details are cached.

        Returns:
            The merged probe result, also stored as the new cache value.

        Raises:
            InvalidArgumentTypeException: If `force` is not a bool. The engine is not called.
            ProbeParseException: If the size probe output cannot be parsed.
            EngineExecutionException: If either probe fails.
        """
        if not isinstance(force, bool):
            raise InvalidArgumentTypeException(
                f"Parameter force should be boolean. {type(force).__name__} given"
            )

        if not force and self.media_details is not None:
            logger.debug(f"Media details cache hit for {self.full_path}")
            return self.media_details

        probed_path = self.full_path
        await self.engine.execute_probe(build_size_probe_command(probed_path))
        last_output = await self.engine.get_last_command_output()
        size_info = parse_size_probe_output(last_output.raw)

        media_information = await self.engine.get_media_information(probed_path)
        if not isinstance(media_information, dict):
            raise ProbeParseException(
                f"Media information of {probed_path} is not an object: {type(media_information).__name__}"
            )

        media_details = MediaDetails(
            {**media_information, **size_info, "extension": get_extension(probed_path)}
        )

        # The path may have changed while probing; only cache details of the current path.
        if probed_path == self.full_path:
            self.media_details = media_details
        else:
            logger.debug(f"Path changed while probing {probed_path}; result not cached.")
        return media_details

    async def refresh_media_details(self) -> Optional[MediaDetails]:
        """
        Drops the cached details and probes again.

        Does nothing for an incorrect input path. Failures are logged, not raised.
        """
        if not self.has_correct_input_file():
            return None

        self.media_details = None
        try:
            return await self.get_details()
        except VideoToolsException as e:
            logger.warning(f"Could not refresh media details of {self.full_path}: {e}")
            return None

    @classmethod
    async def execute(cls, command: str) -> int:
        """Runs an FFmpeg command on the shared engine and returns its return code."""
        return await cls.engine.execute(command)

    @classmethod
    def cancel(cls) -> None:
        """Cancels whatever command the shared engine is running, whichever handle issued it."""
        cls.engine.cancel()
