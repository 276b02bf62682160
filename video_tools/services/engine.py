"""
This module provides the FFmpeg engine: the single point where commands are run.

The engine is a process-wide resource with one execution slot. Commands are
admitted one at a time through an `asyncio.Lock`, and `cancel()` acts on whichever
command currently holds the slot. It cannot target a specific command; a caller
cancelling "its" compression will stop whatever is running at that moment.

The output of the last command is kept in a single shared buffer, so a command
admitted between `execute_probe()` and `get_last_command_output()` replaces it.
"""

import asyncio
import shlex
from typing import Any, Dict, List, NamedTuple, Optional

import ffmpeg
from loguru import logger

from ..config.common import ENGINE_TIMEOUT, MODULE_PATH
from ..domain.exceptions import EngineExecutionException


class LastCommandOutput(NamedTuple):
    raw: str


class FFmpegEngine:
    """
    Runs FFmpeg and ffprobe commands as asyncio subprocesses.

    Commands are given as argument strings without the executable name, e.g.
    "-i in.mp4 -c:v libx264 out.mp4". They are split with `shlex`, so quoted
    paths containing spaces stay a single argument.

    Attributes:
        ffmpeg_cmd (str): The FFmpeg executable to invoke.
        ffprobe_cmd (str): The ffprobe executable to invoke.
        timeout (float | None): Seconds after which a command is killed. None
                                disables the timeout.
    """

    def __init__(self, module_path=MODULE_PATH, timeout: Optional[float] = ENGINE_TIMEOUT):
        self.ffmpeg_cmd = str(module_path / "ffmpeg") if module_path else "ffmpeg"
        self.ffprobe_cmd = str(module_path / "ffprobe") if module_path else "ffprobe"
        self.timeout = timeout
        self._slot: Optional[asyncio.Lock] = None
        self._slot_loop: Optional[asyncio.AbstractEventLoop] = None
        self._process: Optional[asyncio.subprocess.Process] = None
        self._last_command_output = ""

    def _execution_slot(self) -> asyncio.Lock:
        # A lock belongs to one event loop; each new loop (e.g. each asyncio.run) gets its own.
        loop = asyncio.get_running_loop()
        if self._slot is None or self._slot_loop is not loop:
            self._slot = asyncio.Lock()
            self._slot_loop = loop
        return self._slot

    @property
    def is_running(self) -> bool:
        return self._process is not None and self._process.returncode is None

    async def execute(self, command: str) -> int:
        """
        Runs an FFmpeg command and returns its return code.

        A non-zero return code is returned, not raised. Only a command that cannot
        be started or that times out raises `EngineExecutionException`.
        """
        return await self._run(self.ffmpeg_cmd, command)

    async def execute_probe(self, command: str) -> int:
        """Runs an ffprobe command and returns its return code."""
        return await self._run(self.ffprobe_cmd, command)

    async def get_last_command_output(self) -> LastCommandOutput:
        return LastCommandOutput(raw=self._last_command_output)

    async def get_media_information(self, path: str) -> Dict[str, Any]:
        """
        Probes a media file with `ffmpeg.probe` and returns the parsed JSON.

        The probe runs in a worker thread while holding the execution slot.

        Raises:
            EngineExecutionException: If ffprobe is missing, fails or times out.
        """
        async with self._execution_slot():
            logger.debug(f"Probing media information of {path}")
            try:
                return await asyncio.wait_for(
                    asyncio.to_thread(ffmpeg.probe, path, cmd=self.ffprobe_cmd),
                    timeout=self.timeout,
                )
            except ffmpeg.Error as e:
                stderr = e.stderr.decode("utf-8", errors="replace") if e.stderr else ""
                logger.error(f"ffprobe failed for {path}: {stderr}")
                raise EngineExecutionException(f"Failed to probe media file {path}: {stderr}") from e
            except asyncio.TimeoutError as e:
                logger.error(f"ffprobe timed out after {self.timeout}s for {path}")
                raise EngineExecutionException(f"Probe of {path} timed out") from e
            except OSError as e:
                logger.error(f"Could not start '{self.ffprobe_cmd}': {e}")
                raise EngineExecutionException(f"Could not start '{self.ffprobe_cmd}': {e}") from e

    def cancel(self) -> None:
        """
        Terminates the command currently holding the execution slot, if any.

        Media-information probes run in a thread and are not interrupted.
        """
        process = self._process
        if process is None or process.returncode is not None:
            logger.debug("Cancel requested but no command is running.")
            return
        logger.info(f"Cancelling running command (pid {process.pid}).")
        try:
            process.terminate()
        except ProcessLookupError:
            logger.debug(f"Process {process.pid} already exited.")

    async def _run(self, executable: str, command: str) -> int:
        try:
            cmd_list: List[str] = [executable, *shlex.split(command)]
        except ValueError as e:
            logger.error(f"Error splitting command string with shlex: '{command}'. Error: {e}")
            raise EngineExecutionException(f"Malformed command: {command}") from e

        async with self._execution_slot():
            display_cmd_str = shlex.join(cmd_list)
            logger.debug(f"Executing command: {display_cmd_str}")
            try:
                self._process = await asyncio.create_subprocess_exec(
                    *cmd_list,
                    stdin=asyncio.subprocess.DEVNULL,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            except OSError as e:
                # Raised if the executable (e.g., 'ffmpeg') is not found.
                logger.error(
                    f"Error: Command not found (e.g., '{executable}'). "
                    f"Ensure it's in your system's PATH or configured correctly. {e}"
                )
                raise EngineExecutionException(f"Could not start '{executable}': {e}") from e

            process = self._process
            try:
                stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
            except asyncio.TimeoutError as e:
                logger.error(f"Error: Command timed out after {self.timeout}s. Command: {display_cmd_str}")
                process.kill()
                await process.wait()
                raise EngineExecutionException(f"Command timed out after {self.timeout}s") from e
            finally:
                self._process = None

            stdout_text = stdout.decode("utf-8", errors="replace")
            stderr_text = stderr.decode("utf-8", errors="replace")
            self._last_command_output = stdout_text or stderr_text

            if stdout_text:
                logger.trace(f"Command stdout: {stdout_text[:500]}")
            if process.returncode != 0:
                logger.warning(f"Command exited with rc={process.returncode}: {stderr_text[-500:]}")
            elif stderr_text:
                logger.trace(f"Command stderr (non-error): {stderr_text[-500:]}")

            return process.returncode


default_engine = FFmpegEngine()
