"""
Defines custom exception types for Video Tools.

These exceptions allow for more specific and expressive error handling around the
compression and probe workflows. Instead of catching a generic `Exception`,
callers can catch `InvalidOptionsException` or `ProbeParseException` and react
accordingly. Every exception is scoped to the single call that raised it and
leaves the `VideoTools` handle usable for subsequent calls.

All custom exceptions inherit from the base `VideoToolsException`.
"""


class VideoToolsException(Exception):
    """Base class for all custom exceptions in Video Tools."""

    pass


# --- Input Validation Exceptions ---
class InvalidInputPathException(VideoToolsException):
    """
    Raised when the asset's path has no usable extension.

    The check happens before any other work, so no output file is generated and
    no engine command is issued for such an asset.
    """

    pass


class InvalidOptionsException(VideoToolsException):
    """
    Raised when a compression option is not one of its legal values.

    The message lists the legal values. The offending field name and the legal
    values are also kept as attributes for programmatic use.
    """

    def __init__(self, message: str, field: str = "", allowed_values: list[str] | None = None):
        super().__init__(message)
        self.field = field
        self.allowed_values = allowed_values or []


class InvalidArgumentTypeException(VideoToolsException):
    """Raised when an argument has the wrong type, e.g. a non-boolean `force`."""

    pass


# --- Output File Exceptions ---
class OutputPathUnavailableException(VideoToolsException):
    """
    Raised when no usable output path could be obtained for a compression.

    `caller_supplied` tells whether the caller passed the path explicitly or
    whether generating a scratch file failed.
    """

    def __init__(self, message: str, caller_supplied: bool = False):
        super().__init__(message)
        self.caller_supplied = caller_supplied


# --- Engine Exceptions ---
class EngineExecutionException(VideoToolsException):
    """
    Raised when the FFmpeg engine cannot run a command or a probe fails.

    The underlying error is chained as `__cause__` when there is one.
    """

    pass


class ProbeParseException(EngineExecutionException):
    """
    Raised when probe output cannot be parsed into media details.

    Typical causes are malformed JSON or a probe result lacking the size and
    dimension fields.
    """

    pass
