"""
framecode.exceptions - Custom exception classes.

All framecode-specific exceptions inherit from FramecodeError.
"""


class FramecodeError(Exception):
    """Base exception for all framecode errors."""

    pass


class InvalidRateError(FramecodeError):
    """Non-positive frame rate, negative duration or negative frame."""

    pass


class InconsistentRateError(FramecodeError):
    """Timecodes with different frame rates or drop-frame flags were combined,
    or a frame field does not fit the frame rate."""

    pass


class InvalidTimecodeError(FramecodeError):
    """Timecode text is malformed or names a frame drop-frame skips."""

    def __init__(self, timecode: str, message: str = "invalid timecode"):
        self.timecode = timecode
        self.message = message
        super().__init__(f"{message}: {timecode!r}")


class ConfigError(FramecodeError):
    """Configuration loading or validation error."""

    pass
