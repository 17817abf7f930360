"""
framecode - SMPTE timecode toolkit.

Converts between absolute frame counts and HH:MM:SS:FF timecodes,
including 29.97 drop-frame, and does frame arithmetic that wraps at
24 hours.
"""

__version__ = "0.1.0"

from framecode.exceptions import (  # noqa: E402
    FramecodeError,
    InconsistentRateError,
    InvalidRateError,
    InvalidTimecodeError,
)
from framecode.rates import FPS_2997, FPS_23976  # noqa: E402
from framecode.timecode import Timecode  # noqa: E402

__all__ = [
    "FPS_2997",
    "FPS_23976",
    "FramecodeError",
    "InconsistentRateError",
    "InvalidRateError",
    "InvalidTimecodeError",
    "Timecode",
]
