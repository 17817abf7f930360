"""
framecode.rates - Named frame rates and rate helpers.

Handles the NTSC fractional rates, parsing of rate strings such as
"30000/1001" or "29.97", and the 24-hour frame modulus used for
wraparound arithmetic.
"""

from __future__ import annotations

from fractions import Fraction

from framecode.exceptions import InvalidRateError

# NTSC video, the only rate drop-frame timecode applies to.
FPS_2997 = 30000.0 / 1001.0
# NTSC film.
FPS_23976 = 24000.0 / 1001.0

SECONDS_PER_DAY = 24 * 60 * 60

NAMED_RATES: dict[str, float] = {
    "film": 24.0,
    "film-ntsc": FPS_23976,
    "23.976": FPS_23976,
    "23.98": FPS_23976,
    "24": 24.0,
    "pal": 25.0,
    "25": 25.0,
    "ntsc": FPS_2997,
    "29.97": FPS_2997,
    "30": 30.0,
}


def parse_rate(value: str | float | int) -> float:
    """Parse a frame rate from a name, a fraction or a number.

    The usual shorthands "23.976" and "29.97" resolve to the exact NTSC
    rates, not to the rounded decimal.

    Args:
        value: Rate name ("ntsc", "film", ...), fraction ("30000/1001"),
            or number

    Returns:
        Frames per second

    Raises:
        InvalidRateError: If the value is not a positive rate
    """
    if isinstance(value, bool):
        raise InvalidRateError(f"invalid frame rate: {value!r}")

    if isinstance(value, (int, float)):
        fps = float(value)
    else:
        text = value.strip().lower()
        if text in NAMED_RATES:
            return NAMED_RATES[text]
        try:
            if "/" in text:
                fps = float(Fraction(text))
            else:
                fps = float(text)
        except (ValueError, ZeroDivisionError) as e:
            raise InvalidRateError(f"invalid frame rate: {value!r}") from e

    if not fps > 0:
        raise InvalidRateError(f"frame rate must be positive, got {value!r}")
    return fps


def is_drop_frame_fps(fps: float) -> bool:
    """Check if frame rate is the NTSC rate drop-frame timecode exists for.

    Args:
        fps: Frames per second

    Returns:
        True if drop-frame timecode can be used
    """
    return abs(fps - FPS_2997) < 0.01


def frames_per_day(fps: float) -> int:
    """Number of frames in 24 hours, truncated. Used as the wraparound modulus."""
    return int(SECONDS_PER_DAY * fps)


def integer_rate(fps: float) -> int:
    """Nominal frames per second counted by timecode (30 for 29.97)."""
    return round(fps)
