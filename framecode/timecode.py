"""
framecode.timecode - SMPTE timecode engine.

A Timecode is an absolute, zero-based frame count at a given frame rate.
It formats to and parses from HH:MM:SS:FF (non-drop) and HH:MM:SS;FF
(29.97 drop-frame), and supports arithmetic that wraps at 24 hours.

Drop-frame skips frame numbers :00 and :01 at every minute mark
except every 10th minute (00, 10, 20, 30, 40, 50), so the displayed
time stays close to wall-clock time at 30000/1001 fps.
"""

from __future__ import annotations

import copy
import operator
import re
from decimal import ROUND_HALF_UP, Decimal
from random import Random

from framecode.exceptions import (
    InconsistentRateError,
    InvalidRateError,
    InvalidTimecodeError,
)
from framecode.logging import get_logger
from framecode.rates import FPS_2997, frames_per_day, integer_rate

logger = get_logger(__name__)

TIMECODE_PATTERN = re.compile(r"([0-9]{2}):([0-5][0-9]):([0-5][0-9])([:;])([0-2][0-9])")

DROP_FRAMES = 2
RANDOM_RANGE_SECONDS = 12 * 60 * 60

_MILLISECONDS = Decimal(1000)
_MILLI = Decimal("0.001")


def _to_decimal(value: float | int | Decimal) -> Decimal:
    """Exact decimal of a number, using the shortest repr for floats.

    Decimal(0.1) would carry the binary error of the float; going through
    repr() gives Decimal("0.1").
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(float(value)))


class Timecode:
    """SMPTE timecode addressed by absolute frame count. The first frame is 0."""

    def __init__(self, fps: float, frame: int = 0, drop_frame: bool = False) -> None:
        try:
            frame = operator.index(frame)
        except TypeError as e:
            raise InvalidRateError(f"frame must be an integer, got {frame!r}") from e
        if not fps > 0 or frame < 0:
            raise InvalidRateError(f"invalid frame rate or frame: fps={fps}, frame={frame}")
        self._fps = fps
        self._frame = frame
        self._drop_frame = drop_frame

    # Construction

    @classmethod
    def from_seconds(cls, fps: float, seconds: float) -> Timecode:
        """Create a timecode at the frame containing the given time.

        Args:
            fps: Frames per second
            seconds: Elapsed time in seconds

        Returns:
            Timecode whose frame is seconds * fps, truncated

        Raises:
            InvalidRateError: If fps is not positive or seconds is negative
        """
        if not fps > 0 or seconds < 0:
            raise InvalidRateError(f"invalid frame rate or duration: fps={fps}, seconds={seconds}")
        if seconds == 0:
            return cls(fps)
        frame = int(_to_decimal(seconds) * _to_decimal(fps))
        return cls(fps, frame)

    @classmethod
    def from_frame(cls, fps: float, frame: int) -> Timecode:
        """Create a timecode at the given frame. Both arguments must be positive."""
        return cls(fps, frame)

    @classmethod
    def from_string(cls, fps: float, timecode: str) -> Timecode:
        """Create a non-drop timecode from HH:MM:SS:FF text."""
        tc = cls(fps)
        tc.parse(timecode)
        return tc

    @classmethod
    def drop_frame_from_seconds(cls, seconds: float) -> Timecode:
        """Create a 29.97 drop-frame timecode at the given time."""
        tc = cls.from_seconds(FPS_2997, seconds)
        tc._drop_frame = True
        return tc

    @classmethod
    def drop_frame_from_string(cls, timecode: str) -> Timecode:
        """Create a 29.97 drop-frame timecode from HH:MM:SS;FF text."""
        tc = cls(FPS_2997, drop_frame=True)
        tc.parse(timecode)
        return tc

    @classmethod
    def random(cls, fps: float, rng: Random | None = None) -> Timecode:
        """Create a timecode at a uniformly random whole second within 12 hours.

        Meant for test fixtures. Pass a seeded generator for reproducible values.
        """
        if rng is None:
            rng = Random()
        return cls.from_seconds(fps, rng.randrange(RANDOM_RANGE_SECONDS))

    # Accessors

    @property
    def fps(self) -> float:
        return self._fps

    @property
    def drop_frame(self) -> bool:
        return self._drop_frame

    @property
    def frame(self) -> int:
        """Frame number. The first frame is frame 0."""
        return self._frame

    @property
    def frames(self) -> int:
        """Number of frames up to and including this one."""
        return self._frame + 1

    def copy(self) -> Timecode:
        return copy.copy(self)

    def is_compatible(self, other: Timecode) -> bool:
        """True if both timecodes share the same frame rate and drop-frame flag."""
        return self._fps == other._fps and self._drop_frame == other._drop_frame

    # Formatting

    def to_string(self) -> str:
        """Format as HH:MM:SS:FF, or HH:MM:SS;FF for drop-frame."""
        if self._drop_frame:
            return self._format_drop_frame()
        return self._format_non_drop_frame()

    def _format_non_drop_frame(self) -> str:
        frames_per_second = integer_rate(self._fps)
        frames_per_minute = 60 * frames_per_second
        frames_per_hour = 60 * frames_per_minute

        hh, rem = divmod(self._frame, frames_per_hour)
        mm, rem = divmod(rem, frames_per_minute)
        ss, ff = divmod(rem, frames_per_second)

        return f"{hh:02d}:{mm:02d}:{ss:02d}:{ff:02d}"

    def _format_drop_frame(self) -> str:
        # See https://www.davidheidelberger.com/2010/06/10/drop-frame-timecode/
        frames_per_second = integer_rate(self._fps)
        frames_per_hour = round(self._fps * 3600)
        frames_per_10_minutes = round(self._fps * 600)
        frames_per_minute = frames_per_second * 60 - DROP_FRAMES

        frame_number = self._frame % (24 * frames_per_hour)
        d, m = divmod(frame_number, frames_per_10_minutes)

        frame_number += 9 * d * DROP_FRAMES
        if m > DROP_FRAMES:
            frame_number += DROP_FRAMES * ((m - DROP_FRAMES) // frames_per_minute)

        ff = frame_number % frames_per_second
        total_seconds = frame_number // frames_per_second
        ss = total_seconds % 60
        mm = (total_seconds // 60) % 60
        hh = (total_seconds // 3600) % 24

        return f"{hh:02d}:{mm:02d}:{ss:02d};{ff:02d}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Timecode(fps={self._fps!r}, frame={self._frame}, drop_frame={self._drop_frame})"

    # Parsing

    def parse(self, timecode: str) -> None:
        """Set the timecode from HH:MM:SS:FF or HH:MM:SS;FF text.

        The frame field must fit the frame rate, and in drop-frame mode the
        text must use ';' and must not name a skipped frame number. On
        failure the timecode is left unchanged.

        Raises:
            InvalidTimecodeError: If the text is malformed, or uses the wrong
                delimiter or a skipped frame number in drop-frame mode
            InconsistentRateError: If the frame field is too large for the rate
        """
        match = TIMECODE_PATTERN.fullmatch(timecode)
        if not match:
            logger.debug("Rejected timecode %r: does not match HH:MM:SS:FF", timecode)
            raise InvalidTimecodeError(timecode)

        hh, mm, ss = int(match.group(1)), int(match.group(2)), int(match.group(3))
        delimiter = match.group(4)
        ff = int(match.group(5))

        if hh == 0 and mm == 0 and ss == 0 and ff == 0:
            self._frame = 0
            return

        frames_per_second = integer_rate(self._fps)
        if ff >= frames_per_second:
            logger.debug("Rejected timecode %r: frame field too large", timecode)
            raise InconsistentRateError(
                f"frame {ff} out of range for {self._fps:g} fps in {timecode!r}"
            )

        if not self._drop_frame:
            self._frame = (3600 * hh + 60 * mm + ss) * frames_per_second + ff
            return

        if delimiter != ";":
            logger.debug("Rejected timecode %r: drop-frame requires ';'", timecode)
            raise InvalidTimecodeError(timecode, "drop-frame timecode requires ';' before frames")

        if ss == 0 and ff in (0, 1) and mm % 10 != 0:
            logger.debug("Rejected timecode %r: frame number is dropped", timecode)
            raise InvalidTimecodeError(timecode, "frame number is skipped in drop-frame timecode")

        # See https://www.davidheidelberger.com/2010/06/10/drop-frame-timecode/
        frames_per_minute = 60 * frames_per_second
        frames_per_hour = 60 * frames_per_minute
        total_minutes = 60 * hh + mm
        self._frame = (
            hh * frames_per_hour
            + mm * frames_per_minute
            + ss * frames_per_second
            + ff
            - DROP_FRAMES * (total_minutes - total_minutes // 10)
        )

    # Arithmetic

    def add(self, other: Timecode) -> None:
        """Add another timecode, wrapping at 24 hours.

        Raises:
            InconsistentRateError: If the frame rates or drop-frame flags differ
        """
        self._check_compatible(other)
        modulus = frames_per_day(self._fps)
        total = self._frame + other._frame
        if total >= modulus:
            logger.debug("Timecode addition wrapped past 24 hours (%d frames)", total)
            total -= modulus
        self._frame = total

    def subtract(self, other: Timecode) -> None:
        """Subtract another timecode, wrapping at 24 hours.

        00:00:01:00 - 00:00:02:00 gives 23:59:59:00.

        Raises:
            InconsistentRateError: If the frame rates or drop-frame flags differ
        """
        self._check_compatible(other)
        total = self._frame - other._frame
        if total < 0:
            logger.debug("Timecode subtraction wrapped below zero (%d frames)", total)
            total += frames_per_day(self._fps)
        self._frame = total

    def offset(self, frames: int) -> None:
        """Move by a signed number of frames. No wraparound and no clamping."""
        self._frame += frames

    def set_frame(self, frame: int) -> None:
        """Set the frame number. Negative values are clamped to 0."""
        self._frame = max(frame, 0)

    def convert(self, other: Timecode) -> None:
        """Take the frame number of another timecode, keeping this frame rate."""
        self._frame = other._frame

    def _check_compatible(self, other: Timecode) -> None:
        if not self.is_compatible(other):
            raise InconsistentRateError(
                f"inconsistent frame rates: {self._fps:g} fps"
                f"{' DF' if self._drop_frame else ''} and {other._fps:g} fps"
                f"{' DF' if other._drop_frame else ''}"
            )

    def __add__(self, other: Timecode) -> Timecode:
        if not isinstance(other, Timecode):
            return NotImplemented
        result = self.copy()
        result.add(other)
        return result

    def __sub__(self, other: Timecode) -> Timecode:
        if not isinstance(other, Timecode):
            return NotImplemented
        result = self.copy()
        result.subtract(other)
        return result

    # Comparison

    def before(self, other: Timecode) -> bool:
        """True if this timecode is before or equal to the other."""
        return self._frame <= other._frame

    def equal(self, other: Timecode) -> bool:
        """True if frame, frame rate and drop-frame flag all match."""
        return (
            self._frame == other._frame
            and self._fps == other._fps
            and self._drop_frame == other._drop_frame
        )

    def at_offset_from(self, other: Timecode, frames: int) -> bool:
        """True if this timecode is `frames` after the other, at the same rate."""
        if not self.is_compatible(other):
            return False
        return other._frame + frames == self._frame

    def frame_count(self, other: Timecode) -> int:
        """Signed number of frames from this timecode to the other."""
        return other._frame - self._frame

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timecode):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # type: ignore[assignment]

    # Millisecond views

    def seconds(self) -> Decimal:
        """Time at the start of the frame, rounded to the millisecond."""
        return (Decimal(self._frame) / _to_decimal(self._fps)).quantize(_MILLI, ROUND_HALF_UP)

    def milliseconds(self) -> int:
        """Milliseconds at the start of the frame."""
        ms = (Decimal(self._frame) * _MILLISECONDS / _to_decimal(self._fps)).quantize(
            _MILLI, ROUND_HALF_UP
        )
        return int(ms)

    def as_milliseconds(self) -> str:
        """Format the start-of-frame time as HH:MM:SS.mmm."""
        if self._frame == 0:
            return "00:00:00.000"
        duration = self.seconds()
        whole = int(duration)
        hh, rem = divmod(whole, 3600)
        mm, ss = divmod(rem, 60)
        ms = int((duration - whole) * _MILLISECONDS)
        return f"{hh:02d}:{mm:02d}:{ss:02d}.{ms:03d}"
