"""
framecode.convert - Timecode conversion helpers.

Functional shortcuts over Timecode for callers that only need to turn
frames or seconds into timecode text and back.
"""

from __future__ import annotations

from framecode.rates import is_drop_frame_fps
from framecode.timecode import Timecode


def _use_drop_frame(fps: float, drop_frame: bool) -> bool:
    return drop_frame and is_drop_frame_fps(fps)


def frames_to_timecode(total_frames: int, fps: float, drop_frame: bool = False) -> str:
    """Convert frame count to timecode.

    Args:
        total_frames: Zero-based frame number
        fps: Frames per second
        drop_frame: Whether to use drop-frame (ignored unless fps is 29.97)

    Returns:
        Timecode string
    """
    return Timecode(fps, total_frames, _use_drop_frame(fps, drop_frame)).to_string()


def seconds_to_timecode(seconds: float, fps: float, drop_frame: bool = False) -> str:
    """Convert seconds to timecode based on frame rate.

    Args:
        seconds: Time in seconds
        fps: Frames per second
        drop_frame: Whether to use drop-frame (ignored unless fps is 29.97)

    Returns:
        Timecode string of the frame containing the given time
    """
    frame = Timecode.from_seconds(fps, seconds).frame
    return frames_to_timecode(frame, fps, drop_frame)


def timecode_to_frames(timecode: str, fps: float, drop_frame: bool | None = None) -> int:
    """Convert timecode to frame count.

    Args:
        timecode: Timecode string
        fps: Frames per second
        drop_frame: Whether the timecode is drop-frame; auto-detected from
            the ';' delimiter when None

    Returns:
        Frame count
    """
    if drop_frame is None:
        drop_frame = ";" in timecode
    tc = Timecode(fps, drop_frame=_use_drop_frame(fps, drop_frame))
    tc.parse(timecode)
    return tc.frame


def timecode_to_seconds(timecode: str, fps: float, drop_frame: bool | None = None) -> float:
    """Convert timecode to seconds at the start of its frame.

    Args:
        timecode: Timecode string
        fps: Frames per second
        drop_frame: Whether the timecode is drop-frame; auto-detected when None

    Returns:
        Time in seconds
    """
    return timecode_to_frames(timecode, fps, drop_frame) / fps
