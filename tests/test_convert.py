"""Tests for framecode.convert module."""

import pytest

from framecode.convert import (
    frames_to_timecode,
    seconds_to_timecode,
    timecode_to_frames,
    timecode_to_seconds,
)
from framecode.exceptions import InvalidTimecodeError
from framecode.rates import FPS_2997


class TestConvert:
    def test_seconds_to_timecode_24fps(self):
        tc = seconds_to_timecode(0, 24, drop_frame=False)
        assert tc == "00:00:00:00"

        tc = seconds_to_timecode(3600, 24, drop_frame=False)
        assert tc == "01:00:00:00"

        tc = seconds_to_timecode(65.5, 24, drop_frame=False)
        assert tc == "00:01:05:12"

    def test_seconds_to_timecode_2997_drop_frame(self):
        tc = seconds_to_timecode(0, 29.97, drop_frame=True)
        assert tc == "00:00:00;00"

        tc = seconds_to_timecode(60, 29.97, drop_frame=True)
        assert tc == "00:00:59;28"

    def test_drop_frame_ignored_for_other_rates(self):
        assert seconds_to_timecode(60, 25, drop_frame=True) == "00:01:00:00"
        assert frames_to_timecode(1800, 30, drop_frame=True) == "00:01:00:00"

    def test_timecode_to_seconds_24fps(self):
        assert timecode_to_seconds("00:00:00:00", 24) == 0
        assert timecode_to_seconds("01:00:00:00", 24) == 3600
        assert timecode_to_seconds("00:01:05:12", 24) == pytest.approx(65.5)

    def test_timecode_to_seconds_drop_frame(self):
        assert timecode_to_seconds("01:00:00;00", FPS_2997) == pytest.approx(3600, abs=0.01)

    def test_timecode_to_frames(self):
        assert timecode_to_frames("00:00:00:00", 24) == 0
        assert timecode_to_frames("00:00:01:00", 24) == 24
        assert timecode_to_frames("00:01:00:00", 24) == 1440

    def test_timecode_to_frames_detects_drop_frame(self):
        assert timecode_to_frames("00:01:00;02", FPS_2997) == 1800
        assert timecode_to_frames("00:01:00:02", FPS_2997) == 1802
        assert timecode_to_frames("00:00:01;00", 25) == 25

    def test_timecode_to_frames_explicit_drop_frame(self):
        with pytest.raises(InvalidTimecodeError):
            timecode_to_frames("00:01:00:02", FPS_2997, drop_frame=True)
        assert timecode_to_frames("00:01:00;02", FPS_2997, drop_frame=False) == 1802

    def test_frames_to_timecode(self):
        assert frames_to_timecode(0, 24, drop_frame=False) == "00:00:00:00"
        assert frames_to_timecode(24, 24, drop_frame=False) == "00:00:01:00"
        assert frames_to_timecode(1440, 24, drop_frame=False) == "00:01:00:00"
        assert frames_to_timecode(1800, FPS_2997, drop_frame=True) == "00:01:00;02"
