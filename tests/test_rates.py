"""Tests for framecode.rates module."""

from __future__ import annotations

import pytest

from framecode.exceptions import InvalidRateError
from framecode.rates import (
    FPS_2997,
    FPS_23976,
    frames_per_day,
    integer_rate,
    is_drop_frame_fps,
    parse_rate,
)


class TestParseRate:
    def test_named_rates(self) -> None:
        assert parse_rate("ntsc") == FPS_2997
        assert parse_rate("NTSC") == FPS_2997
        assert parse_rate("film") == 24.0
        assert parse_rate("film-ntsc") == FPS_23976
        assert parse_rate("pal") == 25.0

    def test_ntsc_shorthands_resolve_to_exact_rates(self) -> None:
        assert parse_rate("29.97") == FPS_2997
        assert parse_rate("23.976") == FPS_23976
        assert parse_rate("23.98") == FPS_23976

    def test_fraction(self) -> None:
        assert parse_rate("30000/1001") == FPS_2997
        assert parse_rate("24000/1001") == FPS_23976
        assert parse_rate("50/2") == 25.0

    def test_numbers(self) -> None:
        assert parse_rate("25") == 25.0
        assert parse_rate(" 12.5 ") == 12.5
        assert parse_rate(24) == 24.0
        assert parse_rate(23.976) == 23.976

    def test_invalid_raises(self) -> None:
        for value in ["", "fast", "30000/0", "1/2/3", "0", "-24", 0, -1.5, True]:
            with pytest.raises(InvalidRateError):
                parse_rate(value)


class TestIsDropFrameFps:
    def test_is_drop_frame_fps(self) -> None:
        assert is_drop_frame_fps(29.97) is True
        assert is_drop_frame_fps(FPS_2997) is True
        assert is_drop_frame_fps(23.976) is False
        assert is_drop_frame_fps(24) is False
        assert is_drop_frame_fps(25) is False
        assert is_drop_frame_fps(30) is False


class TestFramesPerDay:
    def test_integer_rates(self) -> None:
        assert frames_per_day(24) == 2_073_600
        assert frames_per_day(25) == 2_160_000

    def test_fractional_rates_truncate(self) -> None:
        assert frames_per_day(FPS_2997) == 2_589_410
        assert frames_per_day(FPS_23976) == 2_071_528


class TestIntegerRate:
    def test_integer_rate(self) -> None:
        assert integer_rate(FPS_2997) == 30
        assert integer_rate(FPS_23976) == 24
        assert integer_rate(25.0) == 25
