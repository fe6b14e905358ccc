"""Tests for the supported frame rates."""

from __future__ import annotations

import logging
from fractions import Fraction

import pytest

from smpte import SUPPORTED_FRAMERATES, FrameRate, is_framerate_supported
from smpte.exceptions import UnsupportedFramerateError
from smpte.framerate import (
    drop_frames_per_minute,
    is_drop_frame_rate,
    parse_framerate,
)


class TestFrameRateConstants:
    def test_constants(self):
        assert FrameRate.FR_23_976 == Fraction(24000, 1001)
        assert FrameRate.FR_24 == 24
        assert FrameRate.FR_25 == 25
        assert FrameRate.FR_29_97 == Fraction(30000, 1001)
        assert FrameRate.FR_30 == 30
        assert FrameRate.FR_50 == 50
        assert FrameRate.FR_59_94 == Fraction(60000, 1001)
        assert FrameRate.FR_60 == 60

    def test_ntsc_constants_match_float_division(self):
        assert float(FrameRate.FR_23_976) == 24000 / 1001
        assert float(FrameRate.FR_29_97) == 30000 / 1001
        assert float(FrameRate.FR_59_94) == 60000 / 1001

    def test_supported_framerates(self):
        assert len(SUPPORTED_FRAMERATES) == 8
        assert all(isinstance(rate, Fraction) for rate in SUPPORTED_FRAMERATES)


class TestParseFramerate:
    @pytest.mark.parametrize(
        "rate, expected",
        [
            (29.97, FrameRate.FR_29_97),
            ("29.97", FrameRate.FR_29_97),
            ("30000/1001", FrameRate.FR_29_97),
            ((30000, 1001), FrameRate.FR_29_97),
            (Fraction(30000, 1001), FrameRate.FR_29_97),
            (30000 / 1001, FrameRate.FR_29_97),
            (23.976, FrameRate.FR_23_976),
            ("23.98", FrameRate.FR_23_976),
            ((23976, 1000), FrameRate.FR_23_976),
            (59.94, FrameRate.FR_59_94),
            (24, FrameRate.FR_24),
            (25.0, FrameRate.FR_25),
            ("30", FrameRate.FR_30),
            (50, FrameRate.FR_50),
            (60, FrameRate.FR_60),
        ],
    )
    def test_supported(self, rate, expected):
        assert parse_framerate(rate) == expected

    @pytest.mark.parametrize(
        "rate", [26, 0, -24, 23.5, 48, 120, 1000, "abc", "", None, True, (30, 0)]
    )
    def test_unsupported(self, rate):
        with pytest.raises(UnsupportedFramerateError):
            parse_framerate(rate)
        assert is_framerate_supported(rate) is False

    def test_unsupported_is_value_error(self):
        with pytest.raises(ValueError):
            parse_framerate(26)

    def test_is_framerate_supported(self):
        for rate in SUPPORTED_FRAMERATES:
            assert is_framerate_supported(rate)
        assert is_framerate_supported(29.97)

    def test_snapping_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="smpte"):
            parse_framerate(29.97)
        assert "Snapped framerate" in caplog.text

    def test_exact_rates_are_not_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="smpte"):
            parse_framerate(Fraction(30000, 1001))
            parse_framerate(24)
        assert caplog.text == ""


class TestDropFrameRates:
    @pytest.mark.parametrize(
        "rate, expected",
        [(29.97, True), (59.94, True), (23.976, False), (24, False), (30, False),
         (60, False), (26, False)],
    )
    def test_is_drop_frame_rate(self, rate, expected):
        assert is_drop_frame_rate(rate) is expected

    @pytest.mark.parametrize(
        "rate, expected", [(29.97, 2), (59.94, 4), (23.976, 0), (25, 0), (30, 0)]
    )
    def test_drop_frames_per_minute(self, rate, expected):
        assert drop_frames_per_minute(rate) == expected
