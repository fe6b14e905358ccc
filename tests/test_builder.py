"""Tests for the pre-configured Timecode factory and package logging."""

from __future__ import annotations

import logging
from fractions import Fraction

import pytest

import smpte
from smpte import (
    IncompatibleDropFrameError,
    Timecode,
    TimecodeBuilder,
    UnsupportedFramerateError,
    configure_logging,
)


class TestTimecodeBuilder:
    def test_preconfigured_arguments(self, df_2997):
        tc = df_2997(start_timecode="00:01:00;02")
        assert isinstance(tc, Timecode)
        assert tc.frame_count == 1800
        assert tc.framerate == Fraction(30000, 1001)
        assert tc.drop_frame is True

    def test_call_arguments_override(self, df_2997):
        tc = df_2997(frame_count=1800, drop_frame=False)
        assert tc.drop_frame is False
        assert str(tc) == "00:01:00:00"

    def test_settings_are_validated(self):
        with pytest.raises(IncompatibleDropFrameError):
            TimecodeBuilder(framerate=24, drop_frame=True)
        with pytest.raises(UnsupportedFramerateError):
            TimecodeBuilder(framerate=26)

    def test_framerate_is_normalized(self):
        builder = TimecodeBuilder(framerate="29.97")
        assert builder.kwargs["framerate"] == Fraction(30000, 1001)
        assert builder.kwargs["drop_frame"] is False

    def test_without_framerate(self):
        assert TimecodeBuilder()(frame_count=24).framerate == 24

    def test_with_options(self, ndf_24):
        builder = ndf_24.with_options(framerate=25)
        assert builder(start_timecode="00:00:01:00").frame_count == 25
        assert ndf_24(start_timecode="00:00:01:00").frame_count == 24

    def test_with_options_validates(self, ndf_24):
        with pytest.raises(IncompatibleDropFrameError):
            ndf_24.with_options(drop_frame=True)


class TestLogging:
    def test_configure_verbose(self, reset_smpte_logger):
        configure_logging(verbose=True)
        assert reset_smpte_logger.level == logging.DEBUG

    def test_configure_quiet(self, reset_smpte_logger):
        configure_logging()
        assert reset_smpte_logger.level == logging.WARNING

    def test_null_handler(self):
        handlers = logging.getLogger("smpte").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_module_loggers(self):
        assert logging.getLogger("smpte.timecode").parent.name == "smpte"


def test_version():
    assert smpte.__version__ == "1.0.0"
