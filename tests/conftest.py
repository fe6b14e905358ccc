"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import logging

import pytest

from smpte import FrameRate, TimecodeBuilder


@pytest.fixture
def ndf_24() -> TimecodeBuilder:
    """Return a builder for 24 fps non drop frame timecodes."""
    return TimecodeBuilder(framerate=FrameRate.FR_24)


@pytest.fixture
def df_2997() -> TimecodeBuilder:
    """Return a builder for 29.97 fps drop frame timecodes."""
    return TimecodeBuilder(framerate=FrameRate.FR_29_97, drop_frame=True)


@pytest.fixture
def df_5994() -> TimecodeBuilder:
    """Return a builder for 59.94 fps drop frame timecodes."""
    return TimecodeBuilder(framerate=FrameRate.FR_59_94, drop_frame=True)


@pytest.fixture
def reset_smpte_logger():
    """Restore the level of the smpte logger after the test."""
    smpte_logger = logging.getLogger("smpte")
    level = smpte_logger.level
    yield smpte_logger
    smpte_logger.setLevel(level)
