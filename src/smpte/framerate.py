"""Supported frame rates and frame rate normalization."""

from __future__ import annotations

import logging
from fractions import Fraction

from .exceptions import UnsupportedFramerateError
from .helpers import _Framerate

logger = logging.getLogger(__name__)


class FrameRate:
    """The frame rates a Timecode can use.

    The NTSC rates are exact rationals: 29.97 is 30000/1001, not the rounded
    decimal, so comparisons between them never depend on float precision.
    """

    FR_23_976 = Fraction(24000, 1001)
    FR_24 = Fraction(24)
    FR_25 = Fraction(25)
    FR_29_97 = Fraction(30000, 1001)
    FR_30 = Fraction(30)
    FR_50 = Fraction(50)
    FR_59_94 = Fraction(60000, 1001)
    FR_60 = Fraction(60)


SUPPORTED_FRAMERATES = (
    FrameRate.FR_23_976,
    FrameRate.FR_24,
    FrameRate.FR_25,
    FrameRate.FR_29_97,
    FrameRate.FR_30,
    FrameRate.FR_50,
    FrameRate.FR_59_94,
    FrameRate.FR_60,
)

DROP_FRAME_RATES = (FrameRate.FR_29_97, FrameRate.FR_59_94)


def _check_ntsc_rate(fps: Fraction) -> tuple[bool, int]:
    """Check if framerate is NTSC (nominal rate * 1000/1001).

    Args:
        fps (Fraction): The framerate to check.

    Returns:
        tuple: (is_ntsc, int_framerate) where is_ntsc is True if this is an
            NTSC rate, and int_framerate is the nominal integer framerate.
    """
    int_fps = round(fps * 1001 / 1000)
    expected_ntsc = int_fps * 1000 / 1001
    is_ntsc = abs(fps - expected_ntsc) < 0.005
    return is_ntsc, int_fps


def parse_framerate(rate: _Framerate) -> Fraction:
    """Convert the given value to one of the supported frame rates.

    Approximations of the NTSC rates like 29.97, "23.98" or (23976, 1000) are
    snapped to the exact N*1000/1001 fraction.

    Args:
        rate (Fraction | int | float | str | tuple[int, int]): The frame rate.
            A str can be a decimal ("29.97") or a fraction ("30000/1001"), a
            tuple is a (numerator, denominator) pair.

    Raises:
        UnsupportedFramerateError: If the value is not a number or is not one
            of the supported frame rates.

    Returns:
        Fraction: The supported frame rate.
    """
    if isinstance(rate, bool):
        raise UnsupportedFramerateError(f"Unsupported framerate: {rate!r}")

    try:
        if isinstance(rate, (tuple, list)):
            fps = Fraction(*map(int, rate))
        else:
            fps = Fraction(rate)
    except (TypeError, ValueError, OverflowError, ZeroDivisionError) as e:
        raise UnsupportedFramerateError(f"Unsupported framerate: {rate!r}") from e

    if fps <= 0:
        raise UnsupportedFramerateError(f"Unsupported framerate: {rate!r}")

    is_ntsc, int_fps = _check_ntsc_rate(fps)
    if is_ntsc and fps.denominator != 1001:
        exact = Fraction(int_fps * 1000, 1001)
        logger.debug("Snapped framerate %r to %s", rate, exact)
        fps = exact

    if fps not in SUPPORTED_FRAMERATES:
        raise UnsupportedFramerateError(f"Unsupported framerate: {rate!r}")
    return fps


def is_framerate_supported(rate: _Framerate) -> bool:
    """Return True if the given frame rate is one of the supported rates.

    Args:
        rate (Fraction | int | float | str | tuple[int, int]): The frame rate.

    Returns:
        bool: True if supported.
    """
    try:
        parse_framerate(rate)
    except UnsupportedFramerateError:
        return False
    return True


def is_drop_frame_rate(rate: _Framerate) -> bool:
    """Return True if drop frame numbering can be used with the given rate."""
    try:
        return parse_framerate(rate) in DROP_FRAME_RATES
    except UnsupportedFramerateError:
        return False


def drop_frames_per_minute(rate: _Framerate) -> int:
    """Return the count of frame numbers skipped at each non-tenth minute.

    This is 2 at 29.97, 4 at 59.94 and 0 for the rates without drop frame.
    """
    fps = parse_framerate(rate)
    if fps not in DROP_FRAME_RATES:
        return 0
    return round(fps) // 15
