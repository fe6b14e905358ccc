"""Helper functions for Timecode conversions and validation.

Everything here works on the rounded (integer) frame rate and the number of
frame numbers dropped per minute, so none of it depends on the frame rate
catalog.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from fractions import Fraction
from typing import NamedTuple, NewType

if sys.version_info >= (3, 11):
    _frate_type = Fraction | str | int | float | tuple[int, int]
else:
    from typing import Union
    _frate_type = Union[Fraction, str, int, float, tuple[int, int]]

_Framerate = NewType("_Framerate", _frate_type)

# HH:MM:SS:FF where the first two separators must match each other
TIMECODE_PATTERN = re.compile(
    r"(?:[01][0-9]|2[0-3])([:;])[0-5][0-9]\1[0-5][0-9]([:;])[0-5][0-9]"
)

FRAME_SEPARATOR_INDEX = 8


class TimecodeParts(NamedTuple):
    """The hours, minutes, seconds and frames fields of a timecode."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    frames: int = 0


def pad_number(number: int) -> str:
    """Return the number zero-padded to two digits."""
    return f"{number:02d}"


def to_parts(value: TimecodeParts | Mapping | tuple | list) -> TimecodeParts:
    """Convert the given value to a TimecodeParts instance.

    Args:
        value (TimecodeParts | Mapping | tuple | list): Either a mapping with
            any of the "hours", "minutes", "seconds" and "frames" keys, missing
            keys default to 0, or a sequence of the four values.

    Raises:
        TypeError: If the value is not a mapping or a four items sequence or a
            field is not an integer.

    Returns:
        TimecodeParts: The parts.
    """
    if isinstance(value, TimecodeParts):
        parts = value
    elif isinstance(value, Mapping):
        parts = TimecodeParts(
            **{name: value[name] for name in TimecodeParts._fields if name in value}
        )
    elif isinstance(value, (tuple, list)) and len(value) == 4:
        parts = TimecodeParts(*value)
    else:
        raise TypeError(
            "Timecode parts should be a mapping or a sequence of 4 integers, "
            f"not {value!r}"
        )

    for name, field in zip(parts._fields, parts):
        if isinstance(field, bool) or not isinstance(field, int):
            raise TypeError(
                f"Timecode {name} should be an integer, not "
                f"{field.__class__.__name__}"
            )
    return parts


def join_parts(parts: TimecodeParts, drop_frame: bool = False) -> str:
    """Join the parts as a timecode string.

    The fields are zero-padded and joined with ";" for drop frame and ":"
    otherwise. The result is not validated.
    """
    separator = ";" if drop_frame else ":"
    return separator.join(map(pad_number, parts))


def split_timecode(timecode: str) -> TimecodeParts:
    """Split a well formed timecode string in its parts.

    Args:
        timecode (str): A string accepted by :func:`is_timecode_format_valid`.

    Returns:
        TimecodeParts: The hours, minutes, seconds and frames of the timecode.
    """
    return TimecodeParts(*map(int, re.split("[:;]", timecode)))


def is_timecode_format_valid(timecode: str, drop_frame: bool = False) -> bool:
    """Check if a timecode string has a valid format.

    This is a structural check only, the frame rate is not taken into account.

    Args:
        timecode (str): The timecode string to check.
        drop_frame (bool): True if the timecode uses drop frame notation, in
            that case the separator before the frames must be a ";". Otherwise
            no ";" is allowed.

    Returns:
        bool: True if the format is valid.
    """
    if not isinstance(timecode, str):
        return False

    if not drop_frame and ";" in timecode:
        return False

    if drop_frame and timecode[FRAME_SEPARATOR_INDEX:FRAME_SEPARATOR_INDEX + 1] != ";":
        return False

    return TIMECODE_PATTERN.fullmatch(timecode) is not None


def is_dropped_frame_number(parts: TimecodeParts, drop_frames: int) -> bool:
    """Return True if the parts show a frame number that drop frame skips.

    The first ``drop_frames`` frame numbers of every minute, except the
    minutes that are a multiple of ten, do not exist in drop frame timecode.
    """
    return (
        parts.minutes % 10 != 0
        and parts.seconds == 0
        and parts.frames < drop_frames
    )


def frames_per_ten_minutes(int_framerate: int, drop_frames: int) -> int:
    """Return the number of frames in ten minutes."""
    return int_framerate * 600 - 9 * drop_frames


def frames_per_day(int_framerate: int, drop_frames: int) -> int:
    """Return the number of frames after which the timecode rolls over."""
    return 144 * frames_per_ten_minutes(int_framerate, drop_frames)


def drop_frame_display_count(
    frame_count: int, int_framerate: int, drop_frames: int
) -> int:
    """Convert a sequential frame count to the drop frame display count.

    The display count is the frame count that, decomposed with the rounded
    frame rate, gives the drop frame fields. At 29.97 a ten minutes block is
    17982 frames and a minute after the drop is 1798 frames, 18 frame numbers
    are skipped per block.

    Args:
        frame_count (int): The sequential frame count.
        int_framerate (int): The rounded frame rate.
        drop_frames (int): Frame numbers dropped per minute, 0 for non drop.

    Returns:
        int: The display frame count.
    """
    if not drop_frames:
        return frame_count

    frames_per_minute = int_framerate * 60 - drop_frames
    d, m = divmod(frame_count, frames_per_ten_minutes(int_framerate, drop_frames))
    if m < drop_frames:
        m += drop_frames

    return (
        frame_count
        + 9 * drop_frames * d
        + drop_frames * ((m - drop_frames) // frames_per_minute)
    )


def frames_to_parts(
    frame_count: int, int_framerate: int, drop_frames: int = 0
) -> TimecodeParts:
    """Convert a sequential frame count to timecode parts.

    The hours roll over after 24 hours.

    Args:
        frame_count (int): The sequential frame count.
        int_framerate (int): The rounded frame rate.
        drop_frames (int): Frame numbers dropped per minute, 0 for non drop.

    Returns:
        TimecodeParts: The hours, minutes, seconds and frames.
    """
    display = drop_frame_display_count(frame_count, int_framerate, drop_frames)
    secs, frs = divmod(display, int_framerate)
    return TimecodeParts(
        hours=(secs // 3600) % 24,
        minutes=(secs // 60) % 60,
        seconds=secs % 60,
        frames=frs,
    )


def parts_to_frames(
    parts: TimecodeParts, int_framerate: int, drop_frames: int = 0
) -> int:
    """Convert timecode parts to a sequential frame count.

    This is the inverse of :func:`frames_to_parts` for the parts of a valid
    timecode.

    Args:
        parts (TimecodeParts): The timecode parts.
        int_framerate (int): The rounded frame rate.
        drop_frames (int): Frame numbers dropped per minute, 0 for non drop.

    Returns:
        int: The sequential frame count.
    """
    hours, minutes, seconds, frames = parts
    frame_number = (
        (int_framerate * 60 * 60 * hours)
        + (int_framerate * 60 * minutes)
        + (int_framerate * seconds)
        + frames
    )
    total_minutes = (60 * hours) + minutes
    return frame_number - (drop_frames * (total_minutes - (total_minutes // 10)))
