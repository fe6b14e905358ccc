"""SMPTE timecode conversions with drop frame support."""

from .exceptions import (
    FramerateMismatchError,
    IncompatibleDropFrameError,
    InvalidTimecodeError,
    InvalidTimecodeFormatError,
    NegativeFrameCountError,
    TimecodeError,
    UnsupportedFramerateError,
)
from .framerate import SUPPORTED_FRAMERATES, FrameRate, is_framerate_supported
from .helpers import TimecodeParts, is_timecode_format_valid
from .logging import configure_logging
from .timecode import (
    Timecode,
    TimecodeBuilder,
    frame_count_from_timecode,
    is_valid_timecode,
)

__version__ = "1.0.0"

__all__ = [
    "FrameRate",
    "FramerateMismatchError",
    "IncompatibleDropFrameError",
    "InvalidTimecodeError",
    "InvalidTimecodeFormatError",
    "NegativeFrameCountError",
    "SUPPORTED_FRAMERATES",
    "Timecode",
    "TimecodeBuilder",
    "TimecodeError",
    "TimecodeParts",
    "UnsupportedFramerateError",
    "configure_logging",
    "frame_count_from_timecode",
    "is_framerate_supported",
    "is_timecode_format_valid",
    "is_valid_timecode",
]
