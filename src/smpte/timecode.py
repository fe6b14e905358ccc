"""Timecode class for handling timecode calculations."""

# Standard Library Imports
from __future__ import annotations

import datetime
import logging
import math
import sys
from collections.abc import Mapping
from fractions import Fraction

from .exceptions import (
    FramerateMismatchError,
    IncompatibleDropFrameError,
    InvalidTimecodeError,
    InvalidTimecodeFormatError,
    NegativeFrameCountError,
    TimecodeError,
    UnsupportedFramerateError,
)
from .framerate import (
    DROP_FRAME_RATES,
    FrameRate,
    drop_frames_per_minute,
    is_framerate_supported,
    parse_framerate,
)
from .helpers import (
    TimecodeParts,
    _Framerate,
    frames_per_day,
    frames_to_parts,
    is_dropped_frame_number,
    is_timecode_format_valid,
    join_parts,
    pad_number,
    parts_to_frames,
    split_timecode,
    to_parts,
)

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)

DEFAULT_FRAMERATE = FrameRate.FR_24
DEFAULT_DROP_FRAME = False

_PART_LIMITS = {"hours": 24, "minutes": 60, "seconds": 60}


def _check_framerate(framerate: _Framerate, drop_frame: bool) -> tuple[Fraction, bool]:
    """Validate the frame rate and the drop frame setting together.

    Raises:
        UnsupportedFramerateError: If the frame rate is not supported.
        IncompatibleDropFrameError: If drop frame is used with a frame rate
            other than 29.97 or 59.94.

    Returns:
        tuple: The exact frame rate and the drop frame flag.
    """
    fps = parse_framerate(framerate)
    if drop_frame and fps not in DROP_FRAME_RATES:
        raise IncompatibleDropFrameError(
            "Only 29.97 and 59.94 frame rates have drop frame support, "
            f"not {float(fps):.3f}"
        )
    return fps, bool(drop_frame)


def is_valid_timecode(
    timecode: str,
    framerate: _Framerate | None = None,
    drop_frame: bool = False,
) -> bool:
    """Check if a timecode can exist at the given frame rate.

    Args:
        timecode (str): The timecode string to check.
        framerate (_Framerate | None): The frame rate. If None, the frames
            field is only checked structurally and drop frame assumes 29.97.
        drop_frame (bool): True if the timecode uses drop frame numbering.

    Returns:
        bool: True if the timecode has a valid format, its frames field is
            below the rounded frame rate and it is not one of the frame numbers
            skipped by drop frame.
    """
    if not is_timecode_format_valid(timecode, drop_frame):
        return False

    parts = split_timecode(timecode)

    if framerate is None:
        fps = FrameRate.FR_29_97
    else:
        try:
            fps, drop_frame = _check_framerate(framerate, drop_frame)
        except (UnsupportedFramerateError, IncompatibleDropFrameError):
            return False

        if parts.frames >= round(fps):
            return False

    if drop_frame and is_dropped_frame_number(parts, drop_frames_per_minute(fps)):
        return False

    return True


def frame_count_from_timecode(
    timecode: str,
    framerate: _Framerate = DEFAULT_FRAMERATE,
    drop_frame: bool = DEFAULT_DROP_FRAME,
) -> int:
    """Convert a timecode string to the sequential frame count.

    Args:
        timecode (str): The timecode string, "HH:MM:SS:FF" or, for drop frame,
            "HH:MM:SS;FF" or "HH;MM;SS;FF".
        framerate (_Framerate): The frame rate.
        drop_frame (bool): True if the timecode uses drop frame numbering.

    Raises:
        InvalidTimecodeFormatError: If the string is not shaped like a timecode.
        InvalidTimecodeError: If the timecode can not exist at the frame rate.

    Returns:
        int: The number of frames since 00:00:00:00.
    """
    fps, drop_frame = _check_framerate(framerate, drop_frame)

    if not is_timecode_format_valid(timecode, drop_frame):
        raise InvalidTimecodeFormatError(f"Invalid timecode string: {timecode!r}")

    if not is_valid_timecode(timecode, fps, drop_frame):
        raise InvalidTimecodeError(
            f"Invalid timecode {timecode!r} at {float(fps):.3f} fps"
            + (" drop frame" if drop_frame else "")
        )

    drop_frames = drop_frames_per_minute(fps) if drop_frame else 0
    return parts_to_frames(split_timecode(timecode), round(fps), drop_frames)


#%%
class Timecode:
    """The main timecode class.

    Does all the calculation over frames, so the main data it holds is the
    frame count, then when required it converts the frame count to timecode
    fields by using the frame rate setting.

    At most one of ``start_timecode``, ``frame_count``, ``parts``,
    ``start_datetime`` and ``start_seconds`` can be given, if none is given the
    timecode is '00:00:00:00'.

    Args:
        framerate (Fraction | str | int | float | tuple): The frame rate of the
            Timecode instance, one of 23.976, 24, 25, 29.97, 30, 50, 59.94 or
            60. NTSC rates can be given approximately (29.97, '23.98') or
            exactly (Fraction(30000, 1001), '30000/1001', (30000, 1001)).
            Defaults to 24.
        start_timecode (None | str | Timecode): A timecode string like
            '01:00:00:00', or '01:00:00;00' for drop frame, or a Timecode
            instance with the same frame rate.
        frame_count (int): The number of frames since 00:00:00:00.
        parts (TimecodeParts | Mapping | tuple): The hours, minutes, seconds and
            frames of the timecode. Missing mapping keys default to 0.
        start_datetime (datetime.datetime | datetime.time): A time of day, the
            time since midnight is converted to frames.
        start_seconds (int | float | Fraction): The seconds since 00:00:00:00.
        drop_frame (bool): Use drop frame numbering. Only valid with 29.97 and
            59.94. It is False by default.
    """

    def __init__(
        self,
        framerate: _Framerate = DEFAULT_FRAMERATE,
        start_timecode: str | Timecode | None = None,
        frame_count: int | None = None,
        parts: TimecodeParts | Mapping | tuple | None = None,
        start_datetime: datetime.datetime | datetime.time | None = None,
        start_seconds: float | Fraction | None = None,
        drop_frame: bool = DEFAULT_DROP_FRAME,
    ) -> None:
        self._framerate, self._drop_frame = _check_framerate(framerate, drop_frame)
        self._frame_count = 0

        self._dispatch_set_frames(
            start_timecode=start_timecode,
            frame_count=frame_count,
            parts=parts,
            start_datetime=start_datetime,
            start_seconds=start_seconds,
        )

    def _dispatch_set_frames(self, **kwargs) -> None:
        """Helper to dispatch the arguments to set the Timecode frame count.

        Args:
            kwargs (dict): The possible sources of the frame count, at most one
                of them can be different than None.

        Raises:
            TimecodeError: If more than one source is given.
        """
        given = [name for name, value in kwargs.items() if value is not None]
        if len(given) > 1:
            raise TimecodeError(
                f"Only one of {', '.join(kwargs)} can be given, got "
                f"{', '.join(given)}"
            )

        if (start_timecode := kwargs.get("start_timecode")) is not None:
            self.frame_count = self._frames_from_timecode(start_timecode)
        elif (frame_count := kwargs.get("frame_count")) is not None:
            self.frame_count = self._frames_from_number(frame_count)
        elif (parts := kwargs.get("parts")) is not None:
            self.frame_count = self._frames_from_parts(parts)
        elif (start_datetime := kwargs.get("start_datetime")) is not None:
            self.frame_count = self._frames_from_datetime(start_datetime)
        elif (start_seconds := kwargs.get("start_seconds")) is not None:
            self.frame_count = self._frames_from_seconds(start_seconds)

    @classmethod
    def from_frames(
        cls,
        frame_count: int,
        framerate: _Framerate = DEFAULT_FRAMERATE,
        drop_frame: bool = DEFAULT_DROP_FRAME,
    ) -> Self:
        """Create a Timecode from a frame count, floats are floored."""
        return cls(framerate, frame_count=frame_count, drop_frame=drop_frame)

    @classmethod
    def from_timecode(
        cls,
        timecode: str | Timecode,
        framerate: _Framerate = DEFAULT_FRAMERATE,
        drop_frame: bool = DEFAULT_DROP_FRAME,
    ) -> Self:
        """Create a Timecode from a timecode string."""
        return cls(framerate, start_timecode=timecode, drop_frame=drop_frame)

    @classmethod
    def from_parts(
        cls,
        parts: TimecodeParts | Mapping | tuple,
        framerate: _Framerate = DEFAULT_FRAMERATE,
        drop_frame: bool = DEFAULT_DROP_FRAME,
    ) -> Self:
        """Create a Timecode from hours, minutes, seconds and frames."""
        return cls(framerate, parts=parts, drop_frame=drop_frame)

    @classmethod
    def from_datetime(
        cls,
        value: datetime.datetime | datetime.time,
        framerate: _Framerate = DEFAULT_FRAMERATE,
        drop_frame: bool = DEFAULT_DROP_FRAME,
    ) -> Self:
        """Create a Timecode from the time of day of a datetime or time."""
        return cls(framerate, start_datetime=value, drop_frame=drop_frame)

    @classmethod
    def from_seconds(
        cls,
        seconds: float | Fraction,
        framerate: _Framerate = DEFAULT_FRAMERATE,
        drop_frame: bool = DEFAULT_DROP_FRAME,
    ) -> Self:
        """Create a Timecode from the elapsed seconds."""
        return cls(framerate, start_seconds=seconds, drop_frame=drop_frame)

    def _frames_from_timecode(self, timecode: str | Timecode) -> int:
        """Convert the given timecode string or Timecode to frames."""
        if isinstance(timecode, Timecode):
            if timecode.framerate != self.framerate:
                raise FramerateMismatchError(self.framerate, timecode.framerate)
            return timecode.frame_count

        if not isinstance(timecode, str):
            raise TypeError(
                "start_timecode should be a str or a Timecode, not "
                f"{timecode.__class__.__name__}"
            )
        return frame_count_from_timecode(timecode, self.framerate, self.drop_frame)

    @staticmethod
    def _frames_from_number(frame_count: int | float) -> int:
        """Validate a numeric frame count, floats are floored."""
        if isinstance(frame_count, bool) or not isinstance(
            frame_count, (int, float, Fraction)
        ):
            raise TypeError(
                "frame_count should be a number, not "
                f"{frame_count.__class__.__name__}"
            )
        if frame_count < 0:
            raise NegativeFrameCountError(
                f"Negative frame count not supported, got {frame_count}"
            )
        return math.floor(frame_count)

    def _frames_from_parts(self, parts: TimecodeParts | Mapping | tuple) -> int:
        """Convert the given parts to frames through their timecode string."""
        timecode = join_parts(to_parts(parts), self.drop_frame)
        return frame_count_from_timecode(timecode, self.framerate, self.drop_frame)

    def _frames_from_datetime(self, value: datetime.datetime | datetime.time) -> int:
        """Convert the time since midnight to frames.

        No drop frame correction applies, the time is scaled by the exact
        frame rate and floored.
        """
        if isinstance(value, datetime.datetime):
            value = value.time()
        elif not isinstance(value, datetime.time):
            raise TypeError(
                "start_datetime should be a datetime or a time, not "
                f"{value.__class__.__name__}"
            )

        microseconds = (
            (value.hour * 60 + value.minute) * 60 + value.second
        ) * 1_000_000 + value.microsecond
        return math.floor(Fraction(microseconds, 1_000_000) * self.framerate)

    def _frames_from_seconds(self, seconds: float | Fraction) -> int:
        """Convert seconds to frames with the exact frame rate, rounding half up."""
        if seconds < 0:
            raise NegativeFrameCountError(
                f"Negative seconds not supported, got {seconds}"
            )
        return math.floor(Fraction(seconds) * self.framerate + Fraction(1, 2))

    @property
    def framerate(self) -> Fraction:
        """Return the frame rate, as a fraction of two integers."""
        return self._framerate

    @property
    def drop_frame(self) -> bool:
        """Return True if this Timecode uses drop frame numbering."""
        return self._drop_frame

    @property
    def rounded_framerate(self) -> int:
        """Return the frame rate rounded to the nearest integer."""
        return round(self._framerate)

    @property
    def _drop_frames(self) -> int:
        return drop_frames_per_minute(self._framerate) if self._drop_frame else 0

    @property
    def frames_per_day(self) -> int:
        """Return the number of frames after which the displayed timecode rolls over."""
        return frames_per_day(self.rounded_framerate, self._drop_frames)

    @property
    def frame_count(self) -> int:
        """Return the number of frames since 00:00:00:00.

        Returns:
            int: The frame count. It is not reduced after 24 hours, only the
                displayed fields roll over.
        """
        return self._frame_count

    @frame_count.setter
    def frame_count(self, frame_count: int) -> None:
        """Set the frame count.

        Args:
            frame_count (int): A positive integer or zero.
        """
        if isinstance(frame_count, bool) or not isinstance(frame_count, int):
            raise TypeError(
                f"{self.__class__.__name__}.frame_count should be a positive "
                f"integer, not a {frame_count.__class__.__name__}"
            )

        if frame_count < 0:
            raise NegativeFrameCountError(
                f"{self.__class__.__name__}.frame_count should be a positive "
                f"integer, not {frame_count}"
            )
        self._frame_count = frame_count

    @property
    def parts(self) -> TimecodeParts:
        """Return the hours, minutes, seconds and frames of this Timecode."""
        return frames_to_parts(
            self._frame_count, self.rounded_framerate, self._drop_frames
        )

    @parts.setter
    def parts(self, parts: TimecodeParts | Mapping | tuple) -> None:
        self._frame_count = self._validated_frames(to_parts(parts))

    def _validated_frames(self, parts: TimecodeParts) -> int:
        """Validate the parts and return their frame count.

        Raises:
            InvalidTimecodeError: If a field is out of range or the parts show
                a frame number skipped by drop frame.
        """
        limits = dict(_PART_LIMITS, frames=self.rounded_framerate)
        for name, value in zip(parts._fields, parts):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"Timecode {name} should be an integer, not "
                    f"{value.__class__.__name__}"
                )
            if not 0 <= value < limits[name]:
                raise InvalidTimecodeError(
                    f"Timecode {name} should be between 0 and "
                    f"{limits[name] - 1}, not {value}"
                )

        if self._drop_frame and is_dropped_frame_number(parts, self._drop_frames):
            raise InvalidTimecodeError(
                f"Frame {pad_number(parts.frames)} does not exist at "
                f"{pad_number(parts.hours)}:{pad_number(parts.minutes)}:"
                f"{pad_number(parts.seconds)} in drop frame"
            )
        return parts_to_frames(parts, self.rounded_framerate, self._drop_frames)

    @property
    def hours(self) -> int:
        """Return the hours part of the timecode."""
        return self.parts.hours

    @hours.setter
    def hours(self, value: int) -> None:
        self._frame_count = self._validated_frames(self.parts._replace(hours=value))

    @property
    def minutes(self) -> int:
        """Return the minutes part of the timecode."""
        return self.parts.minutes

    @minutes.setter
    def minutes(self, value: int) -> None:
        self._frame_count = self._validated_frames(self.parts._replace(minutes=value))

    @property
    def seconds(self) -> int:
        """Return the seconds part of the timecode."""
        return self.parts.seconds

    @seconds.setter
    def seconds(self, value: int) -> None:
        self._frame_count = self._validated_frames(self.parts._replace(seconds=value))

    @property
    def frames(self) -> int:
        """Return the frames part of the timecode."""
        return self.parts.frames

    @frames.setter
    def frames(self, value: int) -> None:
        self._frame_count = self._validated_frames(self.parts._replace(frames=value))

    @property
    def exact_duration(self) -> Fraction:
        """Return the duration since 00:00:00:00 in seconds, as a fraction."""
        return self._frame_count / self._framerate

    @property
    def duration_in_seconds(self) -> float:
        """Return the duration since 00:00:00:00 in seconds."""
        return float(self.exact_duration)

    @property
    def frame_delimiter(self) -> str:
        """Return ";" if this is a drop frame timecode or ":" otherwise."""
        return ";" if self._drop_frame else ":"

    def to_string(self, fmt: str | None = None) -> str:
        """Return the timecode as a string.

        Args:
            fmt (str | None): A timecode shaped template like '00;00;00;00'
                whose separators are used. The template must be a valid format
                for the drop frame setting of this Timecode. If None, ":" is
                used, with ";" before the frames for drop frame.

        Raises:
            InvalidTimecodeFormatError: If the template is not a valid format.

        Returns:
            str: The timecode string.
        """
        if fmt is None:
            separators = (":", ":", self.frame_delimiter)
        elif is_timecode_format_valid(fmt, self._drop_frame):
            separators = (fmt[2], fmt[5], fmt[8])
        else:
            raise InvalidTimecodeFormatError(f"Invalid timecode format: {fmt!r}")

        hrs, mins, secs, frs = map(pad_number, self.parts)
        return f"{hrs}{separators[0]}{mins}{separators[1]}{secs}{separators[2]}{frs}"

    def to_datetime(self, day: datetime.date | None = None) -> datetime.datetime:
        """Convert this Timecode to a datetime.

        Args:
            day (datetime.date | None): The day whose midnight is 00:00:00:00,
                defaults to today.

        Returns:
            datetime.datetime: Midnight plus the duration of this Timecode,
                rounded up to the microsecond so :meth:`from_datetime` gives
                back the same frame.
        """
        if day is None:
            day = datetime.date.today()
        midnight = datetime.datetime.combine(day, datetime.time())
        microseconds = math.ceil(self.exact_duration * 1_000_000)
        return midnight + datetime.timedelta(microseconds=microseconds)

    def wrapped(self) -> Self:
        """Return a new Timecode with the frame count reduced to a single day."""
        return self.__class__(
            self._framerate,
            frame_count=self._frame_count % self.frames_per_day,
            drop_frame=self._drop_frame,
        )

    def copy(self) -> Self:
        """Return a new Timecode with the same settings and frame count."""
        return self.__class__(
            self._framerate,
            frame_count=self._frame_count,
            drop_frame=self._drop_frame,
        )

    def _to_operand(self, other: int | str | Mapping | tuple | Timecode) -> Timecode:
        """Convert an arithmetic operand to a Timecode with this frame rate.

        Raises:
            FramerateMismatchError: If other is a Timecode with another frame
                rate.
            TimecodeError: If the type of other is not supported.
        """
        if isinstance(other, Timecode):
            if other.framerate != self._framerate:
                raise FramerateMismatchError(self._framerate, other.framerate)
            return other

        settings = {"framerate": self._framerate, "drop_frame": self._drop_frame}
        if isinstance(other, str):
            return Timecode(start_timecode=other, **settings)
        if isinstance(other, int) and not isinstance(other, bool):
            return Timecode(frame_count=other, **settings)
        if isinstance(other, (Mapping, tuple, list)):
            return Timecode(parts=other, **settings)
        raise TimecodeError(
            "Timecode operations can only be made between Timecode objects, "
            f"frame counts, timecode strings or parts, not {other.__class__.__name__}"
        )

    def add(
        self,
        other: int | str | Mapping | tuple | Timecode,
        compensate_drop: bool = False,
    ) -> Self:
        """Add a timecode or a frame count to this Timecode.

        Args:
            other (int | str | Mapping | tuple | Timecode): A frame count, a
                timecode string, timecode parts or a Timecode with the same
                frame rate.
            compensate_drop (bool): For drop frame timecodes, when both this
                Timecode and other show a frame number past the dropped ones,
                add the dropped frame numbers only once. Plain frame count
                addition is used otherwise.

        Returns:
            Timecode: This Timecode instance.
        """
        operand = self._to_operand(other)
        frame_count = operand.frame_count

        drop_frames = self._drop_frames
        if (
            compensate_drop
            and drop_frames
            and self.frames >= drop_frames
            and operand.frames >= drop_frames
        ):
            logger.debug(
                "Compensating %d dropped frames adding %s to %s",
                drop_frames, operand, self,
            )
            frame_count -= drop_frames

        self.frame_count = self._frame_count + frame_count
        return self

    def subtract(
        self,
        other: int | str | Mapping | tuple | Timecode,
        clamp: bool = False,
    ) -> Self:
        """Subtract a timecode or a frame count from this Timecode.

        Args:
            other (int | str | Mapping | tuple | Timecode): A frame count, a
                timecode string, timecode parts or a Timecode with the same
                frame rate.
            clamp (bool): If True a negative result becomes 0.

        Raises:
            NegativeFrameCountError: If the result is negative and clamp is
                False.

        Returns:
            Timecode: This Timecode instance.
        """
        frame_count = self._frame_count - self._to_operand(other).frame_count
        if frame_count < 0:
            if not clamp:
                raise NegativeFrameCountError(
                    f"Subtracting {other!r} from {self} gives a negative frame "
                    f"count ({frame_count})"
                )
            logger.debug("Clamped frame count %d to 0", frame_count)
            frame_count = 0

        self.frame_count = frame_count
        return self

    def add_from_seconds(self, seconds: float | Fraction) -> Self:
        """Add a number of seconds to this Timecode."""
        return self.add(
            Timecode.from_seconds(seconds, self._framerate, self._drop_frame)
        )

    def subtract_from_seconds(self, seconds: float | Fraction, clamp: bool = False) -> Self:
        """Subtract a number of seconds from this Timecode."""
        return self.subtract(
            Timecode.from_seconds(seconds, self._framerate, self._drop_frame),
            clamp=clamp,
        )

    def next(self) -> Self:
        """Add one frame to this Timecode to go the next frame.

        Returns:
            Timecode: Returns self.
        """
        return self.add(1)

    def back(self) -> Self:
        """Subtract one frame from this Timecode to go back one frame.

        Returns:
            Timecode: Returns self.
        """
        return self.subtract(1)

    def __add__(self, other: int | str | Mapping | tuple | Timecode) -> Timecode:
        """Return a new Timecode with the given timecode or frames added to this one.

        Raises:
            TimecodeError: If the other is not a supported operand.
        """
        return self.copy().add(other)

    def __sub__(self, other: int | str | Mapping | tuple | Timecode) -> Timecode:
        """Return a new Timecode with the given timecode or frames subtracted.

        Raises:
            NegativeFrameCountError: If the result is negative.
        """
        return self.copy().subtract(other)

    def _comparable_frames(self, other: int | str | Timecode | object) -> int | None:
        """Return the frame count to compare other with, None if not comparable."""
        if isinstance(other, Timecode):
            if other.framerate != self._framerate:
                raise FramerateMismatchError(self._framerate, other.framerate)
            return other.frame_count
        if isinstance(other, str):
            return frame_count_from_timecode(other, self._framerate, self._drop_frame)
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: int | str | Timecode | object) -> bool:
        """Override the equality operator.

        Args:
            other (int | str | Timecode): Either an int representing the
                number of frames, a str representing a timecode with the same
                frame rate of this one, or a Timecode.

        Returns:
            bool: True if the other is equal to this Timecode instance.
                Timecodes with different frame rates are never equal.
        """
        if isinstance(other, Timecode):
            return (
                self._framerate == other.framerate
                and self._frame_count == other.frame_count
            )
        if isinstance(other, str):
            return (
                is_valid_timecode(other, self._framerate, self._drop_frame)
                and self._frame_count == self._comparable_frames(other)
            )
        if isinstance(other, int) and not isinstance(other, bool):
            return self._frame_count == other
        return NotImplemented

    def __lt__(self, other: int | str | Timecode) -> bool:
        """Override less than operator."""
        frame_count = self._comparable_frames(other)
        if frame_count is None:
            return NotImplemented
        return self._frame_count < frame_count

    def __le__(self, other: int | str | Timecode) -> bool:
        """Override less or equal to operator."""
        frame_count = self._comparable_frames(other)
        if frame_count is None:
            return NotImplemented
        return self._frame_count <= frame_count

    def __gt__(self, other: int | str | Timecode) -> bool:
        """Override greater than operator."""
        frame_count = self._comparable_frames(other)
        if frame_count is None:
            return NotImplemented
        return self._frame_count > frame_count

    def __ge__(self, other: int | str | Timecode) -> bool:
        """Override greater than or equal to operator."""
        frame_count = self._comparable_frames(other)
        if frame_count is None:
            return NotImplemented
        return self._frame_count >= frame_count

    def __int__(self) -> int:
        return self._frame_count

    def __float__(self) -> float:
        """Convert this Timecode instance to a float representation (seconds)."""
        return self.duration_in_seconds

    def __str__(self) -> str:
        """Return the actual Timecode as a string."""
        return self.to_string()

    def __repr__(self) -> str:
        """Return the string representation of this Timecode instance."""
        # use frame_count= as that is agnostic to the day rollover
        drop_part = ", drop_frame=True" * self._drop_frame
        return (
            f"{__class__.__name__}('{self._framerate}', "
            f"frame_count={self._frame_count}{drop_part})"
        )

    is_timecode_format_valid = staticmethod(is_timecode_format_valid)
    is_valid_timecode = staticmethod(is_valid_timecode)
    is_framerate_supported = staticmethod(is_framerate_supported)
    frame_count_from_timecode = staticmethod(frame_count_from_timecode)
####

#%%
class TimecodeBuilder:
    """Helper class to pre-configure instantiation of Timecodes.

    A list of kwargs of class Timecode can be provided to the builder, which
    will be used when the builder instance is called to create new Timecodes.
    The frame rate and drop frame settings are validated when the builder is
    created.

    Args:
        kwargs (dict): list of pre-configured arguments for the Timecodes
        instantiated by calling this builder. Refer to Timecode docu.
    """

    def __init__(self, **kwargs) -> None:
        if "framerate" in kwargs or "drop_frame" in kwargs:
            kwargs["framerate"], kwargs["drop_frame"] = _check_framerate(
                kwargs.get("framerate", DEFAULT_FRAMERATE),
                kwargs.get("drop_frame", DEFAULT_DROP_FRAME),
            )
        self.kwargs = kwargs

    def __call__(self, *args, **kwargs) -> Timecode:
        """Create a Timecode combining the preconfigured and user arguments.

        Returns:
            Timecode: timecode instance given the arguments.
        """
        kwargs = self.kwargs | kwargs
        return Timecode(*args, **kwargs)

    def with_options(self, **kwargs) -> TimecodeBuilder:
        """Return a new builder with the given arguments added to these ones."""
        return TimecodeBuilder(**(self.kwargs | kwargs))
####
