"""Exception classes for timecode handling.

All timecode specific exceptions inherit from TimecodeError. The input
validation errors also inherit from ValueError.
"""


class TimecodeError(Exception):
    """Raised when an error occurred in timecode calculation."""


class UnsupportedFramerateError(TimecodeError, ValueError):
    """The frame rate is not one of the supported frame rates."""


class IncompatibleDropFrameError(TimecodeError, ValueError):
    """Drop frame was requested with a frame rate that has no drop frame form."""


class NegativeFrameCountError(TimecodeError, ValueError):
    """A frame count, a seconds value or an arithmetic result is negative."""


class InvalidTimecodeError(TimecodeError, ValueError):
    """The timecode can not exist at the frame rate."""


class InvalidTimecodeFormatError(InvalidTimecodeError):
    """The timecode string is not shaped like a timecode."""


class FramerateMismatchError(TimecodeError):
    """Two timecodes with different frame rates were combined."""

    def __init__(self, left, right) -> None:
        self.left = left
        self.right = right
        super().__init__(
            "Different frame rate timecodes cannot be combined "
            f"({left} != {right})."
        )
