"""Logging configuration for the smpte package.

Every module logs through a child of the ``smpte`` logger. The library only
attaches a NullHandler, applications call :func:`configure_logging` or set up
logging themselves.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("smpte")
logger.addHandler(logging.NullHandler())


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the smpte package.

    Args:
        verbose: If True, enable DEBUG level logging; otherwise WARNING level
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s",
    )
    logger.setLevel(level)
