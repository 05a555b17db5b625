"""Parses the M:S total-duration notation used to time the subtitles."""

import logging
import re

from .exceptions import InvalidDurationFormat

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[0-9]+")

def parse_duration(spec: str, strict_seconds: bool = False) -> float:
    """
    Converts an `M:S` duration string into total seconds.

    Minutes and seconds are non-negative decimal integers; neither needs
    zero-padding ("5:30", "0:05" and "12:7" are all valid). Whitespace
    around either component is ignored.

    A seconds part of 60 or more is not carried into the minutes: "5:90"
    is 5 * 60 + 90 = 390 seconds. With `strict_seconds` set it is rejected
    instead.

    Args:
        spec: The duration string.
        strict_seconds: Reject a seconds part >= 60.

    Returns:
        The total duration in seconds, as a float.

    Raises:
        InvalidDurationFormat: If `spec` is not two integers separated by ':'.
    """
    if spec is None:
        raise InvalidDurationFormat("No duration given. Use M:S, e.g. 5:30.")

    parts = spec.split(":")
    if len(parts) != 2:
        raise InvalidDurationFormat(f"Invalid duration '{spec}'. Use M:S, e.g. 5:30.")

    minutes_part, seconds_part = (part.strip() for part in parts)
    for label, part in (("minutes", minutes_part), ("seconds", seconds_part)):
        if not _INTEGER_PATTERN.fullmatch(part):
            raise InvalidDurationFormat(
                f"Invalid duration '{spec}': {label} must be a non-negative whole number."
            )

    minutes = int(minutes_part)
    seconds = int(seconds_part)

    if seconds >= 60:
        if strict_seconds:
            raise InvalidDurationFormat(
                f"Invalid duration '{spec}': seconds must be less than 60."
            )
        logger.warning(f"Duration '{spec}' has {seconds} seconds; using it as-is ({minutes * 60 + seconds}s total).")

    return float(minutes * 60 + seconds)

def format_duration(total_seconds: float) -> str:
    """Renders whole seconds as canonical M:SS (fractions are dropped)."""
    whole = int(total_seconds)
    return f"{whole // 60}:{whole % 60:02d}"
