"""Conversion of runner-reported durations to milliseconds."""

from __future__ import annotations

import math
import re

from testlens.core.exceptions import DurationFormatError

# NUnit 3 writes seconds as a decimal, e.g. "0.123456"
SECONDS_PATTERN = re.compile(r"^\d+(?:\.\d+)?(?:[eE][-+]?\d+)?$")

# .NET TimeSpan, e.g. "00:01:02.5000000"
TIMESPAN_PATTERN = re.compile(r"^(\d+):(\d\d):(\d\d(?:\.\d+)?)$")


def parse_net_duration(value: str) -> float:
    """Parse a .NET test duration into milliseconds.

    Both decimal seconds (``"1.234"``) and TimeSpan notation
    (``"00:00:01.234"``) are understood.

    Args:
        value: Duration as written in the report.

    Returns:
        Duration in milliseconds.

    Raises:
        DurationFormatError: If ``value`` is not a recognized format.
    """
    text = value.strip()

    if SECONDS_PATTERN.match(text):
        milliseconds = float(text) * 1000
        if not math.isfinite(milliseconds):
            raise DurationFormatError(value)
        return milliseconds

    match = TIMESPAN_PATTERN.match(text)
    if match is None:
        raise DurationFormatError(value)

    hours, minutes, seconds = match.groups()
    return (int(hours) * 3600 + int(minutes) * 60 + float(seconds)) * 1000
