"""
Derived workout metrics.

Pure arithmetic over the raw form values: training volume and session
duration, plus the lenient number parsing the form relies on.
"""

import re
import datetime
import logging
from typing import Any, Optional, Union

from treino_core.constants import DATE_FORMAT, TIME_RE, MINUTES_PER_DAY

logger = logging.getLogger(__name__)

_FLOAT_PREFIX_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_INT_PREFIX_RE = re.compile(r'^[+-]?\d+')

Number = Union[int, float]


def parse_float(value: Any) -> Optional[float]:
    """
    Parse the leading decimal number of a value.

    Numbers pass through, strings are read up to the first character that
    cannot belong to a number ("12.5kg" -> 12.5). Returns None when there is
    no leading number at all.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if value is None:
        return None
    match = _FLOAT_PREFIX_RE.match(str(value).strip())
    if not match:
        return None
    return float(match.group(0))


def parse_int(value: Any) -> Optional[int]:
    """Parse the leading integer of a value ("3.7" -> 3), or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if value is None:
        return None
    match = _INT_PREFIX_RE.match(str(value).strip())
    if not match:
        return None
    return int(match.group(0))


def calculate_volume(sets: Any, reps: Any, weight: Any) -> float:
    """
    Calculate training volume (sets x reps x weight).

    Args:
        sets: Number of sets
        reps: Repetitions per set
        weight: Load in kg

    Returns:
        The volume, or 0 if any input is not numeric
    """
    s = parse_float(sets)
    r = parse_float(reps)
    w = parse_float(weight)
    if s is None or r is None or w is None:
        return 0
    return s * r * w


def _minutes_of_day(value: str) -> int:
    match = TIME_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid time of day: {value!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Invalid time of day: {value!r}")
    return hours * 60 + minutes


def normalize_time(value: str) -> str:
    """Rewrite a time of day as zero-padded HH:MM ("9:05" -> "09:05")."""
    hours, minutes = divmod(_minutes_of_day(value), 60)
    return f"{hours:02d}:{minutes:02d}"


def normalize_date(value: str) -> str:
    """
    Rewrite a calendar date as zero-padded YYYY-MM-DD ("2024-5-9" -> "2024-05-09").

    Raises:
        ValueError: If the value is not a valid date
    """
    try:
        parsed = datetime.datetime.strptime(value.strip(), DATE_FORMAT)
    except ValueError:
        raise ValueError(f"Invalid date: {value!r}")
    return parsed.strftime(DATE_FORMAT)


def calculate_duration(start: Optional[str], end: Optional[str]) -> str:
    """
    Calculate a session duration as HH:MM from start and end times.

    An end earlier than the start means the session crossed midnight, so a
    full day is added before taking the difference.

    Args:
        start: Start time (HH:MM)
        end: End time (HH:MM)

    Returns:
        Duration formatted as HH:MM, or an empty string if either time is missing
    """
    if not start or not end:
        return ""
    diff = _minutes_of_day(end) - _minutes_of_day(start)
    if diff < 0:
        diff += MINUTES_PER_DAY
    hours, minutes = divmod(diff, 60)
    return f"{hours:02d}:{minutes:02d}"


def format_decimal(value: Number) -> str:
    """Format a number with two decimals, as volumes and loads are displayed."""
    return f"{value:.2f}"
