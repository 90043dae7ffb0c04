"""
Utility functions for the trade signal parser
"""
from typing import Optional
from .base import Duration
from .constants import DURATION_TOKEN_PATTERN, DURATION_UNITS


def contains_marker(message: str, marker: str) -> bool:
    """Case-insensitive substring check"""
    return marker.lower() in message.lower()


def extract_duration(text: str) -> Optional[Duration]:
    """
    Merge every <digits><h|m|s> token in the text into one Duration

    A unit that appears more than once keeps its last value.

    Args:
        text: Text to scan

    Returns:
        Duration, or None when no token matched
    """
    fields = {}
    for value, unit in DURATION_TOKEN_PATTERN.findall(text):
        fields[DURATION_UNITS[unit.lower()]] = int(value)

    if not fields:
        return None

    return Duration(**fields)


def format_duration(duration: Duration) -> str:
    """Render as '1h 5m 0s'"""
    return f"{duration.hours}h {duration.minutes}m {duration.seconds}s"


def parse_duration(text: str) -> Optional[Duration]:
    """Inverse of format_duration"""
    return extract_duration(text)
