"""
Duration parsing and formatting.

Incident sheets record durations as "H:MM:SS" strings (hours may exceed 24).
Everything downstream works in whole minutes, so every consumer converts
through parse_duration.
"""

import re

_LEADING_INT = re.compile(r"^\s*(\d+)")


def _leading_int(segment: str) -> int:
    match = _LEADING_INT.match(segment)
    return int(match.group(1)) if match else 0


def parse_duration(duration: str) -> int:
    """
    Convert an "H:MM:SS" duration string to whole minutes.

    Seconds are ignored. Each segment contributes its leading digits;
    a missing or non-numeric segment counts as zero, so malformed input
    degrades to a partial or zero value instead of raising.

    Examples:
        "3:50:00" -> 230
        "0:59:59" -> 59
        "12"      -> 720
        "n/a"     -> 0
    """
    parts = (duration or "").split(":")
    hours = _leading_int(parts[0])
    minutes = _leading_int(parts[1]) if len(parts) > 1 else 0
    return hours * 60 + minutes


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_duration(minutes: int) -> str:
    """
    Render minutes for humans: "3 hours 50 minutes", "45 minutes".
    """
    hours, mins = divmod(minutes, 60)
    if hours > 0:
        return f"{_plural(hours, 'hour')} {_plural(mins, 'minute')}"
    return _plural(mins, "minute")
