from __future__ import annotations

from datetime import datetime

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def clock_phrase(dt: datetime) -> str:
    """Speakable hour of ``dt``: "midnight", "noon", or e.g. "8 AM" / "6 PM"."""
    if dt.hour == 0:
        return "midnight"
    if dt.hour == 12:
        return "noon"
    hour = dt.hour % 12 or 12
    meridiem = "PM" if dt.hour >= 12 else "AM"
    return f"{hour} {meridiem}"


def day_offset(now: datetime, target: datetime) -> int:
    if target.tzinfo is not None and now.tzinfo is not None:
        now = now.astimezone(target.tzinfo)
    return (target.date() - now.date()).days


def relative_day_phrase(now: datetime, target: datetime) -> str:
    """Speakable day of ``target`` relative to ``now``.

    Both are compared as calendar dates in the target's timezone. Anything
    further out than a day either way falls back to the weekday name, which
    does not distinguish this week from next.
    """
    offset = day_offset(now, target)
    if offset == 0:
        return "today"
    if offset == 1:
        return "tomorrow"
    if offset == -1:
        return "yesterday"
    return WEEKDAY_NAMES[target.weekday()]
