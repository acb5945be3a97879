from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from skyspeak.models.weather import WeatherAlert
from skyspeak.speech.phrases import clock_phrase, relative_day_phrase

MAX_SPOKEN_ALERTS = 2


def alert_time_range(alert: WeatherAlert, now: datetime) -> str:
    start, end = alert.start, alert.end
    if end.tzinfo is not None and now.tzinfo is not None:
        now = now.astimezone(end.tzinfo)
        start = start.astimezone(end.tzinfo)

    end_phrase = f"{clock_phrase(end)} {relative_day_phrase(now, end)}"

    # Already in effect: only the end matters.
    if start < now:
        return f"until {end_phrase}"

    if start.date() == end.date():
        return f"from {clock_phrase(start)} through {end_phrase}"

    start_phrase = f"{clock_phrase(start)} {relative_day_phrase(now, start)}"
    return f"from {start_phrase} through {end_phrase}"


def summarize(alerts: Sequence[WeatherAlert], now: datetime) -> str:
    """Speak the first two alerts as given, then a count of the rest."""
    clauses: list[str] = []
    for index, alert in enumerate(alerts[:MAX_SPOKEN_ALERTS]):
        lead = "There is a" if index == 0 else "And a"
        clauses.append(f"{lead} {alert.event.lower()} {alert_time_range(alert, now)}")

    remaining = len(alerts) - MAX_SPOKEN_ALERTS
    if remaining > 0:
        noun = "alert" if remaining == 1 else "alerts"
        clauses.append(f"And {remaining} more {noun}")

    return ". ".join(clauses) + "."
