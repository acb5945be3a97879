from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from skyspeak.models.weather import WeatherAlert, WeatherSample

TZ = ZoneInfo("America/New_York")

# March 2024: the 6th is a Wednesday, the 9th a Saturday.
WEDNESDAY = 6
SATURDAY = 9


def at(hour: int, minute: int = 0, *, day: int = WEDNESDAY) -> datetime:
    return datetime(2024, 3, day, hour, minute, tzinfo=TZ)


def sample(
    hour: int,
    summary: str = "Sunny",
    temperature: float = 50.0,
    *,
    apparent_temperature: float | None = None,
    minute: int = 0,
    day: int = WEDNESDAY,
) -> WeatherSample:
    return WeatherSample(
        timestamp=at(hour, minute, day=day),
        summary=summary,
        temperature=temperature,
        apparent_temperature=apparent_temperature,
    )


def alert(event: str, start: datetime, end: datetime) -> WeatherAlert:
    return WeatherAlert(event=event, start=start, end=end, sender="NWS New York NY")
