from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

DEFAULT_CHECKPOINT_HOURS: tuple[int, ...] = (8, 12, 18)
DEFAULT_WEEKEND_HOUR = 22


@dataclass(frozen=True)
class WeatherSample:
    timestamp: datetime
    summary: str
    temperature: float
    apparent_temperature: float | None = None

    @property
    def spoken_temperature(self) -> float:
        if self.apparent_temperature is not None:
            return self.apparent_temperature
        return self.temperature


@dataclass(frozen=True)
class WeatherAlert:
    event: str
    start: datetime
    end: datetime

    sender: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class CheckpointPolicy:
    hours: tuple[int, ...] = DEFAULT_CHECKPOINT_HOURS
    add_weekend_hour: bool = False
    weekend_hour: int = DEFAULT_WEEKEND_HOUR


@dataclass(frozen=True)
class WeatherForecast:
    current: WeatherSample
    upcoming: list[WeatherSample] = field(default_factory=list)
    alerts: list[WeatherAlert] = field(default_factory=list)
