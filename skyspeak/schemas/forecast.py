from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Annotated
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

from skyspeak.models.weather import WeatherAlert, WeatherForecast, WeatherSample

Hour = Annotated[int, Field(ge=0, le=23)]


def localize(dt: datetime, tz: tzinfo) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


class SampleIn(BaseModel):
    timestamp: datetime
    summary: str = Field(min_length=1, max_length=128)
    temperature: float
    apparent_temperature: float | None = None

    def to_model(self, tz: tzinfo) -> WeatherSample:
        return WeatherSample(
            timestamp=localize(self.timestamp, tz),
            summary=self.summary,
            temperature=self.temperature,
            apparent_temperature=self.apparent_temperature,
        )


class AlertIn(BaseModel):
    event: str = Field(min_length=1, max_length=128)
    start: datetime
    end: datetime
    sender: str | None = None
    description: str | None = None

    def to_model(self, tz: tzinfo) -> WeatherAlert:
        return WeatherAlert(
            event=self.event,
            start=localize(self.start, tz),
            end=localize(self.end, tz),
            sender=self.sender,
            description=self.description,
        )


class ForecastRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    timezone: str | None = Field(
        default=None,
        description="IANA timezone of the forecast location; defaults to the server setting.",
    )
    now: datetime | None = Field(
        default=None,
        description="Reference time for alert phrasing; defaults to the current sample.",
    )
    current: SampleIn
    upcoming: list[SampleIn] = Field(default_factory=list, max_length=240)
    alerts: list[AlertIn] = Field(default_factory=list, max_length=64)

    checkpoint_hours: list[Hour] | None = Field(default=None, min_length=1, max_length=24)
    add_weekend_hour: bool | None = None

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, v: str | None) -> str | None:
        if v is None:
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}'.") from e
        return v

    def resolve_timezone(self, default: str) -> ZoneInfo:
        return ZoneInfo(self.timezone or default)

    def to_forecast(self, tz: tzinfo) -> WeatherForecast:
        return WeatherForecast(
            current=self.current.to_model(tz),
            upcoming=[s.to_model(tz) for s in self.upcoming],
            alerts=[a.to_model(tz) for a in self.alerts],
        )


class ForecastResponse(BaseModel):
    text: str
    checkpoint_hours: list[int] = Field(default_factory=list)
    samples_used: int = Field(ge=1)
    alerts_total: int = Field(ge=0)


class OutputSpeech(BaseModel):
    type: str = "PlainText"
    text: str


class SpeechResponseBody(BaseModel):
    outputSpeech: OutputSpeech


class SpeechResponse(BaseModel):
    version: str = "1.0"
    response: SpeechResponseBody
