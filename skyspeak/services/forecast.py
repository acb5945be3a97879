from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from skyspeak.models.weather import CheckpointPolicy, WeatherForecast
from skyspeak.services.checkpoints import select_checkpoint_hours, select_samples
from skyspeak.speech.composer import compose

logger = logging.getLogger(__name__)

WARMUP_DETAIL_TYPE = "Scheduled Event"


@dataclass(frozen=True)
class ForecastResult:
    text: str
    checkpoint_hours: list[int]
    samples_used: int
    alerts_total: int


class ForecastService:
    def __init__(self, *, policy: CheckpointPolicy | None = None) -> None:
        self._policy = policy or CheckpointPolicy()

    @property
    def policy(self) -> CheckpointPolicy:
        return self._policy

    def build(self, forecast: WeatherForecast, *, now: datetime | None = None) -> ForecastResult:
        current = forecast.current
        hours = select_checkpoint_hours(current.timestamp, self._policy)
        samples = select_samples(current, forecast.upcoming, hours)
        for sample in samples:
            logger.debug("%s", sample)

        text = compose(samples, forecast.alerts, now=now or current.timestamp)
        return ForecastResult(
            text=text,
            checkpoint_hours=hours,
            samples_used=len(samples),
            alerts_total=len(forecast.alerts),
        )


def speech_envelope(text: str) -> dict[str, Any]:
    return {
        "version": "1.0",
        "response": {
            "outputSpeech": {
                "type": "PlainText",
                "text": text,
            }
        },
    }


def is_warmup_event(event: Any) -> bool:
    if not isinstance(event, dict):
        return False
    return event.get("detail-type") == WARMUP_DETAIL_TYPE
