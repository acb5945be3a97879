from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from skyspeak.models.weather import WeatherAlert, WeatherSample
from skyspeak.speech.alerts import summarize
from skyspeak.speech.phrases import clock_phrase

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when there are no weather samples to speak."""


def weather_phrase(sample: WeatherSample) -> str:
    temperature = sample.spoken_temperature
    below = " below" if temperature < 0 else ""
    return f"{round(abs(temperature))}{below} and {sample.summary}"


def _all_same(samples: Sequence[WeatherSample]) -> bool:
    first = samples[0]
    return len(samples) > 1 and all(s == first for s in samples[1:])


def compose(
    samples: Sequence[WeatherSample],
    alerts: Sequence[WeatherAlert] = (),
    *,
    now: datetime | None = None,
) -> str:
    """Build the spoken forecast for ``samples`` (current conditions first).

    ``now`` is only used to phrase alert windows and defaults to the
    timestamp of the first sample.
    """
    if not samples:
        raise EmptyInputError("At least one weather sample is required.")

    if _all_same(samples):
        forecast = f"All day, it will be {weather_phrase(samples[0])}."
        logger.info('Forecast: "%s"', forecast)
        return forecast

    current, *rest = samples
    sentences = [f"It's currently {weather_phrase(current)}."]

    if rest:
        *middle, last = rest
        sentences.extend(
            f"At {clock_phrase(s.timestamp)}, it will be {weather_phrase(s)}."
            for s in middle
        )
        lead = "And at" if middle else "At"
        sentences.append(
            f"{lead} {clock_phrase(last.timestamp)} it will be {weather_phrase(last)}."
        )

    if alerts:
        sentences.append(summarize(alerts, now or current.timestamp))

    forecast = " ".join(sentences)
    logger.info('Forecast: "%s"', forecast)
    return forecast
