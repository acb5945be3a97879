from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from skyspeak.models.weather import CheckpointPolicy, WeatherSample

logger = logging.getLogger(__name__)

SATURDAY = 5
SUNDAY = 6


def select_checkpoint_hours(
    current_time: datetime, policy: CheckpointPolicy | None = None
) -> list[int]:
    policy = policy or CheckpointPolicy()
    hours = set(policy.hours)

    if policy.add_weekend_hour and current_time.weekday() in (SATURDAY, SUNDAY):
        hours.add(policy.weekend_hour)

    ordered = sorted(hours)

    # Keep only hours more than an hour out.
    selected: list[int] = []
    for index, hour in enumerate(ordered):
        if current_time.hour + 1 < hour:
            selected = ordered[index:]
            break

    logger.debug("Hours of interest: %s", selected)
    return selected


def select_samples(
    current: WeatherSample,
    upcoming: Iterable[WeatherSample],
    hours: Iterable[int],
) -> list[WeatherSample]:
    """Current conditions followed by the upcoming samples worth speaking.

    ``upcoming`` must be in chronological order; scanning stops at the first
    sample that falls on a later day than ``current``. Samples at or before
    ``current`` are ignored.
    """
    now = current.timestamp
    wanted = set(hours)
    selected = [current]

    for sample in upcoming:
        timestamp = sample.timestamp
        if timestamp.tzinfo is not None and now.tzinfo is not None:
            timestamp = timestamp.astimezone(now.tzinfo)

        if timestamp.date() > now.date():
            logger.debug("%s is no longer relevant", timestamp.isoformat())
            break

        if timestamp.date() < now.date() or timestamp <= now:
            logger.debug("Skipping past sample: %s", timestamp.isoformat())
            continue

        if timestamp.hour == now.hour:
            logger.debug("Skipping current hour: %s", timestamp.isoformat())
            continue

        if timestamp.hour in wanted:
            selected.append(sample)

    return selected
