from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from skyspeak.core.config import Settings
from skyspeak.models.weather import CheckpointPolicy
from skyspeak.schemas.forecast import ForecastRequest


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_checkpoint_policy(
    settings: Annotated[Settings, Depends(get_settings)],
) -> CheckpointPolicy:
    return settings.checkpoint_policy()


def policy_for_request(base: CheckpointPolicy, payload: ForecastRequest) -> CheckpointPolicy:
    return CheckpointPolicy(
        hours=tuple(payload.checkpoint_hours) if payload.checkpoint_hours else base.hours,
        add_weekend_hour=(
            base.add_weekend_hour
            if payload.add_weekend_hour is None
            else payload.add_weekend_hour
        ),
        weekend_hour=base.weekend_hour,
    )

