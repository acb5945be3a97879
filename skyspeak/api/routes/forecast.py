from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from skyspeak.api.deps import get_checkpoint_policy, get_settings, policy_for_request
from skyspeak.core.config import Settings
from skyspeak.models.weather import CheckpointPolicy
from skyspeak.schemas.forecast import (
    ForecastRequest,
    ForecastResponse,
    SpeechResponse,
    localize,
)
from skyspeak.services.forecast import (
    ForecastResult,
    ForecastService,
    is_warmup_event,
    speech_envelope,
)

router = APIRouter(prefix="/forecast")


def _build(
    payload: ForecastRequest, settings: Settings, policy: CheckpointPolicy
) -> ForecastResult:
    tz = payload.resolve_timezone(settings.default_timezone)
    forecast = payload.to_forecast(tz)
    now = localize(payload.now, tz) if payload.now is not None else None

    service = ForecastService(policy=policy_for_request(policy, payload))
    return service.build(forecast, now=now)


@router.post("", response_model=ForecastResponse)
def forecast(
    payload: ForecastRequest,
    settings: Annotated[Settings, Depends(get_settings)],
    policy: Annotated[CheckpointPolicy, Depends(get_checkpoint_policy)],
) -> ForecastResponse:
    result = _build(payload, settings, policy)
    return ForecastResponse(
        text=result.text,
        checkpoint_hours=result.checkpoint_hours,
        samples_used=result.samples_used,
        alerts_total=result.alerts_total,
    )


@router.post("/speech", response_model=SpeechResponse)
def forecast_speech(
    payload: ForecastRequest,
    settings: Annotated[Settings, Depends(get_settings)],
    policy: Annotated[CheckpointPolicy, Depends(get_checkpoint_policy)],
) -> SpeechResponse:
    result = _build(payload, settings, policy)
    return SpeechResponse.model_validate(speech_envelope(result.text))


@router.post("/warmup")
def warmup(event: Annotated[Any, Body()] = None) -> dict[str, str]:
    if is_warmup_event(event):
        return {}
    return {"status": "ok"}
