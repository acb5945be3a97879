from __future__ import annotations

import pytest
from pydantic import ValidationError

from skyspeak.core.config import Settings
from skyspeak.models.weather import CheckpointPolicy


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.checkpoint_policy() == CheckpointPolicy()
    assert settings.log_level == "INFO"
    assert not settings.is_production


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKYSPEAK_CHECKPOINT_HOURS", "[9, 17]")
    monkeypatch.setenv("SKYSPEAK_ADD_WEEKEND_HOUR", "true")
    monkeypatch.setenv("SKYSPEAK_LOG_LEVEL", "debug")
    monkeypatch.setenv("SKYSPEAK_ENV", "production")

    settings = Settings(_env_file=None)

    assert settings.checkpoint_policy() == CheckpointPolicy(
        hours=(9, 17), add_weekend_hour=True, weekend_hour=22
    )
    assert settings.log_level == "DEBUG"
    assert settings.is_production


@pytest.mark.parametrize(
    "overrides",
    [
        {"log_level": "verbose"},
        {"default_timezone": "Nowhere/Land"},
        {"checkpoint_hours": [8, 24]},
        {"weekend_hour": -1},
    ],
)
def test_invalid_settings(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)
