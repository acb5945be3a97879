from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from skyspeak.models.weather import (
    DEFAULT_CHECKPOINT_HOURS,
    DEFAULT_WEEKEND_HOUR,
    CheckpointPolicy,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SKYSPEAK_",
        case_sensitive=False,
    )

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    docs_enabled: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    cors_origins: list[str] = Field(default_factory=list)
    trusted_hosts: list[str] = Field(default_factory=lambda: ["localhost", "127.0.0.1"])

    default_timezone: str = Field(default="UTC", min_length=1, max_length=64)

    checkpoint_hours: list[int] = Field(
        default_factory=lambda: list(DEFAULT_CHECKPOINT_HOURS), min_length=1, max_length=24
    )
    add_weekend_hour: bool = Field(default=False)
    weekend_hour: int = Field(default=DEFAULT_WEEKEND_HOUR, ge=0, le=23)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}.")
        return level

    @field_validator("default_timezone")
    @classmethod
    def _validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}'.") from e
        return v

    @field_validator("checkpoint_hours")
    @classmethod
    def _validate_hours(cls, v: list[int]) -> list[int]:
        for hour in v:
            if not 0 <= hour <= 23:
                raise ValueError(f"Invalid checkpoint hour {hour} (must be 0-23).")
        return v

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"

    def checkpoint_policy(self) -> CheckpointPolicy:
        return CheckpointPolicy(
            hours=tuple(self.checkpoint_hours),
            add_weekend_hour=self.add_weekend_hour,
            weekend_hour=self.weekend_hour,
        )


def load_settings() -> Settings:
    settings = Settings()
    if not settings.cors_origins:
        settings.cors_origins = ["http://localhost:3000", "http://localhost:8000"]
    return settings
