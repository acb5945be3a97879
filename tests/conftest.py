from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from skyspeak.core.config import Settings
from skyspeak.factory import create_app


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        log_level="DEBUG",
        cors_origins=["http://localhost"],
        trusted_hosts=["testserver", "localhost"],
        default_timezone="America/New_York",
        checkpoint_hours=[8, 12, 18],
        add_weekend_hour=True,
        weekend_hour=22,
    )


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    app = create_app(settings)
    with TestClient(app) as client:
        yield client
