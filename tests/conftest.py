from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from fastapi import FastAPI

from token_gate.config import LoggingSettings, Settings, StorageSettings
from token_gate.infrastructure.token_store import TokenStore

SHARED_SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing the store and logs at a temporary directory."""

    return Settings(
        _env_file=None,
        shared_secret=SHARED_SECRET,
        port=8080,
        storage=StorageSettings(tokens_path=tmp_path / "tokens.json"),
        logging=LoggingSettings(directory=tmp_path / "logs"),
    )


@pytest.fixture
def app(settings: Settings) -> Iterator[FastAPI]:
    """Provide a FastAPI app wired to a temporary token file."""

    from token_gate.main import create_app

    app = create_app(settings)
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def token_store(app: FastAPI) -> TokenStore:
    """Expose the application's store for direct inspection in tests."""

    return app.state.token_store


@pytest.fixture
def tokens_path(settings: Settings) -> Path:
    return settings.storage.tokens_path


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-Custom-Auth": SHARED_SECRET}
