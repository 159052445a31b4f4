import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.testclient import TestClient

load_dotenv(Path(__file__).resolve().parents[1] / ".env")
# Importing the application module builds the default app; keep it off disk.
os.environ["STORAGE_BACKEND"] = "memory"

from helpdesk.core.config import Settings, get_settings  # noqa: E402
from helpdesk.main import create_app  # noqa: E402
from helpdesk.repositories.storage import InMemoryStorage  # noqa: E402
from helpdesk.services.container import ServiceContainer, build_services  # noqa: E402

get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_env="test", storage_backend="memory", seed_on_startup=True, app_debug=False
    )


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def services(settings: Settings, storage: InMemoryStorage) -> ServiceContainer:
    return build_services(settings, storage)


@pytest.fixture
def app(settings: Settings, storage: InMemoryStorage) -> FastAPI:
    return create_app(settings, storage)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
