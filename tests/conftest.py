"""Shared test configuration."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from coaster_api.app.core.config import Settings
from coaster_api.app.core.store import CoasterStore
from coaster_api.app.main import create_app

ADMIN_PASSWORD = "secret"


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_password=ADMIN_PASSWORD)


@pytest.fixture
def store() -> CoasterStore:
    """Fresh store holding only the seed record."""
    return CoasterStore()


@pytest.fixture
def app(settings: Settings, store: CoasterStore) -> FastAPI:
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
