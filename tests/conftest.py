"""Shared test fixtures and utilities for all tests."""
from contextlib import asynccontextmanager
from datetime import date
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app.config import Settings, StorageSettings
from src.app.containers import Container
from src.app.core.domain.models import SessionState
from src.app.core.services.client_service import ClientService
from src.app.core.services.form_controller import FormController
from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.client_store import ClientStore
from src.app.infrastructure.exercise_catalog import ExerciseCatalog
from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.client import FitCRMClient
from src.shared.storage.local_store import LocalKeyValueStore, LocalStoreSettings

FIXED_TODAY = date(2030, 1, 15)


@pytest.fixture
def fixed_today() -> date:
    """Calendar date the services treat as today."""
    return FIXED_TODAY


@pytest.fixture
def store_path(tmp_path):
    """Path of the JSON file standing in for browser local storage."""
    return tmp_path / "local_storage.json"


@pytest.fixture
def local_store(store_path) -> LocalKeyValueStore:
    return LocalKeyValueStore(LocalStoreSettings(path=store_path))


@pytest.fixture
def client_store(local_store) -> ClientStore:
    return ClientStore(local_store, ClientMapper())


@pytest.fixture
def client_repository(client_store) -> ClientRepository:
    return ClientRepository(client_store)


@pytest.fixture
def session() -> SessionState:
    return SessionState()


@pytest.fixture
def form_controller(session, fixed_today) -> FormController:
    return FormController(session, today=lambda: fixed_today)


@pytest.fixture
def client_service(client_repository, form_controller, session) -> ClientService:
    return ClientService(repository=client_repository, form=form_controller, session=session)


# =========================================================================
# API fixtures
# =========================================================================

@pytest.fixture
def exercise_catalog():
    """Catalog double; tests set fetch_exercises.return_value or side_effect."""
    catalog = AsyncMock(spec=ExerciseCatalog)
    catalog.fetch_exercises.return_value = []
    return catalog


@pytest.fixture
def test_container(store_path, fixed_today, exercise_catalog):
    """
    Create a test container with storage, clock and catalog overrides.
    Function-scoped so every test gets a fresh session and client list.
    """
    container = Container()

    settings = Settings(storage=StorageSettings(path=store_path))
    container.config.override(providers.Object(settings))
    container.today.override(providers.Object(lambda: fixed_today))
    container.exercise_catalog.override(providers.Object(exercise_catalog))

    yield container

    container.unwire()
    container.reset_override()


@pytest_asyncio.fixture
async def test_app(test_container):
    """Create test application with the test container."""
    from src.app.main import create_app

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield

    yield create_app(test_container, lifespan=lifespan)


@pytest_asyncio.fixture
async def fitcrm_client(test_app):
    """Create a FitCRM client talking to the test application in-process."""
    transport = ASGITransport(app=test_app)
    http_client = AsyncClient(transport=transport, base_url="http://test")
    client = FitCRMClient(base_url="http://test", client=http_client)

    async with client:
        yield client

    await http_client.aclose()
