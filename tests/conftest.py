"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from flashdeck.application.storage.facade import StorageFacade
from flashdeck.core import container
from flashdeck.infrastructure.storage.in_memory_driver import InMemoryStorageDriver
from flashdeck.infrastructure.storage.sqlalchemy_driver import SqlAlchemyStorageDriver
from flashdeck.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Create a fresh in-memory database for each test."""
    test_engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def sqlalchemy_driver(engine: Engine) -> SqlAlchemyStorageDriver:
    """SQLAlchemy driver with its tables created."""
    driver = SqlAlchemyStorageDriver(engine)
    driver.setup()
    return driver


@pytest.fixture
def in_memory_driver() -> InMemoryStorageDriver:
    return InMemoryStorageDriver()


@pytest.fixture
def storage_facade(sqlalchemy_driver: SqlAlchemyStorageDriver) -> StorageFacade:
    return StorageFacade(sqlalchemy_driver)


@pytest.fixture
def client(sqlalchemy_driver: SqlAlchemyStorageDriver) -> Generator[TestClient, Any, None]:
    """Create a test client whose storage is the in-memory test database."""
    container.storage_facade.reset()

    with container.storage_driver.override(providers.Object(sqlalchemy_driver)):
        with TestClient(app) as test_client:
            yield test_client

    container.storage_facade.reset()
