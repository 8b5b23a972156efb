from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from book_catalog.api.http.app import create_app
from book_catalog.client import CatalogClient, CatalogView
from book_catalog.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
    LoggingConfig,
)

__all__ = [
    "catalog_config",
    "app",
    "client",
    "catalog_client",
    "catalog_view",
    "session",
]


@pytest.fixture
def catalog_config() -> ConfigData:
    """Configuration backed by a private in-memory SQLite store."""
    return ConfigData(
        app=AppConfig(environment="test"),
        database=DatabaseConfig(url="sqlite://", password_env_var=None),
        logging=LoggingConfig(level="DEBUG"),
    )


@pytest.fixture
def app(catalog_config: ConfigData) -> FastAPI:
    return create_app(catalog_config)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient]:
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def catalog_client(client: TestClient) -> CatalogClient:
    return CatalogClient("/api", http=client)


@pytest.fixture
def catalog_view(catalog_client: CatalogClient) -> CatalogView:
    return CatalogView(catalog_client)


@pytest.fixture
def session() -> Generator[Session]:
    """Create a fresh database session for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from book_catalog.entities.book import BookTable  # noqa: F401

    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        try:
            yield session
        finally:
            session.rollback()
            session.close()
            engine.dispose()
