"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Valid registration input
- A freshly seeded in-memory user store per test
- FastAPI application and test client bound to that store
"""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.repository.memory import InMemoryUserRepository
from src.api.main import create_app
from src.config.settings import Settings
from src.domain.validation import FormData


@pytest.fixture
def valid_form_data() -> FormData:
    """Form snapshot that passes every field rule."""
    return FormData(
        first_name="John",
        last_name="Doe",
        email="john.doe@gmail.com",
        password="Password123!",
    )


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """User store seeded with the fixture account (test@gmail.com)."""
    repo = InMemoryUserRepository()
    repo.init(seed=True)
    return repo


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment and any .env file."""
    return Settings(
        _env_file=None,
        seed_fixture_user=True,
        api_url="http://testserver",
        registered_email_hints=["test@gmail.com"],
    )


@pytest.fixture
def app(settings: Settings, repository: InMemoryUserRepository) -> FastAPI:
    """Application serving the per-test store."""
    return create_app(settings=settings, repository=repository)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client with lifespan events running."""
    with TestClient(app) as test_client:
        yield test_client
