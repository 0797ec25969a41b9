"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from fallible.application.identity.services.user_service import UserService
from fallible.core import container
from fallible.infrastructure.identity.repositories.user_repository import InMemoryUserRepository
from fallible.main import app


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Fresh repository holding the seed users."""
    return InMemoryUserRepository()


@pytest.fixture
def user_service(user_repository: InMemoryUserRepository) -> UserService:
    return UserService(user_repository)


@pytest.fixture
def client() -> Generator[TestClient, Any, None]:
    """Create a test client backed by a fresh in-memory repository."""
    container.user_repository.reset()

    with TestClient(app) as test_client:
        yield test_client

    container.user_repository.reset()
