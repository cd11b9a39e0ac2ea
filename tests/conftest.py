"""Test configuration and shared fixtures for the customer service."""

from collections.abc import Generator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from customer_core.core.config import Settings
from customer_core.core.security import PasswordHasher
from customer_core.dao.customer_dao import CustomerDao
from customer_core.dao.memory import InMemoryCustomerDao
from customer_core.main import create_app
from customer_core.models.customer import Customer
from customer_core.services.customer_service import CustomerService
from tests.fixtures.test_data import fake_hash, make_customer


@pytest.fixture
def customer_dao() -> AsyncMock:
    """Mock data-access implementation that records every call."""
    return AsyncMock(spec=CustomerDao)


@pytest.fixture
def service(customer_dao: AsyncMock) -> CustomerService:
    """Customer service wired to the mock data-access layer."""
    return CustomerService(customer_dao, fake_hash)


@pytest.fixture
def alex() -> Customer:
    """Stored customer used across update scenarios."""
    return make_customer()


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an in-memory development instance."""
    return Settings(customer_store="memory", api_env="development", bcrypt_rounds=4)


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """HTTP client against an app backed by a fresh in-memory store."""
    app = create_app(
        settings=test_settings,
        customer_dao=InMemoryCustomerDao(),
        password_hasher=PasswordHasher(rounds=4),
    )
    with TestClient(app) as test_client:
        yield test_client
