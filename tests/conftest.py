"""Pytest configuration and shared fixtures for all tests.

This module provides function-scoped fixtures for:
- Sample entity types and instances
- Mocked and in-memory query handles
- Settings isolated from the process environment
"""

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from entity_query.core.settings import Settings, get_settings
from entity_query.features.query.protocols import AsyncQuery, Query
from tests.utils.entities import Customer
from tests.utils.in_memory_query import InMemoryAsyncQuery, InMemoryQuery


@pytest.fixture
def customer() -> Customer:
    """A stored customer with raw identity value '42'."""
    return Customer(id="42", name="Ada")


@pytest.fixture
def mock_query() -> MagicMock:
    """Create a mock synchronous query handle."""
    return MagicMock(spec=Query)


@pytest.fixture
def mock_async_query() -> AsyncMock:
    """Create a mock asynchronous query handle."""
    return AsyncMock(spec=AsyncQuery)


@pytest.fixture
def in_memory_query(customer: Customer) -> InMemoryQuery:
    """An in-memory query handle holding the sample customer."""
    return InMemoryQuery([customer])


@pytest.fixture
def in_memory_async_query(customer: Customer) -> InMemoryAsyncQuery:
    """An in-memory async query handle holding the sample customer."""
    return InMemoryAsyncQuery([customer])


@pytest.fixture(scope="function")
def test_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[Settings, None, None]:
    """Provide settings built from a clean ENTITY_QUERY_* environment."""
    for key in ("DEBUG", "LOG_LEVEL", "LOG_FORMAT", "APP_NAME"):
        monkeypatch.delenv(f"ENTITY_QUERY_{key}", raising=False)
    get_settings.cache_clear()
    yield Settings(_env_file=None)  # pyright: ignore[reportCallIssue]
    get_settings.cache_clear()
