"""
Pytest configuration and shared fixtures for the stock monitor tests.

Provides:
- A scripted fake IQuoteProvider (no network)
- Fresh history store / job registry instances
- A FastAPI TestClient wired to the fakes
"""

import pytest
from fastapi.testclient import TestClient

from src.domain.errors import UpstreamError
from src.infrastructure.entrypoints.fastapi_app import create_app
from src.infrastructure.scheduling.asyncio_job_registry import AsyncioJobRegistry
from src.infrastructure.storage.in_memory_history_store import InMemoryHistoryStore
from tests.fakes import FakeQuoteProvider


# =============================================================================
# Async backend
# =============================================================================

@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


# =============================================================================
# Collaborators
# =============================================================================

@pytest.fixture
def provider() -> FakeQuoteProvider:
    return FakeQuoteProvider()


@pytest.fixture
def failing_provider() -> FakeQuoteProvider:
    fake = FakeQuoteProvider()
    fake.error = UpstreamError("Upstream returned status 503 for 'AAPL'")
    return fake


@pytest.fixture
def history_store() -> InMemoryHistoryStore:
    return InMemoryHistoryStore()


@pytest.fixture
def registry() -> AsyncioJobRegistry:
    return AsyncioJobRegistry()


# =============================================================================
# HTTP client
# =============================================================================

@pytest.fixture
def client(provider, history_store, registry):
    app = create_app(provider=provider, history=history_store, registry=registry)
    with TestClient(app) as test_client:
        yield test_client
