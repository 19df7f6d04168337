"""
Shared test fixtures for the URL builder test suite.

Provides:
  - Async test client for FastAPI integration tests
  - The reference structured initializer and its rendered URL
  - A hook for overriding configured URL defaults
"""

from typing import AsyncIterator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from urlbuildr.core.config import settings
from urlbuildr.main import app

EXPECTED_URL = "https://thegreatsite.co:65132/accounts/users/54298/cart?showAllPurchases=true"


@pytest_asyncio.fixture
async def async_client() -> AsyncIterator[AsyncClient]:
    """Provide an async HTTP test client bound to the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        yield client


@pytest.fixture
def site_initializer():
    """Provide the structured initializer for the reference shop URL."""
    return {
        "prefix": "https://",
        "pathPrefix": "/accounts",
        "additions": ["users", ":userId", "cart"],
        "port": 65132,
        "params": {"userId": 54298},
        "host": "thegreatsite.co",
        "queries": {"showAllPurchases": True},
    }


@pytest.fixture
def expected_url():
    return EXPECTED_URL


@pytest.fixture
def url_defaults(monkeypatch):
    """
    Override the configured URL defaults for one test.

    Usage: url_defaults(url_prefix="http://", url_host="example.com")
    """

    def apply(**overrides):
        for name, value in overrides.items():
            monkeypatch.setattr(settings, name, value)

    return apply
