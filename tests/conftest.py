"""Pytest configuration and fixtures."""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["LEDGER_BACKEND"] = "dryrun"
os.environ["OPERATOR_ID"] = "0.0.1001"
os.environ["OPERATOR_KEY"] = "302e020100300506032b657004220420" + "11" * 32
os.environ["DEBUG"] = "false"

from ticketmint.api.app import create_app
from ticketmint.config import Settings, get_settings
from ticketmint.ledger.dryrun import DryRunLedger


@pytest.fixture
def settings() -> Settings:
    """Fresh settings read from the test environment."""
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def ledger(settings: Settings) -> DryRunLedger:
    """In-memory ledger shared by one test's requests."""
    return DryRunLedger(operator_account_id=settings.operator_id, token_base=7000)


@pytest.fixture
def test_app(settings, ledger):
    """Create test application around the dry-run ledger."""
    return create_app(settings=settings, ledger=ledger)


@pytest_asyncio.fixture
async def client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
