"""
pytest configuration and fixtures for the Social Media Backend test suite
All fixtures run against the in-memory store, no database required.
"""

import pytest
import pytest_asyncio
import httpx

from app import create_app
from config.settings import MEMORY_DATABASE_URL
from database.memory_store import MemoryStore
from services.accounts_service import AccountsService
from services.messages_service import MessagesService


@pytest.fixture
def store():
    """Fresh in-memory store per test"""
    return MemoryStore()


@pytest.fixture
def accounts_service(store):
    return AccountsService(store.accounts)


@pytest.fixture
def messages_service(store):
    return MessagesService(store.messages, store.accounts)


@pytest_asyncio.fixture
async def alice(accounts_service):
    """A registered account to post messages with"""
    result = await accounts_service.register("alice", "pass1")
    assert result.success, f"Setup registration failed: {result.error}"
    return result.data


@pytest_asyncio.fixture
async def client(store):
    """HTTP client bound to an app instance using the test store"""
    app = create_app(MEMORY_DATABASE_URL)
    # ASGITransport does not run the lifespan, so attach the store directly
    app.state.store = store

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
