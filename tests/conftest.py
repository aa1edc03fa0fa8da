"""
Web App — Test Configuration (conftest.py)
===========================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── fresh_app: A newly built FastAPI app (safe to add throwaway routes)
    ├── test_client: HTTPX AsyncClient bound to the module-level app
    └── occupied_port: A port held by a listening socket for the test's duration
"""

import os
import socket

# Override settings for testing BEFORE any app imports
os.environ["WEB_APP_LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["WEB_APP_MODE"] = "test"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


@pytest.fixture
def fresh_app():
    """
    Provides a newly created app instance.

    Tests that register extra routes use this instead of the shared
    `web_app.main.app` so the extra routes do not leak into other tests.
    """
    from web_app.main import create_app
    return create_app()


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to our FastAPI app.
    How:     Uses ASGITransport to route requests directly to the app.

    Usage:
        async def test_ping(test_client):
            response = await test_client.get("/ping")
            assert response.status_code == 200
    """
    from web_app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def occupied_port():
    """
    Provides a loopback port that is already bound and listening.

    Yields the port number; the holder socket is closed after the test.
    """
    holder = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    holder.bind(("127.0.0.1", 0))
    holder.listen(1)
    try:
        yield holder.getsockname()[1]
    finally:
        holder.close()
