"""API test fixtures — FastAPI app over the in-memory test store.

Invariants:
    - The app is built with an injected store, so lifespan never touches disk
    - The injected store is already migrated (tests/conftest.py)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from cellcontrol.main import create_app


@pytest.fixture
def app(test_settings, test_store):
    return create_app(test_settings, store=test_store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
