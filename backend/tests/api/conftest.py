"""API test fixtures — FastAPI test client over the seeded SQLite database.

Invariants:
    - get_db dependency overridden to use the test DB session factory
    - app.state.authorizer is removed after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from learn_api.infrastructure.database import get_db
from learn_api.main import app


@pytest.fixture
async def client(seeded_db, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    if hasattr(app.state, "authorizer"):
        del app.state.authorizer
