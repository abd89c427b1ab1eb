"""Fixtures for API unit tests: in-memory DB session, fake ingestion model, AsyncClient."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.domain.models.reader_output import DataOutput, ErrorOutput
from app.main import app


class FakeIngestionModel:
    """In-memory ingestion for unit tests: knows 'url' only; targets containing 'missing' are unreadable."""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []

    async def read_location(self, type: str, target: str):
        self.calls.append((type, target))
        if type != "url":
            return None
        if "missing" in target:
            return [ErrorOutput(error="404 Not Found")]
        return [DataOutput(data="kind: Component")]


@pytest.fixture
def fake_ingestion_model():
    return FakeIngestionModel()


@pytest.fixture
def app_with_overrides(db_session, fake_ingestion_model):
    """App with DB session and ingestion model overridden for testing."""
    from app.api import dependencies
    from app.infrastructure.database.session import get_db

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[dependencies.get_ingestion_model] = lambda: fake_ingestion_model
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app_with_overrides):
    """Async HTTP client for testing; uses overridden app."""
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
