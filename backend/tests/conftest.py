import json

import pytest
from fastapi.testclient import TestClient

from factories import FakeBackend, make_journey
from haulage_planner.api import get_completion_backend
from haulage_planner.core.config import Settings
from main import create_app


@pytest.fixture
def kano_payload() -> dict:
    return {"journeys": [make_journey("Kano", segment_count=5)]}


@pytest.fixture
def fake_backend(kano_payload) -> FakeBackend:
    return FakeBackend(text=json.dumps(kano_payload))


@pytest.fixture
def app(fake_backend):
    application = create_app(Settings(llm_provider="gemini", llm_timeout_seconds=5.0))
    application.dependency_overrides[get_completion_backend] = lambda: fake_backend
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
