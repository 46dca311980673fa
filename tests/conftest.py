import pytest
from fastapi.testclient import TestClient

from wealth_id.core.config import Settings
from wealth_id.main import create_app
from wealth_id.models.conversion import ConversionRecord


@pytest.fixture
def settings() -> Settings:
    return Settings(debug=False)


@pytest.fixture
def app(settings):
    return create_app(settings_override=settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_record():
    counter = {"n": 0}

    def _make(score: float = 700, country_from: str = "US", country_to: str = "UK"):
        counter["n"] += 1
        return ConversionRecord(
            id=f"rec-{counter['n']}",
            timestamp="2025-01-01T00:00:00.000Z",
            country_from=country_from,
            country_to=country_to,
            original_score=score,
            converted_score=score,
        )

    return _make
