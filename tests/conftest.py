"""Shared fixtures for the service tests."""

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from rest_services.app.core.config import Settings
from rest_services.app.main import create_products_app, create_weather_app
from rest_services.app.services.product_repository import InMemoryProductRepository
from rest_services.app.services.weather_service import WeatherService

TEST_API_URL = "http://weather.test/data/2.5/weather"
TEST_API_KEY = "test-key-123"


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, payload: Any = None, status_code: int = 200, text: Optional[str] = None) -> None:
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def json(self) -> Any:
        if self.text is not None:
            raise ValueError(f"Expecting value: {self.text[:20]!r}")
        return self.payload


class FakeSession:
    """Records outbound calls and replays a canned response or error."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response or FakeResponse({})
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params: Optional[dict] = None, timeout: Optional[float] = None) -> FakeResponse:
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def test_settings() -> Settings:
    return Settings(weather_api_url=TEST_API_URL, weather_api_key=TEST_API_KEY, weather_timeout=5.0)


@pytest.fixture
def repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def products_client(test_settings: Settings, repository: InMemoryProductRepository) -> TestClient:
    app = create_products_app(test_settings, repository=repository)
    return TestClient(app)


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession(FakeResponse({"name": "London", "main": {"temp": 280.0}}))


@pytest.fixture
def weather_service(test_settings: Settings, fake_session: FakeSession) -> WeatherService:
    return WeatherService(
        api_url=test_settings.weather_api_url,
        api_key=test_settings.weather_api_key,
        timeout=test_settings.weather_timeout,
        session=fake_session,
    )


@pytest.fixture
def weather_client(test_settings: Settings, weather_service: WeatherService) -> TestClient:
    app = create_weather_app(test_settings, weather_service=weather_service)
    return TestClient(app)
