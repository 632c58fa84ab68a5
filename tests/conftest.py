"""Shared fixtures: settings, canned OpenWeatherMap payloads and mock transports."""

from datetime import datetime

import httpx
import pytest

from weather_mcp.clients.openweather_client import OpenWeatherClient
from weather_mcp.config import Settings
from weather_mcp.schemas.weather import ForecastSample


def local_epoch(*args: int) -> int:
    """Epoch seconds for a naive local datetime, e.g. local_epoch(2024, 1, 1, 9)."""
    return int(datetime(*args).timestamp())


def sample(day: int, hour: int, temperature: float = 10.0, description: str = "clear sky") -> ForecastSample:
    return ForecastSample(
        timestamp=datetime(2024, 1, day, hour),
        temperature=temperature,
        description=description,
    )


def current_payload(**overrides) -> dict:
    payload = {
        "name": "London",
        "sys": {"country": "GB"},
        "main": {"temp": 15, "feels_like": 14, "humidity": 70, "pressure": 1012},
        "weather": [{"description": "clear sky"}],
        "wind": {"speed": 3.5},
        "visibility": 10000,
    }
    payload.update(overrides)
    return payload


def forecast_payload(entries: list[tuple[int, float, str]]) -> dict:
    return {
        "city": {"name": "London", "country": "GB"},
        "list": [
            {"dt": dt, "main": {"temp": temp}, "weather": [{"description": desc}]}
            for dt, temp, desc in entries
        ],
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        WEATHER_API_KEY="test-key",
        WEATHER_API_BASE="https://owm.test/data/2.5",
    )


@pytest.fixture
def make_client(settings):
    def factory(transport: httpx.AsyncBaseTransport) -> OpenWeatherClient:
        return OpenWeatherClient(settings, transport=transport)

    return factory
