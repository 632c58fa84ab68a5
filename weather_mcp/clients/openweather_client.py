"""
OpenWeatherMap HTTP client.

Wraps the two endpoints this server consumes:
- GET /weather    (current conditions by place name)
- GET /forecast   (5 day / 3 hour forecast by place name)

Failures are returned as domain error values, never raised.
"""

from datetime import datetime

import httpx
from loguru import logger
from pydantic import ValidationError

from weather_mcp.config import Settings
from weather_mcp.schemas.openweather import OwmCurrentPayload, OwmForecastPayload
from weather_mcp.schemas.results import NotFound, Ok, Result, Unauthorized, UpstreamFailure
from weather_mcp.schemas.weather import (
    CurrentConditions,
    ForecastReport,
    ForecastSample,
    UnitSystem,
)

CURRENT_SUBJECT = "weather data"
FORECAST_SUBJECT = "weather forecast"


class OpenWeatherClient:
    """Async client for the OpenWeatherMap 2.5 API."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = settings.WEATHER_API_KEY
        self._client = httpx.AsyncClient(
            base_url=settings.WEATHER_API_BASE,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def fetch_current(
        self, place: str, units: UnitSystem
    ) -> Result[CurrentConditions]:
        """Get current conditions for a place."""
        outcome = await self._get("/weather", place, units, CURRENT_SUBJECT)
        if not isinstance(outcome, Ok):
            return outcome

        try:
            payload = OwmCurrentPayload.model_validate(outcome.value)
        except ValidationError as e:
            logger.warning(f"Malformed current-weather payload for {place!r}: {e.error_count()} errors")
            return UpstreamFailure("malformed provider payload", CURRENT_SUBJECT)

        main = payload.main
        return Ok(CurrentConditions(
            place=payload.name,
            country=payload.sys.country,
            temperature=main.temp,
            feels_like=main.feels_like if main.feels_like is not None else main.temp,
            description=payload.weather[0].description,
            humidity_percent=main.humidity or 0.0,
            pressure_hpa=main.pressure or 0.0,
            wind_speed=payload.wind.speed,
            visibility_m=payload.visibility,
        ))

    async def fetch_forecast(
        self, place: str, units: UnitSystem
    ) -> Result[ForecastReport]:
        """Get the 3-hourly forecast samples for a place, in provider order."""
        outcome = await self._get("/forecast", place, units, FORECAST_SUBJECT)
        if not isinstance(outcome, Ok):
            return outcome

        try:
            payload = OwmForecastPayload.model_validate(outcome.value)
        except ValidationError as e:
            logger.warning(f"Malformed forecast payload for {place!r}: {e.error_count()} errors")
            return UpstreamFailure("malformed provider payload", FORECAST_SUBJECT)

        try:
            samples = tuple(
                ForecastSample(
                    timestamp=datetime.fromtimestamp(item.dt),
                    temperature=item.main.temp,
                    description=item.weather[0].description,
                )
                for item in payload.items
            )
        except (ValueError, OverflowError, OSError) as e:
            logger.warning(f"Forecast payload for {place!r} has an unusable timestamp: {e}")
            return UpstreamFailure("malformed provider payload", FORECAST_SUBJECT)
        return Ok(ForecastReport(
            place=payload.city.name,
            country=payload.city.country,
            samples=samples,
        ))

    async def _get(
        self, path: str, place: str, units: UnitSystem, subject: str
    ) -> Result[object]:
        logger.debug(f"OpenWeatherMap {path}: q={place!r}, units={units.value}")
        try:
            response = await self._client.get(
                path,
                params={
                    "q": place,
                    "appid": self._api_key,
                    "units": units.provider_value,
                },
            )
        except httpx.HTTPError as e:
            logger.warning(f"OpenWeatherMap {path} request failed: {type(e).__name__}: {e}")
            return UpstreamFailure(f"{type(e).__name__}: {e}", subject)

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info(f"OpenWeatherMap {path}: place {place!r} not found")
            return NotFound(place)
        if response.status_code == httpx.codes.UNAUTHORIZED:
            logger.warning(f"OpenWeatherMap {path}: API key rejected")
            return Unauthorized()
        if response.is_error:
            logger.error(f"OpenWeatherMap API error: {response.status_code} - {response.text}")
            return UpstreamFailure(f"HTTP {response.status_code}", subject)

        try:
            return Ok(response.json())
        except ValueError:
            logger.warning(f"OpenWeatherMap {path} returned a non-JSON body")
            return UpstreamFailure("malformed provider payload", subject)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
