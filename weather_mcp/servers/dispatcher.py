"""
Tool invocation dispatcher.

Routes a validated invocation to its handler and turns every outcome,
including validation failures and provider errors, into an InvocationResult.
This is the only place failures are converted for the caller.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from loguru import logger

from weather_mcp.clients.openweather_client import OpenWeatherClient
from weather_mcp.infrastructure.observability import get_observability_manager
from weather_mcp.schemas.capabilities import Invocation
from weather_mcp.schemas.results import (
    InvalidInvocation,
    InvocationResult,
    NotFound,
    Ok,
    Result,
    Unauthorized,
    UpstreamFailure,
)
from weather_mcp.servers.capability_catalog import GET_FORECAST, GET_WEATHER, CapabilityCatalog
from weather_mcp.utils.forecast_aggregator import bucket_by_day
from weather_mcp.utils.weather_formatters import format_current, format_forecast

Handler = Callable[[Invocation], Awaitable[Result[str]]]

_OUTCOME_LABELS = {
    NotFound: "not_found",
    Unauthorized: "unauthorized",
    UpstreamFailure: "upstream_failure",
}


class WeatherDispatcher:
    def __init__(self, catalog: CapabilityCatalog, client: OpenWeatherClient) -> None:
        self._catalog = catalog
        self._client = client
        self._handlers: dict[str, Handler] = {
            GET_WEATHER: self._current_weather,
            GET_FORECAST: self._forecast,
        }

    async def invoke(self, name: str, arguments: Mapping[str, Any] | None) -> InvocationResult:
        checked = self._catalog.validate_invocation(name, arguments)
        if isinstance(checked, InvalidInvocation):
            logger.info(f"Rejected invocation of {name!r}: {checked.reason}")
            return InvocationResult.failure(checked.message)

        try:
            outcome = await self._handlers[checked.tool](checked)
        except Exception as e:
            logger.exception(f"Unexpected error in {checked.tool}")
            self._record(checked, "internal_error")
            return InvocationResult.failure(str(e) or type(e).__name__)

        match outcome:
            case Ok(value=text):
                self._record(checked, "ok")
                return InvocationResult.success(text)
            case NotFound() | Unauthorized() | UpstreamFailure() as error:
                logger.info(f"{checked.tool} for {checked.place!r} failed: {error.message}")
                self._record(checked, _OUTCOME_LABELS[type(error)])
                return InvocationResult.failure(error.message)

    @staticmethod
    def _record(invocation: Invocation, outcome: str) -> None:
        get_observability_manager().set_lookup_attributes(
            tool=invocation.tool,
            city=invocation.place,
            units=invocation.units.value,
            outcome=outcome,
        )

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    async def _current_weather(self, invocation: Invocation) -> Result[str]:
        outcome = await self._client.fetch_current(invocation.place, invocation.units)
        if isinstance(outcome, Ok):
            return Ok(format_current(outcome.value, invocation.units))
        return outcome

    async def _forecast(self, invocation: Invocation) -> Result[str]:
        outcome = await self._client.fetch_forecast(invocation.place, invocation.units)
        if isinstance(outcome, Ok):
            report = outcome.value
            buckets = bucket_by_day(report.samples)
            return Ok(format_forecast(report.place, report.country, buckets, invocation.units))
        return outcome
