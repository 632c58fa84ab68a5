"""
Capability catalog.

Declares the fixed tool, resource and prompt catalogs, validates tool
invocations before dispatch and serves the two read-only resources.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

# Import prompt modules to trigger registration in PROMPT_REGISTRY
import weather_mcp.prompts.travel_weather_advice
import weather_mcp.prompts.weather_summary
from weather_mcp.prompts import PROMPT_REGISTRY
from weather_mcp.schemas.capabilities import (
    Invocation,
    PromptDescriptor,
    ResourceDescriptor,
    ToolDescriptor,
    ToolParameter,
)
from weather_mcp.schemas.results import InvalidInvocation
from weather_mcp.schemas.weather import DEFAULT_UNITS, UnitSystem

GET_WEATHER = "get_weather"
GET_FORECAST = "get_forecast"

POPULAR_CITIES_URI = "weather://cities/popular"
API_STATUS_URI = "weather://api/status"

POPULAR_CITIES: tuple[str, ...] = (
    "New York",
    "London",
    "Tokyo",
    "Paris",
    "Sydney",
    "Berlin",
    "San Francisco",
    "Toronto",
    "Mumbai",
    "Singapore",
)

_UNIT_CHOICES = tuple(u.value for u in UnitSystem)

TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name=GET_WEATHER,
        title="Get Current Weather",
        description="Get current weather information for a city",
        parameters=(
            ToolParameter(
                name="city",
                description="The city name to get weather for",
                required=True,
            ),
            ToolParameter(
                name="units",
                description=(
                    "Temperature units "
                    "(metric=Celsius, imperial=Fahrenheit, kelvin=Kelvin)"
                ),
                choices=_UNIT_CHOICES,
                default=DEFAULT_UNITS.value,
            ),
        ),
    ),
    ToolDescriptor(
        name=GET_FORECAST,
        title="Get Weather Forecast",
        description="Get 5-day weather forecast for a city",
        parameters=(
            ToolParameter(
                name="city",
                description="The city name to get forecast for",
                required=True,
            ),
            ToolParameter(
                name="units",
                description="Temperature units",
                choices=_UNIT_CHOICES,
                default=DEFAULT_UNITS.value,
            ),
        ),
    ),
)

RESOURCES: tuple[ResourceDescriptor, ...] = (
    ResourceDescriptor(
        uri=POPULAR_CITIES_URI,
        name="Popular Cities",
        description="List of popular cities for weather queries",
    ),
    ResourceDescriptor(
        uri=API_STATUS_URI,
        name="API Status",
        description="Current status of the weather API",
    ),
)


class UnknownResourceError(LookupError):
    def __init__(self, uri: str) -> None:
        super().__init__(f"Unknown resource: {uri}")
        self.uri = uri


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a 'Z' suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CapabilityCatalog:
    """Read-only catalogs of tools, resources and prompts."""

    def __init__(
        self,
        api_key_configured: bool,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._api_key_configured = api_key_configured
        self._clock = clock
        self._tools = TOOLS
        self._tools_by_name = {tool.name: tool for tool in TOOLS}
        self._resources = RESOURCES
        self._prompts = tuple(
            PromptDescriptor.from_definition(definition)
            for definition in PROMPT_REGISTRY.values()
        )

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        return self._tools

    def list_resources(self) -> tuple[ResourceDescriptor, ...]:
        return self._resources

    def list_prompts(self) -> tuple[PromptDescriptor, ...]:
        return self._prompts

    def get_tool(self, name: str) -> ToolDescriptor:
        return self._tools_by_name[name]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_invocation(
        self, name: str, arguments: Mapping[str, Any] | None
    ) -> Invocation | InvalidInvocation:
        """Check a tool name and its arguments before anything is dispatched.

        Unknown arguments are ignored; ``units`` falls back to metric.
        """
        if name not in self._tools_by_name:
            return InvalidInvocation(f"Unknown tool: {name}")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            return InvalidInvocation(f"Arguments for {name} must be an object")

        if "city" not in arguments:
            return InvalidInvocation("Missing required argument: city")
        city = arguments["city"]
        if not isinstance(city, str):
            return InvalidInvocation("Argument 'city' must be a string")
        if not city.strip():
            return InvalidInvocation("Argument 'city' must not be empty")

        raw_units = arguments.get("units")
        if raw_units is None:
            units = DEFAULT_UNITS
        elif isinstance(raw_units, str) and raw_units in _UNIT_CHOICES:
            units = UnitSystem(raw_units)
        else:
            return InvalidInvocation(
                f"Argument 'units' must be one of: {', '.join(_UNIT_CHOICES)}"
            )

        return Invocation(tool=name, place=city, units=units)

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    def read_resource(self, uri: str) -> str:
        """Return the JSON text of a declared resource."""
        if uri == POPULAR_CITIES_URI:
            return json.dumps({"cities": list(POPULAR_CITIES)})
        if uri == API_STATUS_URI:
            return json.dumps({
                "status": "operational",
                "apiKey": "configured" if self._api_key_configured else "demo",
                "timestamp": _iso_timestamp(self._clock()),
            })
        raise UnknownResourceError(uri)
