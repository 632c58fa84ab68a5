"""
Weather MCP Server.

Self-contained FastMCP instance with the OpenWeatherMap tools and the
reference resources. Mounted into the registry via server_registry.py.
"""

from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from weather_mcp.infrastructure.trace_decorator import traced
from weather_mcp.schemas.capabilities import ToolParameter
from weather_mcp.schemas.results import InvocationResult
from weather_mcp.schemas.weather import DEFAULT_UNITS
from weather_mcp.servers.capability_catalog import (
    API_STATUS_URI,
    GET_FORECAST,
    GET_WEATHER,
    POPULAR_CITIES_URI,
    CapabilityCatalog,
)
from weather_mcp.servers.dispatcher import WeatherDispatcher

READ_ONLY_ANNOTATIONS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": False,
    "openWorldHint": True,
}


def _argument_type(param: ToolParameter) -> Any:
    """String argument type advertising the catalog description and choices.

    Choices are advertised only; the catalog rejects bad values itself.
    """
    extra = {"enum": list(param.choices)} if param.choices else None
    return Annotated[str, Field(description=param.description, json_schema_extra=extra)]


def _unwrap(result: InvocationResult) -> str:
    if result.is_error:
        raise ToolError(result.text)
    return result.text


def build_weather_server(
    dispatcher: WeatherDispatcher,
    catalog: CapabilityCatalog,
) -> FastMCP:
    """Create the weather FastMCP server bound to a dispatcher and catalog."""
    weather_mcp = FastMCP("weather")

    # ---------------------------------------------------------------------------
    # MCP Tools
    # ---------------------------------------------------------------------------

    current_tool = catalog.get_tool(GET_WEATHER)
    forecast_tool = catalog.get_tool(GET_FORECAST)

    CurrentCity = _argument_type(current_tool.parameter("city"))
    CurrentUnits = _argument_type(current_tool.parameter("units"))
    ForecastCity = _argument_type(forecast_tool.parameter("city"))
    ForecastUnits = _argument_type(forecast_tool.parameter("units"))

    @weather_mcp.tool(
        name=current_tool.name,
        title=current_tool.title,
        description=current_tool.description,
        tags={"weather", "current", "conditions"},
        annotations={"title": current_tool.title, **READ_ONLY_ANNOTATIONS},
    )
    @traced(span_name="mcp.tool.get_weather", handler_type="tool")
    async def get_weather(
        city: CurrentCity,
        units: CurrentUnits = DEFAULT_UNITS.value,
    ) -> str:
        """Get current weather conditions for a city."""
        result = await dispatcher.invoke(GET_WEATHER, {"city": city, "units": units})
        return _unwrap(result)

    @weather_mcp.tool(
        name=forecast_tool.name,
        title=forecast_tool.title,
        description=forecast_tool.description,
        tags={"weather", "forecast", "planning"},
        annotations={"title": forecast_tool.title, **READ_ONLY_ANNOTATIONS},
    )
    @traced(span_name="mcp.tool.get_forecast", handler_type="tool")
    async def get_forecast(
        city: ForecastCity,
        units: ForecastUnits = DEFAULT_UNITS.value,
    ) -> str:
        """Get a 5-day forecast for a city, up to three samples per day."""
        result = await dispatcher.invoke(GET_FORECAST, {"city": city, "units": units})
        return _unwrap(result)

    # ---------------------------------------------------------------------------
    # MCP Resources
    # ---------------------------------------------------------------------------

    resources = {r.uri: r for r in catalog.list_resources()}
    popular = resources[POPULAR_CITIES_URI]
    status = resources[API_STATUS_URI]

    @weather_mcp.resource(
        popular.uri,
        name=popular.name,
        description=popular.description,
        mime_type=popular.mime_type,
    )
    def popular_cities() -> str:
        return catalog.read_resource(POPULAR_CITIES_URI)

    @weather_mcp.resource(
        status.uri,
        name=status.name,
        description=status.description,
        mime_type=status.mime_type,
    )
    def api_status() -> str:
        return catalog.read_resource(API_STATUS_URI)

    return weather_mcp
