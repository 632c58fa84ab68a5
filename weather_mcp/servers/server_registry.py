"""
MCP Server Registry.

Owns the provider client, capability catalog and dispatcher, and aggregates
the weather and prompt servers into a single FastMCP instance.
Initializes observability on startup.
"""

import httpx
from fastmcp import FastMCP
from loguru import logger

from weather_mcp.clients.openweather_client import OpenWeatherClient
from weather_mcp.config import Settings
from weather_mcp.infrastructure.observability import initialize_observability
from weather_mcp.servers.capability_catalog import CapabilityCatalog
from weather_mcp.servers.dispatcher import WeatherDispatcher
from weather_mcp.servers.prompt_server import build_prompt_server
from weather_mcp.servers.weather_server import build_weather_server

SERVER_NAME = "weather-mcp-server"


class McpServersRegistry:
    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.registry = FastMCP(SERVER_NAME)
        self.client = OpenWeatherClient(settings, transport=transport)
        self.catalog = CapabilityCatalog(api_key_configured=settings.api_key_configured)
        self.dispatcher = WeatherDispatcher(self.catalog, self.client)
        self._is_initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    async def initialize(self) -> None:
        """Mount the weather and prompt servers into the registry."""
        if self._is_initialized:
            return

        logger.info("Initializing MCP server registry...")

        initialize_observability(
            service_name=self.settings.OTEL_SERVICE_NAME,
            enabled=self.settings.AGENT_OBSERVABILITY_ENABLED,
        )

        if not self.settings.api_key_configured:
            logger.warning(
                "WEATHER_API_KEY is not configured; running in demo mode. "
                "Provider calls will be rejected as unauthorized."
            )

        # --- Mount servers ---
        self.registry.mount(build_weather_server(self.dispatcher, self.catalog))
        self.registry.mount(build_prompt_server())

        self._is_initialized = True

        tool_names = [t.name for t in self.catalog.list_tools()]
        resource_uris = [r.uri for r in self.catalog.list_resources()]
        prompt_names = [p.name for p in self.catalog.list_prompts()]
        logger.info(f"Registry initialized with {len(tool_names)} tools: {tool_names}")
        logger.info(f"Registry initialized with {len(resource_uris)} resources: {resource_uris}")
        logger.info(f"Registry initialized with {len(prompt_names)} prompts: {prompt_names}")

    def get_registry(self) -> FastMCP:
        return self.registry

    async def close(self) -> None:
        await self.client.close()
