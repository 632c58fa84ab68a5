from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEMO_API_KEY = "demo_key"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- OpenWeatherMap API ---
    WEATHER_API_KEY: str = Field(
        default=DEMO_API_KEY,
        description="OpenWeatherMap API key. The placeholder value means demo mode.",
    )
    WEATHER_API_BASE: str = Field(
        default="http://api.openweathermap.org/data/2.5",
        description="Base URL of the OpenWeatherMap 2.5 API.",
    )
    HTTP_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Timeout applied to every outbound provider request.",
    )

    # --- MCP transport ---
    MCP_TRANSPORT: Literal["stdio", "http"] = Field(
        default="stdio",
        description="Transport used to serve MCP: stdio or streamable HTTP.",
    )
    HOST: str = Field(
        default="0.0.0.0",
        description="Bind address for the HTTP transport.",
    )
    PORT: int = Field(
        default=8000,
        description="Listen port for the HTTP transport.",
    )

    # --- Logging ---
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Minimum level written to the stderr log sink.",
    )

    # --- Observability ---
    OTEL_SERVICE_NAME: str = Field(
        default="weather-mcp",
        description="Service name attached to OpenTelemetry spans.",
    )
    AGENT_OBSERVABILITY_ENABLED: bool = Field(
        default=False,
        description="Enable OpenTelemetry spans for tool and prompt handlers.",
    )

    @property
    def api_key_configured(self) -> bool:
        """Whether a real provider credential is set (vs. the demo placeholder)."""
        return bool(self.WEATHER_API_KEY) and self.WEATHER_API_KEY != DEMO_API_KEY
