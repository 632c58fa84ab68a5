"""
Weather Prompt MCP Server.

Self-contained FastMCP instance serving the local prompt templates.
Variables are substituted at render time from prompt arguments.
Mounted into the registry via server_registry.py.
"""

from fastmcp import FastMCP

from weather_mcp.infrastructure.trace_decorator import traced
from weather_mcp.prompts import get_prompt
from weather_mcp.prompts.travel_weather_advice import UNSPECIFIED_TRAVEL_DATE

# Import prompt modules to trigger registration in PROMPT_REGISTRY
import weather_mcp.prompts.weather_summary


def build_prompt_server() -> FastMCP:
    prompt_mcp = FastMCP("weather_prompts")
    summary = get_prompt("weather_summary")
    travel_advice = get_prompt("travel_weather_advice")

    @prompt_mcp.prompt(
        name=summary.name,
        title=summary.title,
        description=summary.description,
        tags=set(summary.tags),
    )
    @traced(span_name="mcp.prompt.weather_summary", handler_type="prompt")
    async def weather_summary(city: str) -> str:
        """Render the weather summary prompt.

        Args:
            city: The city to generate weather summary for.
        """
        return summary.render(city=city)

    @prompt_mcp.prompt(
        name=travel_advice.name,
        title=travel_advice.title,
        description=travel_advice.description,
        tags=set(travel_advice.tags),
    )
    @traced(span_name="mcp.prompt.travel_weather_advice", handler_type="prompt")
    async def travel_weather_advice(
        destination: str,
        travel_date: str | None = None,
    ) -> str:
        """Render the travel weather advice prompt.

        Args:
            destination: Travel destination city.
            travel_date: Planned travel date (YYYY-MM-DD), optional.
        """
        return travel_advice.render(
            destination=destination,
            travel_date=travel_date or UNSPECIFIED_TRAVEL_DATE,
        )

    return prompt_mcp
