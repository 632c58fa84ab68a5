"""Weather summary prompt definition."""

from weather_mcp.prompts import PromptArgument, PromptDefinition, register_prompt

_WEATHER_SUMMARY_PROMPT = """\
Generate a comprehensive weather summary for {{city}}.

1. Call **get_weather** for {{city}} to get the current conditions.
2. Call **get_forecast** for {{city}} to get the outlook for the coming days.
3. Summarize the current temperature, how it feels, humidity, wind and \
visibility, then describe how conditions change over the forecast period.

Keep the summary short and point out anything notable, such as rain, \
strong wind or large temperature swings.
"""

WEATHER_SUMMARY = register_prompt(PromptDefinition(
    name="weather_summary",
    template_text=_WEATHER_SUMMARY_PROMPT,
    title="Weather Summary",
    description="Generate a comprehensive weather summary",
    arguments=(
        PromptArgument(
            name="city",
            description="The city to generate weather summary for",
            required=True,
        ),
    ),
    tags=frozenset({"weather", "summary"}),
))
