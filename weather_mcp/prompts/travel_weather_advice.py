"""Travel weather advice prompt definition."""

from weather_mcp.prompts import PromptArgument, PromptDefinition, register_prompt

UNSPECIFIED_TRAVEL_DATE = "not specified"

_TRAVEL_WEATHER_ADVICE_PROMPT = """\
I am planning a trip to {{destination}}. Travel date: {{travel_date}}.

- Use **get_weather** for the current conditions in {{destination}}.
- Use **get_forecast** for {{destination}}. The forecast only covers the \
next five days; if the travel date is further out, say so and rely on the \
current conditions and typical seasonal weather instead.

Recommend what to pack, which activities suit the expected weather, and \
flag any conditions that could disrupt travel.
"""

TRAVEL_WEATHER_ADVICE = register_prompt(PromptDefinition(
    name="travel_weather_advice",
    template_text=_TRAVEL_WEATHER_ADVICE_PROMPT,
    title="Travel Weather Advice",
    description="Provide travel advice based on weather conditions",
    arguments=(
        PromptArgument(
            name="destination",
            description="Travel destination city",
            required=True,
        ),
        PromptArgument(
            name="travel_date",
            description="Planned travel date (YYYY-MM-DD)",
            required=False,
        ),
    ),
    tags=frozenset({"weather", "travel"}),
))
