import pytest

from weather_mcp.prompts import PromptDefinition, get_prompt, register_prompt
from weather_mcp.prompts.travel_weather_advice import TRAVEL_WEATHER_ADVICE
from weather_mcp.prompts.weather_summary import WEATHER_SUMMARY


def test_weather_summary_renders_city():
    text = WEATHER_SUMMARY.render(city="Berlin")

    assert "{{" not in text
    assert "weather summary for Berlin" in text


def test_travel_advice_variables():
    assert set(TRAVEL_WEATHER_ADVICE.variables) == {"destination", "travel_date"}

    text = TRAVEL_WEATHER_ADVICE.render(destination="Sydney", travel_date="2024-12-24")

    assert "trip to Sydney. Travel date: 2024-12-24." in text


def test_missing_variable_is_left_in_place():
    assert "{{travel_date}}" in TRAVEL_WEATHER_ADVICE.render(destination="Sydney")


def test_registry_lookup_and_duplicates():
    assert get_prompt("weather_summary") is WEATHER_SUMMARY

    with pytest.raises(ValueError, match="Duplicate prompt name"):
        register_prompt(PromptDefinition(name="weather_summary", template_text=""))

    with pytest.raises(KeyError):
        get_prompt("packing_list")
