from datetime import date

import pytest
from conftest import sample

from weather_mcp.schemas.weather import CurrentConditions, DailyBucket, UnitSystem
from weather_mcp.utils.weather_formatters import format_current, format_forecast


@pytest.fixture
def london() -> CurrentConditions:
    return CurrentConditions(
        place="London",
        country="GB",
        temperature=15,
        feels_like=14,
        description="clear sky",
        humidity_percent=70,
        pressure_hpa=1012,
        wind_speed=3.5,
        visibility_m=10000,
    )


@pytest.mark.parametrize(
    ("units", "symbol"),
    [(UnitSystem.METRIC, "°C"), (UnitSystem.IMPERIAL, "°F"), (UnitSystem.KELVIN, "K")],
)
def test_unit_symbols(units, symbol):
    assert units.symbol == symbol


def test_kelvin_is_sent_as_standard():
    assert UnitSystem.KELVIN.provider_value == "standard"
    assert UnitSystem.METRIC.provider_value == "metric"
    assert UnitSystem.IMPERIAL.provider_value == "imperial"


def test_format_current_metric(london):
    text = format_current(london, UnitSystem.METRIC)

    assert text == (
        "Current weather in London, GB:\n"
        "Temperature: 15°C\n"
        "Feels like: 14°C\n"
        "Description: clear sky\n"
        "Humidity: 70%\n"
        "Pressure: 1012 hPa\n"
        "Wind: 3.5 m/s\n"
        "Visibility: 10 km"
    )


def test_format_current_imperial_uses_mph(london):
    lines = format_current(london, UnitSystem.IMPERIAL).splitlines()

    assert lines[1].endswith("°F")
    assert lines[6] == "Wind: 3.5 mph"


def test_format_current_fractional_visibility(london):
    hazy = london.model_copy(update={"visibility_m": 2500})

    assert format_current(hazy, UnitSystem.METRIC).endswith("Visibility: 2.5 km")


def test_format_forecast_without_days_is_header_only():
    assert format_forecast("London", "GB", [], UnitSystem.METRIC) == (
        "5-day weather forecast for London, GB:"
    )


def test_format_forecast_days_and_samples():
    buckets = [
        DailyBucket(day=date(2024, 1, 1), samples=(sample(1, 9, 5.5, "light rain"), sample(1, 15, 8))),
        DailyBucket(day=date(2024, 1, 2), samples=(sample(2, 0, -1, "snow"),)),
    ]

    text = format_forecast("London", "GB", buckets, UnitSystem.METRIC)

    assert text == (
        "5-day weather forecast for London, GB:\n"
        "\n"
        "Mon Jan 01 2024:\n"
        "  09:00 AM: 5.5°C, light rain\n"
        "  03:00 PM: 8°C, clear sky\n"
        "\n"
        "Tue Jan 02 2024:\n"
        "  12:00 AM: -1°C, snow\n"
        "\n"
    )
