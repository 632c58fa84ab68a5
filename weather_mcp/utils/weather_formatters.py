"""Text rendering for current conditions and bucketed forecasts."""

from collections.abc import Sequence

from weather_mcp.schemas.weather import CurrentConditions, DailyBucket, UnitSystem

FORECAST_DAYS_LABEL = "5-day"


def _format_number(value: float) -> str:
    """Render integral floats without a trailing '.0' (15.0 -> '15')."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_current(conditions: CurrentConditions, units: UnitSystem) -> str:
    """Format current conditions into a fixed multi-line block."""
    symbol = units.symbol
    lines = [
        f"Current weather in {conditions.place}, {conditions.country}:",
        f"Temperature: {_format_number(conditions.temperature)}{symbol}",
        f"Feels like: {_format_number(conditions.feels_like)}{symbol}",
        f"Description: {conditions.description}",
        f"Humidity: {_format_number(conditions.humidity_percent)}%",
        f"Pressure: {_format_number(conditions.pressure_hpa)} hPa",
        f"Wind: {_format_number(conditions.wind_speed)} {units.wind_unit}",
        f"Visibility: {_format_number(conditions.visibility_m / 1000)} km",
    ]
    return "\n".join(lines)


def format_forecast(
    place: str,
    country: str,
    buckets: Sequence[DailyBucket],
    units: UnitSystem,
) -> str:
    """Format day buckets: a header, then one block per day separated by blank lines."""
    header = f"{FORECAST_DAYS_LABEL} weather forecast for {place}, {country}:"
    if not buckets:
        return header

    parts = [header, ""]
    for bucket in buckets:
        parts.append(f"{bucket.day.strftime('%a %b %d %Y')}:")
        for sample in bucket.samples:
            parts.append(
                f"  {sample.timestamp.strftime('%I:%M %p')}: "
                f"{_format_number(sample.temperature)}{units.symbol}, "
                f"{sample.description}"
            )
        parts.append("")
    return "\n".join(parts) + "\n"
