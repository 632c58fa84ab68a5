"""Pydantic models for weather lookups and the unit systems they are rendered in."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    KELVIN = "kelvin"

    @property
    def symbol(self) -> str:
        """Temperature display symbol."""
        return _SYMBOLS[self]

    @property
    def provider_value(self) -> str:
        """Value sent as the provider's `units` query parameter."""
        # OpenWeatherMap calls Kelvin output "standard"
        return "standard" if self is UnitSystem.KELVIN else self.value

    @property
    def wind_unit(self) -> str:
        return "mph" if self is UnitSystem.IMPERIAL else "m/s"


_SYMBOLS = {
    UnitSystem.METRIC: "°C",
    UnitSystem.IMPERIAL: "°F",
    UnitSystem.KELVIN: "K",
}

DEFAULT_UNITS = UnitSystem.METRIC


class CurrentConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    place: str = Field(description="Place name as resolved by the provider.")
    country: str = Field(description="ISO country code.")
    temperature: float = Field(description="Current temperature in the requested units.")
    feels_like: float = Field(description="Feels-like temperature in the requested units.")
    description: str = Field(description="Short weather condition description.")
    humidity_percent: float = Field(description="Relative humidity percentage.")
    pressure_hpa: float = Field(description="Atmospheric pressure in hPa.")
    wind_speed: float = Field(description="Wind speed (m/s, or mph for imperial).")
    visibility_m: float = Field(description="Visibility distance in metres.")


class ForecastSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(description="Sample time on the server's local calendar.")
    temperature: float = Field(description="Forecast temperature in the requested units.")
    description: str = Field(description="Short weather condition description.")


class ForecastReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    place: str = Field(description="Place name as resolved by the provider.")
    country: str = Field(description="ISO country code.")
    samples: tuple[ForecastSample, ...] = Field(description="Samples in provider order.")


class DailyBucket(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: date = Field(description="Calendar day shared by every sample in the bucket.")
    samples: tuple[ForecastSample, ...] = Field(description="Samples for the day, chronological.")
