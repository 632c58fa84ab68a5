"""Pydantic models for the parts of the OpenWeatherMap payloads this server consumes."""

from pydantic import BaseModel, Field


class OwmCondition(BaseModel):
    description: str = Field(description="Condition text, e.g. 'clear sky'.")


class OwmMain(BaseModel):
    temp: float
    feels_like: float | None = None
    humidity: float | None = None
    pressure: float | None = None


class OwmWind(BaseModel):
    speed: float = 0.0


class OwmSys(BaseModel):
    country: str = ""


class OwmCurrentPayload(BaseModel):
    """Body of GET /weather."""

    name: str
    sys: OwmSys = Field(default_factory=OwmSys)
    main: OwmMain
    weather: list[OwmCondition] = Field(min_length=1)
    wind: OwmWind = Field(default_factory=OwmWind)
    visibility: float = 0.0


class OwmForecastItem(BaseModel):
    dt: int = Field(description="Sample time, Unix epoch seconds.")
    main: OwmMain
    weather: list[OwmCondition] = Field(min_length=1)


class OwmCity(BaseModel):
    name: str
    country: str = ""


class OwmForecastPayload(BaseModel):
    """Body of GET /forecast."""

    city: OwmCity
    items: list[OwmForecastItem] = Field(default_factory=list, alias="list")
