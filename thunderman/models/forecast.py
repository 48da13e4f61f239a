"""NWS API response models.

Field aliases are the wire (camelCase) names used by api.weather.gov. They
are the only place the wire format is described; decoding and validation
happen in pydantic. Payload keys that are not modelled are kept as extras.
"""

from enum import StrEnum
from typing import Any

from pydantic import AwareDatetime, BaseModel, Field, model_validator


class ForecastVariant(StrEnum):
    STANDARD = "standard"
    HOURLY = "hourly"


class WireModel(BaseModel):
    model_config = {"extra": "allow", "populate_by_name": True}


class RelativeProps(WireModel):
    city: str
    state: str
    distance: Any = None
    bearing: Any = None


class RelativeLocation(WireModel):
    geometry: Any = None
    properties: RelativeProps


class PointProps(WireModel):
    forecast_office: str = Field(alias="forecastOffice")
    forecast: str
    forecast_hourly: str = Field(alias="forecastHourly")
    forecast_grid_data: str = Field(alias="forecastGridData")
    observation_stations: str = Field(alias="observationStations")
    relative_location: RelativeLocation = Field(alias="relativeLocation")
    forecast_zone: str = Field(alias="forecastZone")
    county: str
    fire_weather_zone: str = Field(alias="fireWeatherZone")
    time_zone: str = Field(alias="timeZone")
    radar_station: str = Field(alias="radarStation")

    def forecast_url(self, variant: ForecastVariant) -> str:
        if variant == ForecastVariant.HOURLY:
            return self.forecast_hourly
        return self.forecast


class PointInfo(WireModel):
    """Result of GET /points/{lat},{lng}."""

    id: str
    properties: PointProps


class ForecastPeriod(WireModel):
    number: int = Field(ge=0, le=65535)
    name: str
    start_time: AwareDatetime = Field(alias="startTime")
    end_time: AwareDatetime = Field(alias="endTime")
    is_day_time: bool = Field(alias="isDaytime")
    temperature: int = Field(ge=-128, le=127)
    temperature_unit: str = Field(alias="temperatureUnit")
    wind_speed: str | None = Field(default=None, alias="windSpeed")
    wind_direction: str | None = Field(default=None, alias="windDirection")
    icon: str
    short_forecast: str = Field(alias="shortForecast")
    detailed_forecast: str = Field(alias="detailedForecast")

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "ForecastPeriod":
        if self.end_time < self.start_time:
            raise ValueError(
                f"period {self.number} ends ({self.end_time.isoformat()}) "
                f"before it starts ({self.start_time.isoformat()})"
            )
        return self


class ForecastProps(WireModel):
    updated: AwareDatetime
    units: str | None = None
    generated_at: AwareDatetime = Field(alias="generatedAt")
    elevation: Any = None
    periods: list[ForecastPeriod] = Field(min_length=1)


class Forecast(WireModel):
    """Result of GET on a forecast or forecastHourly URL."""

    properties: ForecastProps
