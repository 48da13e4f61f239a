"""Storable forecast bundles tied to a city."""

import logging
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel

from thunderman.errors import AggregationError
from thunderman.models.city import City
from thunderman.models.forecast import Forecast, ForecastPeriod

logger = logging.getLogger(__name__)


class MissingWindPolicy(StrEnum):
    FAIL = "fail"
    SKIP = "skip"


class ForecastBundle(BaseModel):
    model_config = {"frozen": True}

    start: datetime
    end: datetime
    temperature: int
    # TODO: parse into a number once range values ("10 to 15 mph") have a representation
    wind_speed: str
    wind_direction: str
    short_forecast: str


class WeatherBundle(BaseModel):
    """Forecast for a specific city, the unit written to storage."""

    model_config = {"frozen": True}

    location: City
    forecast: list[ForecastBundle]
    updated: datetime


def bundle_period(period: ForecastPeriod) -> ForecastBundle:
    """Reduce one forecast period. Both wind fields are required."""
    if period.wind_speed is None:
        raise AggregationError(
            f"Period {period.number} ({period.name!r}) has no wind speed",
            period.number,
        )
    if period.wind_direction is None:
        raise AggregationError(
            f"Period {period.number} ({period.name!r}) has no wind direction",
            period.number,
        )
    return ForecastBundle(
        start=period.start_time,
        end=period.end_time,
        temperature=period.temperature,
        wind_speed=period.wind_speed,
        wind_direction=period.wind_direction,
        short_forecast=period.short_forecast,
    )


def build_weather_bundle(
    city: City,
    forecast: Forecast,
    policy: MissingWindPolicy = MissingWindPolicy.FAIL,
) -> WeatherBundle:
    """Build a WeatherBundle from a forecast, preserving period order.

    With MissingWindPolicy.FAIL the first period missing a wind field
    aborts the whole bundle; with SKIP such periods are dropped.
    """
    entries: list[ForecastBundle] = []
    for period in forecast.properties.periods:
        try:
            entries.append(bundle_period(period))
        except AggregationError as e:
            if policy == MissingWindPolicy.FAIL:
                raise
            logger.warning("Skipping period for %s: %s", city.city, e)

    return WeatherBundle(
        location=city,
        forecast=entries,
        updated=forecast.properties.updated,
    )
