"""Forecast fetcher: resolves a city to its forecast and bundles it."""

import logging

from thunderman.ingest.nws_client import NwsClient
from thunderman.models.bundle import (
    MissingWindPolicy,
    WeatherBundle,
    build_weather_bundle,
)
from thunderman.models.city import City
from thunderman.models.forecast import Forecast, ForecastVariant
from thunderman.models.geo import Point

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, nws_client: NwsClient):
        self.nws = nws_client

    async def fetch_for_point(
        self, point: Point, variant: ForecastVariant = ForecastVariant.STANDARD
    ) -> Forecast:
        """Resolve a point and fetch its forecast. Errors propagate."""
        info = await self.nws.resolve_point(point)
        rel = info.properties.relative_location.properties
        logger.info(
            "Resolved (%s, %s) to office %s near %s, %s",
            point.lat, point.lng, info.properties.forecast_office,
            rel.city, rel.state,
        )
        return await self.nws.fetch_forecast(info, variant)

    async def fetch_bundle(
        self,
        city: City,
        variant: ForecastVariant = ForecastVariant.STANDARD,
        policy: MissingWindPolicy = MissingWindPolicy.FAIL,
    ) -> WeatherBundle:
        """Fetch the forecast for a city and reduce it to a WeatherBundle."""
        forecast = await self.fetch_for_point(city.to_point(), variant)
        bundle = build_weather_bundle(city, forecast, policy)
        logger.info(
            "Bundled %d of %d %s periods for %s, %s (updated %s)",
            len(bundle.forecast), len(forecast.properties.periods), variant,
            city.city, city.state_id, bundle.updated.isoformat(),
        )
        return bundle
