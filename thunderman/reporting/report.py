"""Weather report: the point -> metadata -> forecast -> console pipeline."""

import asyncio
import logging
import sys
from typing import TextIO

from thunderman.config.schema import AppConfig
from thunderman.errors import BoundaryError
from thunderman.ingest.nws_client import NwsClient
from thunderman.models.forecast import ForecastPeriod, ForecastVariant
from thunderman.models.geo import Point
from thunderman.reporting.formatters import format_period_line

logger = logging.getLogger(__name__)


def select_window(periods: list[ForecastPeriod], size: int) -> list[ForecastPeriod]:
    """Return the first ``size`` periods, or all of them if there are fewer."""
    if size < 1:
        raise BoundaryError(f"Report window must be at least 1, got {size}")
    return periods[: min(size, len(periods))]


async def run_report(
    lat: float,
    lng: float,
    *,
    window: int | None = None,
    variant: ForecastVariant | None = None,
    config: AppConfig | None = None,
    out: TextIO | None = None,
    nws_client: NwsClient | None = None,
) -> list[str]:
    """Print the upcoming forecast periods for a coordinate pair.

    Steps run strictly in order and the first failure aborts the report.
    Nothing is written until every line has been rendered. Returns the
    rendered lines.
    """
    config = config or AppConfig()
    if window is None:
        window = config.report.window
    if variant is None:
        variant = config.report.variant
    if window < 1:
        raise BoundaryError(f"Report window must be at least 1, got {window}")

    point = Point(lat=lat, lng=lng)
    nws = nws_client or NwsClient.from_config(config.client)
    try:
        logger.debug("Resolving point (%s, %s)", lat, lng)
        info = await nws.resolve_point(point)
        logger.debug(
            "Fetching %s forecast from %s",
            variant, info.properties.forecast_url(variant),
        )
        forecast = await nws.fetch_forecast(info, variant)
    finally:
        if nws_client is None:
            await nws.aclose()

    periods = forecast.properties.periods
    selected = select_window(periods, window)
    if len(selected) < window:
        logger.info(
            "Only %d of %d requested periods available for (%s, %s)",
            len(selected), window, lat, lng,
        )

    lines = [format_period_line(p) for p in selected]
    out = out or sys.stdout
    for line in lines:
        print(line, file=out)
    return lines


async def run_reports(
    coords: list[tuple[float, float]], **kwargs
) -> list[list[str] | BaseException]:
    """Run independent reports concurrently, one client per report.

    A failed report yields its exception in the result list and does not
    affect the others.
    """
    if kwargs.get("nws_client") is not None:
        raise ValueError("run_reports creates one client per report")
    return await asyncio.gather(
        *(run_report(lat, lng, **kwargs) for lat, lng in coords),
        return_exceptions=True,
    )
