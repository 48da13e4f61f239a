"""Tests for report and bundle formatters."""

import json

from thunderman.models.bundle import build_weather_bundle
from thunderman.models.city import City
from thunderman.models.forecast import Forecast
from thunderman.reporting.formatters import (
    format_bundle_json,
    format_bundle_text,
    format_nearest,
    format_period_line,
)


class TestFormatPeriodLine:
    def test_standard_period(self, forecast: Forecast):
        line = format_period_line(forecast.properties.periods[1])
        assert line == "18:00:00-06:00:00 = 48°F :: Mostly Clear"

    def test_negative_temperature(self, forecast_body: dict):
        forecast_body["properties"]["periods"][0]["temperature"] = -12
        forecast = Forecast.model_validate(forecast_body)
        assert " = -12°F :: " in format_period_line(forecast.properties.periods[0])


class TestFormatBundle:
    def test_text(self, abq: City, forecast: Forecast):
        text = format_bundle_text(build_weather_bundle(abq, forecast))
        lines = text.splitlines()
        assert lines[0].startswith("=== Albuquerque, NM | updated 2026-10-18T19:12:44")
        assert len(lines) == 5
        assert "W 10 to 15 mph :: Sunny" in lines[1]

    def test_json(self, abq: City, forecast: Forecast):
        data = json.loads(format_bundle_json(build_weather_bundle(abq, forecast)))
        assert data["location"]["city"] == "Albuquerque"
        assert len(data["forecast"]) == 4
        assert data["forecast"][0]["wind_direction"] == "W"


def test_format_nearest(abq: City):
    assert format_nearest(abq, 6.17) == (
        "Albuquerque, NM (35.1054, -106.6465) is 6.2 km away"
    )
