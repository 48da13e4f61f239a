"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from thunderman.models.city import City
from thunderman.models.forecast import Forecast, PointInfo

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-nws.example.com"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def point_body() -> dict:
    return load_fixture("nws_point_abq.json")


@pytest.fixture
def hourly_body() -> dict:
    return load_fixture("nws_forecast_hourly_abq.json")


@pytest.fixture
def forecast_body() -> dict:
    return load_fixture("nws_forecast_abq.json")


@pytest.fixture
def point_info(point_body: dict) -> PointInfo:
    return PointInfo.model_validate(point_body)


@pytest.fixture
def hourly_forecast(hourly_body: dict) -> Forecast:
    return Forecast.model_validate(hourly_body)


@pytest.fixture
def forecast(forecast_body: dict) -> Forecast:
    return Forecast.model_validate(forecast_body)


@pytest.fixture
def abq() -> City:
    return City(city="Albuquerque", state_id="NM", lat=35.1054, lng=-106.6465)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "client": {"base_url": TEST_BASE_URL},
        "report": {"window": 10},
        "storage": {"db_path": str(tmp_path / "bundles.db")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
