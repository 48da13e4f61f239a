"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from thunderman.config.schema import (
    AppConfig,
    BundleConfig,
    ClientConfig,
    ReportConfig,
)
from thunderman.models.bundle import MissingWindPolicy
from thunderman.models.forecast import ForecastVariant


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.client.user_agent == "thunderman"
        assert config.client.timeout == 30.0
        assert config.report.window == 10
        assert config.bundle.missing_wind == MissingWindPolicy.FAIL
        assert config.storage.db_path == "data/thunderman.db"

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            AppConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            ClientConfig(retries=3)


class TestClientConfig:
    def test_timeout_positive(self):
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0)

    def test_empty_user_agent_rejected(self):
        with pytest.raises(ValidationError):
            ClientConfig(user_agent="")


class TestReportConfig:
    def test_window_at_least_one(self):
        with pytest.raises(ValidationError):
            ReportConfig(window=0)

    def test_variant_from_string(self):
        assert ReportConfig(variant="standard").variant == ForecastVariant.STANDARD

    def test_unknown_variant(self):
        with pytest.raises(ValidationError):
            ReportConfig(variant="daily")


class TestBundleConfig:
    def test_policy_from_string(self):
        assert BundleConfig(missing_wind="skip").missing_wind == MissingWindPolicy.SKIP
