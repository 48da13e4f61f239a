"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from thunderman.config.defaults import (
    DEFAULT_DB_PATH,
    DEFAULT_USER_AGENT,
    DEFAULT_WINDOW,
    NWS_BASE_URL,
)
from thunderman.models.bundle import MissingWindPolicy
from thunderman.models.forecast import ForecastVariant


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NWS_BASE_URL
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    timeout: float = Field(default=30.0, gt=0.0)


class ReportConfig(BaseModel):
    model_config = {"extra": "forbid"}

    window: int = Field(default=DEFAULT_WINDOW, ge=1)
    variant: ForecastVariant = ForecastVariant.HOURLY


class BundleConfig(BaseModel):
    model_config = {"extra": "forbid"}

    variant: ForecastVariant = ForecastVariant.STANDARD
    missing_wind: MissingWindPolicy = MissingWindPolicy.FAIL


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = DEFAULT_DB_PATH


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    client: ClientConfig = ClientConfig()
    report: ReportConfig = ReportConfig()
    bundle: BundleConfig = BundleConfig()
    storage: StorageConfig = StorageConfig()
