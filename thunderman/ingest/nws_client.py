"""NWS (api.weather.gov) point metadata and forecast client."""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from thunderman.config.defaults import DEFAULT_USER_AGENT, NWS_BASE_URL
from thunderman.config.schema import ClientConfig
from thunderman.errors import DecodeError, NetworkError
from thunderman.models.forecast import Forecast, ForecastVariant, PointInfo
from thunderman.models.geo import Point

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class NwsClient:
    """Async client for the two-step NWS lookup.

    A point is first resolved to its metadata (which carries the forecast
    URLs for the grid cell containing it); the forecast is then fetched
    from the URL found there. Each call performs a fresh request.

    When no ``http_client`` is given the client creates its own
    ``httpx.AsyncClient`` and closes it in ``aclose``.
    """

    def __init__(
        self,
        base_url: str = NWS_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=timeout, follow_redirects=True
        )

    @classmethod
    def from_config(
        cls, config: ClientConfig, http_client: httpx.AsyncClient | None = None
    ) -> "NwsClient":
        return cls(
            base_url=config.base_url,
            user_agent=config.user_agent,
            timeout=config.timeout,
            http_client=http_client,
        )

    async def __aenter__(self) -> "NwsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    def point_url(self, point: Point) -> str:
        return f"{self.base_url}/points/{point.lat},{point.lng}"

    async def resolve_point(self, point: Point) -> PointInfo:
        """Fetch the metadata for a point, including its forecast URLs."""
        return await self._get(self.point_url(point), PointInfo)

    async def fetch_forecast(
        self, info: PointInfo, variant: ForecastVariant = ForecastVariant.STANDARD
    ) -> Forecast:
        """Fetch the standard or hourly forecast linked from point metadata."""
        return await self._get(info.properties.forecast_url(variant), Forecast)

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": "application/geo+json"}

    async def _get(self, url: str, model: type[ModelT]) -> ModelT:
        try:
            resp = await self._http.get(
                url, headers=self._headers(), timeout=self.timeout
            )
        except httpx.RequestError as e:
            logger.error("NWS request failed: GET %s -> %s", url, e)
            raise NetworkError(f"Request failed: GET {url}: {e}", url) from e

        logger.debug("GET %s -> %d: %s", url, resp.status_code, resp.text)
        if not resp.is_success:
            logger.error("NWS API %d: GET %s", resp.status_code, url)
            raise NetworkError(
                f"HTTP {resp.status_code}: GET {url}", url, resp.status_code
            )

        try:
            return model.model_validate_json(resp.content)
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected {model.__name__} body from {url}: {e}", url
            ) from e
