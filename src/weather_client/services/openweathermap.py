"""OpenWeatherMap API client exposing the weather and forecast finders."""

from collections.abc import Callable
from typing import Any, TypeVar

import httpx
from loguru import logger

from ..core.config import settings
from ..models.forecast import Forecast
from ..models.location import Coordinate
from ..models.weather import Weather

T = TypeVar("T")

WEATHER_PATH = "/weather"
FORECAST_PATH = "/forecast"


class OpenWeatherMapError(Exception):
    """Base exception for OpenWeatherMap API errors."""

    pass


class OpenWeatherMapTimeoutError(OpenWeatherMapError):
    """Raised when an OpenWeatherMap request times out."""

    pass


class OpenWeatherMapUpstreamError(OpenWeatherMapError):
    """Raised when OpenWeatherMap returns a 5xx error or an unreadable body."""

    pass


class OpenWeatherMapClientError(OpenWeatherMapError):
    """Raised when OpenWeatherMap returns a 4xx error."""

    pass


class OpenWeatherMapNetworkError(OpenWeatherMapError):
    """Raised when a network error occurs (connection refused, DNS failure, etc)."""

    pass


class OpenWeatherMapClient:
    """Client for finding current weather and forecasts on OpenWeatherMap.

    Every finder sends one request and returns exactly one decoded entity or
    raises. Decoded entities are not checked for validity; callers decide
    what to do with ``is_valid() is False`` results.

    Example:
        >>> async def example():
        ...     async with OpenWeatherMapClient() as client:
        ...         weather = await client.find_weather_by_city_name("London")
        ...         return weather.is_valid()
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        units: str | None = None,
    ):
        """Initialize the client, falling back to settings for unset options."""
        self._client: httpx.AsyncClient | None = None
        self._base_url = (base_url or settings.OPENWEATHERMAP_BASE_URL).rstrip("/")
        self._api_key = api_key or settings.OPENWEATHERMAP_API_KEY
        self._timeout = timeout or settings.UPSTREAM_TIMEOUT
        self._units = units or settings.UNITS

    async def __aenter__(self):
        """Async context manager entry."""
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout),
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def find_weather_by_city_name(self, name: str) -> Weather:
        """Find current weather by city name (e.g. ``"London"`` or ``"London,GB"``)."""
        return await self._find(WEATHER_PATH, {"q": name}, Weather.from_wire)

    async def find_weather_by_city_id(self, city_id: int) -> Weather:
        """Find current weather by provider city id."""
        return await self._find(WEATHER_PATH, {"id": city_id}, Weather.from_wire)

    async def find_weather_by_coordinate(self, coordinate: Coordinate) -> Weather:
        """Find current weather at a coordinate.

        Raises:
            ValueError: If the coordinate is not valid
        """
        return await self._find(
            WEATHER_PATH,
            self._coordinate_params(coordinate),
            Weather.from_wire,
        )

    async def find_forecast_by_city_name(self, name: str) -> Forecast:
        """Find the forecast for a city name."""
        return await self._find(FORECAST_PATH, {"q": name}, Forecast.from_wire)

    async def find_forecast_by_coordinate(self, coordinate: Coordinate) -> Forecast:
        """Find the forecast at a coordinate.

        Raises:
            ValueError: If the coordinate is not valid
        """
        return await self._find(
            FORECAST_PATH,
            self._coordinate_params(coordinate),
            Forecast.from_wire,
        )

    @staticmethod
    def _coordinate_params(coordinate: Coordinate) -> dict[str, Any]:
        if not coordinate.is_valid():
            raise ValueError(f"Invalid coordinate: {coordinate}")
        return {"lat": coordinate.latitude, "lon": coordinate.longitude}

    def _build_params(self, query: dict[str, Any]) -> dict[str, Any]:
        params = dict(query)
        params["units"] = self._units

        # Add API key if configured
        if self._api_key:
            params["appid"] = self._api_key
        return params

    async def _find(
        self,
        path: str,
        query: dict[str, Any],
        decoder: Callable[[Any], T],
    ) -> T:
        """Send one GET request and decode its JSON body.

        Raises:
            OpenWeatherMapTimeoutError: If the request times out
            OpenWeatherMapUpstreamError: On a 5xx status or a non-JSON body
            OpenWeatherMapClientError: On a 4xx status
            OpenWeatherMapNetworkError: On any other transport failure
            DecodeError: If the body does not match the wire schema
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        url = f"{self._base_url}{path}"

        try:
            logger.debug("Fetching from OpenWeatherMap", url=url)
            response = await self._client.get(url, params=self._build_params(query))

        except httpx.TimeoutException as e:
            logger.warning("OpenWeatherMap request timed out", url=url)
            raise OpenWeatherMapTimeoutError("Upstream API request timed out") from e

        except httpx.ConnectError as e:
            logger.warning("Failed to connect to OpenWeatherMap", error=str(e))
            raise OpenWeatherMapNetworkError("Failed to connect to upstream API") from e

        except httpx.HTTPError as e:
            logger.error("HTTP error occurred", error=str(e))
            raise OpenWeatherMapNetworkError(f"Network error: {e}") from e

        if response.status_code >= 500:
            logger.warning(
                "OpenWeatherMap returned 5xx error",
                status_code=response.status_code,
            )
            raise OpenWeatherMapUpstreamError(
                f"Upstream API returned {response.status_code}"
            )

        if response.status_code >= 400:
            logger.warning(
                "OpenWeatherMap returned 4xx error",
                status_code=response.status_code,
            )
            raise OpenWeatherMapClientError(
                f"Upstream API returned {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("OpenWeatherMap returned a non-JSON body", url=url)
            raise OpenWeatherMapUpstreamError("Upstream API returned invalid JSON") from e

        return decoder(payload)
