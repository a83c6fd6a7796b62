"""HTTP client for the Google Directions and Places web services."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx

from ...config import PLACEHOLDER_API_KEYS, settings
from ...errors import ConfigurationError, ProviderError
from ...models.domain import Coordinates
from ..geospatial import format_latlng

logger = logging.getLogger(__name__)

# Statuses that describe the request itself rather than a transient failure.
TERMINAL_STATUSES = frozenset(
    {"OK", "ZERO_RESULTS", "NOT_FOUND", "INVALID_REQUEST", "REQUEST_DENIED", "MAX_ROUTE_LENGTH_EXCEEDED"}
)


class GoogleMapsClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.google_maps_api_key
        if (self.api_key or "").strip() in PLACEHOLDER_API_KEYS:
            raise ConfigurationError("Google Maps API key is not configured.")
        self.base_url = (base_url or settings.google_maps_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.http_max_retries
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.http_backoff_seconds
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=min(self.timeout, 10.0)),
            transport=self._transport,
        )

    def _get_json(self, path: str, params: dict[str, Any]) -> dict:
        """GET ``path`` with retries; returns the decoded JSON body."""
        url = f"{self.base_url}/{path}"
        query = {**params, "key": self.api_key}

        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.get(url, params=query)
                    response.raise_for_status()
                    data = response.json()
                    status = data.get("status")
                    if status and status not in TERMINAL_STATUSES:
                        raise ProviderError(f"Google {path} returned status {status}")
                    return data
                except httpx.HTTPStatusError as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise ProviderError(
                            f"Google {path} request failed with HTTP {e.response.status_code}"
                        ) from e
                    time.sleep(self.backoff_seconds * attempt)
                except (httpx.TimeoutException, httpx.NetworkError) as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        logger.warning(f"Google {path} request failed after {self.max_retries} retries: {e}")
                        raise ProviderError(f"Failed to reach Google {path}: {e}") from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(
                        f"Google {path} network error, retrying in {wait_time:.1f}s "
                        f"(attempt {attempt}/{self.max_retries}): {e}"
                    )
                    time.sleep(wait_time)
                except (ProviderError, ValueError) as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        if isinstance(e, ProviderError):
                            raise
                        raise ProviderError(f"Google {path} returned an unreadable response") from e
                    time.sleep(self.backoff_seconds * attempt)
        finally:
            client.close()

    def directions(
        self,
        origin: Coordinates | str,
        destination: Coordinates | str,
        departure_time: str | int = "now",
        traffic_model: str = "best_guess",
        alternatives: bool | str | None = None,
    ) -> dict:
        """Raw Directions API response for a driving trip with traffic estimates."""
        params: dict[str, Any] = {
            "origin": origin if isinstance(origin, str) else format_latlng(origin),
            "destination": destination if isinstance(destination, str) else format_latlng(destination),
            "departure_time": str(departure_time),
            "traffic_model": traffic_model,
        }
        if alternatives:
            params["alternatives"] = "true" if alternatives is True else str(alternatives)
        return self._get_json("directions/json", params)

    def text_search(
        self,
        query: str,
        language: str = "id",
        location: Optional[Coordinates] = None,
        radius_meters: Optional[int] = None,
    ) -> dict:
        """Raw Places Text Search response, biased towards Jakarta."""
        params = {
            "query": f"{query} Jakarta",
            "location": format_latlng(location or settings.city_center),
            "radius": radius_meters or settings.places_radius_meters,
            "language": language,
        }
        return self._get_json("place/textsearch/json", params)


def check_health(api_key: str | None = None) -> bool:
    """True when a Google Maps key is configured; no request is made."""
    key = api_key if api_key is not None else settings.google_maps_api_key
    return (key or "").strip() not in PLACEHOLDER_API_KEYS
