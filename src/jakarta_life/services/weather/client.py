"""WeatherAPI.com client and the mock weather used when it is unavailable."""

from __future__ import annotations

import logging
import math
import time
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional

import httpx

from ...config import PLACEHOLDER_API_KEYS, settings
from ...errors import ConfigurationError, ProviderError
from ...models.domain import WeatherCondition, WeatherData, WeatherForecast
from ..geospatial import format_latlng
from ..timing import now_in

logger = logging.getLogger(__name__)

FORECAST_HOURS = 12

THUNDERSTORM_CODES = frozenset({1087, 1273, 1276, 1279, 1282})
HEAVY_RAIN_CODES = frozenset({1192, 1195, 1243, 1246, 1252})
LIGHT_RAIN_CODES = frozenset({1063, 1150, 1153, 1168, 1171, 1180, 1183, 1186, 1189, 1198, 1201, 1240})
CLOUDY_CODES = frozenset({1006, 1009})
PARTLY_CLOUDY_CODES = frozenset({1003})
SUNNY_CODES = frozenset({1000})

_CODE_TABLE = (
    (THUNDERSTORM_CODES, WeatherCondition.THUNDERSTORM),
    (HEAVY_RAIN_CODES, WeatherCondition.HEAVY_RAIN),
    (LIGHT_RAIN_CODES, WeatherCondition.LIGHT_RAIN),
    (CLOUDY_CODES, WeatherCondition.CLOUDY),
    (PARTLY_CLOUDY_CODES, WeatherCondition.PARTLY_CLOUDY),
    (SUNNY_CODES, WeatherCondition.SUNNY),
)

# Rainy-season rotation used by the mock generator.
MOCK_CONDITIONS = (
    WeatherCondition.HEAVY_RAIN,
    WeatherCondition.LIGHT_RAIN,
    WeatherCondition.CLOUDY,
    WeatherCondition.PARTLY_CLOUDY,
)
MOCK_CURRENT_RAINFALL = {WeatherCondition.HEAVY_RAIN: 25.0, WeatherCondition.LIGHT_RAIN: 8.0}
MOCK_FORECAST_RAINFALL = {WeatherCondition.HEAVY_RAIN: 25.0, WeatherCondition.LIGHT_RAIN: 10.0}


def map_condition(code: Optional[int], text: str = "") -> WeatherCondition:
    """Map a WeatherAPI condition code (or, failing that, its text) to a condition."""

    for codes, condition in _CODE_TABLE:
        if code in codes:
            return condition
    lower = (text or "").lower()
    if "thunder" in lower:
        return WeatherCondition.THUNDERSTORM
    if "heavy" in lower and "rain" in lower:
        return WeatherCondition.HEAVY_RAIN
    if "rain" in lower or "drizzle" in lower:
        return WeatherCondition.LIGHT_RAIN
    if "cloud" in lower or "overcast" in lower:
        return WeatherCondition.CLOUDY
    if "partly" in lower:
        return WeatherCondition.PARTLY_CLOUDY
    return WeatherCondition.SUNNY


def _condition_of(block: Mapping[str, Any]) -> WeatherCondition:
    condition = block.get("condition") or {}
    return map_condition(condition.get("code"), condition.get("text", ""))


class WeatherAPIClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.weather_api_key
        if (self.api_key or "").strip() in PLACEHOLDER_API_KEYS:
            raise ConfigurationError("Weather API key is not configured.")
        self.base_url = (base_url or settings.weather_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.http_max_retries
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.http_backoff_seconds
        self._transport = transport

    def forecast(self, days: int = 2) -> dict:
        """Raw ``forecast.json`` response for the city center."""

        params = {
            "key": self.api_key,
            "q": format_latlng(settings.city_center),
            "days": days,
            "aqi": "no",
            "alerts": "no",
        }
        url = f"{self.base_url}/forecast.json"
        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            attempt = 0
            while True:
                try:
                    response = client.get(url, params=params)
                    response.raise_for_status()
                    return response.json()
                except httpx.HTTPStatusError as e:
                    # 4xx means a bad key or query; retrying will not help.
                    if e.response.status_code < 500 or attempt >= self.max_retries:
                        raise ProviderError(f"Weather API error: {e.response.status_code}") from e
                except (httpx.TimeoutException, httpx.NetworkError) as e:
                    if attempt >= self.max_retries:
                        raise ProviderError(f"Failed to reach Weather API: {e}") from e
                except ValueError as e:
                    raise ProviderError("Weather API returned an unreadable response") from e
                attempt += 1
                wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                logger.debug(f"Weather API retry {attempt}/{self.max_retries} in {wait_time:.1f}s")
                time.sleep(wait_time)


def parse_weather(payload: Mapping[str, Any], now: datetime) -> WeatherData:
    """Current conditions plus the next twelve forecast hours after ``now``.

    Forecast times are local to the city; they inherit ``now``'s tzinfo.
    """
    current = payload["current"]
    forecast = []
    for day in payload.get("forecast", {}).get("forecastday", []):
        for hour in day.get("hour", []):
            if len(forecast) >= FORECAST_HOURS:
                break
            hour_time = datetime.strptime(hour["time"], "%Y-%m-%d %H:%M").replace(tzinfo=now.tzinfo)
            if hour_time <= now:
                continue
            forecast.append(
                WeatherForecast(
                    time=hour_time,
                    condition=_condition_of(hour),
                    temperature_c=float(hour.get("temp_c", 0.0)),
                    rain_probability=float(hour.get("chance_of_rain", 0.0)),
                    rainfall_mm=float(hour.get("precip_mm", 0.0)),
                )
            )

    return WeatherData(
        temperature_c=float(current.get("temp_c", 0.0)),
        humidity=float(current.get("humidity", 0.0)),
        condition=_condition_of(current),
        rainfall_mm=float(current.get("precip_mm", 0.0)),
        wind_speed_kph=float(current.get("wind_kph", 0.0)),
        forecast=tuple(forecast),
        last_updated=now,
        source="live",
    )


def generate_mock_weather(now: datetime) -> WeatherData:
    """Deterministic rainy-season weather that rotates every hour."""

    slot = int(now.timestamp() // 3600)
    condition = MOCK_CONDITIONS[slot % len(MOCK_CONDITIONS)]
    forecast = []
    for i in range(1, FORECAST_HOURS + 1):
        hour_condition = MOCK_CONDITIONS[(slot + i) % len(MOCK_CONDITIONS)]
        forecast.append(
            WeatherForecast(
                time=now + timedelta(hours=i),
                condition=hour_condition,
                temperature_c=round(28 + math.sin(i / 3) * 4, 1),
                rain_probability=82.5 if "rain" in hour_condition.value else 35.0,
                rainfall_mm=MOCK_FORECAST_RAINFALL.get(hour_condition, 0.0),
            )
        )
    return WeatherData(
        temperature_c=29.0,
        humidity=85.0,
        condition=condition,
        rainfall_mm=MOCK_CURRENT_RAINFALL.get(condition, 0.0),
        wind_speed_kph=12.0,
        forecast=tuple(forecast),
        last_updated=now,
        source="mock",
    )


def fetch_weather(now: Optional[datetime] = None, client: Optional[WeatherAPIClient] = None) -> WeatherData:
    now = now or now_in(settings.timezone)
    client = client if client is not None else WeatherAPIClient()
    return parse_weather(client.forecast(), now)


def fetch_weather_or_mock(
    now: Optional[datetime] = None,
    client: Optional[WeatherAPIClient] = None,
) -> WeatherData:
    """Live weather when the provider answers, mock weather otherwise."""

    now = now or now_in(settings.timezone)
    try:
        return fetch_weather(now, client)
    except (ConfigurationError, ProviderError) as exc:
        logger.warning(f"Using mock weather: {exc}")
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning(f"Weather API payload could not be parsed, using mock weather: {exc}")
    return generate_mock_weather(now)
