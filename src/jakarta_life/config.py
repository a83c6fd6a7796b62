"""Application configuration and settings management."""

from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_API_KEYS = frozenset({"", "your_key_here"})


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="JKT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Life in Jakarta API"
    api_prefix: str = "/api"
    google_maps_api_key: Optional[str] = Field(
        default=None,
        description="Google Maps key used for Directions and Places requests.",
    )
    weather_api_key: Optional[str] = Field(
        default=None,
        description="WeatherAPI.com key used for current conditions and forecasts.",
    )
    google_maps_base_url: str = Field(default="https://maps.googleapis.com/maps/api")
    weather_api_base_url: str = Field(default="https://api.weatherapi.com/v1")
    http_timeout_seconds: float = Field(default=15.0, gt=0.0)
    http_max_retries: int = Field(default=2, ge=0)
    http_backoff_seconds: float = Field(default=0.5, ge=0.0)
    city_center: tuple[float, float] = Field(
        default=(-6.2088, 106.8456),
        description="Jakarta city center (Monas area) used to bias searches and traffic probes.",
    )
    places_radius_meters: int = Field(default=30000, ge=1)
    places_max_results: int = Field(default=5, ge=1)
    timezone: str = "Asia/Jakarta"
    default_scenario: Literal["normal", "heavy-rain"] = "normal"
    default_language: Literal["en", "id"] = "id"
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @property
    def google_maps_configured(self) -> bool:
        return (self.google_maps_api_key or "").strip() not in PLACEHOLDER_API_KEYS

    @property
    def weather_api_configured(self) -> bool:
        return (self.weather_api_key or "").strip() not in PLACEHOLDER_API_KEYS

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("city_center", mode="before")
    @classmethod
    def _parse_coordinates_from_env(cls, value: Any) -> Any:
        """Accept "lat,lng" or a JSON array for the city center."""
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(float(item) for item in parsed)
            except (json.JSONDecodeError, TypeError, ValueError):
                pass
            parts = [item.strip() for item in value.split(",") if item.strip()]
            return tuple(float(item) for item in parts)
        return value


settings = Settings()
