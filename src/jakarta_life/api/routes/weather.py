"""Weather endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import Literal, Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...models.domain import WeatherCondition
from ...schemas.conditions import WeatherDataModel, WeatherImpactResponse
from ...services.weather.client import fetch_weather_or_mock
from ...services.weather.impact import (
    format_weather_impact_badge,
    get_weather_adjusted_recommendation,
    get_weather_delay_text,
    get_weather_impact,
)

router = APIRouter(prefix="/weather", tags=["weather"])


@router.get("", response_model=WeatherDataModel, status_code=status.HTTP_200_OK)
def current_weather() -> WeatherDataModel:
    """Current conditions and a 12 hour forecast; simulated when the provider is unavailable."""
    return WeatherDataModel.model_validate(asdict(fetch_weather_or_mock()))


@router.get("/impact/{condition}", response_model=WeatherImpactResponse, status_code=status.HTTP_200_OK)
def weather_impact(
    condition: WeatherCondition,
    language: Literal["en", "id"] = Query(default="id"),
    base_duration: Optional[int] = Query(default=None, ge=0, description="Free-flow minutes"),
    arrival_time: Optional[str] = Query(default=None, description="Target arrival, HH:mm"),
) -> WeatherImpactResponse:
    impact = get_weather_impact(condition)
    body = {
        "condition": condition,
        "impact": asdict(impact),
        "badge": format_weather_impact_badge(condition, language),
        "delay_text": get_weather_delay_text(condition, language),
    }
    if base_duration is not None and arrival_time is not None:
        try:
            adjusted = get_weather_adjusted_recommendation(base_duration, arrival_time, condition)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        body["adjusted_duration"] = adjusted["adjusted_duration"]
        body["departure_time"] = adjusted["departure_time"]
    return WeatherImpactResponse.model_validate(body)
