"""Weather, flood, traffic and place schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from ..models.domain import SeverityLevel, WeatherCondition, WeatherSeverity


class WeatherForecastModel(BaseModel):
    time: datetime
    condition: WeatherCondition
    temperature_c: float
    rain_probability: float
    rainfall_mm: float


class WeatherDataModel(BaseModel):
    temperature_c: float
    humidity: float
    condition: WeatherCondition
    rainfall_mm: float
    wind_speed_kph: float
    forecast: List[WeatherForecastModel]
    last_updated: datetime
    source: str


class WeatherImpactModel(BaseModel):
    multiplier: float
    severity: WeatherSeverity
    description: Dict[str, str]
    icon: str


class WeatherBadgeModel(BaseModel):
    text: str
    color: str


class WeatherImpactResponse(BaseModel):
    condition: WeatherCondition
    impact: WeatherImpactModel
    badge: Optional[WeatherBadgeModel] = None
    delay_text: Optional[str] = None
    adjusted_duration: Optional[int] = None
    departure_time: Optional[str] = Field(default=None, description="HH:mm that still meets the arrival time.")


class FloodPredictionModel(BaseModel):
    next_hour: SeverityLevel
    next_3_hours: SeverityLevel
    next_6_hours: SeverityLevel
    peak_time: Optional[datetime] = None
    peak_level: Optional[SeverityLevel] = None


class FloodDataModel(BaseModel):
    region_id: str
    level: SeverityLevel
    water_level_cm: int
    prediction: FloodPredictionModel
    last_updated: datetime
    affected_areas: List[str] = Field(default_factory=list)


class TrafficDataModel(BaseModel):
    region_id: str
    level: SeverityLevel
    average_speed_kmh: int
    congestion_points: List[str]
    estimated_delay_minutes: int
    last_updated: datetime
    source: str


class PlaceModel(BaseModel):
    place_id: str
    name: str
    address: str
    coordinates: Tuple[float, float]


class RegionSummaryModel(BaseModel):
    region_id: str
    name: str
    coordinates: Tuple[float, float]
    flood_level: SeverityLevel
    traffic_level: SeverityLevel
    level: SeverityLevel = Field(..., description="Worse of flood_level and traffic_level.")
