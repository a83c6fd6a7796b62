"""Route display and route data schemas."""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, Field

from ..models.domain import SeverityLevel


class TrafficSegmentModel(BaseModel):
    start_index: int
    end_index: int
    color: str
    speed_kmh: int


class RouteDisplayModel(BaseModel):
    encoded_polyline: str
    decoded_path: List[Tuple[float, float]]
    duration: int = Field(..., description="Minutes, including traffic.")
    distance: float = Field(..., description="Kilometres, one decimal.")
    traffic_segments: List[TrafficSegmentModel] = Field(default_factory=list)
    fallback: bool = Field(default=False, description="True when this is a straight-line estimate.")
    google_maps_url: str


class AlternateRouteModel(BaseModel):
    name: str
    duration: int
    flood_risk: SeverityLevel
    traffic_level: SeverityLevel


class RouteDataModel(BaseModel):
    origin: str
    destination: str
    distance_km: int
    normal_duration: int
    current_duration: int
    flood_affected: bool
    alternate_routes: List[AlternateRouteModel] = Field(default_factory=list)


class TrafficEstimateModel(BaseModel):
    duration: int
    traffic_level: SeverityLevel
