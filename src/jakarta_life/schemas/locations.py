"""Catalog response schemas."""

from __future__ import annotations

from typing import Dict, List, Tuple

from pydantic import BaseModel


class OfficeModel(BaseModel):
    name: Dict[str, str]
    full_address: str
    short_address: str
    coordinates: Tuple[float, float]
    company_name: str
    icon: str


class DestinationModel(BaseModel):
    id: str
    name: Dict[str, str]
    short_address: str
    full_address: str
    coordinates: Tuple[float, float]
    icon: str
    category: str


class ScenarioModel(BaseModel):
    id: str
    name: Dict[str, str]
    icon: str
    description: Dict[str, str]
    flood_multiplier: float
    traffic_multiplier: float


class ActivityOptionModel(BaseModel):
    type: str
    name: Dict[str, str]
    icon: str
    category: str
    destination_id: str
    location_name: Dict[str, str]


class LocationsResponse(BaseModel):
    office: OfficeModel
    home: DestinationModel
    destinations: List[DestinationModel]
    activity_options: List[ActivityOptionModel]
    scenarios: List[ScenarioModel]
