"""Recommendation and weekly plan schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

from ..models.domain import CustomLocation, SeverityLevel, WeatherCondition, WeeklyActivity
from .locations import DestinationModel

HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class CustomLocationModel(BaseModel):
    id: str
    name: str
    address: str
    coordinates: Tuple[float, float]

    def to_domain(self) -> CustomLocation:
        return CustomLocation(id=self.id, name=self.name, address=self.address, coordinates=self.coordinates)


class ActivityModel(BaseModel):
    id: str
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Sunday, 1 = Monday, ...")
    destination_id: str
    activity_name: Dict[str, str]
    scheduled_time: str = Field(..., pattern=HHMM_PATTERN, description="Target arrival time, HH:mm.")
    notes: Optional[Dict[str, str]] = None
    custom_location: Optional[CustomLocationModel] = None

    def to_domain(self) -> WeeklyActivity:
        return WeeklyActivity(
            id=self.id,
            day_of_week=self.day_of_week,
            destination_id=self.destination_id,
            activity_name=self.activity_name,
            scheduled_time=self.scheduled_time,
            notes=self.notes,
            custom_location=self.custom_location.to_domain() if self.custom_location else None,
        )


class RecommendationRequest(BaseModel):
    destination_id: Optional[str] = Field(default=None, description="Saved destination; home when omitted.")
    custom_location: Optional[CustomLocationModel] = None
    scheduled_time: str = Field(default="18:00", pattern=HHMM_PATTERN)
    trip_date: Optional[date] = Field(default=None, description="Day of the trip; today in Jakarta when omitted.")
    scenario: Literal["normal", "heavy-rain"] = "normal"
    language: Literal["en", "id"] = "id"
    weather: Optional[WeatherCondition] = None


class RouteWarningModel(BaseModel):
    type: str
    message: Dict[str, str]
    severity: SeverityLevel


class TimeComparisonModel(BaseModel):
    leave_now_duration: int
    optimal_duration: int
    time_saved: int


class RecommendationModel(BaseModel):
    departure_time: datetime
    arrival_time: datetime
    duration: int
    flood_risk: SeverityLevel
    traffic_level: SeverityLevel
    score: int
    route_description: Dict[str, str]
    message: str
    motivational_message: Dict[str, str]
    warnings: List[RouteWarningModel] = Field(default_factory=list)
    comparison: Optional[TimeComparisonModel] = None


class RecommendationResponse(BaseModel):
    destination_id: str
    base_duration: int
    recommendations: List[RecommendationModel]


class DayPlanModel(BaseModel):
    day_of_week: int
    day_name: Dict[str, str]
    activity: Optional[ActivityModel] = None
    destination: Optional[DestinationModel] = None
    recommendation: RecommendationModel
    alternative_recommendations: List[RecommendationModel] = Field(default_factory=list)


class DayPlanRequest(BaseModel):
    day_of_week: int = Field(..., ge=1, le=5, description="1 = Monday ... 5 = Friday.")
    activity: Optional[ActivityModel] = Field(default=None, description="Replacement activity; default commute home when omitted.")
    plan_date: Optional[date] = Field(default=None, description="Day being planned; next occurrence of day_of_week when omitted.")
    scenario: Literal["normal", "heavy-rain"] = "normal"
    language: Literal["en", "id"] = "id"
    weather: Optional[WeatherCondition] = None


class WeeklyPlanResponse(BaseModel):
    scenario: str
    days: List[DayPlanModel]
