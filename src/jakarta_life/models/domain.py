"""Domain models for destinations, recommendations, routes and conditions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Literal, Mapping, Optional

Coordinates = tuple[float, float]
ScenarioId = Literal["normal", "heavy-rain"]
DestinationCategory = Literal["home", "sports", "dining", "social", "family", "other"]
WarningType = Literal["flood", "traffic", "construction"]
SegmentColor = Literal["green", "yellow", "red"]
WindowLabel = Literal["early", "optimal", "late"]

# Language-keyed text, e.g. {"en": "Home", "id": "Rumah"}.
LocalizedText = Mapping[str, str]


def localize(text: LocalizedText, language: str) -> str:
    """Return ``text`` in ``language``, falling back to English, then to any value."""

    if language in text:
        return text[language]
    if "en" in text:
        return text["en"]
    return next(iter(text.values()), "")


class SeverityLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank >= other.rank


_SEVERITY_RANK = {SeverityLevel.LOW: 0, SeverityLevel.MEDIUM: 1, SeverityLevel.HIGH: 2}


def max_severity(*levels: SeverityLevel) -> SeverityLevel:
    """Worst of the given levels; ``low`` when none are given."""

    return max(levels, key=lambda level: level.rank, default=SeverityLevel.LOW)


class WeatherCondition(str, Enum):
    SUNNY = "sunny"
    PARTLY_CLOUDY = "partly-cloudy"
    CLOUDY = "cloudy"
    LIGHT_RAIN = "light-rain"
    HEAVY_RAIN = "heavy-rain"
    THUNDERSTORM = "thunderstorm"


class WeatherSeverity(str, Enum):
    NONE = "none"
    LIGHT = "light"
    MODERATE = "moderate"
    SEVERE = "severe"


@dataclass(slots=True, frozen=True)
class Scenario:
    id: ScenarioId
    name: LocalizedText
    icon: str
    description: LocalizedText
    flood_multiplier: float
    traffic_multiplier: float


@dataclass(slots=True, frozen=True)
class Destination:
    """A place the user travels to after work."""

    id: str
    name: LocalizedText
    short_address: str
    full_address: str
    coordinates: Coordinates
    icon: str
    category: DestinationCategory


@dataclass(slots=True, frozen=True)
class OfficeConfig:
    """The anchor point every commute starts from."""

    name: LocalizedText
    full_address: str
    short_address: str
    coordinates: Coordinates
    company_name: str
    icon: str


@dataclass(slots=True, frozen=True)
class CustomLocation:
    """A user-picked location returned by a Places search."""

    id: str
    name: str
    address: str
    coordinates: Coordinates


@dataclass(slots=True, frozen=True)
class WeeklyActivity:
    id: str
    day_of_week: int  # 0 = Sunday, 1 = Monday, ...
    destination_id: str
    activity_name: LocalizedText
    scheduled_time: str  # HH:mm
    notes: Optional[LocalizedText] = None
    custom_location: Optional[CustomLocation] = None


@dataclass(slots=True, frozen=True)
class ActivityOption:
    type: str
    name: LocalizedText
    icon: str
    category: DestinationCategory
    destination_id: str
    location_name: LocalizedText


@dataclass(slots=True, frozen=True)
class DepartureCandidate:
    """One departure window evaluated by the scorer."""

    departure_offset_minutes: int
    label: WindowLabel
    position: int
    day_of_week: int
    destination_coordinates: Coordinates
    office_coordinates: Coordinates
    base_duration_minutes: int


@dataclass(slots=True, frozen=True)
class RouteWarning:
    type: WarningType
    message: LocalizedText
    severity: SeverityLevel


@dataclass(slots=True, frozen=True)
class TimeComparison:
    leave_now_duration: int
    optimal_duration: int
    time_saved: int


@dataclass(slots=True, frozen=True)
class DepartureRecommendation:
    departure_time: datetime
    arrival_time: datetime
    duration: int  # minutes
    flood_risk: SeverityLevel
    traffic_level: SeverityLevel
    score: int  # 0-100
    route_description: LocalizedText
    message: str
    motivational_message: LocalizedText
    warnings: tuple[RouteWarning, ...] = ()
    comparison: Optional[TimeComparison] = None


@dataclass(slots=True, frozen=True)
class WeatherImpact:
    multiplier: float
    severity: WeatherSeverity
    description: LocalizedText
    icon: str


@dataclass(slots=True, frozen=True)
class TrafficSegment:
    start_index: int
    end_index: int
    color: SegmentColor
    speed_kmh: int


@dataclass(slots=True, frozen=True)
class RouteDisplayData:
    encoded_polyline: str
    decoded_path: tuple[Coordinates, ...]
    duration: int  # minutes
    distance: float  # km
    traffic_segments: tuple[TrafficSegment, ...] = ()


@dataclass(slots=True)
class DayPlan:
    """Plan for one working day; edited in place when the activity changes."""

    day_of_week: int
    day_name: LocalizedText
    activity: Optional[WeeklyActivity]
    destination: Optional[Destination]
    recommendation: DepartureRecommendation
    alternative_recommendations: list[DepartureRecommendation] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class Region:
    id: str
    name: LocalizedText
    coordinates: Coordinates
    flood_zones: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class FloodPrediction:
    next_hour: SeverityLevel
    next_3_hours: SeverityLevel
    next_6_hours: SeverityLevel
    peak_time: Optional[datetime] = None
    peak_level: Optional[SeverityLevel] = None


@dataclass(slots=True, frozen=True)
class FloodData:
    region_id: str
    level: SeverityLevel
    water_level_cm: int
    prediction: FloodPrediction
    last_updated: datetime
    affected_areas: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class TrafficData:
    region_id: str
    level: SeverityLevel
    average_speed_kmh: int
    congestion_points: tuple[str, ...]
    estimated_delay_minutes: int
    last_updated: datetime
    source: Literal["live", "mock"] = "mock"


@dataclass(slots=True, frozen=True)
class AlternateRoute:
    name: str
    duration: int
    flood_risk: SeverityLevel
    traffic_level: SeverityLevel


@dataclass(slots=True, frozen=True)
class RouteData:
    origin: str
    destination: str
    distance_km: int
    normal_duration: int
    current_duration: int
    flood_affected: bool
    alternate_routes: tuple[AlternateRoute, ...] = ()


@dataclass(slots=True, frozen=True)
class WeatherForecast:
    time: datetime
    condition: WeatherCondition
    temperature_c: float
    rain_probability: float
    rainfall_mm: float


@dataclass(slots=True, frozen=True)
class WeatherData:
    temperature_c: float
    humidity: float
    condition: WeatherCondition
    rainfall_mm: float
    wind_speed_kph: float
    forecast: tuple[WeatherForecast, ...]
    last_updated: datetime
    source: Literal["live", "mock"] = "mock"


@dataclass(slots=True, frozen=True)
class PlaceResult:
    place_id: str
    name: str
    address: str
    coordinates: Coordinates
