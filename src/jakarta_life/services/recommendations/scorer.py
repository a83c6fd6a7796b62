"""Departure recommendation scoring.

Each call evaluates three fixed departure windows around the activity's
scheduled time (45 minutes early, 15 minutes early and 30 minutes late) and
returns them ranked by a 0-100 score:

    score = traffic (40/25/10) + flood (40/25/10) + timing (20/15/5)

Base travel time is a straight-line estimate of three minutes per kilometre
from the office. Rush-hour, scenario and (optionally) weather multipliers
compose by multiplication and are rounded once. The scorer never reads the
clock and performs no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Mapping, Optional

from ...data import locations
from ...models.domain import (
    DepartureCandidate,
    DepartureRecommendation,
    Destination,
    OfficeConfig,
    RouteWarning,
    Scenario,
    SeverityLevel,
    TimeComparison,
    WeatherCondition,
    WeeklyActivity,
    WindowLabel,
    localize,
)
from ..geospatial import distance_km
from ..timing import add_minutes, at_time, day_index, is_rush_hour, round_half_up
from ..weather.impact import WEATHER_IMPACTS, WeatherImpactTable, get_weather_impact, is_rainy_condition

MINUTES_PER_KM = 3
RUSH_HOUR_MULTIPLIER = 1.8
LEAVE_NOW_MULTIPLIER = 2
HIGH_TRAFFIC_RATIO = 2.0
MEDIUM_TRAFFIC_RATIO = 1.3
FLOOD_PEAK_HOURS = (14, 19)
FRIDAY = 5

DEPARTURE_WINDOWS: tuple[tuple[int, WindowLabel], ...] = (
    (-45, "early"),
    (-15, "optimal"),
    (30, "late"),
)

SEVERITY_POINTS = {
    SeverityLevel.LOW: 40,
    SeverityLevel.MEDIUM: 25,
    SeverityLevel.HIGH: 10,
}
TIMING_POINTS: Mapping[WindowLabel, int] = {"optimal": 20, "early": 15, "late": 5}
# Rain pulls the preferred window earlier.
RAINY_TIMING_POINTS: Mapping[WindowLabel, int] = {"early": 20, "optimal": 15, "late": 5}

FLOOD_WARNING = {
    "en": "Flooding reported on Jl. Sudirman",
    "id": "Banjir dilaporkan di Jl. Sudirman",
}
TRAFFIC_WARNING = {
    "en": "Heavy traffic on main routes",
    "id": "Lalu lintas padat di rute utama",
}
FLOOD_SAFE_ROUTE = {
    "en": "Via toll road (avoiding flooded areas)",
    "id": "Via jalan tol (menghindari daerah banjir)",
}
DIRECT_ROUTE = {
    "en": "Direct route via Jl. Sudirman",
    "id": "Rute langsung via Jl. Sudirman",
}


@dataclass(slots=True, frozen=True)
class ScoringTables:
    """Configuration the scorer reads; swap entries to test with other tables."""

    office: OfficeConfig
    home: Destination
    default_activity: WeeklyActivity
    scenarios: Mapping[str, Scenario]
    messages: Mapping[str, Mapping[str, tuple[str, ...]]]
    weather_impacts: WeatherImpactTable = field(default_factory=lambda: WEATHER_IMPACTS)


DEFAULT_TABLES = ScoringTables(
    office=locations.OFFICE,
    home=locations.HOME,
    default_activity=locations.DEFAULT_ACTIVITY,
    scenarios=locations.SCENARIOS,
    messages=locations.MOTIVATIONAL_MESSAGES,
)


def estimate_base_duration(origin, destination) -> int:
    """Free-flow minutes between two points at three minutes per kilometre."""

    return round_half_up(distance_km(origin, destination) * MINUTES_PER_KM)


def classify_traffic_level(effective_duration: float, base_duration: float) -> SeverityLevel:
    if effective_duration > base_duration * HIGH_TRAFFIC_RATIO:
        return SeverityLevel.HIGH
    if effective_duration > base_duration * MEDIUM_TRAFFIC_RATIO:
        return SeverityLevel.MEDIUM
    return SeverityLevel.LOW


def classify_flood_risk(scenario_id: str, hour: int) -> SeverityLevel:
    if scenario_id != "heavy-rain":
        return SeverityLevel.LOW
    start, end = FLOOD_PEAK_HOURS
    if start <= hour <= end:
        return SeverityLevel.HIGH
    return SeverityLevel.MEDIUM


def timing_points(label: WindowLabel, raining: bool = False) -> int:
    table = RAINY_TIMING_POINTS if raining else TIMING_POINTS
    return table[label]


def message_category(destination: Destination, day_of_week: int) -> str:
    if day_of_week == FRIDAY:
        return "weekendVibes"
    if destination.category == "sports":
        return "sportsTime"
    return "optimalTime"


class RecommendationScorer:
    """Ranks departure windows for one destination on one day."""

    def __init__(self, tables: ScoringTables = DEFAULT_TABLES) -> None:
        self.tables = tables

    def resolve_destination(
        self,
        activity: Optional[WeeklyActivity],
        destination: Optional[Destination],
    ) -> Destination:
        """Destination the commute is scored against; home when none is given."""
        if activity is not None and activity.custom_location is not None:
            custom = activity.custom_location
            return Destination(
                id=custom.id,
                name={"en": custom.name, "id": custom.name},
                short_address=custom.address,
                full_address=custom.address,
                coordinates=custom.coordinates,
                icon="📍",
                category="other",
            )
        return destination or self.tables.home

    def generate(
        self,
        activity: Optional[WeeklyActivity],
        destination: Optional[Destination],
        target_date: date | datetime,
        scenario: str = "normal",
        language: str = "id",
        weather: Optional[WeatherCondition | str] = None,
    ) -> list[DepartureRecommendation]:
        activity = activity or self.tables.default_activity
        target = self.resolve_destination(activity, destination)
        scenario_config = self.tables.scenarios.get(scenario, self.tables.scenarios["normal"])
        base_duration = estimate_base_duration(self.tables.office.coordinates, target.coordinates)
        target_time = at_time(target_date, activity.scheduled_time)

        recommendations = []
        for position, (offset, label) in enumerate(DEPARTURE_WINDOWS):
            candidate = DepartureCandidate(
                departure_offset_minutes=offset,
                label=label,
                position=position,
                day_of_week=day_index(target_time),
                destination_coordinates=target.coordinates,
                office_coordinates=self.tables.office.coordinates,
                base_duration_minutes=base_duration,
            )
            recommendations.append(
                self.score_candidate(candidate, target, target_time, scenario_config, language, weather)
            )

        # sorted() is stable: equal scores keep window order.
        return sorted(recommendations, key=lambda rec: rec.score, reverse=True)

    def score_candidate(
        self,
        candidate: DepartureCandidate,
        destination: Destination,
        target_time: datetime,
        scenario: Scenario,
        language: str,
        weather: Optional[WeatherCondition | str] = None,
    ) -> DepartureRecommendation:
        base_duration = candidate.base_duration_minutes
        departure_time = add_minutes(target_time, candidate.departure_offset_minutes - base_duration)
        hour = departure_time.hour

        rush_multiplier = RUSH_HOUR_MULTIPLIER if is_rush_hour(hour) else 1.0
        weather_multiplier = 1.0
        raining = False
        if weather is not None:
            weather_multiplier = get_weather_impact(weather, self.tables.weather_impacts).multiplier
            raining = is_rainy_condition(weather)
        effective_duration = round_half_up(
            base_duration * rush_multiplier * scenario.traffic_multiplier * weather_multiplier
        )

        traffic_level = classify_traffic_level(effective_duration, base_duration)
        flood_risk = classify_flood_risk(scenario.id, hour)
        score = (
            SEVERITY_POINTS[traffic_level]
            + SEVERITY_POINTS[flood_risk]
            + timing_points(candidate.label, raining)
        )

        warnings = []
        if flood_risk != SeverityLevel.LOW:
            warnings.append(RouteWarning(type="flood", message=FLOOD_WARNING, severity=flood_risk))
        if traffic_level == SeverityLevel.HIGH:
            warnings.append(RouteWarning(type="traffic", message=TRAFFIC_WARNING, severity=SeverityLevel.HIGH))

        motivational = self._motivational_message(destination, day_index(departure_time), candidate.position)
        leave_now_duration = round_half_up(base_duration * LEAVE_NOW_MULTIPLIER)

        return DepartureRecommendation(
            departure_time=departure_time,
            arrival_time=add_minutes(departure_time, effective_duration),
            duration=effective_duration,
            flood_risk=flood_risk,
            traffic_level=traffic_level,
            score=score,
            route_description=FLOOD_SAFE_ROUTE if flood_risk != SeverityLevel.LOW else DIRECT_ROUTE,
            message=localize(motivational, language),
            motivational_message=motivational,
            warnings=tuple(warnings),
            comparison=TimeComparison(
                leave_now_duration=leave_now_duration,
                optimal_duration=effective_duration,
                time_saved=leave_now_duration - effective_duration,
            ),
        )

    def _motivational_message(self, destination: Destination, day_of_week: int, position: int) -> dict[str, str]:
        pools = self.tables.messages[message_category(destination, day_of_week)]
        return {language: pool[position % len(pool)] for language, pool in pools.items()}


_default_scorer = RecommendationScorer()


def generate_recommendations(
    activity: Optional[WeeklyActivity],
    destination: Optional[Destination],
    target_date: date | datetime,
    scenario: str = "normal",
    language: str = "id",
    weather: Optional[WeatherCondition | str] = None,
) -> list[DepartureRecommendation]:
    """Three departure recommendations, best first. See ``RecommendationScorer``."""

    return _default_scorer.generate(activity, destination, target_date, scenario, language, weather)
