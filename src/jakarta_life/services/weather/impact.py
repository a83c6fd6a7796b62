"""Travel-time adjustments and display badges derived from weather conditions."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ...models.domain import WeatherCondition, WeatherImpact, WeatherSeverity, localize
from ..timing import format_hhmm, parse_hhmm, round_half_up

WeatherImpactTable = Mapping[WeatherCondition, WeatherImpact]

WEATHER_IMPACTS: WeatherImpactTable = MappingProxyType(
    {
        WeatherCondition.SUNNY: WeatherImpact(
            multiplier=1.0,
            severity=WeatherSeverity.NONE,
            description={
                "en": "Clear weather - normal travel time",
                "id": "Cuaca cerah - waktu perjalanan normal",
            },
            icon="☀️",
        ),
        WeatherCondition.PARTLY_CLOUDY: WeatherImpact(
            multiplier=1.0,
            severity=WeatherSeverity.NONE,
            description={
                "en": "Partly cloudy - normal travel time",
                "id": "Berawan sebagian - waktu perjalanan normal",
            },
            icon="⛅",
        ),
        WeatherCondition.CLOUDY: WeatherImpact(
            multiplier=1.05,
            severity=WeatherSeverity.LIGHT,
            description={
                "en": "Cloudy - slightly reduced visibility",
                "id": "Berawan - visibilitas sedikit berkurang",
            },
            icon="☁️",
        ),
        WeatherCondition.LIGHT_RAIN: WeatherImpact(
            multiplier=1.15,
            severity=WeatherSeverity.LIGHT,
            description={
                "en": "Light rain - expect 10-15% longer travel",
                "id": "Hujan ringan - perkiraan waktu 10-15% lebih lama",
            },
            icon="🌧️",
        ),
        WeatherCondition.HEAVY_RAIN: WeatherImpact(
            multiplier=1.35,
            severity=WeatherSeverity.MODERATE,
            description={
                "en": "Heavy rain - expect 25-40% longer travel, possible flooding",
                "id": "Hujan lebat - perkiraan 25-40% lebih lama, kemungkinan banjir",
            },
            icon="⛈️",
        ),
        WeatherCondition.THUNDERSTORM: WeatherImpact(
            multiplier=1.5,
            severity=WeatherSeverity.SEVERE,
            description={
                "en": "Thunderstorm - expect 40-60% longer travel, avoid if possible",
                "id": "Badai petir - perkiraan 40-60% lebih lama, hindari jika memungkinkan",
            },
            icon="🌩️",
        ),
    }
)

RAINY_CONDITIONS = frozenset(
    {WeatherCondition.LIGHT_RAIN, WeatherCondition.HEAVY_RAIN, WeatherCondition.THUNDERSTORM}
)

_BADGE_COLORS = {
    WeatherSeverity.LIGHT: "bg-amber-100 text-amber-700 dark:bg-amber-900/30 dark:text-amber-300",
    WeatherSeverity.MODERATE: "bg-orange-100 text-orange-700 dark:bg-orange-900/30 dark:text-orange-300",
    WeatherSeverity.SEVERE: "bg-red-100 text-red-700 dark:bg-red-900/30 dark:text-red-300",
}

_BADGE_TEXTS = {
    WeatherSeverity.LIGHT: {"en": "Light Rain Impact", "id": "Dampak Hujan Ringan"},
    WeatherSeverity.MODERATE: {"en": "Weather Delay", "id": "Penundaan Cuaca"},
    WeatherSeverity.SEVERE: {"en": "Severe Weather", "id": "Cuaca Buruk"},
}


def coerce_condition(condition: object) -> Optional[WeatherCondition]:
    """Map a raw value onto a known condition, or None when unrecognized."""

    if isinstance(condition, WeatherCondition):
        return condition
    try:
        return WeatherCondition(str(condition))
    except ValueError:
        return None


def get_weather_impact(
    condition: object,
    table: WeatherImpactTable = WEATHER_IMPACTS,
) -> WeatherImpact:
    """Impact entry for ``condition``; unknown conditions get the sunny entry."""

    known = coerce_condition(condition)
    if known is not None and known in table:
        return table[known]
    return table[WeatherCondition.SUNNY]


def get_weather_icon(condition: object) -> str:
    return get_weather_impact(condition).icon


def is_rainy_condition(condition: object) -> bool:
    return coerce_condition(condition) in RAINY_CONDITIONS


def calculate_adjusted_duration(
    base_duration: float,
    condition: object,
    table: WeatherImpactTable = WEATHER_IMPACTS,
) -> int:
    return round_half_up(base_duration * get_weather_impact(condition, table).multiplier)


def get_weather_adjusted_recommendation(
    base_duration: float,
    target_arrival_time: str,
    condition: object,
) -> dict:
    """Departure time ("HH:mm") that still meets ``target_arrival_time`` in this weather."""

    impact = get_weather_impact(condition)
    adjusted = calculate_adjusted_duration(base_duration, condition)
    hours, minutes = parse_hhmm(target_arrival_time)
    departure_minutes = (hours * 60 + minutes - adjusted) % (24 * 60)
    return {
        "departure_time": format_hhmm(departure_minutes),
        "adjusted_duration": adjusted,
        "impact": impact,
    }


def format_weather_impact_badge(condition: object, language: str) -> Optional[dict]:
    """Badge text and color classes, or None when the weather has no impact."""

    impact = get_weather_impact(condition)
    if impact.severity == WeatherSeverity.NONE:
        return None
    return {
        "text": localize(_BADGE_TEXTS[impact.severity], language),
        "color": _BADGE_COLORS[impact.severity],
    }


def get_weather_delay_text(condition: object, language: str) -> Optional[str]:
    impact = get_weather_impact(condition)
    if impact.multiplier <= 1.0:
        return None
    percentage = round_half_up((impact.multiplier - 1) * 100)
    if language == "id":
        return f"+{percentage}% waktu karena cuaca"
    return f"+{percentage}% travel time due to weather"
