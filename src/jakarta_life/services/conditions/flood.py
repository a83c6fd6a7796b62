"""Simulated per-region flood conditions."""

from __future__ import annotations

from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Mapping

from ...data.regions import JAKARTA_REGIONS
from ...models.domain import FloodData, FloodPrediction, SeverityLevel

# (level, water level in cm); North Jakarta is the most flood-prone.
FLOOD_SCENARIOS: Mapping[str, tuple[SeverityLevel, int]] = MappingProxyType(
    {
        "jakarta-utara": (SeverityLevel.HIGH, 85),
        "jakarta-barat": (SeverityLevel.MEDIUM, 45),
        "jakarta-pusat": (SeverityLevel.LOW, 15),
        "jakarta-selatan": (SeverityLevel.MEDIUM, 35),
        "jakarta-timur": (SeverityLevel.LOW, 20),
        "bekasi": (SeverityLevel.MEDIUM, 40),
        "tangerang": (SeverityLevel.LOW, 10),
        "depok": (SeverityLevel.LOW, 25),
    }
)
DEFAULT_FLOOD_SCENARIO = (SeverityLevel.LOW, 10)

# Next hour, next 3 hours, next 6 hours: floods worsen, then recede.
LEVEL_PROGRESSION: Mapping[SeverityLevel, tuple[SeverityLevel, SeverityLevel, SeverityLevel]] = {
    SeverityLevel.LOW: (SeverityLevel.LOW, SeverityLevel.LOW, SeverityLevel.LOW),
    SeverityLevel.MEDIUM: (SeverityLevel.MEDIUM, SeverityLevel.HIGH, SeverityLevel.MEDIUM),
    SeverityLevel.HIGH: (SeverityLevel.HIGH, SeverityLevel.HIGH, SeverityLevel.MEDIUM),
}
PEAK_OFFSET = timedelta(hours=2)


def predict_flood(level: SeverityLevel, now: datetime) -> FloodPrediction:
    next_hour, next_3_hours, next_6_hours = LEVEL_PROGRESSION[level]
    flooding = level != SeverityLevel.LOW
    return FloodPrediction(
        next_hour=next_hour,
        next_3_hours=next_3_hours,
        next_6_hours=next_6_hours,
        peak_time=now + PEAK_OFFSET if flooding else None,
        peak_level=SeverityLevel.HIGH if flooding else None,
    )


def _affected_areas(level: SeverityLevel, flood_zones: tuple[str, ...]) -> tuple[str, ...]:
    if level == SeverityLevel.LOW:
        return ()
    return flood_zones[: 3 if level == SeverityLevel.HIGH else 1]


def generate_flood_data(now: datetime) -> list[FloodData]:
    data = []
    for region in JAKARTA_REGIONS:
        level, water_level = FLOOD_SCENARIOS.get(region.id, DEFAULT_FLOOD_SCENARIO)
        data.append(
            FloodData(
                region_id=region.id,
                level=level,
                water_level_cm=water_level,
                prediction=predict_flood(level, now),
                last_updated=now,
                affected_areas=_affected_areas(level, region.flood_zones),
            )
        )
    return data
