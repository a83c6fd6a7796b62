"""Combined per-region status for map markers."""

from __future__ import annotations

from typing import Sequence

from ...data.regions import JAKARTA_REGIONS, get_region_name
from ...models.domain import FloodData, SeverityLevel, TrafficData, max_severity


def summarize_regions(
    flood: Sequence[FloodData],
    traffic: Sequence[TrafficData],
    language: str = "id",
) -> list[dict]:
    """One entry per region; ``level`` is the worse of its flood and traffic levels."""

    flood_by_region = {item.region_id: item.level for item in flood}
    traffic_by_region = {item.region_id: item.level for item in traffic}
    summary = []
    for region in JAKARTA_REGIONS:
        flood_level = flood_by_region.get(region.id, SeverityLevel.LOW)
        traffic_level = traffic_by_region.get(region.id, SeverityLevel.LOW)
        summary.append(
            {
                "region_id": region.id,
                "name": get_region_name(region, language),
                "coordinates": region.coordinates,
                "flood_level": flood_level,
                "traffic_level": traffic_level,
                "level": max_severity(flood_level, traffic_level),
            }
        )
    return summary
