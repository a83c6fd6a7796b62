"""Per-region traffic: live from Google Directions, simulated as a fallback."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ...config import settings
from ...data.regions import JAKARTA_REGIONS
from ...errors import ConfigurationError, ProviderError
from ...models.domain import Region, SeverityLevel, TrafficData
from ..routing.google_client import GoogleMapsClient
from ..routing.polyline import classify_delay_ratio, delay_ratio, leg_value
from ..timing import round_half_up

logger = logging.getLogger(__name__)

MAX_CONGESTION_POINTS = 3
STEPS_SCANNED = 5
_ROAD_PATTERN = re.compile(r"(?:Jl\.|Jalan|Tol|onto|via)\s+([^<]+)", re.IGNORECASE)
_TAG_PATTERN = re.compile(r"<[^>]*>")

# (level, average speed km/h, delay minutes)
TRAFFIC_SCENARIOS: Mapping[str, tuple[SeverityLevel, int, int]] = MappingProxyType(
    {
        "jakarta-utara": (SeverityLevel.HIGH, 12, 45),
        "jakarta-barat": (SeverityLevel.MEDIUM, 25, 20),
        "jakarta-pusat": (SeverityLevel.HIGH, 15, 35),
        "jakarta-selatan": (SeverityLevel.MEDIUM, 22, 25),
        "jakarta-timur": (SeverityLevel.MEDIUM, 28, 15),
        "bekasi": (SeverityLevel.HIGH, 18, 40),
        "tangerang": (SeverityLevel.MEDIUM, 30, 20),
        "depok": (SeverityLevel.LOW, 35, 10),
    }
)
DEFAULT_TRAFFIC_SCENARIO = (SeverityLevel.MEDIUM, 25, 20)

CONGESTION_POINTS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "jakarta-pusat": ("Jl. Sudirman", "Jl. Thamrin", "Bundaran HI"),
        "jakarta-utara": ("Jl. Pluit", "Tol Bandara", "Pelabuhan Priok"),
        "jakarta-barat": ("Jl. S. Parman", "Tol Jakarta-Tangerang", "Kebon Jeruk"),
        "jakarta-selatan": ("Jl. TB Simatupang", "Pondok Indah", "Fatmawati"),
        "jakarta-timur": ("Jl. Bekasi Raya", "Kalimalang", "Cawang"),
        "bekasi": ("Tol Jakarta-Cikampek", "Jl. Ahmad Yani", "Summarecon"),
        "tangerang": ("Tol Jakarta-Merak", "BSD", "Alam Sutera"),
        "depok": ("Jl. Margonda", "UI", "Depok Lama"),
    }
)


def generate_traffic_data(now: datetime) -> list[TrafficData]:
    data = []
    for region in JAKARTA_REGIONS:
        level, speed, delay = TRAFFIC_SCENARIOS.get(region.id, DEFAULT_TRAFFIC_SCENARIO)
        data.append(
            TrafficData(
                region_id=region.id,
                level=level,
                average_speed_kmh=speed,
                congestion_points=CONGESTION_POINTS.get(region.id, ()),
                estimated_delay_minutes=delay,
                last_updated=now,
                source="mock",
            )
        )
    return data


def default_region_traffic(region_id: str, now: datetime) -> TrafficData:
    """Used for a single region whose live lookup failed."""
    return TrafficData(
        region_id=region_id,
        level=SeverityLevel.MEDIUM,
        average_speed_kmh=25,
        congestion_points=(),
        estimated_delay_minutes=15,
        last_updated=now,
        source="mock",
    )


def congestion_points_from_route(route: Mapping[str, Any]) -> tuple[str, ...]:
    """Road names pulled from the first few step instructions."""

    legs = route.get("legs") or [{}]
    points: list[str] = []
    for step in (legs[0].get("steps") or [])[:STEPS_SCANNED]:
        match = _ROAD_PATTERN.search(step.get("html_instructions", ""))
        if not match:
            continue
        road = _TAG_PATTERN.sub("", match.group(1)).strip()
        if road and road not in points:
            points.append(road)
    return tuple(points[:MAX_CONGESTION_POINTS])


def live_region_traffic(region: Region, client: GoogleMapsClient, now: datetime) -> TrafficData:
    """Traffic for ``region`` measured on its drive to the city center."""

    payload = client.directions(region.coordinates, settings.city_center)
    if payload.get("status") != "OK" or not payload.get("routes"):
        raise ProviderError(f"No route for region {region.id} (status={payload.get('status')})")

    route = payload["routes"][0]
    leg = route["legs"][0]
    normal_seconds = leg_value(leg, "duration") or 0.0
    traffic_seconds = leg_value(leg, "duration_in_traffic") or normal_seconds
    meters = leg_value(leg, "distance") or 0.0
    speed = round_half_up((meters / 1000) / (traffic_seconds / 3600)) if traffic_seconds else 0

    return TrafficData(
        region_id=region.id,
        level=classify_delay_ratio(delay_ratio(leg)),
        average_speed_kmh=speed,
        congestion_points=congestion_points_from_route(route),
        estimated_delay_minutes=max(0, round_half_up((traffic_seconds - normal_seconds) / 60)),
        last_updated=now,
        source="live",
    )


def fetch_traffic_data(now: datetime, client: Optional[GoogleMapsClient] = None) -> list[TrafficData]:
    """Live traffic for every region; a failing region gets default values.

    Raises ``ConfigurationError`` when no Google key is configured.
    """
    client = client if client is not None else GoogleMapsClient()
    data = []
    for region in JAKARTA_REGIONS:
        try:
            data.append(live_region_traffic(region, client, now))
        except (ProviderError, KeyError, IndexError, TypeError) as exc:
            logger.warning(f"Traffic lookup failed for {region.id}, using defaults: {exc}")
            data.append(default_region_traffic(region.id, now))
    return data


def traffic_conditions(now: datetime, client: Optional[GoogleMapsClient] = None) -> list[TrafficData]:
    """Live traffic when Google is configured, the simulated set otherwise."""

    try:
        return fetch_traffic_data(now, client)
    except ConfigurationError as exc:
        logger.info(f"Using simulated traffic: {exc}")
        return generate_traffic_data(now)
