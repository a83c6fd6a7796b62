"""Route lookups backed by Google Directions, with straight-line fallbacks."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ...data.regions import get_region_by_id
from ...errors import ConfigurationError, ProviderError
from ...models.domain import (
    AlternateRoute,
    Coordinates,
    RouteData,
    RouteDisplayData,
    SeverityLevel,
    TrafficSegment,
)
from ..geospatial import distance_km
from ..timing import round_half_up
from .google_client import GoogleMapsClient
from .polyline import build_route_display, classify_delay_ratio, delay_ratio, encode_polyline, leg_value

logger = logging.getLogger(__name__)

MINUTES_PER_KM = 3
FALLBACK_SPEED_KMH = 20
FLOOD_DELAY_RATIO = 1.3
DEFAULT_FUTURE_ESTIMATE = (45, SeverityLevel.MEDIUM)


def _get_client(client: Optional[GoogleMapsClient]) -> GoogleMapsClient:
    return client if client is not None else GoogleMapsClient()


def get_directions(
    origin: Coordinates | str,
    destination: Coordinates | str,
    departure_time: str | int = "now",
    traffic_model: str = "best_guess",
    alternatives: bool | str | None = None,
    client: Optional[GoogleMapsClient] = None,
) -> dict:
    """Pass-through Directions request; provider errors propagate to the caller."""
    return _get_client(client).directions(
        origin,
        destination,
        departure_time=departure_time,
        traffic_model=traffic_model,
        alternatives=alternatives,
    )


def fallback_route_display(origin: Coordinates, destination: Coordinates) -> RouteDisplayData:
    """Straight line between the two points, timed at three minutes per kilometre."""

    km = distance_km(origin, destination)
    path = (tuple(origin), tuple(destination))
    return RouteDisplayData(
        encoded_polyline=encode_polyline(path),
        decoded_path=path,
        duration=round_half_up(km * MINUTES_PER_KM),
        distance=round_half_up(km * 10) / 10,
        traffic_segments=(
            TrafficSegment(start_index=0, end_index=1, color="green", speed_kmh=FALLBACK_SPEED_KMH),
        ),
    )


def fetch_route_display(
    origin: Coordinates,
    destination: Coordinates,
    client: Optional[GoogleMapsClient] = None,
) -> Optional[RouteDisplayData]:
    """Road geometry for the map, or None when the provider has no route."""
    try:
        payload = get_directions(origin, destination, client=client)
    except (ConfigurationError, ProviderError) as exc:
        logger.warning(f"Route lookup failed, no road geometry available: {exc}")
        return None
    route = build_route_display(payload)
    if route is None:
        logger.warning(f"No route found between {origin} and {destination} (status={payload.get('status')})")
    return route


def route_display_with_fallback(
    origin: Coordinates,
    destination: Coordinates,
    client: Optional[GoogleMapsClient] = None,
) -> tuple[RouteDisplayData, bool]:
    """Route display data plus a flag telling whether the straight-line fallback was used."""

    route = fetch_route_display(origin, destination, client)
    if route is not None:
        return route, False
    return fallback_route_display(origin, destination), True


def _leg_minutes(leg: dict[str, Any]) -> int:
    seconds = leg_value(leg, "duration_in_traffic") or leg_value(leg, "duration") or 0.0
    return round_half_up(seconds / 60)


def _region_coordinates(region_id: str) -> Coordinates:
    region = get_region_by_id(region_id)
    if region is None:
        raise ValueError(f"Invalid region ID: {region_id}")
    return region.coordinates


def fetch_route_data(
    from_region_id: str,
    to_region_id: str,
    client: Optional[GoogleMapsClient] = None,
) -> RouteData:
    """Main route and up to two alternates between two regions."""

    origin = _region_coordinates(from_region_id)
    destination = _region_coordinates(to_region_id)
    payload = get_directions(origin, destination, alternatives=True, client=client)
    if payload.get("status") != "OK" or not payload.get("routes"):
        raise ProviderError(f"Failed to fetch route data (status={payload.get('status')})")
    legs = payload["routes"][0].get("legs") or []
    if not legs:
        raise ProviderError("Failed to fetch route data (main route has no legs)")

    main_leg = legs[0]
    normal_duration = round_half_up((leg_value(main_leg, "duration") or 0.0) / 60)
    current_duration = _leg_minutes(main_leg)

    alternates = []
    for index, route in enumerate(payload["routes"][1:3], start=1):
        duration = _leg_minutes(route["legs"][0])
        ratio = duration / normal_duration if normal_duration else 1.0
        alternates.append(
            AlternateRoute(
                name=route.get("summary") or f"Alternate Route {index}",
                duration=duration,
                flood_risk=SeverityLevel.MEDIUM if ratio > FLOOD_DELAY_RATIO else SeverityLevel.LOW,
                traffic_level=classify_delay_ratio(ratio),
            )
        )

    return RouteData(
        origin=from_region_id,
        destination=to_region_id,
        distance_km=round_half_up((leg_value(main_leg, "distance") or 0.0) / 1000),
        normal_duration=normal_duration,
        current_duration=current_duration,
        flood_affected=current_duration > normal_duration * FLOOD_DELAY_RATIO,
        alternate_routes=tuple(alternates),
    )


def fetch_future_traffic_estimate(
    from_region_id: str,
    to_region_id: str,
    departure_time: datetime,
    client: Optional[GoogleMapsClient] = None,
) -> tuple[int, SeverityLevel]:
    """Predicted (minutes, traffic level) for leaving at ``departure_time``.

    Falls back to 45 minutes of medium traffic when the provider has no answer.
    """
    origin = _region_coordinates(from_region_id)
    destination = _region_coordinates(to_region_id)
    try:
        payload = get_directions(
            origin,
            destination,
            departure_time=int(departure_time.timestamp()),
            client=client,
        )
    except ProviderError as exc:
        logger.warning(f"Future traffic estimate unavailable, using default: {exc}")
        return DEFAULT_FUTURE_ESTIMATE
    if payload.get("status") != "OK" or not payload.get("routes"):
        return DEFAULT_FUTURE_ESTIMATE
    legs = payload["routes"][0].get("legs") or []
    if not legs:
        return DEFAULT_FUTURE_ESTIMATE

    leg = legs[0]
    return _leg_minutes(leg), classify_delay_ratio(delay_ratio(leg))
