"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..models.domain import Coordinates

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(origin: Coordinates, destination: Coordinates) -> float:
    """Great-circle distance between two (lat, lng) pairs."""

    return haversine_km(origin[0], origin[1], destination[0], destination[1])


def format_latlng(point: Coordinates) -> str:
    """Render a point the way Google web services expect it: ``"lat,lng"``."""

    return f"{point[0]},{point[1]}"


def google_maps_url(origin: Coordinates, destination: Coordinates) -> str:
    """Deep link that opens driving directions in Google Maps."""

    return (
        "https://www.google.com/maps/dir/?api=1"
        f"&origin={format_latlng(origin)}&destination={format_latlng(destination)}&travelmode=driving"
    )
