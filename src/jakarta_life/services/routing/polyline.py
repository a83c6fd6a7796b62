"""Google encoded-polyline codec and traffic colouring for route display."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ...errors import PolylineDecodeError
from ...models.domain import Coordinates, RouteDisplayData, SegmentColor, SeverityLevel, TrafficSegment
from ..timing import round_half_up

logger = logging.getLogger(__name__)

PRECISION = 1e5
RED_DELAY_RATIO = 1.5
YELLOW_DELAY_RATIO = 1.2

SEGMENT_COLORS: Mapping[SeverityLevel, SegmentColor] = {
    SeverityLevel.LOW: "green",
    SeverityLevel.MEDIUM: "yellow",
    SeverityLevel.HIGH: "red",
}


def _read_value(encoded: str, index: int) -> Optional[tuple[int, int]]:
    """Read one signed delta starting at ``index``; None if the input runs out."""

    shift = 0
    result = 0
    while True:
        if index >= len(encoded):
            return None
        b = ord(encoded[index]) - 63
        index += 1
        result |= (b & 0x1F) << shift
        shift += 5
        if b < 0x20:
            break
    delta = ~(result >> 1) if (result & 1) else (result >> 1)
    return delta, index


def decode_polyline(encoded: str, *, strict: bool = False) -> list[Coordinates]:
    """Decode Google polyline string to list of (lat, lng) coordinates.

    A truncated trailing point is dropped and the points decoded so far are
    returned. Pass ``strict=True`` to raise ``PolylineDecodeError`` instead.
    """
    coordinates: list[Coordinates] = []
    index = 0
    lat = 0
    lng = 0

    while index < len(encoded):
        lat_value = _read_value(encoded, index)
        lng_value = _read_value(encoded, lat_value[1]) if lat_value else None
        if lat_value is None or lng_value is None:
            if strict:
                raise PolylineDecodeError(
                    f"Polyline truncated at character {index} after {len(coordinates)} points"
                )
            logger.debug("Polyline truncated at character %d; keeping %d points", index, len(coordinates))
            break
        lat += lat_value[0]
        lng += lng_value[0]
        index = lng_value[1]
        coordinates.append((lat / PRECISION, lng / PRECISION))

    return coordinates


def _encode_value(value: int) -> str:
    value = ~(value << 1) if value < 0 else value << 1
    chunks = []
    while value >= 0x20:
        chunks.append(chr((0x20 | (value & 0x1F)) + 63))
        value >>= 5
    chunks.append(chr(value + 63))
    return "".join(chunks)


def encode_polyline(points: Sequence[Coordinates]) -> str:
    """Encode (lat, lng) points with Google's polyline algorithm."""

    encoded = []
    prev_lat = 0
    prev_lng = 0
    for lat, lng in points:
        lat_e5 = round_half_up(lat * PRECISION)
        lng_e5 = round_half_up(lng * PRECISION)
        encoded.append(_encode_value(lat_e5 - prev_lat))
        encoded.append(_encode_value(lng_e5 - prev_lng))
        prev_lat, prev_lng = lat_e5, lng_e5
    return "".join(encoded)


def leg_value(leg: Mapping[str, Any], key: str) -> Optional[float]:
    block = leg.get(key)
    if not isinstance(block, Mapping):
        return None
    value = block.get("value")
    return float(value) if value else None


def delay_ratio(leg: Mapping[str, Any]) -> float:
    """duration_in_traffic / duration; 1.0 when either is missing or zero."""

    normal = leg_value(leg, "duration")
    if not normal or normal <= 0:
        return 1.0
    in_traffic = leg_value(leg, "duration_in_traffic") or normal
    return in_traffic / normal


def classify_delay_ratio(ratio: float) -> SeverityLevel:
    if ratio > RED_DELAY_RATIO:
        return SeverityLevel.HIGH
    if ratio > YELLOW_DELAY_RATIO:
        return SeverityLevel.MEDIUM
    return SeverityLevel.LOW


def segment_color(ratio: float) -> SegmentColor:
    return SEGMENT_COLORS[classify_delay_ratio(ratio)]


def generate_traffic_segments(path_length: int, leg: Mapping[str, Any]) -> list[TrafficSegment]:
    """Colour the decoded path from leg-level durations.

    The whole path is a single segment; an empty path has none.
    """
    if path_length <= 0:
        return []
    ratio = delay_ratio(leg)
    return [
        TrafficSegment(
            start_index=0,
            end_index=path_length - 1,
            color=segment_color(ratio),
            speed_kmh=round_half_up(10 / (ratio * 0.6)),
        )
    ]


def build_route_display(payload: Mapping[str, Any]) -> Optional[RouteDisplayData]:
    """Turn a Directions API response into map-ready route data.

    Returns None when the response is not OK or carries no routes.
    """
    if payload.get("status") != "OK" or not payload.get("routes"):
        return None

    route = payload["routes"][0]
    legs = route.get("legs") or []
    if not legs:
        return None
    leg = legs[0]
    encoded = (route.get("overview_polyline") or {}).get("points", "")
    decoded_path = decode_polyline(encoded)

    seconds = leg_value(leg, "duration_in_traffic") or leg_value(leg, "duration") or 0.0
    meters = leg_value(leg, "distance") or 0.0

    return RouteDisplayData(
        encoded_polyline=encoded,
        decoded_path=tuple(decoded_path),
        duration=round_half_up(seconds / 60),
        distance=round_half_up(meters / 1000 * 10) / 10,
        traffic_segments=tuple(generate_traffic_segments(len(decoded_path), leg)),
    )
