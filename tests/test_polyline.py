import pytest

from src.jakarta_life.errors import PolylineDecodeError
from src.jakarta_life.models.domain import SeverityLevel
from src.jakarta_life.services.routing.polyline import (
    build_route_display,
    classify_delay_ratio,
    decode_polyline,
    delay_ratio,
    encode_polyline,
    generate_traffic_segments,
)

ENCODED = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
POINTS = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]


def _leg(duration, in_traffic=None, distance=12345):
    leg = {"duration": {"value": duration}, "distance": {"value": distance}}
    if in_traffic is not None:
        leg["duration_in_traffic"] = {"value": in_traffic}
    return leg


def test_decode_reference_polyline():
    decoded = decode_polyline(ENCODED)
    assert len(decoded) == 3
    for (lat, lng), (exp_lat, exp_lng) in zip(decoded, POINTS):
        assert lat == pytest.approx(exp_lat)
        assert lng == pytest.approx(exp_lng)


def test_encode_reference_points():
    assert encode_polyline(POINTS) == ENCODED


def test_decode_empty_string():
    assert decode_polyline("") == []


def test_truncated_polyline_keeps_complete_points():
    # Latitude of the second point is present, its longitude is missing.
    assert decode_polyline("_p~iF~ps|U_ulL") == [pytest.approx((38.5, -120.2))]
    # Cut in the middle of a chunk.
    assert len(decode_polyline("_p~iF~ps|U_u")) == 1


def test_strict_decode_rejects_truncation():
    with pytest.raises(PolylineDecodeError):
        decode_polyline("_p~iF~ps|U_ulL", strict=True)
    assert len(decode_polyline(ENCODED, strict=True)) == 3


def test_delay_ratio_defaults_to_one():
    assert delay_ratio(_leg(600)) == 1.0
    assert delay_ratio(_leg(0, 300)) == 1.0
    assert delay_ratio({}) == 1.0
    assert delay_ratio(_leg(600, 900)) == 1.5


def test_classify_delay_ratio_thresholds():
    assert classify_delay_ratio(1.51) == SeverityLevel.HIGH
    assert classify_delay_ratio(1.5) == SeverityLevel.MEDIUM
    assert classify_delay_ratio(1.21) == SeverityLevel.MEDIUM
    assert classify_delay_ratio(1.2) == SeverityLevel.LOW


@pytest.mark.parametrize(
    "in_traffic,color,speed",
    [(600, "green", 17), (780, "yellow", 13), (1000, "red", 10)],
)
def test_single_segment_covers_path(in_traffic, color, speed):
    segments = generate_traffic_segments(5, _leg(600, in_traffic))
    assert len(segments) == 1
    segment = segments[0]
    assert (segment.start_index, segment.end_index) == (0, 4)
    assert segment.color == color
    assert segment.speed_kmh == speed


def test_empty_path_has_no_segments():
    assert generate_traffic_segments(0, _leg(600, 900)) == []


def test_build_route_display():
    payload = {
        "status": "OK",
        "routes": [{"overview_polyline": {"points": ENCODED}, "legs": [_leg(600, 900, 12345)]}],
    }
    route = build_route_display(payload)
    assert route.encoded_polyline == ENCODED
    assert len(route.decoded_path) == 3
    assert route.duration == 15
    assert route.distance == 12.3
    assert len(route.traffic_segments) == 1
    assert route.traffic_segments[0].color == "yellow"
    assert route.traffic_segments[0].end_index == 2


def test_build_route_display_without_traffic_uses_duration():
    payload = {
        "status": "OK",
        "routes": [{"overview_polyline": {"points": ENCODED}, "legs": [_leg(1530, None, 5000)]}],
    }
    route = build_route_display(payload)
    assert route.duration == 26  # 25.5 minutes
    assert route.traffic_segments[0].color == "green"


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "ZERO_RESULTS", "routes": []},
        {"status": "OK", "routes": []},
        {"status": "OK", "routes": [{"overview_polyline": {"points": ENCODED}, "legs": []}]},
        {},
    ],
)
def test_build_route_display_returns_none_without_route(payload):
    assert build_route_display(payload) is None
