from datetime import date, datetime, timezone

import pytest

from src.jakarta_life.services.geospatial import distance_km, google_maps_url, haversine_km
from src.jakarta_life.services.timing import (
    add_minutes,
    at_time,
    day_index,
    format_hhmm,
    is_rush_hour,
    parse_hhmm,
    round_half_up,
)


def test_round_half_up_matches_half_away_from_floor():
    assert round_half_up(12.5) == 13
    assert round_half_up(13.5) == 14
    assert round_half_up(12.49) == 12
    assert round_half_up(-2.5) == -2


def test_parse_and_format_hhmm():
    assert parse_hhmm("07:05") == (7, 5)
    assert format_hhmm(7 * 60 + 5) == "07:05"
    for bad in ("24:00", "7pm", "12:60", ""):
        with pytest.raises(ValueError):
            parse_hhmm(bad)


def test_at_time_keeps_timezone():
    moment = datetime(2024, 1, 8, 9, 30, 15, tzinfo=timezone.utc)
    result = at_time(moment, "18:00")
    assert result == datetime(2024, 1, 8, 18, 0, tzinfo=timezone.utc)
    assert at_time(date(2024, 1, 8), "06:15") == datetime(2024, 1, 8, 6, 15)
    assert add_minutes(result, -75) == datetime(2024, 1, 8, 16, 45, tzinfo=timezone.utc)


def test_day_index_starts_on_sunday():
    assert day_index(date(2024, 1, 7)) == 0
    assert day_index(date(2024, 1, 8)) == 1
    assert day_index(datetime(2024, 1, 12, 23, 59)) == 5
    assert day_index(date(2024, 1, 13)) == 6


@pytest.mark.parametrize("hour,expected", [(6, False), (7, True), (9, True), (10, False), (16, False), (17, True), (19, True), (20, False)])
def test_rush_hour_bands(hour, expected):
    assert is_rush_hour(hour) is expected


def test_distances():
    assert haversine_km(0, 0, 0, 0) == 0
    assert distance_km((-6.2, 106.8), (-6.11, 106.8)) == pytest.approx(10.0, abs=0.02)
    assert google_maps_url((1.0, 2.0), (3.0, 4.0)).endswith("origin=1.0,2.0&destination=3.0,4.0&travelmode=driving")
