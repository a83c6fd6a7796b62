import pytest

from src.jakarta_life.models.domain import WeatherCondition, WeatherSeverity
from src.jakarta_life.services.weather.impact import (
    WEATHER_IMPACTS,
    calculate_adjusted_duration,
    format_weather_impact_badge,
    get_weather_adjusted_recommendation,
    get_weather_delay_text,
    get_weather_icon,
    get_weather_impact,
    is_rainy_condition,
)


@pytest.mark.parametrize(
    "condition,multiplier,severity",
    [
        ("sunny", 1.0, WeatherSeverity.NONE),
        ("partly-cloudy", 1.0, WeatherSeverity.NONE),
        ("cloudy", 1.05, WeatherSeverity.LIGHT),
        ("light-rain", 1.15, WeatherSeverity.LIGHT),
        ("heavy-rain", 1.35, WeatherSeverity.MODERATE),
        ("thunderstorm", 1.5, WeatherSeverity.SEVERE),
    ],
)
def test_impact_table(condition, multiplier, severity):
    impact = get_weather_impact(condition)
    assert impact.multiplier == multiplier
    assert impact.severity == severity


def test_every_condition_has_an_impact():
    assert set(WEATHER_IMPACTS) == set(WeatherCondition)


def test_unknown_condition_is_treated_as_sunny():
    assert get_weather_impact("snow") == WEATHER_IMPACTS[WeatherCondition.SUNNY]
    assert get_weather_icon("snow") == "☀️"


def test_adjusted_duration_rounds_half_up():
    assert calculate_adjusted_duration(30, "thunderstorm") == 45
    assert calculate_adjusted_duration(30, "heavy-rain") == 41  # 40.5
    assert calculate_adjusted_duration(30, "sunny") == 30


def test_adjusted_recommendation_moves_departure_earlier():
    result = get_weather_adjusted_recommendation(30, "18:00", "heavy-rain")
    assert result["adjusted_duration"] == 41
    assert result["departure_time"] == "17:19"
    assert result["impact"].severity == WeatherSeverity.MODERATE


def test_adjusted_recommendation_wraps_past_midnight():
    result = get_weather_adjusted_recommendation(20, "00:10", "sunny")
    assert result["departure_time"] == "23:50"


def test_adjusted_recommendation_rejects_bad_time():
    with pytest.raises(ValueError):
        get_weather_adjusted_recommendation(20, "24:00", "sunny")


def test_badges():
    assert format_weather_impact_badge("sunny", "en") is None
    assert format_weather_impact_badge("partly-cloudy", "id") is None

    badge = format_weather_impact_badge("heavy-rain", "en")
    assert badge["text"] == "Weather Delay"
    assert "orange" in badge["color"]
    assert format_weather_impact_badge("thunderstorm", "id")["text"] == "Cuaca Buruk"


def test_delay_text():
    assert get_weather_delay_text("sunny", "en") is None
    assert get_weather_delay_text("thunderstorm", "en") == "+50% travel time due to weather"
    assert get_weather_delay_text("cloudy", "id") == "+5% waktu karena cuaca"
    assert get_weather_delay_text("light-rain", "en") == "+15% travel time due to weather"


def test_rainy_conditions():
    assert is_rainy_condition("light-rain")
    assert is_rainy_condition(WeatherCondition.THUNDERSTORM)
    assert not is_rainy_condition("cloudy")
    assert not is_rainy_condition(None)
