from datetime import date, datetime, timedelta

from src.jakarta_life.data import locations
from src.jakarta_life.models.domain import CustomLocation, WeeklyActivity
from src.jakarta_life.services.recommendations.planner import (
    date_for_weekday,
    generate_weekly_plan,
    get_todays_plan,
    update_day_plan,
)
from src.jakarta_life.services.recommendations.scorer import estimate_base_duration

WEDNESDAY = date(2024, 1, 10)
SATURDAY = date(2024, 1, 13)


def test_date_for_weekday_rolls_forward():
    assert date_for_weekday(WEDNESDAY, 3) == WEDNESDAY
    assert date_for_weekday(WEDNESDAY, 5) == date(2024, 1, 12)
    assert date_for_weekday(WEDNESDAY, 1) == date(2024, 1, 15)


def test_weekly_plan_covers_monday_to_friday():
    plans = generate_weekly_plan(WEDNESDAY, "normal", "en")

    assert [plan.day_of_week for plan in plans] == [1, 2, 3, 4, 5]
    assert [plan.day_name["en"] for plan in plans] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    for plan in plans:
        assert len(plan.alternative_recommendations) == 2
        best = plan.recommendation.score
        assert all(best >= alt.score for alt in plan.alternative_recommendations)


def test_weekly_plan_uses_default_pattern_and_dates():
    plans = generate_weekly_plan(WEDNESDAY)
    monday = plans[0]
    assert monday.activity.id == "monday-padel"
    assert monday.destination.id == "padel-senopati"
    assert monday.recommendation.departure_time.date() == date(2024, 1, 15)

    wednesday = plans[2]
    assert wednesday.destination.id == locations.HOME.id
    assert wednesday.recommendation.departure_time.date() == WEDNESDAY


def test_day_without_activity_defaults_to_home():
    plans = generate_weekly_plan(WEDNESDAY, pattern=locations.DEFAULT_WEEKLY_PATTERN[:1])
    tuesday = plans[1]
    assert tuesday.activity is None
    assert tuesday.destination is None
    base = estimate_base_duration(locations.OFFICE.coordinates, locations.HOME.coordinates)
    departures = [rec.departure_time for rec in (tuesday.recommendation, *tuesday.alternative_recommendations)]
    assert min(departures) == datetime(2024, 1, 16, 17, 15) - timedelta(minutes=base)


def test_todays_plan_is_none_on_weekends():
    assert get_todays_plan(SATURDAY) is None
    assert get_todays_plan(date(2024, 1, 14)) is None


def test_todays_plan_on_a_weekday():
    plan = get_todays_plan(WEDNESDAY, language="en")
    assert plan.day_of_week == 3
    assert plan.activity.id == "wednesday-home"


def test_update_day_plan_recomputes_in_place():
    plans = generate_weekly_plan(WEDNESDAY, "normal", "en")
    monday = plans[0]
    before = monday.recommendation

    activity = WeeklyActivity(
        id="monday-custom",
        day_of_week=1,
        destination_id="custom",
        activity_name={"en": "Visit", "id": "Kunjungan"},
        scheduled_time="20:00",
        custom_location=CustomLocation(
            id="friend", name="Friend", address="Jl. Kemang Raya", coordinates=locations.OFFICE.coordinates
        ),
    )
    updated = update_day_plan(monday, activity, date(2024, 1, 15), "normal", "en")

    assert updated is monday
    assert plans[0].activity.id == "monday-custom"
    assert monday.destination.id == "friend"
    assert monday.destination.coordinates == locations.OFFICE.coordinates
    assert monday.recommendation != before
    assert monday.recommendation.duration == 0
    assert len(monday.alternative_recommendations) == 2


def test_weekly_plan_accepts_datetime_anchor():
    plans = generate_weekly_plan(datetime(2024, 1, 10, 8, 0))
    assert plans[2].recommendation.departure_time.date() == WEDNESDAY
