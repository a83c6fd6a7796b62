"""Weekly (Mon-Fri) commute plans built on top of the recommendation scorer."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ...data import locations
from ...models.domain import DayPlan, Destination, WeatherCondition, WeeklyActivity
from ..timing import day_index
from .scorer import RecommendationScorer

logger = logging.getLogger(__name__)

WORKDAYS = (1, 2, 3, 4, 5)


def date_for_weekday(today: date, day_of_week: int) -> date:
    """Date of the next ``day_of_week`` (0 = Sunday), today included.

    Weekdays already past this week roll over to next week.
    """
    current = day_index(today)
    days_ahead = (day_of_week - current) % 7
    return today + timedelta(days=days_ahead)


def resolve_activity_destination(
    activity: Optional[WeeklyActivity],
    scorer: RecommendationScorer,
) -> Optional[Destination]:
    """Place the day's activity is scored against; a custom location wins over the catalog."""
    if activity is None:
        return None
    catalog = locations.get_destination_by_id(activity.destination_id)
    if activity.custom_location is None:
        return catalog
    return scorer.resolve_destination(activity, catalog)


def build_day_plan(
    day_of_week: int,
    activity: Optional[WeeklyActivity],
    plan_date: date | datetime,
    scenario: str = "normal",
    language: str = "id",
    weather: Optional[WeatherCondition | str] = None,
    scorer: Optional[RecommendationScorer] = None,
) -> DayPlan:
    scorer = scorer or RecommendationScorer()
    destination = resolve_activity_destination(activity, scorer)
    recommendations = scorer.generate(activity, destination, plan_date, scenario, language, weather)
    return DayPlan(
        day_of_week=day_of_week,
        day_name=locations.DAY_NAMES[day_of_week],
        activity=activity,
        destination=destination,
        recommendation=recommendations[0],
        alternative_recommendations=recommendations[1:],
    )


def generate_weekly_plan(
    today: date | datetime,
    scenario: str = "normal",
    language: str = "id",
    pattern: Sequence[WeeklyActivity] = locations.DEFAULT_WEEKLY_PATTERN,
    weather: Optional[WeatherCondition | str] = None,
    scorer: Optional[RecommendationScorer] = None,
) -> list[DayPlan]:
    """Plans for Monday through Friday, each on its next occurrence from ``today``."""

    scorer = scorer or RecommendationScorer()
    anchor = today.date() if isinstance(today, datetime) else today
    plans = []
    for day in WORKDAYS:
        activity = locations.get_activity_for_day(day, pattern)
        plan_date = date_for_weekday(anchor, day)
        plans.append(build_day_plan(day, activity, plan_date, scenario, language, weather, scorer))
    logger.info("Generated weekly plan for %d days (scenario=%s)", len(plans), scenario)
    return plans


def get_todays_plan(
    today: date | datetime,
    scenario: str = "normal",
    language: str = "id",
    pattern: Sequence[WeeklyActivity] = locations.DEFAULT_WEEKLY_PATTERN,
    weather: Optional[WeatherCondition | str] = None,
) -> Optional[DayPlan]:
    """Today's plan, or None on weekends."""

    if day_index(today) not in WORKDAYS:
        return None
    plans = generate_weekly_plan(today, scenario, language, pattern, weather)
    return next((plan for plan in plans if plan.day_of_week == day_index(today)), None)


def update_day_plan(
    plan: DayPlan,
    activity: Optional[WeeklyActivity],
    plan_date: date | datetime,
    scenario: str = "normal",
    language: str = "id",
    weather: Optional[WeatherCondition | str] = None,
    scorer: Optional[RecommendationScorer] = None,
) -> DayPlan:
    """Swap the activity on ``plan`` and recompute its recommendations in place."""

    refreshed = build_day_plan(plan.day_of_week, activity, plan_date, scenario, language, weather, scorer)
    plan.activity = refreshed.activity
    plan.destination = refreshed.destination
    plan.recommendation = refreshed.recommendation
    plan.alternative_recommendations = refreshed.alternative_recommendations
    logger.info("Recomputed plan for day %d (activity=%s)", plan.day_of_week, activity.id if activity else None)
    return plan
