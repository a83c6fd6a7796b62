"""Weekly commute plan endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Literal, Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...config import settings
from ...data import locations
from ...models.domain import WeatherCondition
from ...schemas.recommendations import DayPlanModel, DayPlanRequest, WeeklyPlanResponse
from ...services.recommendations.planner import (
    build_day_plan,
    date_for_weekday,
    generate_weekly_plan,
    get_todays_plan,
)
from ...services.timing import now_in

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("/week", response_model=WeeklyPlanResponse, status_code=status.HTTP_200_OK)
def weekly_plan(
    scenario: Literal["normal", "heavy-rain"] = Query(default="normal"),
    language: Literal["en", "id"] = Query(default="id"),
    weather: Optional[WeatherCondition] = Query(default=None),
) -> WeeklyPlanResponse:
    """Monday through Friday plans from the default weekly pattern."""
    today = now_in(settings.timezone).date()
    plans = generate_weekly_plan(today, scenario, language, weather=weather)
    return WeeklyPlanResponse.model_validate(
        {"scenario": scenario, "days": [asdict(plan) for plan in plans]}
    )


@router.get("/today", response_model=Optional[DayPlanModel], status_code=status.HTTP_200_OK)
def todays_plan(
    scenario: Literal["normal", "heavy-rain"] = Query(default="normal"),
    language: Literal["en", "id"] = Query(default="id"),
    weather: Optional[WeatherCondition] = Query(default=None),
) -> Optional[DayPlanModel]:
    """Today's plan, or null on weekends."""
    plan = get_todays_plan(now_in(settings.timezone).date(), scenario, language, weather=weather)
    if plan is None:
        return None
    return DayPlanModel.model_validate(asdict(plan))


@router.post("/day", response_model=DayPlanModel, status_code=status.HTTP_200_OK)
def recompute_day_plan(payload: DayPlanRequest) -> DayPlanModel:
    """Recompute one weekday's plan after its activity was edited."""
    activity = payload.activity.to_domain() if payload.activity else None
    if activity is not None and activity.custom_location is None:
        if locations.get_destination_by_id(activity.destination_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown destination '{activity.destination_id}'",
            )

    plan_date = payload.plan_date or date_for_weekday(now_in(settings.timezone).date(), payload.day_of_week)
    try:
        plan = build_day_plan(
            payload.day_of_week,
            activity,
            plan_date,
            payload.scenario,
            payload.language,
            payload.weather,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    logger.info(f"Recomputed plan for day {payload.day_of_week}")
    return DayPlanModel.model_validate(asdict(plan))
