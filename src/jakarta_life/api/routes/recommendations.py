"""Departure recommendation endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, status

from ...config import settings
from ...data import locations
from ...models.domain import WeeklyActivity
from ...schemas.recommendations import RecommendationRequest, RecommendationResponse
from ...services.recommendations.scorer import RecommendationScorer, estimate_base_duration
from ...services.timing import day_index, now_in

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recommendations"])

REQUEST_ACTIVITY_NAME = {"en": "Trip", "id": "Perjalanan"}


@router.post("/recommendations", response_model=RecommendationResponse, status_code=status.HTTP_200_OK)
def recommend_departures(payload: RecommendationRequest) -> RecommendationResponse:
    """Rank the early, optimal and late departure windows for one trip."""
    destination = None
    if payload.destination_id and payload.custom_location is None:
        destination = locations.get_destination_by_id(payload.destination_id)
        if destination is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown destination '{payload.destination_id}'",
            )

    trip_date = payload.trip_date or now_in(settings.timezone).date()
    activity = WeeklyActivity(
        id="request",
        day_of_week=day_index(trip_date),
        destination_id=payload.destination_id or locations.HOME.id,
        activity_name=REQUEST_ACTIVITY_NAME,
        scheduled_time=payload.scheduled_time,
        custom_location=payload.custom_location.to_domain() if payload.custom_location else None,
    )

    scorer = RecommendationScorer()
    try:
        target = scorer.resolve_destination(activity, destination)
        recommendations = scorer.generate(
            activity, destination, trip_date, payload.scenario, payload.language, payload.weather
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error generating recommendations: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate recommendations: {str(exc)}",
        ) from exc

    return RecommendationResponse.model_validate(
        {
            "destination_id": target.id,
            "base_duration": estimate_base_duration(scorer.tables.office.coordinates, target.coordinates),
            "recommendations": [asdict(item) for item in recommendations],
        }
    )
