"""Regional traffic and flood condition endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import List, Literal

from fastapi import APIRouter, Query, status

from ...config import settings
from ...schemas.conditions import FloodDataModel, RegionSummaryModel, TrafficDataModel
from ...services.conditions.flood import generate_flood_data
from ...services.conditions.summary import summarize_regions
from ...services.conditions.traffic import traffic_conditions
from ...services.timing import now_in

router = APIRouter(prefix="/conditions", tags=["conditions"])


@router.get("/traffic", response_model=List[TrafficDataModel], status_code=status.HTTP_200_OK)
def traffic() -> List[TrafficDataModel]:
    now = now_in(settings.timezone)
    return [TrafficDataModel.model_validate(asdict(item)) for item in traffic_conditions(now)]


@router.get("/flood", response_model=List[FloodDataModel], status_code=status.HTTP_200_OK)
def flood() -> List[FloodDataModel]:
    now = now_in(settings.timezone)
    return [FloodDataModel.model_validate(asdict(item)) for item in generate_flood_data(now)]


@router.get("/summary", response_model=List[RegionSummaryModel], status_code=status.HTTP_200_OK)
def summary(language: Literal["en", "id"] = Query(default="id")) -> List[RegionSummaryModel]:
    """Worst-of flood and traffic per region, for map markers."""
    now = now_in(settings.timezone)
    entries = summarize_regions(generate_flood_data(now), traffic_conditions(now), language)
    return [RegionSummaryModel.model_validate(entry) for entry in entries]
