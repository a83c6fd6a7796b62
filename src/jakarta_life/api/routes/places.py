"""Location search endpoint."""

from __future__ import annotations

from dataclasses import asdict
from typing import List, Literal

from fastapi import APIRouter, Query, status

from ...schemas.conditions import PlaceModel
from ...services.places.service import search_places

router = APIRouter(tags=["places"])


@router.get("/places", response_model=List[PlaceModel], status_code=status.HTTP_200_OK)
def places(
    query: str = Query(..., min_length=1),
    language: Literal["en", "id"] = Query(default="id"),
) -> List[PlaceModel]:
    """Top matches around Jakarta; an empty list when the search fails."""
    return [PlaceModel.model_validate(asdict(place)) for place in search_places(query, language)]
