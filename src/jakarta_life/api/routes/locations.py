"""Catalog endpoints."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, status

from ...data import locations
from ...schemas.locations import LocationsResponse

router = APIRouter(tags=["locations"])


@router.get("/locations", response_model=LocationsResponse, status_code=status.HTTP_200_OK)
def list_locations() -> LocationsResponse:
    return LocationsResponse.model_validate(
        {
            "office": asdict(locations.OFFICE),
            "home": asdict(locations.HOME),
            "destinations": [asdict(item) for item in locations.get_all_destinations()],
            "activity_options": [asdict(item) for item in locations.ACTIVITY_OPTIONS],
            "scenarios": [asdict(item) for item in locations.SCENARIOS.values()],
        }
    )
