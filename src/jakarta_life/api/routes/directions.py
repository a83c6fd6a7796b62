"""Directions proxy and route display endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...errors import ConfigurationError, ProviderError
from ...models.domain import Coordinates
from ...schemas.routes import RouteDataModel, RouteDisplayModel, TrafficEstimateModel
from ...services.geospatial import google_maps_url
from ...services.routing.service import (
    fetch_future_traffic_estimate,
    fetch_route_data,
    get_directions,
    route_display_with_fallback,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["routes"])


def parse_point(value: str, name: str) -> Coordinates:
    """Parse ``"lat,lng"`` query values."""
    try:
        lat_str, lng_str = value.split(",")
        lat, lng = float(lat_str), float(lng_str)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"'{name}' must be 'lat,lng'",
        ) from exc
    if not (-90 <= lat <= 90 and -180 <= lng <= 180):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"'{name}' is out of range")
    return lat, lng


@router.get("/directions", status_code=status.HTTP_200_OK)
def directions(
    origin: str = Query(..., description="'lat,lng' or an address"),
    destination: str = Query(..., description="'lat,lng' or an address"),
    departure_time: str = Query(default="now"),
    traffic_model: str = Query(default="best_guess"),
    alternatives: Optional[str] = Query(default=None),
) -> dict:
    """Forward a Directions request and return the provider's JSON unchanged."""
    try:
        return get_directions(origin, destination, departure_time, traffic_model, alternatives)
    except ConfigurationError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    except ProviderError as exc:
        logger.warning(f"Directions proxy failed: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch directions",
        ) from exc


@router.get("/routes/display", response_model=RouteDisplayModel, status_code=status.HTTP_200_OK)
def route_display(
    origin: str = Query(..., description="'lat,lng'"),
    destination: str = Query(..., description="'lat,lng'"),
) -> RouteDisplayModel:
    """Road geometry with traffic colouring; a straight line when no route is available."""
    start = parse_point(origin, "origin")
    end = parse_point(destination, "destination")
    route, fallback = route_display_with_fallback(start, end)
    return RouteDisplayModel.model_validate(
        {**asdict(route), "fallback": fallback, "google_maps_url": google_maps_url(start, end)}
    )


@router.get("/routes/regions", response_model=RouteDataModel, status_code=status.HTTP_200_OK)
def route_between_regions(
    from_region: str = Query(...),
    to_region: str = Query(...),
) -> RouteDataModel:
    try:
        data = fetch_route_data(from_region, to_region)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except (ConfigurationError, ProviderError) as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return RouteDataModel.model_validate(asdict(data))


@router.get("/routes/estimate", response_model=TrafficEstimateModel, status_code=status.HTTP_200_OK)
def future_traffic_estimate(
    from_region: str = Query(...),
    to_region: str = Query(...),
    departure_time: datetime = Query(..., description="ISO 8601 departure time"),
) -> TrafficEstimateModel:
    try:
        duration, level = fetch_future_traffic_estimate(from_region, to_region, departure_time)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ConfigurationError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return TrafficEstimateModel(duration=duration, traffic_level=level)
