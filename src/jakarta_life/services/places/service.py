"""Location search through Google Places Text Search."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ...config import settings
from ...errors import ConfigurationError, ProviderError
from ...models.domain import PlaceResult
from ..routing.google_client import GoogleMapsClient

logger = logging.getLogger(__name__)

USABLE_STATUSES = ("OK", "ZERO_RESULTS")


def parse_place(raw: Mapping[str, Any]) -> PlaceResult:
    location = raw["geometry"]["location"]
    return PlaceResult(
        place_id=raw["place_id"],
        name=raw["name"],
        address=raw.get("formatted_address", ""),
        coordinates=(float(location["lat"]), float(location["lng"])),
    )


def search_places(
    query: str,
    language: str = "id",
    client: Optional[GoogleMapsClient] = None,
    limit: Optional[int] = None,
) -> list[PlaceResult]:
    """Top matches for ``query`` around Jakarta; an empty list on any failure."""

    if not query.strip():
        return []
    limit = limit or settings.places_max_results
    try:
        client = client if client is not None else GoogleMapsClient()
        payload = client.text_search(query.strip(), language=language)
    except (ConfigurationError, ProviderError) as exc:
        logger.warning(f"Places search failed for '{query}': {exc}")
        return []

    status = payload.get("status")
    if status not in USABLE_STATUSES:
        logger.warning(f"Places search failed for '{query}': status {status}")
        return []

    results = []
    for raw in (payload.get("results") or [])[:limit]:
        try:
            results.append(parse_place(raw))
        except (KeyError, TypeError, ValueError) as exc:
            logger.debug(f"Skipping malformed place result: {exc}")
    return results
