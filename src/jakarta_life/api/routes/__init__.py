"""Route group exports."""

from . import conditions, directions, health, locations, places, plans, recommendations, weather

__all__ = ["conditions", "directions", "health", "locations", "places", "plans", "recommendations", "weather"]
