"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import conditions, directions, health, locations, places, plans, recommendations, weather
from .config import settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)
    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Root endpoint for diagnostics
    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    for module in (health, locations, recommendations, plans, directions, places, weather, conditions):
        app.include_router(module.router, prefix=settings.api_prefix)

    if not settings.google_maps_configured:
        logger.warning("Google Maps API key not configured; routes and traffic will use fallback data.")
    if not settings.weather_api_configured:
        logger.warning("Weather API key not configured; weather will use mock data.")
    return app


app = create_app()
