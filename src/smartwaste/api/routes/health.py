"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/config", status_code=status.HTTP_200_OK)
def health_config() -> dict:
    """Report the estimation constants the planner is running with."""
    return {
        "travel_minutes_per_km": settings.travel_minutes_per_km,
        "dwell_minutes_per_stop": settings.dwell_minutes_per_stop,
        "fuel_efficiency_km_per_liter": settings.fuel_efficiency_km_per_liter,
        "default_fuel_efficiency_km_per_liter": settings.default_fuel_efficiency_km_per_liter,
        "collection_fill_threshold": settings.collection_fill_threshold,
        "max_candidates_per_route": settings.max_candidates_per_route,
    }
