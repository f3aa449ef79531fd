"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.routing import (
    InventoryRoutingRequest,
    RoutingRequest,
    RoutingResponse,
    StartTimeRequest,
    StartTimeResponse,
)
from ...services.routing.schedule import recommend_start_time
from ...services.routing.service import optimize_inventory, optimize_routes

router = APIRouter(prefix="/routes", tags=["routes"])

logger = logging.getLogger(__name__)


@router.post("/optimize", response_model=RoutingResponse, status_code=status.HTTP_200_OK)
def optimize(payload: RoutingRequest) -> RoutingResponse:
    try:
        return optimize_routes(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error optimizing route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}"
        ) from exc


@router.post("/optimize-inventory", response_model=RoutingResponse, status_code=status.HTTP_200_OK)
def optimize_from_inventory(payload: InventoryRoutingRequest) -> RoutingResponse:
    """Select bins above the fill threshold and plan a trip over them."""
    try:
        return optimize_inventory(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error optimizing route from inventory: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}"
        ) from exc


@router.post("/start-time", response_model=StartTimeResponse, status_code=status.HTTP_200_OK)
def start_time(payload: StartTimeRequest) -> StartTimeResponse:
    recommendation = recommend_start_time(payload.estimated_time_min)
    return StartTimeResponse(
        optimal_start_time=recommendation.optimal_start_time,
        estimated_completion_hour=recommendation.estimated_completion_hour,
        traffic_multiplier=recommendation.traffic_multiplier,
        adjusted_time_min=recommendation.adjusted_time_min,
    )
