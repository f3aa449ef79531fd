"""Routing request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class CoordinateModel(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class PickupCandidateModel(BaseModel):
    candidate_id: str = Field(..., min_length=1)
    location: CoordinateModel
    demand: float = Field(..., ge=0)
    fill_percentage: float = Field(..., ge=0, le=100)
    last_service: Optional[datetime] = None


class BinRecordModel(BaseModel):
    """Bin inventory entry; demand is derived from capacity and fill level."""
    bin_id: str = Field(..., min_length=1)
    location: CoordinateModel
    capacity: float = Field(..., ge=0, description="Bin capacity in kg")
    fill_percentage: float = Field(..., ge=0, le=100)
    last_collection: Optional[datetime] = None


class VehicleModel(BaseModel):
    capacity: float = Field(..., gt=0)
    vehicle_class: str = Field(default="truck", description="truck, van, auto; others use the default efficiency")
    vehicle_id: Optional[str] = None


class _RunOptions(BaseModel):
    depot: CoordinateModel
    vehicle: VehicleModel
    persist: bool = True
    run_label: Optional[str] = Field(default=None, description="Friendly name for persisted outputs.")
    requested_by: Optional[str] = Field(default=None, description="Person or system requesting the run.")


class RoutingRequest(_RunOptions):
    candidates: List[PickupCandidateModel] = Field(default_factory=list)


class InventoryRoutingRequest(_RunOptions):
    bins: List[BinRecordModel] = Field(default_factory=list)
    fill_threshold: Optional[float] = Field(
        default=None,
        ge=0,
        le=100,
        description="Minimum fill percentage; defaults to the configured collection threshold.",
    )


class RouteStopModel(BaseModel):
    candidate_id: str
    sequence: int
    location: CoordinateModel
    demand: float
    priority: int
    travel_time_min: int
    distance_from_prev_km: float
    arrival_min: float


class RoutePlanModel(BaseModel):
    total_distance_km: float
    total_time_min: int
    total_weight: float
    fuel_consumption_liters: float
    savings_percent: int
    co2_kg: float
    stop_count: int
    stops: List[RouteStopModel]


class StartTimeRequest(BaseModel):
    estimated_time_min: float = Field(..., ge=0)


class StartTimeResponse(BaseModel):
    optimal_start_time: str
    estimated_completion_hour: int
    traffic_multiplier: float
    adjusted_time_min: float


class RoutingResponse(BaseModel):
    plan: RoutePlanModel
    unrouted_ids: List[str]
    start_time: StartTimeResponse
    metadata: dict
