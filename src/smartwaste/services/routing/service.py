"""Routing orchestration service."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Sequence

from ...config import settings
from ...models.domain import BinRecord, Coordinate, PickupCandidate, Vehicle
from ...persistence.filesystem import FileStorage
from ...schemas.routing import (
    CoordinateModel,
    InventoryRoutingRequest,
    RoutePlanModel,
    RouteStopModel,
    RoutingRequest,
    RoutingResponse,
    StartTimeResponse,
)
from ..export.geojson import build_route_overlay
from ..outputs.routing_formatter import routing_result_to_csv, routing_result_to_json
from .builder import build_route
from .candidates import candidates_from_inventory
from .estimator import estimate
from .models import RoutePlan, RoutingResult
from .schedule import recommend_start_time
from .validation import validate_request

logger = logging.getLogger(__name__)


def optimize_route(
    depot: Coordinate,
    candidates: Sequence[PickupCandidate],
    vehicle: Vehicle,
    *,
    now: datetime | None = None,
) -> RoutingResult:
    """Plan a single collection trip.

    Input is validated up front; an :class:`InvalidInputError` means nothing
    was planned. Candidates that cannot be fitted are returned in
    ``unrouted_ids`` rather than dropped.
    """
    validate_request(depot, candidates, vehicle, max_candidates=settings.max_candidates_per_route)

    now = now or datetime.now(timezone.utc)
    built = build_route(depot, candidates, vehicle, now=now)
    plan = estimate(depot, built.stops, vehicle)

    if built.unrouted_ids:
        logger.warning(
            f"{len(built.unrouted_ids)} of {len(candidates)} candidates did not fit vehicle capacity "
            f"{vehicle.capacity}: {list(built.unrouted_ids)}"
        )
    logger.info(
        f"Planned {plan.stop_count} stops, {plan.total_distance_km:.2f} km, "
        f"{plan.total_weight} of {vehicle.capacity} capacity"
    )

    metadata = {
        "status": "complete",
        "algorithm": "nearest_feasible_neighbor",
        "candidate_count": len(candidates),
        "routed_count": plan.stop_count,
        "unrouted_count": len(built.unrouted_ids),
        "vehicle_class": vehicle.vehicle_class,
        "vehicle_capacity": vehicle.capacity,
        "generated_at": now.isoformat(),
    }
    if vehicle.vehicle_id:
        metadata["vehicle_id"] = vehicle.vehicle_id
    return RoutingResult(plan=plan, unrouted_ids=built.unrouted_ids, metadata=metadata)


def _to_coordinate(model: CoordinateModel) -> Coordinate:
    return Coordinate(latitude=model.lat, longitude=model.lng)


def _to_vehicle(payload: RoutingRequest | InventoryRoutingRequest) -> Vehicle:
    return Vehicle(
        capacity=payload.vehicle.capacity,
        vehicle_class=payload.vehicle.vehicle_class,
        vehicle_id=payload.vehicle.vehicle_id,
    )


def _plan_to_model(plan: RoutePlan) -> RoutePlanModel:
    return RoutePlanModel(
        total_distance_km=plan.total_distance_km,
        total_time_min=plan.total_time_min,
        total_weight=plan.total_weight,
        fuel_consumption_liters=plan.fuel_consumption_liters,
        savings_percent=plan.savings_percent,
        co2_kg=plan.co2_kg,
        stop_count=plan.stop_count,
        stops=[
            RouteStopModel(
                candidate_id=stop.candidate_id,
                sequence=stop.sequence,
                location=CoordinateModel(lat=stop.location.latitude, lng=stop.location.longitude),
                demand=stop.demand,
                priority=stop.priority,
                travel_time_min=stop.travel_time_min,
                distance_from_prev_km=stop.distance_from_prev_km,
                arrival_min=stop.arrival_min,
            )
            for stop in plan.stops
        ],
    )


def _finalize(
    payload: RoutingRequest | InventoryRoutingRequest,
    depot: Coordinate,
    result: RoutingResult,
    extra_metadata: dict | None = None,
) -> RoutingResponse:
    metadata = dict(result.metadata)
    if extra_metadata:
        metadata.update(extra_metadata)
    if payload.run_label:
        metadata["run_label"] = payload.run_label
    if payload.requested_by:
        metadata["author"] = payload.requested_by

    route_id = payload.run_label or payload.vehicle.vehicle_id or "route"
    metadata["map_overlays"] = {"routes": [build_route_overlay(depot, result.plan, route_id)]}

    start_time = recommend_start_time(result.plan.total_time_min)
    result = RoutingResult(plan=result.plan, unrouted_ids=result.unrouted_ids, metadata=metadata)

    if payload.persist:
        storage = FileStorage()
        summary = routing_result_to_json(result)
        run_dir = storage.save_run(f"routes_{route_id}", summary, routing_result_to_csv(result))
        metadata["output_dir"] = str(run_dir)
        logger.info(f"Route plan artifacts written to {run_dir}")

    return RoutingResponse(
        plan=_plan_to_model(result.plan),
        unrouted_ids=list(result.unrouted_ids),
        start_time=StartTimeResponse(
            optimal_start_time=start_time.optimal_start_time,
            estimated_completion_hour=start_time.estimated_completion_hour,
            traffic_multiplier=start_time.traffic_multiplier,
            adjusted_time_min=start_time.adjusted_time_min,
        ),
        metadata=metadata,
    )


def optimize_routes(payload: RoutingRequest) -> RoutingResponse:
    depot = _to_coordinate(payload.depot)
    candidates = [
        PickupCandidate(
            candidate_id=item.candidate_id.strip(),
            location=_to_coordinate(item.location),
            demand=item.demand,
            fill_percentage=item.fill_percentage,
            last_service=item.last_service,
        )
        for item in payload.candidates
    ]
    result = optimize_route(depot, candidates, _to_vehicle(payload))
    return _finalize(payload, depot, result)


def optimize_inventory(payload: InventoryRoutingRequest) -> RoutingResponse:
    """Filter the bin inventory by fill level, then plan the trip."""
    depot = _to_coordinate(payload.depot)
    bins = [
        BinRecord(
            bin_id=item.bin_id.strip(),
            location=_to_coordinate(item.location),
            capacity=item.capacity,
            fill_percentage=item.fill_percentage,
            last_collection=item.last_collection,
        )
        for item in payload.bins
    ]
    selection = candidates_from_inventory(bins, payload.fill_threshold)
    logger.info(
        f"{len(selection.candidates)} of {len(bins)} bins at or above {selection.fill_threshold}% fill"
    )
    result = optimize_route(depot, selection.candidates, _to_vehicle(payload))
    return _finalize(
        payload,
        depot,
        result,
        {"fill_threshold": selection.fill_threshold, "skipped_ids": list(selection.skipped_ids)},
    )
