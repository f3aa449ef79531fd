"""Greedy nearest-feasible-neighbor route construction.

Starting at the depot, the builder repeatedly moves to the closest unvisited
candidate whose demand still fits in the remaining capacity. Equidistant
candidates are resolved by the lexically smaller identifier so that the same
input always yields the same route. The heuristic does not backtrack and is
not guaranteed to be optimal.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Sequence

from ...config import settings
from ...models.domain import Coordinate, PickupCandidate, Vehicle
from ..geospatial import distance_km
from .estimator import travel_minutes
from .models import RouteStop
from .priority import priority_score


@dataclass(frozen=True, slots=True)
class BuildResult:
    stops: tuple[RouteStop, ...]
    unrouted_ids: tuple[str, ...]


def _nearest_feasible(
    current: Coordinate,
    unvisited: Sequence[PickupCandidate],
    remaining_capacity: float,
    tolerance: float,
) -> tuple[PickupCandidate, float] | None:
    best: PickupCandidate | None = None
    best_distance = 0.0
    for candidate in unvisited:
        if candidate.demand > remaining_capacity:
            continue
        leg = distance_km(current, candidate.location)
        if best is None or leg < best_distance - tolerance:
            best, best_distance = candidate, leg
        elif abs(leg - best_distance) <= tolerance and candidate.candidate_id < best.candidate_id:
            best, best_distance = candidate, leg
    if best is None:
        return None
    return best, best_distance


def build_route(
    depot: Coordinate,
    candidates: Sequence[PickupCandidate],
    vehicle: Vehicle,
    *,
    now: datetime | None = None,
    tie_tolerance_km: float | None = None,
) -> BuildResult:
    """Build the visiting sequence; candidates that never fit are returned as unrouted."""
    now = now or datetime.now(timezone.utc)
    tolerance = settings.tie_tolerance_km if tie_tolerance_km is None else tie_tolerance_km

    current = depot
    remaining_capacity = vehicle.capacity
    unvisited = list(candidates)
    stops: list[RouteStop] = []
    elapsed_min = 0.0

    while unvisited and remaining_capacity > 0:
        choice = _nearest_feasible(current, unvisited, remaining_capacity, tolerance)
        if choice is None:
            break
        candidate, leg = choice
        leg_minutes = travel_minutes(leg)
        elapsed_min += leg_minutes
        stops.append(
            RouteStop(
                candidate_id=candidate.candidate_id,
                sequence=len(stops) + 1,
                location=candidate.location,
                demand=candidate.demand,
                priority=priority_score(candidate, now),
                travel_time_min=leg_minutes,
                distance_from_prev_km=leg,
                arrival_min=elapsed_min,
            )
        )
        elapsed_min += settings.dwell_minutes_per_stop
        remaining_capacity -= candidate.demand
        current = candidate.location
        unvisited = [item for item in unvisited if item is not candidate]

    return BuildResult(
        stops=tuple(stops),
        unrouted_ids=tuple(candidate.candidate_id for candidate in unvisited),
    )
