"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ...models.domain import Coordinate


@dataclass(frozen=True, slots=True)
class RouteStop:
    candidate_id: str
    sequence: int
    location: Coordinate
    demand: float
    priority: int
    travel_time_min: int
    distance_from_prev_km: float
    arrival_min: float


@dataclass(frozen=True, slots=True)
class RoutePlan:
    stops: Tuple[RouteStop, ...]
    total_distance_km: float
    total_time_min: int
    total_weight: float
    fuel_consumption_liters: float
    savings_percent: int
    co2_kg: float

    @property
    def stop_count(self) -> int:
        return len(self.stops)


@dataclass(frozen=True, slots=True)
class RoutingResult:
    plan: RoutePlan
    unrouted_ids: Tuple[str, ...]
    metadata: dict = field(default_factory=dict)
