"""Trip-level estimates for a built stop sequence."""

from __future__ import annotations

import math
from typing import Sequence

from ...config import settings
from ...models.domain import Coordinate, Vehicle
from ..geospatial import distance_km
from .models import RoutePlan, RouteStop


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def travel_minutes(leg_km: float) -> int:
    return round_half_up(leg_km * settings.travel_minutes_per_km)


def fuel_efficiency(vehicle_class: str) -> float:
    table = settings.fuel_efficiency_km_per_liter
    return table.get((vehicle_class or "").lower(), settings.default_fuel_efficiency_km_per_liter)


def fuel_consumption_liters(total_distance_km: float, vehicle_class: str) -> float:
    return total_distance_km / fuel_efficiency(vehicle_class)


def route_distance_km(depot: Coordinate, stops: Sequence[RouteStop]) -> float:
    """Depot to every stop in order, then back to the depot."""
    if not stops:
        return 0.0
    total = 0.0
    current = depot
    for stop in stops:
        total += distance_km(current, stop.location)
        current = stop.location
    total += distance_km(current, depot)
    return total


def baseline_distance_km(stop_count: int) -> float:
    return stop_count * settings.baseline_leg_km * settings.baseline_inefficiency_factor


def savings_percent(total_distance_km: float, stop_count: int) -> int:
    baseline = baseline_distance_km(stop_count)
    if baseline <= 0:
        return 0
    return max(0, round_half_up((baseline - total_distance_km) / baseline * 100))


def estimate(depot: Coordinate, stops: Sequence[RouteStop], vehicle: Vehicle) -> RoutePlan:
    total_distance = route_distance_km(depot, stops)
    total_time = round_half_up(
        total_distance * settings.travel_minutes_per_km + len(stops) * settings.dwell_minutes_per_stop
    )
    fuel = fuel_consumption_liters(total_distance, vehicle.vehicle_class)
    return RoutePlan(
        stops=tuple(stops),
        total_distance_km=total_distance,
        total_time_min=total_time,
        total_weight=sum(stop.demand for stop in stops),
        fuel_consumption_liters=fuel,
        savings_percent=savings_percent(total_distance, len(stops)),
        co2_kg=fuel * settings.co2_kg_per_liter,
    )
