"""Serializers for routing outputs."""

from __future__ import annotations

import csv
import io

from ..routing.models import RoutePlan, RouteStop, RoutingResult


def stop_to_dict(stop: RouteStop) -> dict:
    return {
        "candidate_id": stop.candidate_id,
        "sequence": stop.sequence,
        "location": {"lat": stop.location.latitude, "lng": stop.location.longitude},
        "demand": stop.demand,
        "priority": stop.priority,
        "travel_time_min": stop.travel_time_min,
        "distance_from_prev_km": stop.distance_from_prev_km,
        "arrival_min": stop.arrival_min,
    }


def plan_to_dict(plan: RoutePlan) -> dict:
    return {
        "total_distance_km": plan.total_distance_km,
        "total_time_min": plan.total_time_min,
        "total_weight": plan.total_weight,
        "fuel_consumption_liters": plan.fuel_consumption_liters,
        "savings_percent": plan.savings_percent,
        "co2_kg": plan.co2_kg,
        "stop_count": plan.stop_count,
        "stops": [stop_to_dict(stop) for stop in plan.stops],
    }


def routing_result_to_json(result: RoutingResult) -> dict:
    return {
        "metadata": result.metadata,
        "unrouted_ids": list(result.unrouted_ids),
        "plan": plan_to_dict(result.plan),
    }


def routing_result_to_csv(result: RoutingResult) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "sequence",
        "candidate_id",
        "lat",
        "lng",
        "demand",
        "priority",
        "travel_time_min",
        "distance_from_prev_km",
        "arrival_min",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for stop in result.plan.stops:
        writer.writerow(
            {
                "sequence": stop.sequence,
                "candidate_id": stop.candidate_id,
                "lat": stop.location.latitude,
                "lng": stop.location.longitude,
                "demand": stop.demand,
                "priority": stop.priority,
                "travel_time_min": stop.travel_time_min,
                "distance_from_prev_km": stop.distance_from_prev_km,
                "arrival_min": stop.arrival_min,
            }
        )
    return buffer.getvalue()
