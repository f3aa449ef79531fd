"""Map overlay export for planned collection routes."""

from __future__ import annotations

from typing import Any, Dict, List

from shapely.geometry import LineString, mapping

from ...models.domain import Coordinate
from ..routing.models import RoutePlan


def route_waypoints(depot: Coordinate, plan: RoutePlan) -> List[List[float]]:
    """Return ``[lat, lon]`` pairs for depot -> stops -> depot."""
    if not plan.stops:
        return []
    waypoints = [[depot.latitude, depot.longitude]]
    waypoints.extend([stop.location.latitude, stop.location.longitude] for stop in plan.stops)
    waypoints.append([depot.latitude, depot.longitude])
    return waypoints


def route_to_geojson_feature(depot: Coordinate, plan: RoutePlan, route_id: str) -> Dict[str, Any] | None:
    """Build a GeoJSON LineString feature for the route, or None for an empty plan.

    GeoJSON and WKT use lon,lat order (x,y).
    """
    waypoints = route_waypoints(depot, plan)
    if len(waypoints) < 2:
        return None
    line = LineString([(lon, lat) for lat, lon in waypoints])
    return {
        "type": "Feature",
        "geometry": mapping(line),
        "properties": {
            "route_id": route_id,
            "stop_count": plan.stop_count,
            "total_distance_km": plan.total_distance_km,
            "total_time_min": plan.total_time_min,
            "wkt": line.wkt,
        },
    }


def build_route_overlay(depot: Coordinate, plan: RoutePlan, route_id: str) -> Dict[str, Any]:
    feature = route_to_geojson_feature(depot, plan, route_id)
    return {
        "route_id": route_id,
        "coordinates": route_waypoints(depot, plan),
        "feature": feature,
    }
