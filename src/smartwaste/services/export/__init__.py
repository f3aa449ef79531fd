"""Export services."""

from .geojson import build_route_overlay, route_to_geojson_feature, route_waypoints

__all__ = [
    "build_route_overlay",
    "route_to_geojson_feature",
    "route_waypoints",
]
