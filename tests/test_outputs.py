import csv
import io

from smartwaste.models.domain import Coordinate, PickupCandidate, Vehicle
from smartwaste.services.export.geojson import route_to_geojson_feature, route_waypoints
from smartwaste.services.outputs.routing_formatter import routing_result_to_csv, routing_result_to_json
from smartwaste.services.routing.service import optimize_route

DEPOT = Coordinate(21.5, 39.2)


def _result():
    candidates = [
        PickupCandidate(candidate_id="C1", location=Coordinate(21.51, 39.21), demand=5, fill_percentage=90),
        PickupCandidate(candidate_id="C2", location=Coordinate(21.55, 39.25), demand=5, fill_percentage=72),
        PickupCandidate(candidate_id="C3", location=Coordinate(21.6, 39.3), demand=50, fill_percentage=99),
    ]
    return optimize_route(DEPOT, candidates, Vehicle(capacity=20, vehicle_class="auto"))


def test_routing_result_to_json_includes_unrouted():
    payload = routing_result_to_json(_result())

    assert payload["unrouted_ids"] == ["C3"]
    assert payload["plan"]["stop_count"] == 2
    assert [stop["candidate_id"] for stop in payload["plan"]["stops"]] == ["C1", "C2"]
    assert payload["plan"]["stops"][0]["location"] == {"lat": 21.51, "lng": 39.21}
    assert payload["metadata"]["algorithm"] == "nearest_feasible_neighbor"


def test_routing_result_to_csv_has_one_row_per_stop():
    rows = list(csv.DictReader(io.StringIO(routing_result_to_csv(_result()))))

    assert [row["candidate_id"] for row in rows] == ["C1", "C2"]
    assert rows[0]["sequence"] == "1"
    assert rows[1]["sequence"] == "2"


def test_route_geometry_closes_at_depot():
    plan = _result().plan
    waypoints = route_waypoints(DEPOT, plan)

    assert waypoints[0] == waypoints[-1] == [21.5, 39.2]
    assert len(waypoints) == plan.stop_count + 2

    feature = route_to_geojson_feature(DEPOT, plan, "R1")
    assert feature["geometry"]["type"] == "LineString"
    # GeoJSON is lon,lat
    assert tuple(feature["geometry"]["coordinates"][0]) == (39.2, 21.5)
    assert feature["properties"]["wkt"].startswith("LINESTRING")


def test_empty_plan_has_no_geometry():
    plan = optimize_route(DEPOT, [], Vehicle(capacity=20)).plan

    assert route_waypoints(DEPOT, plan) == []
    assert route_to_geojson_feature(DEPOT, plan, "R1") is None
