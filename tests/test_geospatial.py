import pytest

from smartwaste.models.domain import Coordinate, PickupCandidate, Vehicle
from smartwaste.services.geospatial import distance_km, haversine_km, is_valid_coordinate
from smartwaste.services.routing.service import optimize_route


def test_distance_is_symmetric():
    pairs = [
        (Coordinate(21.5, 39.2), Coordinate(21.55, 39.25)),
        (Coordinate(-33.86, 151.21), Coordinate(51.5, -0.12)),
        (Coordinate(0.0, 179.9), Coordinate(0.0, -179.9)),
    ]
    for a, b in pairs:
        assert distance_km(a, b) == distance_km(b, a)


def test_distance_to_self_is_zero():
    point = Coordinate(12.97, 77.59)
    assert distance_km(point, point) == 0.0


def test_one_degree_of_latitude():
    # 6371 km * pi / 180
    assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19492664, rel=1e-9)


def test_coordinate_range_check():
    assert is_valid_coordinate(Coordinate(90.0, -180.0))
    assert not is_valid_coordinate(Coordinate(90.5, 0.0))
    assert not is_valid_coordinate(Coordinate(0.0, 181.0))
    assert not is_valid_coordinate(Coordinate(float("nan"), 0.0))


def test_near_antipodal_points_stay_defined():
    half_circumference = 6371.0 * 3.141592653589793
    for i in range(1, 200):
        lat = i / 100
        a = Coordinate(lat, 0.0)
        b = Coordinate(-lat, 180.0)
        assert distance_km(a, b) == pytest.approx(half_circumference, rel=1e-6)


def test_antipodal_candidate_can_be_routed():
    candidate = PickupCandidate(
        candidate_id="A",
        location=Coordinate(-0.08, 180.0),
        demand=1,
        fill_percentage=80,
    )
    result = optimize_route(Coordinate(0.08, 0.0), [candidate], Vehicle(capacity=10))

    assert [stop.candidate_id for stop in result.plan.stops] == ["A"]
    assert result.plan.total_distance_km > 0
