from datetime import datetime, timezone

from smartwaste.models.domain import Coordinate, PickupCandidate, Vehicle
from smartwaste.services.geospatial import distance_km
from smartwaste.services.routing.builder import build_route

DEPOT = Coordinate(0.0, 0.0)
NOW = datetime(2024, 3, 10, tzinfo=timezone.utc)


def _candidate(cid: str, lat: float, lon: float, demand: float, fill: float = 80) -> PickupCandidate:
    return PickupCandidate(
        candidate_id=cid,
        location=Coordinate(lat, lon),
        demand=demand,
        fill_percentage=fill,
    )


def test_empty_candidates_give_empty_route():
    result = build_route(DEPOT, [], Vehicle(capacity=100), now=NOW)
    assert result.stops == ()
    assert result.unrouted_ids == ()


def test_nearest_first_then_capacity_cutoff():
    a = _candidate("A", 0.009, 0.0, demand=10)
    b = _candidate("B", 0.018, 0.0, demand=10)

    result = build_route(DEPOT, [b, a], Vehicle(capacity=15), now=NOW)

    assert [stop.candidate_id for stop in result.stops] == ["A"]
    assert result.unrouted_ids == ("B",)


def test_visits_nearer_candidate_first():
    a = _candidate("A", 0.045, 0.0, demand=5)
    b = _candidate("B", 0.009, 0.0, demand=5)

    result = build_route(DEPOT, [a, b], Vehicle(capacity=20), now=NOW)

    assert [stop.candidate_id for stop in result.stops] == ["B", "A"]
    assert result.unrouted_ids == ()
    assert result.stops[0].distance_from_prev_km == distance_km(DEPOT, b.location)
    assert result.stops[1].distance_from_prev_km == distance_km(b.location, a.location)


def test_skips_candidate_that_does_not_fit_and_keeps_going():
    near_heavy = _candidate("HEAVY", 0.001, 0.0, demand=50)
    far_light = _candidate("LIGHT", 0.02, 0.0, demand=5)

    result = build_route(DEPOT, [near_heavy, far_light], Vehicle(capacity=30), now=NOW)

    assert [stop.candidate_id for stop in result.stops] == ["LIGHT"]
    assert result.unrouted_ids == ("HEAVY",)


def test_single_candidate_over_capacity_is_unrouted():
    result = build_route(DEPOT, [_candidate("X", 0.01, 0.01, demand=500)], Vehicle(capacity=100), now=NOW)
    assert result.stops == ()
    assert result.unrouted_ids == ("X",)


def test_equidistant_candidates_break_tie_by_identifier():
    east = _candidate("B", 0.0, 0.01, demand=1)
    west = _candidate("A", 0.0, -0.01, demand=1)

    result = build_route(DEPOT, [east, west], Vehicle(capacity=10), now=NOW)

    assert [stop.candidate_id for stop in result.stops] == ["A", "B"]


def test_stop_fields_carry_priority_and_times():
    bin_a = _candidate("A", 0.09, 0.0, demand=10, fill=95)
    bin_b = _candidate("B", 0.18, 0.0, demand=10, fill=60)

    result = build_route(DEPOT, [bin_a, bin_b], Vehicle(capacity=100), now=NOW)
    first, second = result.stops

    leg_one = distance_km(DEPOT, bin_a.location)
    assert first.sequence == 1
    assert first.priority == 4
    assert first.demand == 10
    assert first.travel_time_min == int(leg_one * 2 + 0.5)
    assert first.arrival_min == first.travel_time_min
    assert second.sequence == 2
    assert second.priority == 1
    assert second.arrival_min == first.travel_time_min + 10 + second.travel_time_min


def test_exhausted_capacity_stops_the_loop():
    exact = _candidate("A", 0.01, 0.0, demand=10)
    free = _candidate("Z", 0.02, 0.0, demand=0)

    result = build_route(DEPOT, [exact, free], Vehicle(capacity=10), now=NOW)

    assert [stop.candidate_id for stop in result.stops] == ["A"]
    assert result.unrouted_ids == ("Z",)


def test_input_candidates_are_not_mutated():
    candidates = [_candidate("A", 0.01, 0.0, demand=1), _candidate("B", 0.02, 0.0, demand=1)]
    snapshot = list(candidates)

    build_route(DEPOT, candidates, Vehicle(capacity=10), now=NOW)

    assert candidates == snapshot


def test_near_tie_within_tolerance_prefers_lower_identifier():
    # A is about 1e-5 km farther than B
    first_listed = _candidate("B", 0.0, 0.01, demand=1)
    slightly_farther = _candidate("A", 0.0, -0.0100001, demand=1)

    result = build_route(
        DEPOT, [first_listed, slightly_farther], Vehicle(capacity=10), now=NOW, tie_tolerance_km=1e-3
    )

    assert [stop.candidate_id for stop in result.stops] == ["A", "B"]


def test_gap_outside_tolerance_is_not_a_tie():
    nearer = _candidate("B", 0.0, 0.01, demand=1)
    slightly_farther = _candidate("A", 0.0, -0.0100001, demand=1)

    result = build_route(
        DEPOT, [slightly_farther, nearer], Vehicle(capacity=10), now=NOW, tie_tolerance_km=1e-9
    )

    assert [stop.candidate_id for stop in result.stops] == ["B", "A"]
