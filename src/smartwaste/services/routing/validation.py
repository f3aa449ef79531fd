"""Boundary checks run once before a route is built."""

from __future__ import annotations

import math
from typing import Sequence

from ...models.domain import Coordinate, PickupCandidate, Vehicle
from ..geospatial import is_valid_coordinate
from .errors import InvalidInputError


def _check_coordinate(coordinate: Coordinate, label: str) -> None:
    if not is_valid_coordinate(coordinate):
        raise InvalidInputError(
            f"{label} has out-of-range coordinates ({coordinate.latitude}, {coordinate.longitude})."
        )


def validate_vehicle(vehicle: Vehicle) -> None:
    if not math.isfinite(vehicle.capacity) or vehicle.capacity <= 0:
        raise InvalidInputError(f"Vehicle capacity must be a positive number, got {vehicle.capacity}.")


def validate_candidates(candidates: Sequence[PickupCandidate], *, max_candidates: int | None = None) -> None:
    if max_candidates is not None and len(candidates) > max_candidates:
        raise InvalidInputError(
            f"Too many candidates for a single route: {len(candidates)} (limit {max_candidates})."
        )
    seen: set[str] = set()
    for candidate in candidates:
        cid = candidate.candidate_id
        if not cid:
            raise InvalidInputError("Candidate identifier must not be empty.")
        if cid in seen:
            raise InvalidInputError(f"Duplicate candidate identifier '{cid}'.")
        seen.add(cid)
        if not math.isfinite(candidate.demand) or candidate.demand < 0:
            raise InvalidInputError(f"Candidate '{cid}' has invalid demand {candidate.demand}.")
        if not math.isfinite(candidate.fill_percentage) or not 0 <= candidate.fill_percentage <= 100:
            raise InvalidInputError(
                f"Candidate '{cid}' fill percentage must be within 0-100, got {candidate.fill_percentage}."
            )
        _check_coordinate(candidate.location, f"Candidate '{cid}'")


def validate_request(depot: Coordinate, candidates: Sequence[PickupCandidate], vehicle: Vehicle, *, max_candidates: int | None = None) -> None:
    """Raise :class:`InvalidInputError` on the first problem found."""
    _check_coordinate(depot, "Depot")
    validate_vehicle(vehicle)
    validate_candidates(candidates, max_candidates=max_candidates)
