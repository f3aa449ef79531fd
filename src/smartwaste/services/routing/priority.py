"""Dispatch priority scoring for pickup candidates.

The score is reported on each stop. It does not change the visiting order.
"""

from __future__ import annotations

from datetime import datetime, timezone

from ...models.domain import PickupCandidate

BASE_PRIORITY = 1

# (minimum fill percentage, contribution); first match wins
FILL_TIERS: tuple[tuple[float, int], ...] = ((90.0, 3), (80.0, 2), (70.0, 1))

# (days since service strictly greater than, contribution); first match wins
STALENESS_TIERS: tuple[tuple[float, int], ...] = ((3.0, 2), (2.0, 1))

SECONDS_PER_DAY = 24 * 60 * 60


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def fill_contribution(fill_percentage: float) -> int:
    for threshold, points in FILL_TIERS:
        if fill_percentage >= threshold:
            return points
    return 0


def days_since(last_service: datetime, now: datetime) -> float:
    delta = _as_utc(now) - _as_utc(last_service)
    return delta.total_seconds() / SECONDS_PER_DAY


def staleness_contribution(last_service: datetime | None, now: datetime) -> int:
    if last_service is None:
        return 0
    elapsed = days_since(last_service, now)
    for threshold, points in STALENESS_TIERS:
        if elapsed > threshold:
            return points
    return 0


def priority_score(candidate: PickupCandidate, now: datetime | None = None) -> int:
    """Return ``1 + fill tier + staleness tier`` for the candidate.

    ``now`` defaults to the current UTC time; naive timestamps are read as UTC.
    """
    now = now or datetime.now(timezone.utc)
    return (
        BASE_PRIORITY
        + fill_contribution(candidate.fill_percentage)
        + staleness_contribution(candidate.last_service, now)
    )
