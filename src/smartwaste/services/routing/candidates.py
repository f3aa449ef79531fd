"""Turn a bin inventory snapshot into pickup candidates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...config import settings
from ...models.domain import BinRecord, PickupCandidate
from .estimator import round_half_up


@dataclass(frozen=True, slots=True)
class CandidateSelection:
    candidates: tuple[PickupCandidate, ...]
    skipped_ids: tuple[str, ...]
    fill_threshold: float


def estimated_weight(bin_record: BinRecord) -> int:
    return round_half_up(bin_record.capacity * (bin_record.fill_percentage / 100))


def candidates_from_inventory(
    bins: Sequence[BinRecord],
    fill_threshold: float | None = None,
) -> CandidateSelection:
    """Keep bins at or above the fill threshold, preserving inventory order."""
    threshold = settings.collection_fill_threshold if fill_threshold is None else fill_threshold
    selected: list[PickupCandidate] = []
    skipped: list[str] = []
    for record in bins:
        if record.fill_percentage < threshold:
            skipped.append(record.bin_id)
            continue
        selected.append(
            PickupCandidate(
                candidate_id=record.bin_id,
                location=record.location,
                demand=estimated_weight(record),
                fill_percentage=record.fill_percentage,
                last_service=record.last_collection,
            )
        )
    return CandidateSelection(candidates=tuple(selected), skipped_ids=tuple(skipped), fill_threshold=threshold)
