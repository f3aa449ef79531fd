"""Start-time advice based on typical morning traffic."""

from __future__ import annotations

import math
from dataclasses import dataclass

# hour of day -> travel time multiplier
TRAFFIC_MULTIPLIERS: dict[int, float] = {
    6: 0.8,
    7: 1.0,
    8: 1.3,
    9: 1.1,
    10: 0.9,
    11: 0.8,
    12: 1.0,
}


@dataclass(frozen=True, slots=True)
class StartTimeRecommendation:
    optimal_start_time: str
    estimated_completion_hour: int
    traffic_multiplier: float
    adjusted_time_min: float


def recommend_start_time(estimated_time_min: float) -> StartTimeRecommendation:
    """Pick the earliest hour with the smallest traffic-adjusted duration."""
    best_hour = min(TRAFFIC_MULTIPLIERS)
    best_time = math.inf
    for hour in sorted(TRAFFIC_MULTIPLIERS):
        adjusted = estimated_time_min * TRAFFIC_MULTIPLIERS[hour]
        if adjusted < best_time:
            best_hour, best_time = hour, adjusted
    return StartTimeRecommendation(
        optimal_start_time=f"{best_hour:02d}:00",
        estimated_completion_hour=best_hour + math.ceil(best_time / 60),
        traffic_multiplier=TRAFFIC_MULTIPLIERS[best_hour],
        adjusted_time_min=best_time,
    )
