"""Domain models for pickup candidates, vehicles and bin inventory records."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class PickupCandidate:
    """A bin awaiting collection, as supplied for a single routing call."""

    candidate_id: str
    location: Coordinate
    demand: float
    fill_percentage: float
    last_service: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class Vehicle:
    """Collection vehicle; the class tag selects its fuel efficiency."""

    capacity: float
    vehicle_class: str = "truck"
    vehicle_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class BinRecord:
    """Inventory snapshot of a smart bin before it is turned into a candidate."""

    bin_id: str
    location: Coordinate
    capacity: float
    fill_percentage: float
    last_collection: Optional[datetime] = None
