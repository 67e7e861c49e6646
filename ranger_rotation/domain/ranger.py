"""Per-ranger station and fairness bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ranger_rotation.domain.errors import InvariantViolationError


class Station(Enum):
    """The two stations a ranger can hold."""

    NORTH = "N"
    SOUTH = "S"

    def other(self) -> Station:
        return Station.SOUTH if self is Station.NORTH else Station.NORTH


@dataclass(slots=True)
class Ranger:
    """One ranger's station plus the counters used by the fairness checks."""

    ranger_id: str
    station: Station
    north_visits: int = 0
    south_visits: int = 0
    moved_count: int = 0
    co_location: dict[str, int] = field(default_factory=dict)  # peer id -> shared-station count

    @property
    def is_north(self) -> bool:
        return self.station is Station.NORTH

    def register_peer(self, other_id: str) -> None:
        self.co_location[other_id] = 0

    def note_stationed(self) -> None:
        """Count one visit to the station currently held."""
        if self.station is Station.NORTH:
            self.north_visits += 1
        else:
            self.south_visits += 1

    def increment_co_location_with(self, other_id: str) -> None:
        if other_id not in self.co_location:
            raise InvariantViolationError(
                f"ranger {self.ranger_id} has no co-location entry for {other_id}"
            )
        self.co_location[other_id] += 1

    def is_fair(self) -> bool:
        """True when both stations were visited equally and every pairing count matches."""
        if self.north_visits != self.south_visits:
            return False
        return len(set(self.co_location.values())) <= 1

    def clone(self) -> Ranger:
        return Ranger(
            ranger_id=self.ranger_id,
            station=self.station,
            north_visits=self.north_visits,
            south_visits=self.south_visits,
            moved_count=self.moved_count,
            co_location=dict(self.co_location),
        )
