"""Full puzzle state: every ranger record plus the swaps that produced it.

Station-balance invariant: exactly two rangers are North and two South. The
seed satisfies it and every successful swap exchanges one North resident with
one South resident, so it holds for every reachable configuration.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TypeAlias

from ranger_rotation.domain.errors import InvariantViolationError
from ranger_rotation.domain.ranger import Ranger, Station

Swap: TypeAlias = tuple[str, str]
"""An attempted exchange between two rangers, in the order it was requested."""


@dataclass
class Configuration:
    """Ranger records keyed by id and the ordered swap history."""

    rangers: dict[str, Ranger] = field(default_factory=dict)
    swap_history: tuple[Swap, ...] = ()

    @classmethod
    def seed(cls, ranger_ids: Iterable[str], initial_north: Iterable[str]) -> Configuration:
        """Build the starting configuration; rangers outside *initial_north* start South."""
        roster = tuple(ranger_ids)
        north = set(initial_north)
        if len(north) != 2 or not north <= set(roster):
            raise InvariantViolationError(
                f"initial_north must name two distinct rangers from {roster}, got {sorted(north)}"
            )
        config = cls()
        for ranger_id in roster:
            config.add_ranger(ranger_id, Station.NORTH if ranger_id in north else Station.SOUTH)
        return config

    def add_ranger(self, ranger_id: str, station: Station) -> None:
        """Insert a new ranger and cross-register it with every existing one."""
        if ranger_id in self.rangers:
            raise InvariantViolationError(f"ranger {ranger_id} is already registered")
        new_ranger = Ranger(ranger_id=ranger_id, station=station)
        for other_id, other in self.rangers.items():
            other.register_peer(ranger_id)
            new_ranger.register_peer(other_id)
        self.rangers[ranger_id] = new_ranger

    def ranger(self, ranger_id: str) -> Ranger:
        try:
            return self.rangers[ranger_id]
        except KeyError:
            raise InvariantViolationError(f"unknown ranger id: {ranger_id}") from None

    def residents(self, station: Station) -> list[Ranger]:
        return [r for r in self.rangers.values() if r.station is station]

    def can_swap(self, id1: str, id2: str) -> bool:
        """True when the two rangers currently hold different stations."""
        return self.ranger(id1).station is not self.ranger(id2).station

    def attempt_swap(self, id1: str, id2: str) -> bool:
        """Exchange the stations of two rangers; return False for a same-station pair.

        Before anything moves, every ranger is credited with a visit to its
        current station and each station's pair of residents is credited with
        one co-location. A rejected swap leaves the configuration untouched.
        """
        if not self.can_swap(id1, id2):
            return False
        first, second = self.ranger(id1), self.ranger(id2)

        for ranger in self.rangers.values():
            ranger.note_stationed()
        for station in Station:
            residents = self.residents(station)
            if len(residents) != 2:
                raise InvariantViolationError(
                    f"station {station.value} holds {len(residents)} rangers, expected 2"
                )
            a, b = residents
            a.increment_co_location_with(b.ranger_id)
            b.increment_co_location_with(a.ranger_id)

        self.swap_history = (*self.swap_history, (id1, id2))

        first.station = first.station.other()
        second.station = second.station.other()
        first.moved_count += 1
        second.moved_count += 1
        return True

    def is_goal_state(self, required_north: Iterable[str]) -> bool:
        """True when the required pair is North and every fairness counter has balanced."""
        required = tuple(required_north)
        if len(required) != 2 or required[0] == required[1]:
            raise InvariantViolationError("required_north must name exactly two distinct rangers")
        required_at_north = [self.ranger(ranger_id).is_north for ranger_id in required]
        if not all(required_at_north):
            return False
        if not all(r.is_fair() for r in self.rangers.values()):
            return False
        return len({r.moved_count for r in self.rangers.values()}) <= 1

    def clone(self) -> Configuration:
        """Deep copy; sibling branches never share a Ranger."""
        return Configuration(
            rangers={ranger_id: r.clone() for ranger_id, r in self.rangers.items()},
            swap_history=self.swap_history,
        )
