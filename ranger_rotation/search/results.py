"""Immutable records describing reported solutions and finished runs."""

from __future__ import annotations

from dataclasses import dataclass

from ranger_rotation.domain.configuration import Configuration, Swap
from ranger_rotation.domain.ranger import Ranger, Station


@dataclass(frozen=True)
class RangerSnapshot:
    """Final counters of one ranger in a reported configuration."""

    ranger_id: str
    station: Station
    north_visits: int
    south_visits: int
    moved_count: int
    co_location: tuple[tuple[str, int], ...]  # (peer id, count), peer ids sorted

    @classmethod
    def from_ranger(cls, ranger: Ranger) -> RangerSnapshot:
        return cls(
            ranger_id=ranger.ranger_id,
            station=ranger.station,
            north_visits=ranger.north_visits,
            south_visits=ranger.south_visits,
            moved_count=ranger.moved_count,
            co_location=tuple(sorted(ranger.co_location.items())),
        )


@dataclass(frozen=True)
class Solution:
    """One goal configuration in discovery order."""

    ordinal: int
    rangers: tuple[RangerSnapshot, ...]
    swap_history: tuple[Swap, ...]

    @classmethod
    def from_configuration(cls, ordinal: int, config: Configuration) -> Solution:
        return cls(
            ordinal=ordinal,
            rangers=tuple(RangerSnapshot.from_ranger(r) for r in config.rangers.values()),
            swap_history=config.swap_history,
        )


@dataclass(frozen=True)
class SearchResult:
    """Everything a completed (or early-exited) search reports."""

    solutions: tuple[Solution, ...]
    nodes_processed: int
    halted_early: bool

    @property
    def solution_count(self) -> int:
        return len(self.solutions)
