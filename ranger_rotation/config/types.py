"""Configuration dataclasses for the puzzle definition and the search driver."""

from __future__ import annotations

from dataclasses import dataclass

from ranger_rotation.config.constants import (
    INITIAL_NORTH,
    MAX_SWAPS,
    NUM_RANGERS,
    OPENING_SWAP,
    PROGRESS_INTERVAL,
    RANGER_IDS,
    REQUIRED_NORTH,
)

__all__ = [
    "PuzzleConfig",
    "SearchConfig",
]


def _check_pair(pair: tuple[str, ...], known: tuple[str, ...], label: str) -> None:
    """Validate that *pair* names two distinct rangers from *known*."""
    if len(pair) != 2:
        raise ValueError(f"{label} must contain exactly two ranger ids")
    if pair[0] == pair[1]:
        raise ValueError(f"{label} must contain two distinct ranger ids")
    unknown = [ranger_id for ranger_id in pair if ranger_id not in known]
    if unknown:
        raise ValueError(f"{label} references unknown ranger ids: {', '.join(unknown)}")


@dataclass(frozen=True)
class PuzzleConfig:
    """Fixed puzzle definition: roster, seed placement, opening and goal pair."""

    ranger_ids: tuple[str, ...] = RANGER_IDS
    initial_north: tuple[str, str] = INITIAL_NORTH
    opening_swap: tuple[str, str] = OPENING_SWAP
    required_north: tuple[str, str] = REQUIRED_NORTH
    force_opening: bool = True
    """Apply ``opening_swap`` before searching instead of exploring every opening."""

    def __post_init__(self) -> None:
        if len(self.ranger_ids) != NUM_RANGERS:
            raise ValueError(f"ranger_ids must contain exactly {NUM_RANGERS} ids")
        if len(set(self.ranger_ids)) != len(self.ranger_ids):
            raise ValueError("ranger_ids must be distinct")
        if any(len(ranger_id) != 1 for ranger_id in self.ranger_ids):
            raise ValueError("ranger_ids must be single characters")
        _check_pair(self.initial_north, self.ranger_ids, "initial_north")
        _check_pair(self.opening_swap, self.ranger_ids, "opening_swap")
        _check_pair(self.required_north, self.ranger_ids, "required_north")
        first, second = self.opening_swap
        if (first in self.initial_north) == (second in self.initial_north):
            raise ValueError("opening_swap must pair a North ranger with a South ranger")

    @property
    def initial_south(self) -> tuple[str, ...]:
        """Rangers stationed South in the seed configuration, in roster order."""
        return tuple(r for r in self.ranger_ids if r not in self.initial_north)


@dataclass(frozen=True)
class SearchConfig:
    """Search-driver run mode and telemetry knobs."""

    end_on_first_solution: bool = False
    max_swaps: int | None = MAX_SWAPS
    """Histories of this length are goal-checked but never expanded; ``None`` is unbounded."""
    progress_interval: int = PROGRESS_INTERVAL
    """Processed-node period for progress telemetry; ``0`` disables it."""

    def __post_init__(self) -> None:
        if self.max_swaps is not None and self.max_swaps < 1:
            raise ValueError("max_swaps must be >= 1 or None")
        if self.progress_interval < 0:
            raise ValueError("progress_interval must be >= 0")
        if self.max_swaps is None and not self.end_on_first_solution:
            raise ValueError("unbounded search requires end_on_first_solution")
