"""Plain-text rendering of rangers, configurations and solutions."""

from __future__ import annotations

from collections.abc import Iterable

from ranger_rotation.domain.configuration import Configuration, Swap
from ranger_rotation.domain.ranger import Ranger
from ranger_rotation.search.results import RangerSnapshot, Solution


def format_ranger(ranger: Ranger | RangerSnapshot) -> str:
    """Render one ranger as ``name:A, station:N, ncount:.., ...``."""
    co_location = (
        ranger.co_location
        if isinstance(ranger, RangerSnapshot)
        else tuple(sorted(ranger.co_location.items()))
    )
    parts = [
        f"name:{ranger.ranger_id}",
        f"station:{ranger.station.value}",
        f"ncount:{ranger.north_visits}",
        f"scount:{ranger.south_visits}",
        f"mcount:{ranger.moved_count}",
    ]
    parts.extend(f"with_{peer}:{count}" for peer, count in co_location)
    return ", ".join(parts)


def format_history(swap_history: Iterable[Swap]) -> str:
    return ", ".join(f"[{first},{second}]" for first, second in swap_history)


def format_configuration(config: Configuration) -> str:
    lines = [format_ranger(r) for r in config.rangers.values()]
    lines.append(format_history(config.swap_history))
    return "\n".join(lines)


def format_solution(solution: Solution) -> str:
    lines = [f"Solution: {solution.ordinal}"]
    lines.extend(format_ranger(r) for r in solution.rangers)
    lines.append(format_history(solution.swap_history))
    return "\n".join(lines)
