"""Domain layer: ranger records, configurations, moves, and puzzle symmetry."""

from ranger_rotation.domain.configuration import Configuration, Swap
from ranger_rotation.domain.errors import InvariantViolationError
from ranger_rotation.domain.moves import build_move_catalog, rotated
from ranger_rotation.domain.ranger import Ranger, Station
from ranger_rotation.domain.symmetry import (
    legal_openings,
    puzzle_symmetries,
    uncovered_openings,
)

__all__ = [
    "Configuration",
    "InvariantViolationError",
    "Ranger",
    "Station",
    "Swap",
    "build_move_catalog",
    "legal_openings",
    "puzzle_symmetries",
    "rotated",
    "uncovered_openings",
]
