"""Configuration layer: constants and typed config dataclasses."""

from ranger_rotation.config.constants import (
    INITIAL_NORTH,
    MAX_SWAPS,
    MOVE_CATALOG,
    NUM_RANGERS,
    OPENING_SWAP,
    PROGRESS_INTERVAL,
    RANGER_IDS,
    REQUIRED_NORTH,
)
from ranger_rotation.config.types import PuzzleConfig, SearchConfig

__all__ = [
    "INITIAL_NORTH",
    "MAX_SWAPS",
    "MOVE_CATALOG",
    "NUM_RANGERS",
    "OPENING_SWAP",
    "PROGRESS_INTERVAL",
    "PuzzleConfig",
    "RANGER_IDS",
    "REQUIRED_NORTH",
    "SearchConfig",
]
