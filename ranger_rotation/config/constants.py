"""Centralized puzzle constants and search defaults.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

RANGER_IDS: tuple[str, ...] = ("A", "B", "C", "D")
"""Ranger roster, in seeding order."""

NUM_RANGERS = 4
"""Size of the roster; the puzzle is only defined for four rangers."""

INITIAL_NORTH: tuple[str, str] = ("A", "B")
"""Rangers stationed North in the seed configuration; the rest start South."""

OPENING_SWAP: tuple[str, str] = ("A", "C")
"""Swap applied to the seed before the search starts."""

REQUIRED_NORTH: tuple[str, str] = ("A", "B")
"""Rangers that must be stationed North in a goal configuration."""

MAX_SWAPS = 12
"""Default depth bound on swap-history length.

Twelve is the shortest solution length for the default puzzle: move counts
must be equal and even, and every ranger needs three co-location partners.
"""

PROGRESS_INTERVAL = 5_000_000
"""Emit progress telemetry every this many processed nodes."""

MOVE_CATALOG: tuple[tuple[str, str], ...] = (
    ("A", "B"),
    ("B", "C"),
    ("B", "D"),
    ("C", "D"),
    ("A", "C"),
    ("A", "D"),
)
"""Swap catalog for the default roster, in the order discovery output is known by."""
