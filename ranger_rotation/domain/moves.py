"""Move catalog: every unordered pair of rangers, legal or not."""

from __future__ import annotations

import itertools
from collections.abc import Iterable

from ranger_rotation.domain.configuration import Swap


def build_move_catalog(ranger_ids: Iterable[str]) -> tuple[Swap, ...]:
    """Return every unordered ranger pair in roster order.

    Legality depends on the stations in a particular configuration and is
    left to ``Configuration.attempt_swap``.
    """
    return tuple(itertools.combinations(ranger_ids, 2))


def rotated(catalog: tuple[Swap, ...], offset: int) -> tuple[Swap, ...]:
    """Return *catalog* starting at *offset* and wrapping around."""
    if not catalog:
        return catalog
    offset %= len(catalog)
    return catalog[offset:] + catalog[:offset]
