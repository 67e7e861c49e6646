"""Puzzle symmetries used to justify forcing a single opening swap.

Two rangers are interchangeable iff they start on the same station AND agree
on membership in the required-North pair. The symmetries are the automorphisms
of a labeled graph carrying exactly those two attributes per ranger; a forced
opening is sound when every legal opening is its image under one of them.
"""

from __future__ import annotations

import networkx as nx
from networkx.algorithms import isomorphism

from ranger_rotation.config.types import PuzzleConfig
from ranger_rotation.domain.configuration import Swap
from ranger_rotation.domain.ranger import Station

Relabeling = dict[str, str]
"""Ranger id -> ranger id permutation."""


def puzzle_graph(puzzle: PuzzleConfig) -> nx.Graph:
    """Build a labeled graph with one node per ranger.

    Each node carries ``start`` (the seed station value) and ``required``
    (membership in the required-North pair). Rangers sharing a starting
    station are joined by an edge.
    """
    g = nx.Graph()
    for ranger_id in puzzle.ranger_ids:
        start = Station.NORTH if ranger_id in puzzle.initial_north else Station.SOUTH
        g.add_node(ranger_id, start=start.value, required=ranger_id in puzzle.required_north)
    for group in (puzzle.initial_north, puzzle.initial_south):
        for i, a in enumerate(group):
            for b in group[i + 1 :]:
                g.add_edge(a, b)
    return g


def puzzle_symmetries(puzzle: PuzzleConfig) -> list[Relabeling]:
    """Return every relabeling of ranger ids that leaves the puzzle unchanged."""
    g = puzzle_graph(puzzle)
    node_match = isomorphism.categorical_node_match(["start", "required"], [None, None])
    matcher = isomorphism.GraphMatcher(g, g, node_match=node_match)
    return [dict(mapping) for mapping in matcher.isomorphisms_iter()]


def legal_openings(puzzle: PuzzleConfig) -> list[Swap]:
    """Every swap that is legal from the seed configuration, North ranger first."""
    return [(n, s) for n in puzzle.initial_north for s in puzzle.initial_south]


def uncovered_openings(puzzle: PuzzleConfig) -> list[Swap]:
    """Legal openings that no symmetry maps the forced opening onto.

    An empty result certifies that searching from ``puzzle.opening_swap`` alone
    finds every solution up to relabeling.
    """
    a, b = puzzle.opening_swap
    images = {frozenset((mapping[a], mapping[b])) for mapping in puzzle_symmetries(puzzle)}
    return [swap for swap in legal_openings(puzzle) if frozenset(swap) not in images]
