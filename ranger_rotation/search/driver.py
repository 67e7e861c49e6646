"""Breadth-first search driver over ranger configurations.

The worklist is a FIFO of configurations that are neither illegal nor goals.
Each dequeued node is expanded by trying every catalog move on a private
clone, starting at a random offset into the catalog. The offset only changes
the order siblings are enqueued in; the set of explored histories is the same
for every randomness source.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable
from random import Random

from ranger_rotation.config.constants import MOVE_CATALOG, RANGER_IDS
from ranger_rotation.config.types import PuzzleConfig, SearchConfig
from ranger_rotation.domain.configuration import Configuration
from ranger_rotation.domain.moves import build_move_catalog, rotated
from ranger_rotation.domain.symmetry import uncovered_openings
from ranger_rotation.search.results import SearchResult, Solution

logger = logging.getLogger(__name__)

SolutionCallback = Callable[[Solution], None]


class SearchDriver:
    """Owns the worklist, the randomness source and the solution tally for one puzzle."""

    def __init__(
        self,
        puzzle: PuzzleConfig | None = None,
        config: SearchConfig | None = None,
        rng: Random | None = None,
        on_solution: SolutionCallback | None = None,
    ) -> None:
        self.puzzle = puzzle or PuzzleConfig()
        self.config = config or SearchConfig()
        self.rng = rng if rng is not None else Random(time.time_ns())
        self.on_solution = on_solution
        self.catalog = (
            MOVE_CATALOG
            if self.puzzle.ranger_ids == RANGER_IDS
            else build_move_catalog(self.puzzle.ranger_ids)
        )
        self.solution_count = 0
        self.nodes_processed = 0

    def seed_configuration(self) -> Configuration:
        """Build the starting configuration, applying the forced opening if enabled."""
        seed = Configuration.seed(self.puzzle.ranger_ids, self.puzzle.initial_north)
        if not self.puzzle.force_opening:
            return seed
        uncovered = uncovered_openings(self.puzzle)
        if uncovered:
            logger.warning(
                "forced opening %s does not cover openings %s by symmetry; "
                "solutions starting with them will not be found",
                self.puzzle.opening_swap,
                uncovered,
            )
        if not seed.attempt_swap(*self.puzzle.opening_swap):
            raise ValueError(f"opening swap {self.puzzle.opening_swap} is illegal")
        return seed

    def _expandable(self, config: Configuration) -> bool:
        max_swaps = self.config.max_swaps
        return max_swaps is None or len(config.swap_history) < max_swaps

    def _report(self, config: Configuration) -> Solution:
        self.solution_count += 1
        solution = Solution.from_configuration(self.solution_count, config)
        if self.on_solution is not None:
            self.on_solution(solution)
        return solution

    def run(self) -> SearchResult:
        """Search until the worklist drains or the first solution when so configured."""
        self.solution_count = 0
        self.nodes_processed = 0
        solutions: list[Solution] = []
        required_north = self.puzzle.required_north
        progress_interval = self.config.progress_interval

        worklist: deque[Configuration] = deque()
        seed = self.seed_configuration()
        if self._expandable(seed):
            worklist.append(seed)

        while worklist:
            node = worklist.popleft()
            self.nodes_processed += 1

            if progress_interval and self.nodes_processed % progress_interval == 0:
                logger.info(
                    "count: %d, deque_size: %d, swaps: %d",
                    self.nodes_processed,
                    len(worklist),
                    len(node.swap_history),
                )

            offset = self.rng.randrange(len(self.catalog))
            for id1, id2 in rotated(self.catalog, offset):
                if not node.can_swap(id1, id2):
                    continue
                child = node.clone()
                child.attempt_swap(id1, id2)
                if child.is_goal_state(required_north):
                    solutions.append(self._report(child))
                    if self.config.end_on_first_solution:
                        return SearchResult(
                            solutions=tuple(solutions),
                            nodes_processed=self.nodes_processed,
                            halted_early=True,
                        )
                elif self._expandable(child):
                    worklist.append(child)

        return SearchResult(
            solutions=tuple(solutions),
            nodes_processed=self.nodes_processed,
            halted_early=False,
        )


def run_search(
    puzzle: PuzzleConfig | None = None,
    config: SearchConfig | None = None,
    rng: Random | None = None,
    on_solution: SolutionCallback | None = None,
) -> SearchResult:
    """Run one search with a fresh driver."""
    return SearchDriver(puzzle=puzzle, config=config, rng=rng, on_solution=on_solution).run()
