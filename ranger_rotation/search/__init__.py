"""Search layer: breadth-first driver and its result records."""

from ranger_rotation.search.driver import SearchDriver, run_search
from ranger_rotation.search.results import RangerSnapshot, SearchResult, Solution

__all__ = [
    "RangerSnapshot",
    "SearchDriver",
    "SearchResult",
    "Solution",
    "run_search",
]
