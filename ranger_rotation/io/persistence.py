"""Parquet/JSON persistence for finished searches."""

from __future__ import annotations

import json
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from ranger_rotation.config.types import PuzzleConfig, SearchConfig
from ranger_rotation.io.paths import (
    logs_dir,
    solution_rangers_path,
    solution_swaps_path,
    summary_path,
)
from ranger_rotation.io.schemas import (
    SOLUTION_RANGERS_SCHEMA,
    SOLUTION_SCHEMA_VERSION,
    SOLUTION_SWAPS_SCHEMA,
)
from ranger_rotation.search.results import SearchResult


def solution_ranger_rows(result: SearchResult) -> list[dict[str, object]]:
    """Flatten solutions into one row per ranger per solution."""
    rows: list[dict[str, object]] = []
    for solution in result.solutions:
        for snapshot in solution.rangers:
            rows.append(
                {
                    "schema_version": SOLUTION_SCHEMA_VERSION,
                    "solution_id": solution.ordinal,
                    "ranger_id": snapshot.ranger_id,
                    "station": snapshot.station.value,
                    "north_visits": snapshot.north_visits,
                    "south_visits": snapshot.south_visits,
                    "moved_count": snapshot.moved_count,
                    "co_location": list(snapshot.co_location),
                }
            )
    return rows


def solution_swap_rows(result: SearchResult) -> list[dict[str, object]]:
    """Flatten solution histories into one row per swap."""
    rows: list[dict[str, object]] = []
    for solution in result.solutions:
        for swap_index, (first, second) in enumerate(solution.swap_history):
            rows.append(
                {
                    "schema_version": SOLUTION_SCHEMA_VERSION,
                    "solution_id": solution.ordinal,
                    "swap_index": swap_index,
                    "first": first,
                    "second": second,
                }
            )
    return rows


def build_summary(
    result: SearchResult,
    puzzle: PuzzleConfig,
    config: SearchConfig,
    seed: int | None = None,
) -> dict[str, object]:
    """Build the JSON-serializable run summary."""
    return {
        "ranger_ids": list(puzzle.ranger_ids),
        "initial_north": list(puzzle.initial_north),
        "opening_swap": list(puzzle.opening_swap) if puzzle.force_opening else None,
        "required_north": list(puzzle.required_north),
        "seed": seed,
        "max_swaps": config.max_swaps,
        "end_on_first_solution": config.end_on_first_solution,
        "nodes_processed": result.nodes_processed,
        "halted_early": result.halted_early,
        "solutions": result.solution_count,
        "solution_lengths": sorted({len(s.swap_history) for s in result.solutions}),
    }


def write_search_artifacts(
    result: SearchResult,
    out_dir: Path,
    puzzle: PuzzleConfig,
    config: SearchConfig,
    seed: int | None = None,
) -> dict[str, object]:
    """Write solution Parquet logs and the summary JSON; return the summary."""
    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    pq.write_table(
        pa.Table.from_pylist(solution_ranger_rows(result), schema=SOLUTION_RANGERS_SCHEMA),
        solution_rangers_path(out_dir),
    )
    pq.write_table(
        pa.Table.from_pylist(solution_swap_rows(result), schema=SOLUTION_SWAPS_SCHEMA),
        solution_swaps_path(out_dir),
    )
    summary = build_summary(result, puzzle, config, seed=seed)
    summary_path(out_dir).write_text(json.dumps(summary, ensure_ascii=False, indent=2))
    return summary
