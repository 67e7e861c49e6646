"""CLI entrypoint for the ranger rotation search.

Supports ``--config path/to/config.json`` for reproducible runs. CLI
arguments override config-file values; config-file values override built-in
defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from random import Random

from ranger_rotation.config.constants import (
    MAX_SWAPS,
    PROGRESS_INTERVAL,
    REQUIRED_NORTH,
)
from ranger_rotation.config.types import PuzzleConfig, SearchConfig
from ranger_rotation.io.persistence import build_summary, write_search_artifacts
from ranger_rotation.render import format_solution
from ranger_rotation.search.driver import SearchDriver
from ranger_rotation.search.results import Solution

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_optional_int(raw: object, key: str) -> int | None:
    """Like ``_coerce_int`` but maps ``None``/``"none"`` to None."""
    if raw is None:
        return None
    if isinstance(raw, str) and raw.strip().lower() in {"none", "null", "unbounded"}:
        return None
    return _coerce_int(raw, key)


def _parse_pair(raw: object, key: str) -> tuple[str, str]:
    """Parse a ranger pair given as ``"AB"``, ``"A,B"`` or a two-item list."""
    if isinstance(raw, str):
        parts = [p.strip() for p in raw.split(",")] if "," in raw else list(raw.strip())
    elif isinstance(raw, (list, tuple)):
        parts = [str(p).strip() for p in raw]
    else:
        raise ValueError(f"{key} must be a ranger pair such as 'AB' or 'A,B'")
    parts = [p for p in parts if p]
    if len(parts) != 2:
        raise ValueError(f"{key} must name exactly two rangers")
    return parts[0], parts[1]


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Search for fair ranger station rotations")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for move-order randomization (default: wall-clock time)",
    )
    parser.add_argument(
        "--max-swaps",
        type=str,
        default=None,
        help="Longest swap history explored; 'none' for unbounded (first-solution mode only)",
    )
    parser.add_argument(
        "--first-solution",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Stop after the first reported solution",
    )
    parser.add_argument("--progress-interval", type=int, default=None)
    parser.add_argument("--required-north", type=str, default=None)
    parser.add_argument(
        "--force-opening",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Apply the fixed opening swap before searching",
    )
    parser.add_argument(
        "--print-solutions",
        action=argparse.BooleanOptionalAction,
        default=None,
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Write Parquet solution logs and summary.json here",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for search execution."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    try:
        raw_seed = _get_val(args.seed, "seed", file_cfg, None)
        seed = time.time_ns() if raw_seed is None else _coerce_int(raw_seed, "seed")
        puzzle = PuzzleConfig(
            required_north=_parse_pair(
                _get_val(args.required_north, "required_north", file_cfg, REQUIRED_NORTH),
                "required_north",
            ),
            force_opening=_coerce_bool(
                _get_val(args.force_opening, "force_opening", file_cfg, True), "force_opening"
            ),
        )
        config = SearchConfig(
            end_on_first_solution=_coerce_bool(
                _get_val(args.first_solution, "end_on_first_solution", file_cfg, False),
                "end_on_first_solution",
            ),
            max_swaps=_coerce_optional_int(
                _get_val(args.max_swaps, "max_swaps", file_cfg, MAX_SWAPS), "max_swaps"
            ),
            progress_interval=_coerce_int(
                _get_val(args.progress_interval, "progress_interval", file_cfg, PROGRESS_INTERVAL),
                "progress_interval",
            ),
        )
        print_solutions = _coerce_bool(
            _get_val(args.print_solutions, "print_solutions", file_cfg, False), "print_solutions"
        )
    except ValueError as exc:
        parser.error(str(exc))

    raw_out_dir = _get_val(args.out_dir, "out_dir", file_cfg, None)

    def _print_solution(solution: Solution) -> None:
        print(format_solution(solution) + "\n")

    driver = SearchDriver(
        puzzle=puzzle,
        config=config,
        rng=Random(seed),
        on_solution=_print_solution if print_solutions else None,
    )
    result = driver.run()

    if raw_out_dir is not None:
        summary = write_search_artifacts(result, Path(str(raw_out_dir)), puzzle, config, seed=seed)
    else:
        summary = build_summary(result, puzzle, config, seed=seed)
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
