"""Path construction helpers for search output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def solution_rangers_path(out_dir: Path) -> Path:
    """Return path to the per-ranger solution Parquet file."""
    return logs_dir(out_dir) / "solution_rangers.parquet"


def solution_swaps_path(out_dir: Path) -> Path:
    """Return path to the per-swap solution Parquet file."""
    return logs_dir(out_dir) / "solution_swaps.parquet"


def summary_path(out_dir: Path) -> Path:
    """Return path to the run summary JSON file."""
    return out_dir / "summary.json"
