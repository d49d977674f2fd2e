"""Path construction helpers for solver output directories.

Centralises the directory/file naming conventions used by the CLI and the
trace recorder.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def puzzle_id_for(paths: Sequence[Path]) -> str:
    """Deterministic puzzle ID built from the input file stems."""
    if not paths:
        raise ValueError("at least one board path is required")
    return "+".join(Path(p).stem for p in paths)


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def solutions_dir(out_dir: Path) -> Path:
    """Return path to the solutions subdirectory within an output directory."""
    return out_dir / "solutions"


def search_trace_path(out_dir: Path) -> Path:
    """Return path to the search trace Parquet file."""
    return logs_dir(out_dir) / "search_trace.parquet"


def solution_path(out_dir: Path, puzzle_id: str) -> Path:
    """Return path to the JSON solution payload of *puzzle_id*."""
    return resolve_within_base(solutions_dir(out_dir) / f"{puzzle_id}.json", out_dir)
