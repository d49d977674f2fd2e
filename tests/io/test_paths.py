"""Tests for tile_escape.io.paths."""

from __future__ import annotations

from pathlib import Path

import pytest

from tile_escape.io.paths import (
    logs_dir,
    puzzle_id_for,
    resolve_within_base,
    search_trace_path,
    solution_path,
    solutions_dir,
)


def test_output_layout(tmp_path: Path) -> None:
    assert logs_dir(tmp_path) == tmp_path / "logs"
    assert solutions_dir(tmp_path) == tmp_path / "solutions"
    assert search_trace_path(tmp_path) == tmp_path / "logs" / "search_trace.parquet"


def test_solution_path(tmp_path: Path) -> None:
    assert solution_path(tmp_path, "maze") == (tmp_path / "solutions" / "maze.json").resolve()


def test_solution_path_cannot_escape(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="escapes"):
        solution_path(tmp_path, "../../elsewhere")


def test_resolve_within_base_accepts_relative(tmp_path: Path) -> None:
    assert resolve_within_base(Path("a/b.png"), tmp_path) == (tmp_path / "a" / "b.png").resolve()


def test_resolve_within_base_rejects_outside_absolute(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        resolve_within_base(tmp_path.parent / "other.png", tmp_path)


def test_puzzle_id_for() -> None:
    assert puzzle_id_for([Path("boards/left.txt")]) == "left"
    assert puzzle_id_for([Path("a/left.txt"), Path("b/right.txt")]) == "left+right"


def test_puzzle_id_for_requires_paths() -> None:
    with pytest.raises(ValueError):
        puzzle_id_for([])
