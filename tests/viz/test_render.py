"""Tests for tile_escape.viz.render."""

from __future__ import annotations

from pathlib import Path

import pytest

from tile_escape.domain.board import Tile
from tile_escape.domain.geometry import Position
from tile_escape.io.format import parse_moves
from tile_escape.io.parser import parse_puzzle, parse_puzzles
from tile_escape.viz.render import board_image, render_solution, token_trails

PIT_BESIDE_START = "#E###\n.....\n.OP..\n.....\n"
DUAL_OFFSET = "E..\nP..\n...\n\nE..\n...\nP..\n"


def test_board_image_prepends_exit_row() -> None:
    board = parse_puzzle(PIT_BESIDE_START).board
    image = board_image(board)
    assert image.shape == (board.rows + 1, board.columns)
    assert image[0, board.exit_column] == Tile.EXIT.value
    assert image[0, 0] == Tile.WALL.value
    assert image[2, 1] == Tile.PIT.value


def test_token_trail_of_solution() -> None:
    puzzle = parse_puzzle(PIT_BESIDE_START)
    trails = token_trails([puzzle], parse_moves("ULU"))
    assert trails == [[Position(2, 1), Position(2, 0), Position(1, 0), Position(1, -1)]]


def test_token_trail_without_moves() -> None:
    puzzle = parse_puzzle(PIT_BESIDE_START)
    assert token_trails([puzzle], ()) == [[puzzle.start]]


def test_render_single_board(tmp_path: Path) -> None:
    puzzle = parse_puzzle(PIT_BESIDE_START)
    out = render_solution(puzzle, parse_moves("ULU"), tmp_path / "pit.png")
    assert out.exists()
    assert out.stat().st_size > 0


def test_render_dual_boards_unsolved(tmp_path: Path) -> None:
    out = render_solution(parse_puzzles(DUAL_OFFSET), None, tmp_path / "nested" / "dual.png")
    assert out.exists()


def test_render_respects_base_dir(tmp_path: Path) -> None:
    puzzle = parse_puzzle(PIT_BESIDE_START)
    with pytest.raises(ValueError):
        render_solution(puzzle, None, Path("../escape.png"), base_dir=tmp_path)
