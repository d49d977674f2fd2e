"""Tests for tile_escape.domain.board module."""

from __future__ import annotations

import numpy as np
import pytest

from tile_escape.domain.board import Board, Puzzle, Tile
from tile_escape.domain.errors import BoardIntegrityError, BoardParseError, ParseErrorKind
from tile_escape.domain.geometry import Position
from tile_escape.io.parser import parse_puzzle

O, W, P, T = Tile.OPEN, Tile.WALL, Tile.PIT, Tile.TELEPORT

MIXED_BOARD = """\
#E###
.....
.~.T.
.O.T.
..P..
"""


@pytest.fixture
def board() -> Board:
    return parse_puzzle(MIXED_BOARD).board


class TestTileLookup:
    def test_dimensions(self, board: Board) -> None:
        assert (board.rows, board.columns) == (4, 5)
        assert board.exit_column == 1
        assert board.exit_position == Position(1, -1)

    def test_stored_tiles(self, board: Board) -> None:
        assert board.tile_at(Position(0, 0)) is Tile.OPEN
        assert board.tile_at(Position(1, 1)) is Tile.ICE
        assert board.tile_at(Position(1, 2)) is Tile.PIT
        assert board.tile_at(Position(3, 1)) is Tile.TELEPORT
        assert board.tile_at(Position(2, 3)) is Tile.OPEN

    def test_exit_gap(self, board: Board) -> None:
        assert board.tile_at(Position(1, -1)) is Tile.EXIT
        assert board.tile_at(Position(0, -1)) is Tile.WALL
        assert board.tile_at(Position(2, -1)) is Tile.WALL

    def test_everything_outside_the_grid_is_wall(self, board: Board) -> None:
        for x in range(-3, board.columns + 3):
            for y in range(-4, board.rows + 3):
                position = Position(x, y)
                if board.contains(position) or position == board.exit_position:
                    continue
                assert board.tile_at(position) is Tile.WALL, position

    def test_lookup_is_idempotent(self, board: Board) -> None:
        for x in range(-1, board.columns + 1):
            for y in range(-2, board.rows + 1):
                position = Position(x, y)
                assert board.tile_at(position) is board.tile_at(position)


class TestTeleporters:
    def test_pair_is_found_in_row_major_order(self, board: Board) -> None:
        assert board.teleporters == (Position(3, 1), Position(3, 2))

    def test_partner_lookup_is_symmetric(self, board: Board) -> None:
        assert board.teleport_partner(Position(3, 1)) == Position(3, 2)
        assert board.teleport_partner(Position(3, 2)) == Position(3, 1)

    def test_partner_of_non_teleporter_raises(self, board: Board) -> None:
        with pytest.raises(BoardIntegrityError):
            board.teleport_partner(Position(0, 0))

    @pytest.mark.parametrize("count", [1, 3])
    def test_wrong_teleporter_count_is_rejected(self, count: int) -> None:
        row = [T] * count + [O] * (4 - count)
        with pytest.raises(BoardParseError) as excinfo:
            Board.from_rows([row, [O, O, O, O]], exit_column=0)
        assert excinfo.value.kind is ParseErrorKind.TELEPORTER_COUNT

    def test_no_teleporters_is_fine(self) -> None:
        board = Board.from_rows([[O, W], [P, Tile.ICE]], exit_column=0)
        assert board.teleporters == ()


class TestConstruction:
    def test_ragged_rows_are_rejected(self) -> None:
        with pytest.raises(BoardParseError) as excinfo:
            Board.from_rows([[O, O, O], [O, O]], exit_column=0)
        assert excinfo.value.kind is ParseErrorKind.RAGGED_ROWS

    def test_exit_outside_grid_is_rejected(self) -> None:
        with pytest.raises(BoardParseError) as excinfo:
            Board.from_rows([[O, O]], exit_column=2)
        assert excinfo.value.kind is ParseErrorKind.EXIT_OUTSIDE_GRID

    def test_exit_tiles_cannot_be_stored(self) -> None:
        with pytest.raises(BoardParseError) as excinfo:
            Board.from_rows([[O, Tile.EXIT]], exit_column=0)
        assert excinfo.value.kind is ParseErrorKind.UNKNOWN_TILE

    def test_tiles_are_read_only(self, board: Board) -> None:
        with pytest.raises(ValueError):
            board.tiles[0, 0] = Tile.WALL.value

    def test_source_array_is_copied(self) -> None:
        codes = np.zeros((2, 2), dtype=np.int8)
        board = Board(tiles=codes, exit_column=0)
        codes[0, 0] = Tile.PIT.value
        assert board.tile_at(Position(0, 0)) is Tile.OPEN

    def test_equal_boards_hash_equal(self, board: Board) -> None:
        twin = parse_puzzle(MIXED_BOARD).board
        assert board == twin
        assert hash(board) == hash(twin)
        assert board != Board.from_rows([[O]], exit_column=0)


class TestPuzzle:
    def test_start_on_wall_is_rejected(self) -> None:
        board = Board.from_rows([[O, W]], exit_column=0)
        with pytest.raises(BoardParseError) as excinfo:
            Puzzle(board=board, start=Position(1, 0))
        assert excinfo.value.kind is ParseErrorKind.MISSING_START

    def test_start_outside_grid_is_rejected(self) -> None:
        board = Board.from_rows([[O, O]], exit_column=0)
        with pytest.raises(BoardParseError):
            Puzzle(board=board, start=Position(0, -1))
