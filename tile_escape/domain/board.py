"""Immutable tile grid with a single exit gap above the top row.

Lookup is total over integer coordinates: everything outside the stored grid
reads as ``Tile.WALL`` except the one cell at ``(exit_column, -1)``, which
reads as ``Tile.EXIT``. The grid therefore behaves as if it were permanently
walled in, with one opening leading to the exit.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from tile_escape.config.constants import EXIT_ROW, TELEPORTERS_PER_BOARD
from tile_escape.domain.errors import BoardIntegrityError, BoardParseError, ParseErrorKind
from tile_escape.domain.geometry import Position


class Tile(Enum):
    """Tile kinds. Values are the int8 codes stored in ``Board.tiles``."""

    OPEN = 0
    WALL = 1
    PIT = 2
    ICE = 3
    TELEPORT = 4
    EXIT = 5


GRID_TILES: frozenset[Tile] = frozenset(
    {Tile.OPEN, Tile.WALL, Tile.PIT, Tile.ICE, Tile.TELEPORT}
)
"""Tiles that may be stored in the grid; ``EXIT`` is virtual."""


@dataclass(frozen=True, eq=False)
class Board:
    """Rectangular grid of tiles plus the column of the exit gap.

    ``tiles`` is a read-only ``(rows, columns)`` int8 array of ``Tile`` codes.
    """

    tiles: np.ndarray
    exit_column: int
    _cells: tuple[tuple[Tile, ...], ...] = field(init=False, repr=False)
    _teleporters: tuple[Position, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        tiles = np.array(self.tiles, dtype=np.int8, copy=True)
        if tiles.ndim != 2:
            raise BoardParseError(ParseErrorKind.RAGGED_ROWS, "grid must be two-dimensional")
        valid_codes = {t.value for t in GRID_TILES}
        for code in np.unique(tiles):
            if int(code) not in valid_codes:
                raise BoardParseError(
                    ParseErrorKind.UNKNOWN_TILE, f"tile code {int(code)} cannot be stored in a grid"
                )
        if not 0 <= self.exit_column < tiles.shape[1]:
            raise BoardParseError(
                ParseErrorKind.EXIT_OUTSIDE_GRID,
                f"exit column {self.exit_column} outside grid of width {tiles.shape[1]}",
            )
        tiles.setflags(write=False)

        teleporters = tuple(
            Position(int(col), int(row))
            for row, col in np.argwhere(tiles == Tile.TELEPORT.value)
        )
        if len(teleporters) not in (0, TELEPORTERS_PER_BOARD):
            raise BoardParseError(
                ParseErrorKind.TELEPORTER_COUNT,
                f"expected 0 or {TELEPORTERS_PER_BOARD} teleporters, found {len(teleporters)}",
            )

        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(
            self, "_cells", tuple(tuple(Tile(int(code)) for code in row) for row in tiles)
        )
        object.__setattr__(self, "_teleporters", teleporters)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]], exit_column: int) -> Board:
        """Build a board from nested tile rows, rejecting ragged input."""
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise BoardParseError(
                ParseErrorKind.RAGGED_ROWS, f"rows have differing widths {sorted(widths)}"
            )
        width = widths.pop() if widths else 0
        codes = np.array(
            [[tile.value for tile in row] for row in rows], dtype=np.int8
        ).reshape(len(rows), width)
        return cls(tiles=codes, exit_column=exit_column)

    @property
    def rows(self) -> int:
        return int(self.tiles.shape[0])

    @property
    def columns(self) -> int:
        return int(self.tiles.shape[1])

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    @property
    def exit_position(self) -> Position:
        return Position(self.exit_column, EXIT_ROW)

    @property
    def teleporters(self) -> tuple[Position, ...]:
        return self._teleporters

    def contains(self, position: Position) -> bool:
        """True when *position* is a stored grid cell."""
        return 0 <= position.x < self.columns and 0 <= position.y < self.rows

    def tile_at(self, position: Position) -> Tile:
        """Return the tile at *position*, including the implicit boundary."""
        if position.y == EXIT_ROW:
            return Tile.EXIT if position.x == self.exit_column else Tile.WALL
        if not self.contains(position):
            return Tile.WALL
        return self._cells[position.y][position.x]

    def teleport_partner(self, position: Position) -> Position:
        """Return the other teleporter of the pair that *position* belongs to."""
        partners = [p for p in self._teleporters if p != position]
        if len(partners) != 1 or position not in self._teleporters:
            raise BoardIntegrityError(f"{position} is not one of a teleporter pair")
        return partners[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.exit_column == other.exit_column and np.array_equal(self.tiles, other.tiles)

    def __hash__(self) -> int:
        return hash((self.exit_column, self.tiles.shape, self.tiles.tobytes()))


@dataclass(frozen=True)
class Puzzle:
    """One board together with its token's starting position."""

    board: Board
    start: Position

    def __post_init__(self) -> None:
        if not self.board.contains(self.start):
            raise BoardParseError(
                ParseErrorKind.MISSING_START, f"start {self.start} lies outside the grid"
            )
        tile = self.board.tile_at(self.start)
        if tile in (Tile.WALL, Tile.PIT):
            raise BoardParseError(
                ParseErrorKind.MISSING_START, f"start {self.start} sits on a {tile.name} tile"
            )
