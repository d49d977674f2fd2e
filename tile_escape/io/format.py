"""Result presentation: compact move strings, board text, and JSON payloads."""

from __future__ import annotations

from collections.abc import Iterable

from tile_escape.config.constants import (
    EXIT_MARKER,
    ICE_GLYPH,
    OPEN_GLYPH,
    PIT_GLYPH,
    START_MARKER,
    TELEPORT_GLYPH,
    WALL_GLYPH,
)
from tile_escape.config.types import SolveResult
from tile_escape.domain.board import Puzzle, Tile
from tile_escape.domain.geometry import Direction

TILE_GLYPHS: dict[Tile, str] = {
    Tile.OPEN: OPEN_GLYPH,
    Tile.WALL: WALL_GLYPH,
    Tile.PIT: PIT_GLYPH,
    Tile.ICE: ICE_GLYPH,
    Tile.TELEPORT: TELEPORT_GLYPH,
}

RESULT_PAYLOAD_SCHEMA_VERSION = 1


def format_moves(moves: Iterable[Direction]) -> str:
    """Render moves as single-letter codes, e.g. ``"UURL"``."""
    return "".join(direction.value for direction in moves)


def parse_moves(text: str) -> tuple[Direction, ...]:
    """Inverse of ``format_moves``; whitespace and commas are ignored."""
    return tuple(Direction.from_code(ch) for ch in text if not ch.isspace() and ch != ",")


def format_puzzle(puzzle: Puzzle) -> str:
    """Render *puzzle* back into the board grammar accepted by the parser."""
    board = puzzle.board
    exit_line = "".join(
        EXIT_MARKER if x == board.exit_column else WALL_GLYPH for x in range(board.columns)
    )
    lines = [exit_line]
    for y in range(board.rows):
        row = []
        for x in range(board.columns):
            if (x, y) == (puzzle.start.x, puzzle.start.y):
                row.append(START_MARKER)
            else:
                row.append(TILE_GLYPHS[Tile(int(board.tiles[y, x]))])
        lines.append("".join(row))
    return "\n".join(lines)


def result_payload(result: SolveResult) -> dict[str, object]:
    """Build the JSON-ready summary written by the CLI."""
    return {
        "schema_version": RESULT_PAYLOAD_SCHEMA_VERSION,
        "puzzle_id": result.puzzle_id,
        "solved": result.solved,
        "moves": format_moves(result.moves) if result.moves is not None else None,
        "move_count": len(result.moves) if result.moves is not None else None,
        "generations": result.generations,
        "turns_expanded": result.turns_expanded,
        "termination_reason": result.termination_reason.value,
    }
