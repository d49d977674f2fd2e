"""Text grammar for boards and puzzles.

A board block looks like::

    ##E##
    .....
    .~.T.
    .O.T.
    ..P..

The first line only locates the exit: the column of ``E`` becomes the board's
exit column and every other character is decoration. Each following line is a
grid row (``.`` open, ``#`` wall, ``O`` pit, ``~`` ice, ``T`` teleporter, ``P``
start). A puzzle holds one block, or two blocks separated by blank lines for
the synchronized two-token variant.
"""

from __future__ import annotations

from tile_escape.config.constants import (
    EXIT_MARKER,
    ICE_GLYPH,
    MAX_BOARDS,
    OPEN_GLYPH,
    PIT_GLYPH,
    START_MARKER,
    TELEPORT_GLYPH,
    WALL_GLYPH,
)
from tile_escape.domain.board import Board, Puzzle, Tile
from tile_escape.domain.errors import BoardParseError, ParseErrorKind
from tile_escape.domain.geometry import Position

GLYPH_TILES: dict[str, Tile] = {
    OPEN_GLYPH: Tile.OPEN,
    WALL_GLYPH: Tile.WALL,
    PIT_GLYPH: Tile.PIT,
    ICE_GLYPH: Tile.ICE,
    TELEPORT_GLYPH: Tile.TELEPORT,
    START_MARKER: Tile.OPEN,
}
"""Grid character -> stored tile. The start marker stands on open floor."""


def _split_blocks(text: str) -> list[list[tuple[int, str]]]:
    """Split *text* into blank-line separated blocks of ``(line_no, line)``."""
    blocks: list[list[tuple[int, str]]] = []
    current: list[tuple[int, str]] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.rstrip()
        if not line:
            if current:
                blocks.append(current)
                current = []
            continue
        current.append((line_no, line))
    if current:
        blocks.append(current)
    return blocks


def _parse_block(block: list[tuple[int, str]]) -> Puzzle:
    exit_line_no, exit_line = block[0]
    exit_columns = [i for i, ch in enumerate(exit_line) if ch == EXIT_MARKER]
    if not exit_columns:
        raise BoardParseError(
            ParseErrorKind.MISSING_EXIT,
            f"first line has no {EXIT_MARKER!r} marker",
            line=exit_line_no,
        )
    if len(exit_columns) > 1:
        raise BoardParseError(
            ParseErrorKind.MULTIPLE_EXITS,
            f"first line has {len(exit_columns)} {EXIT_MARKER!r} markers",
            line=exit_line_no,
            column=exit_columns[1] + 1,
        )

    rows: list[list[Tile]] = []
    start: Position | None = None
    width: int | None = None
    for y, (line_no, line) in enumerate(block[1:]):
        if width is None:
            width = len(line)
        elif len(line) != width:
            raise BoardParseError(
                ParseErrorKind.RAGGED_ROWS,
                f"row has width {len(line)}, expected {width}",
                line=line_no,
            )
        row: list[Tile] = []
        for x, ch in enumerate(line):
            tile = GLYPH_TILES.get(ch)
            if tile is None:
                raise BoardParseError(
                    ParseErrorKind.UNKNOWN_TILE,
                    f"unrecognized tile character {ch!r}",
                    line=line_no,
                    column=x + 1,
                )
            if ch == START_MARKER:
                if start is not None:
                    raise BoardParseError(
                        ParseErrorKind.MULTIPLE_STARTS,
                        f"second {START_MARKER!r} marker",
                        line=line_no,
                        column=x + 1,
                    )
                start = Position(x, y)
            row.append(tile)
        rows.append(row)

    if start is None:
        raise BoardParseError(
            ParseErrorKind.MISSING_START,
            f"grid has no {START_MARKER!r} marker",
            line=exit_line_no,
        )

    try:
        board = Board.from_rows(rows, exit_column=exit_columns[0])
    except BoardParseError as exc:
        raise BoardParseError(exc.kind, exc.detail, line=exit_line_no) from exc
    return Puzzle(board=board, start=start)


def parse_puzzles(text: str) -> tuple[Puzzle, ...]:
    """Parse one or two board blocks from *text*."""
    blocks = _split_blocks(text)
    if not blocks:
        raise BoardParseError(ParseErrorKind.EMPTY_INPUT, "no board text given")
    if len(blocks) > MAX_BOARDS:
        raise BoardParseError(
            ParseErrorKind.TOO_MANY_BOARDS,
            f"found {len(blocks)} boards, at most {MAX_BOARDS} are supported",
            line=blocks[MAX_BOARDS][0][0],
        )
    return tuple(_parse_block(block) for block in blocks)


def parse_puzzle(text: str) -> Puzzle:
    """Parse exactly one board block from *text*."""
    blocks = _split_blocks(text)
    if not blocks:
        raise BoardParseError(ParseErrorKind.EMPTY_INPUT, "no board text given")
    if len(blocks) > 1:
        raise BoardParseError(
            ParseErrorKind.TOO_MANY_BOARDS,
            f"expected a single board, found {len(blocks)}",
            line=blocks[1][0][0],
        )
    return _parse_block(blocks[0])
