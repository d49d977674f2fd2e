"""Replay a move sequence through the movement rules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tile_escape.domain.board import Puzzle
from tile_escape.domain.geometry import Direction
from tile_escape.domain.turn import Turn


def replay(puzzles: Puzzle | Sequence[Puzzle], moves: Iterable[Direction]) -> Turn:
    """Apply *moves* from the starting positions and return the final turn.

    Stops at the first turn that is no longer ongoing, so a returned turn with
    status ``SUCCEEDED`` may have consumed fewer moves than given.
    """
    resolved = (puzzles,) if isinstance(puzzles, Puzzle) else tuple(puzzles)
    turn = Turn.initial(resolved)
    for direction in moves:
        if not turn.is_ongoing:
            break
        turn = turn.expand(direction)
    return turn
