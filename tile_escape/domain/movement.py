"""Single-token movement resolution.

``resolve`` answers "where does a token standing at P end up after one move
in direction D": bounced back by a wall, dead in a pit, relocated by a
teleporter, slid across ice, or out through the exit. It never mutates the
board and performs no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tile_escape.domain.board import Board, Tile
from tile_escape.domain.errors import BoardIntegrityError
from tile_escape.domain.geometry import Direction, Position


class OutcomeKind(Enum):
    """Tag of a ``MoveOutcome``."""

    EXITED = "exited"
    DEAD = "dead"
    ARRIVED = "arrived"


@dataclass(frozen=True)
class MoveOutcome:
    """Result of one simulated step for a single token.

    ``position`` is set only for ``ARRIVED`` outcomes.
    """

    kind: OutcomeKind
    position: Position | None = None

    @classmethod
    def exited(cls) -> MoveOutcome:
        return cls(OutcomeKind.EXITED)

    @classmethod
    def dead(cls) -> MoveOutcome:
        return cls(OutcomeKind.DEAD)

    @classmethod
    def arrived(cls, position: Position) -> MoveOutcome:
        return cls(OutcomeKind.ARRIVED, position)

    @property
    def is_exited(self) -> bool:
        return self.kind is OutcomeKind.EXITED

    @property
    def is_dead(self) -> bool:
        return self.kind is OutcomeKind.DEAD

    @property
    def is_arrived(self) -> bool:
        return self.kind is OutcomeKind.ARRIVED


def resolve(direction: Direction, board: Board, start: Position) -> MoveOutcome:
    """Move a token one step from *start* towards *direction* on *board*.

    Ice keeps the token travelling in the same direction until it reaches a
    tile that is not ice. A wall hit while sliding leaves the token on the
    last ice cell before the wall.

    Every slide step moves strictly towards the walled boundary, so a slide
    visits at most ``board.cell_count`` cells. A longer slide raises
    ``BoardIntegrityError``.
    """
    current = start
    budget = board.cell_count + 1
    while budget > 0:
        budget -= 1
        target = current.step(direction)
        tile = board.tile_at(target)
        if tile is Tile.OPEN:
            return MoveOutcome.arrived(target)
        if tile is Tile.WALL:
            return MoveOutcome.arrived(current)
        if tile is Tile.PIT:
            return MoveOutcome.dead()
        if tile is Tile.EXIT:
            return MoveOutcome.exited()
        if tile is Tile.TELEPORT:
            return MoveOutcome.arrived(board.teleport_partner(target))
        # Ice: keep sliding from the ice cell.
        current = target
    raise BoardIntegrityError(
        f"slide from {start} towards {direction.name} did not terminate "
        f"within {board.cell_count + 1} steps"
    )
