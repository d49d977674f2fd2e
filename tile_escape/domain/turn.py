"""Joint search state: one node of the breadth-first search tree.

A ``Turn`` tracks one token per board. Its history and visited set are not
copied into every child; each turn keeps a pointer to its parent and the
direction that produced it, so siblings share their common prefix read-only
and never observe each other's additions. The visited set of a turn is
exactly the set of joint positions along its lineage.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

from tile_escape.config.constants import MAX_BOARDS
from tile_escape.domain.board import Board, Puzzle
from tile_escape.domain.geometry import DIRECTION_ORDER, Direction, JointPosition
from tile_escape.domain.movement import resolve


class TurnStatus(Enum):
    """Outcome tag of a turn."""

    ONGOING = "ongoing"
    FAILED = "failed"
    SUCCEEDED = "succeeded"


@dataclass(frozen=True, eq=False)
class Turn:
    """One or two token positions plus the lineage that produced them.

    Terminal turns (``FAILED`` / ``SUCCEEDED``) keep the positions held before
    the final move; they are never expanded.
    """

    boards: tuple[Board, ...]
    positions: JointPosition
    status: TurnStatus = TurnStatus.ONGOING
    direction: Direction | None = None
    parent: Turn | None = None
    depth: int = 0

    def __post_init__(self) -> None:
        if not 1 <= len(self.boards) <= MAX_BOARDS:
            raise ValueError(f"a turn tracks 1 to {MAX_BOARDS} boards, got {len(self.boards)}")
        if len(self.positions) != len(self.boards):
            raise ValueError("positions must hold exactly one entry per board")

    @classmethod
    def initial(cls, puzzles: Sequence[Puzzle]) -> Turn:
        """Root turn: empty history, visited set holding only the start."""
        return cls(
            boards=tuple(p.board for p in puzzles),
            positions=tuple(p.start for p in puzzles),
        )

    def lineage(self) -> Iterator[Turn]:
        """Yield this turn, then its parent, up to the root."""
        node: Turn | None = self
        while node is not None:
            yield node
            node = node.parent

    def __contains__(self, joint: object) -> bool:
        return any(node.positions == joint for node in self.lineage())

    @property
    def history(self) -> tuple[Direction, ...]:
        moves = [node.direction for node in self.lineage() if node.direction is not None]
        moves.reverse()
        return tuple(moves)

    @property
    def visited(self) -> frozenset[JointPosition]:
        return frozenset(node.positions for node in self.lineage())

    @property
    def is_ongoing(self) -> bool:
        return self.status is TurnStatus.ONGOING

    def expand(self, direction: Direction) -> Turn:
        """Apply *direction* to every token at once and return the child turn."""
        if not self.is_ongoing:
            raise ValueError(f"cannot expand a {self.status.value} turn")

        outcomes = [
            resolve(direction, board, position)
            for board, position in zip(self.boards, self.positions, strict=True)
        ]
        positions = self.positions
        if all(outcome.is_exited for outcome in outcomes):
            status = TurnStatus.SUCCEEDED
        elif any(not outcome.is_arrived for outcome in outcomes):
            # A pit, or one token leaving while another stays behind.
            status = TurnStatus.FAILED
        else:
            joint = tuple(outcome.position for outcome in outcomes)
            if joint in self:
                status = TurnStatus.FAILED
            else:
                status = TurnStatus.ONGOING
                positions = joint  # type: ignore[assignment]

        return Turn(
            boards=self.boards,
            positions=positions,
            status=status,
            direction=direction,
            parent=self,
            depth=self.depth + 1,
        )

    def children(self) -> list[Turn]:
        """Expand in the fixed search order, keeping failed children."""
        return [self.expand(direction) for direction in DIRECTION_ORDER]
