"""Coordinate and direction value types.

``Position`` uses screen coordinates: ``x`` grows to the right and ``y`` grows
downward, so row ``-1`` sits above the top edge of the grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """One of the four cardinal moves, valued by its single-letter code."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @classmethod
    def from_code(cls, code: str) -> Direction:
        """Parse a single-letter code (case-insensitive)."""
        try:
            return cls(code.upper())
        except ValueError as exc:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"direction code must be one of {valid}, got {code!r}") from exc


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

DIRECTION_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.RIGHT,
    Direction.LEFT,
)
"""Fixed enumeration order used by the search; it breaks ties between paths."""


@dataclass(frozen=True)
class Position:
    """Immutable grid coordinate."""

    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        """Return the neighbouring position one cell towards *direction*."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)


JointPosition = tuple[Position, ...]
"""Positions of every tracked token at one instant, in board order."""
