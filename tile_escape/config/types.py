"""Configuration dataclasses and result containers for solver runs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tile_escape.domain.geometry import Direction

__all__ = [
    "SolveResult",
    "SolverConfig",
    "TerminationReason",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


class TerminationReason(Enum):
    """Why a search run stopped."""

    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    GENERATION_LIMIT = "generation_limit"
    TURN_LIMIT = "turn_limit"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class SolveResult:
    """Top-level result for one solved (or abandoned) puzzle."""

    puzzle_id: str
    solved: bool
    moves: tuple[Direction, ...] | None
    generations: int
    turns_expanded: int
    termination_reason: TerminationReason

    def __post_init__(self) -> None:
        if self.solved != (self.moves is not None):
            raise ValueError("moves must be set exactly when solved is True")


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SolverConfig:
    """Runtime knobs for the frontier search.

    ``max_generations`` and ``max_turns`` are caller-imposed bounds; ``None``
    means the search runs until it succeeds or the frontier is exhausted.
    """

    max_generations: int | None = None
    max_turns: int | None = None
    max_workers: int = 1
    precheck_reachability: bool = True

    def __post_init__(self) -> None:
        if self.max_generations is not None and self.max_generations < 1:
            raise ValueError("max_generations must be >= 1")
        if self.max_turns is not None and self.max_turns < 1:
            raise ValueError("max_turns must be >= 1")
        if self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")

    @property
    def parallel(self) -> bool:
        return self.max_workers > 1
