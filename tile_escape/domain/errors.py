"""Error types for malformed boards and board-integrity violations.

Game outcomes (falling into a pit, revisiting a joint position, exiting on
the wrong move) are never errors; they are ``TurnStatus`` values. Only input
that cannot describe a valid board ends up here.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Distinct reasons a board description is rejected."""

    EMPTY_INPUT = "empty_input"
    MISSING_EXIT = "missing_exit"
    MULTIPLE_EXITS = "multiple_exits"
    MISSING_START = "missing_start"
    MULTIPLE_STARTS = "multiple_starts"
    UNKNOWN_TILE = "unknown_tile"
    TELEPORTER_COUNT = "teleporter_count"
    RAGGED_ROWS = "ragged_rows"
    EXIT_OUTSIDE_GRID = "exit_outside_grid"
    TOO_MANY_BOARDS = "too_many_boards"


class BoardParseError(ValueError):
    """Raised when a board description violates the grammar or board invariants.

    ``line`` and ``column`` are 1-based and refer to the text block of the
    offending board when the parser knows them.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.kind = kind
        self.detail = message
        self.line = line
        self.column = column
        location = ""
        if line is not None:
            location = f" (line {line}" + (f", column {column})" if column is not None else ")")
        super().__init__(f"{kind.value}: {message}{location}")


class BoardIntegrityError(RuntimeError):
    """Raised when a board that passed construction is used inconsistently."""
