"""Configuration layer: constants and typed config dataclasses."""

from tile_escape.config.constants import (
    DEFAULT_PUZZLE_ID,
    EXIT_MARKER,
    EXIT_ROW,
    FLUSH_THRESHOLD,
    ICE_GLYPH,
    MAX_BOARDS,
    OPEN_GLYPH,
    PIT_GLYPH,
    START_MARKER,
    TELEPORT_GLYPH,
    TELEPORTERS_PER_BOARD,
    WALL_GLYPH,
)
from tile_escape.config.types import SolveResult, SolverConfig, TerminationReason

__all__ = [
    "DEFAULT_PUZZLE_ID",
    "EXIT_MARKER",
    "EXIT_ROW",
    "FLUSH_THRESHOLD",
    "ICE_GLYPH",
    "MAX_BOARDS",
    "OPEN_GLYPH",
    "PIT_GLYPH",
    "START_MARKER",
    "SolveResult",
    "SolverConfig",
    "TELEPORTERS_PER_BOARD",
    "TELEPORT_GLYPH",
    "TerminationReason",
    "WALL_GLYPH",
]
