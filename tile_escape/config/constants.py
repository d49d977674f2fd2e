"""Centralized constants for the board grammar and the search engine.

Glyphs, board limits and persistence thresholds that appear across several
modules are defined here. Consuming modules should import from this module
rather than defining their own inline literals.
"""

from __future__ import annotations

EXIT_MARKER = "E"
"""Character on the first line of a board block that marks the exit column."""

START_MARKER = "P"
"""Grid character marking the token's starting cell (an open tile)."""

OPEN_GLYPH = "."
WALL_GLYPH = "#"
PIT_GLYPH = "O"
ICE_GLYPH = "~"
TELEPORT_GLYPH = "T"

TELEPORTERS_PER_BOARD = 2
"""A board holds either no teleporters or exactly one pair."""

MAX_BOARDS = 2
"""Boards that can be solved in lockstep (one token per board)."""

EXIT_ROW = -1
"""Virtual row above the grid where the exit gap sits."""

FLUSH_THRESHOLD = 4_096
"""Flush search-trace rows to Parquet once this in-memory row count is reached."""

DEFAULT_PUZZLE_ID = "puzzle"
"""Identifier used when the caller does not name the puzzle."""
