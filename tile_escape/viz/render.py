"""Render boards and solution paths to image files with matplotlib."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.colors import ListedColormap  # noqa: E402

from tile_escape.domain.board import Board, Puzzle, Tile  # noqa: E402
from tile_escape.domain.geometry import Direction, Position  # noqa: E402
from tile_escape.domain.turn import TurnStatus  # noqa: E402
from tile_escape.io.format import format_moves  # noqa: E402
from tile_escape.io.paths import resolve_within_base  # noqa: E402
from tile_escape.simulation.replay import replay  # noqa: E402

# Indexed by Tile.value.
TILE_COLORS: tuple[str, ...] = (
    "#f3f4f6",  # OPEN
    "#374151",  # WALL
    "#111827",  # PIT
    "#bae6fd",  # ICE
    "#c084fc",  # TELEPORT
    "#22c55e",  # EXIT
)
PATH_COLOR = "#ef4444"
START_COLOR = "#2563eb"

_CELL_INCHES = 0.5
_MIN_PANEL_INCHES = 2.5
_DPI = 120


def board_image(board: Board) -> np.ndarray:
    """Return tile codes with the virtual exit row prepended as row 0."""
    exit_row = np.full((1, board.columns), Tile.WALL.value, dtype=np.int8)
    exit_row[0, board.exit_column] = Tile.EXIT.value
    return np.vstack([exit_row, board.tiles])


def token_trails(
    puzzles: Sequence[Puzzle], moves: Iterable[Direction]
) -> list[list[Position]]:
    """Positions each token occupies while *moves* are replayed.

    A trail ends at the board's exit position when the replay succeeds.
    """
    final = replay(puzzles, moves)
    nodes = list(final.lineage())
    if not final.is_ongoing:
        # Terminal turns repeat their parent's positions.
        nodes.pop(0)
    joints = [node.positions for node in reversed(nodes)]
    trails = [[joint[i] for joint in joints] for i in range(len(puzzles))]
    if final.status is TurnStatus.SUCCEEDED:
        for trail, puzzle in zip(trails, puzzles, strict=True):
            trail.append(puzzle.board.exit_position)
    return trails


def render_solution(
    puzzles: Puzzle | Sequence[Puzzle],
    moves: Sequence[Direction] | None,
    output_path: Path,
    base_dir: Path | None = None,
    title: str | None = None,
) -> Path:
    """Draw every board side by side with its token's path and save the figure."""
    resolved = (puzzles,) if isinstance(puzzles, Puzzle) else tuple(puzzles)
    if base_dir is None:
        output_path = Path(output_path).resolve()
    else:
        output_path = resolve_within_base(Path(output_path), Path(base_dir).resolve())

    trails = token_trails(resolved, moves or ())
    cmap = ListedColormap(list(TILE_COLORS))
    widths = [max(_MIN_PANEL_INCHES, p.board.columns * _CELL_INCHES) for p in resolved]
    height = max(_MIN_PANEL_INCHES, max(p.board.rows + 1 for p in resolved) * _CELL_INCHES)
    fig, axes = plt.subplots(1, len(resolved), figsize=(sum(widths), height), squeeze=False)

    for ax, puzzle, trail in zip(axes[0], resolved, trails, strict=True):
        board = puzzle.board
        ax.imshow(
            board_image(board),
            cmap=cmap,
            vmin=-0.5,
            vmax=len(TILE_COLORS) - 0.5,
            extent=(-0.5, board.columns - 0.5, board.rows - 0.5, -1.5),
            interpolation="nearest",
        )
        if len(trail) > 1:
            ax.plot([p.x for p in trail], [p.y for p in trail], color=PATH_COLOR, linewidth=2)
        ax.scatter([puzzle.start.x], [puzzle.start.y], color=START_COLOR, s=60, zorder=3)
        ax.set_xticks(range(board.columns))
        ax.set_yticks(range(-1, board.rows))
        ax.set_aspect("equal")

    if title is None:
        title = format_moves(moves) if moves else "no solution"
    fig.suptitle(title)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, bbox_inches="tight", dpi=_DPI)
    plt.close(fig)
    return output_path
