"""Domain layer: board model, movement rules, and joint search state."""

from tile_escape.domain.board import GRID_TILES, Board, Puzzle, Tile
from tile_escape.domain.errors import BoardIntegrityError, BoardParseError, ParseErrorKind
from tile_escape.domain.geometry import DIRECTION_ORDER, Direction, JointPosition, Position
from tile_escape.domain.movement import MoveOutcome, OutcomeKind, resolve
from tile_escape.domain.turn import Turn, TurnStatus

__all__ = [
    "Board",
    "BoardIntegrityError",
    "BoardParseError",
    "DIRECTION_ORDER",
    "Direction",
    "GRID_TILES",
    "JointPosition",
    "MoveOutcome",
    "OutcomeKind",
    "ParseErrorKind",
    "Position",
    "Puzzle",
    "Tile",
    "Turn",
    "TurnStatus",
    "resolve",
]
