"""Grid-escape puzzle solver: movement rules plus breadth-first joint search."""

from tile_escape.config.types import SolveResult, SolverConfig, TerminationReason
from tile_escape.domain.board import Board, Puzzle, Tile
from tile_escape.domain.errors import BoardIntegrityError, BoardParseError, ParseErrorKind
from tile_escape.domain.geometry import DIRECTION_ORDER, Direction, Position
from tile_escape.domain.movement import MoveOutcome, OutcomeKind, resolve
from tile_escape.domain.turn import Turn, TurnStatus
from tile_escape.io.parser import parse_puzzle, parse_puzzles
from tile_escape.simulation.engine import run_search, solve, solve_puzzle

__all__ = [
    "Board",
    "BoardIntegrityError",
    "BoardParseError",
    "DIRECTION_ORDER",
    "Direction",
    "MoveOutcome",
    "OutcomeKind",
    "ParseErrorKind",
    "Position",
    "Puzzle",
    "SolveResult",
    "SolverConfig",
    "TerminationReason",
    "Tile",
    "Turn",
    "TurnStatus",
    "parse_puzzle",
    "parse_puzzles",
    "resolve",
    "run_search",
    "solve",
    "solve_puzzle",
]
