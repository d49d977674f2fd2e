"""Analysis layer: static reachability checks over the movement rules."""

from tile_escape.analysis.reachability import (
    EXIT_NODE,
    build_move_graph,
    can_reach_exit,
    min_moves_to_exit,
)

__all__ = [
    "EXIT_NODE",
    "build_move_graph",
    "can_reach_exit",
    "min_moves_to_exit",
]
