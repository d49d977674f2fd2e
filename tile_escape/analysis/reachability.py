"""Single-token move graph and exit-reachability precheck.

The graph's nodes are the positions a lone token can occupy starting from
its start cell, plus the sentinel ``EXIT_NODE``. An edge ``a -> b`` labelled
``direction`` means one move from ``a`` ends at ``b``. Moves into a pit have
no edge, and wall bounces that leave the token in place are dropped.

A joint solution projects onto a path in every token's own graph, so a
puzzle where some token cannot reach ``EXIT_NODE`` has no solution.
"""

from __future__ import annotations

from collections import deque

import networkx as nx

from tile_escape.domain.board import Board
from tile_escape.domain.geometry import DIRECTION_ORDER, Position
from tile_escape.domain.movement import resolve

EXIT_NODE = "exit"


def build_move_graph(board: Board, start: Position) -> nx.DiGraph:
    """Explore every position reachable from *start* with single moves."""
    graph = nx.DiGraph()
    graph.add_node(start)
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for direction in DIRECTION_ORDER:
            outcome = resolve(direction, board, current)
            if outcome.is_dead:
                continue
            if outcome.is_exited:
                graph.add_edge(current, EXIT_NODE, direction=direction)
                continue
            target = outcome.position
            if target == current:
                continue
            if target not in graph:
                queue.append(target)
            graph.add_edge(current, target, direction=direction)
    return graph


def can_reach_exit(board: Board, start: Position) -> bool:
    """True when a lone token at *start* has some path to the exit."""
    graph = build_move_graph(board, start)
    return EXIT_NODE in graph and nx.has_path(graph, start, EXIT_NODE)


def min_moves_to_exit(board: Board, start: Position) -> int | None:
    """Fewest moves a lone token needs to exit, or ``None`` if it cannot."""
    graph = build_move_graph(board, start)
    if EXIT_NODE not in graph:
        return None
    try:
        return int(nx.shortest_path_length(graph, start, EXIT_NODE))
    except nx.NetworkXNoPath:
        return None
