"""Tests for tile_escape.analysis.reachability."""

from __future__ import annotations

import networkx as nx

from tile_escape.analysis.reachability import (
    EXIT_NODE,
    build_move_graph,
    can_reach_exit,
    min_moves_to_exit,
)
from tile_escape.domain.geometry import Direction, Position
from tile_escape.io.parser import parse_puzzle

OPEN_5X5 = "#E###\n.....\n.....\n.....\n.....\n...P.\n"
PIT_BESIDE_START = "#E###\n.....\n.OP..\n.....\n"
ICE_AGAINST_WALL = "E####\n.....\nP~~~#\n"
ENCLOSED = "E....\n.....\n###..\nP#...\n"


class TestMoveGraph:
    def test_open_board_covers_every_cell(self) -> None:
        puzzle = parse_puzzle(OPEN_5X5)
        graph = build_move_graph(puzzle.board, puzzle.start)
        assert isinstance(graph, nx.DiGraph)
        assert graph.number_of_nodes() == puzzle.board.cell_count + 1
        assert graph.has_edge(Position(1, 0), EXIT_NODE)
        assert graph.edges[Position(1, 0), EXIT_NODE]["direction"] is Direction.UP

    def test_pit_has_no_edge(self) -> None:
        puzzle = parse_puzzle(PIT_BESIDE_START)
        graph = build_move_graph(puzzle.board, puzzle.start)
        assert Position(1, 1) not in graph

    def test_wall_bounces_are_not_edges(self) -> None:
        puzzle = parse_puzzle(ENCLOSED)
        graph = build_move_graph(puzzle.board, puzzle.start)
        assert list(graph.nodes) == [puzzle.start]
        assert graph.number_of_edges() == 0

    def test_ice_slide_is_a_single_edge(self) -> None:
        puzzle = parse_puzzle(ICE_AGAINST_WALL)
        graph = build_move_graph(puzzle.board, puzzle.start)
        assert graph.has_edge(Position(0, 1), Position(3, 1))
        assert graph.edges[Position(0, 1), Position(3, 1)]["direction"] is Direction.RIGHT


class TestExitQueries:
    def test_can_reach_exit(self) -> None:
        for text in (OPEN_5X5, PIT_BESIDE_START, ICE_AGAINST_WALL):
            puzzle = parse_puzzle(text)
            assert can_reach_exit(puzzle.board, puzzle.start)

    def test_enclosed_start_cannot_exit(self) -> None:
        puzzle = parse_puzzle(ENCLOSED)
        assert not can_reach_exit(puzzle.board, puzzle.start)
        assert min_moves_to_exit(puzzle.board, puzzle.start) is None

    def test_min_moves(self) -> None:
        open_puzzle = parse_puzzle(OPEN_5X5)
        assert min_moves_to_exit(open_puzzle.board, open_puzzle.start) == 7
        pit_puzzle = parse_puzzle(PIT_BESIDE_START)
        assert min_moves_to_exit(pit_puzzle.board, pit_puzzle.start) == 3
        ice_puzzle = parse_puzzle(ICE_AGAINST_WALL)
        assert min_moves_to_exit(ice_puzzle.board, ice_puzzle.start) == 2
