"""Tests for tile_escape.io.format."""

from __future__ import annotations

import json

import pytest

from tile_escape.config.types import SolveResult, TerminationReason
from tile_escape.domain.geometry import Direction
from tile_escape.io.format import (
    RESULT_PAYLOAD_SCHEMA_VERSION,
    format_moves,
    format_puzzle,
    parse_moves,
    result_payload,
)
from tile_escape.io.parser import parse_puzzle

U, D, L, R = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT


def test_format_moves() -> None:
    assert format_moves([U, U, R, L, D]) == "UURLD"
    assert format_moves([]) == ""


def test_parse_moves_ignores_separators() -> None:
    assert parse_moves("U, u r\nL") == (U, U, R, L)


def test_parse_moves_rejects_unknown_codes() -> None:
    with pytest.raises(ValueError):
        parse_moves("UQ")


def test_format_puzzle_is_parseable() -> None:
    text = "#E###\n.....\n.~.T.\n.O.T.\n..P..\n"
    puzzle = parse_puzzle(text)
    rendered = format_puzzle(puzzle)
    assert rendered == text.rstrip("\n")
    again = parse_puzzle(rendered)
    assert again.board == puzzle.board
    assert again.start == puzzle.start


class TestResultPayload:
    def test_solved(self) -> None:
        result = SolveResult(
            puzzle_id="demo",
            solved=True,
            moves=(U, L, U),
            generations=3,
            turns_expanded=7,
            termination_reason=TerminationReason.SOLVED,
        )
        payload = result_payload(result)
        assert payload == {
            "schema_version": RESULT_PAYLOAD_SCHEMA_VERSION,
            "puzzle_id": "demo",
            "solved": True,
            "moves": "ULU",
            "move_count": 3,
            "generations": 3,
            "turns_expanded": 7,
            "termination_reason": "solved",
        }

    def test_unsolved_is_json_serialisable(self) -> None:
        result = SolveResult(
            puzzle_id="demo",
            solved=False,
            moves=None,
            generations=0,
            turns_expanded=0,
            termination_reason=TerminationReason.UNREACHABLE,
        )
        payload = json.loads(json.dumps(result_payload(result)))
        assert payload["moves"] is None
        assert payload["move_count"] is None
        assert payload["termination_reason"] == "unreachable"
