"""I/O layer: board grammar, result formatting, Parquet schemas, and paths."""

from tile_escape.io.format import format_moves, format_puzzle, parse_moves, result_payload
from tile_escape.io.parser import parse_puzzle, parse_puzzles

__all__ = [
    "format_moves",
    "format_puzzle",
    "parse_moves",
    "parse_puzzle",
    "parse_puzzles",
    "result_payload",
]
