"""Simulation engine: frontier search, observers, replay, and trace persistence."""

from tile_escape.simulation.engine import run_search, solve, solve_puzzle
from tile_escape.simulation.observers import (
    CompositeObserver,
    LoggingObserver,
    NullObserver,
    SearchObserver,
    TraceRecorder,
)
from tile_escape.simulation.persistence import flush_trace_columns
from tile_escape.simulation.replay import replay

__all__ = [
    "CompositeObserver",
    "LoggingObserver",
    "NullObserver",
    "SearchObserver",
    "TraceRecorder",
    "flush_trace_columns",
    "replay",
    "run_search",
    "solve",
    "solve_puzzle",
]
