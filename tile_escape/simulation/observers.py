"""Search observers: injected reporting hooks for the frontier search.

The engine never prints or logs on its own. Callers pass an observer that
receives one ``on_generation`` call per completed generation and a final
``on_finish`` call with the ``SolveResult``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import pyarrow.parquet as pq

from tile_escape.config.constants import DEFAULT_PUZZLE_ID, FLUSH_THRESHOLD
from tile_escape.config.types import SolveResult
from tile_escape.io.format import format_moves
from tile_escape.simulation.persistence import flush_trace_columns


class SearchObserver(Protocol):
    """Receives progress reports from ``run_search``."""

    def on_generation(self, generation: int, frontier_size: int, turns_expanded: int) -> None:
        ...

    def on_finish(self, result: SolveResult) -> None:
        ...


class NullObserver:
    """Observer that ignores every report."""

    def on_generation(self, generation: int, frontier_size: int, turns_expanded: int) -> None:
        return None

    def on_finish(self, result: SolveResult) -> None:
        return None


class LoggingObserver:
    """Report search progress through a stdlib logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG) -> None:
        self.logger = logger or logging.getLogger("tile_escape.search")
        self.level = level

    def on_generation(self, generation: int, frontier_size: int, turns_expanded: int) -> None:
        self.logger.log(
            self.level,
            "generation %d: frontier=%d expanded=%d",
            generation,
            frontier_size,
            turns_expanded,
        )

    def on_finish(self, result: SolveResult) -> None:
        if result.solved:
            self.logger.info(
                "%s solved in %d moves: %s",
                result.puzzle_id,
                len(result.moves or ()),
                format_moves(result.moves or ()),
            )
        else:
            self.logger.info(
                "%s not solved (%s) after %d generations",
                result.puzzle_id,
                result.termination_reason.value,
                result.generations,
            )


class TraceRecorder:
    """Buffer per-generation rows and stream them to a Parquet file.

    Rows are flushed every ``flush_threshold`` generations and on ``close``.
    One recorder can observe several searches; ``puzzle_id`` tags the rows of
    the search currently running.
    """

    def __init__(
        self,
        trace_path: Path,
        puzzle_id: str = DEFAULT_PUZZLE_ID,
        flush_threshold: int = FLUSH_THRESHOLD,
    ) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.trace_path = Path(trace_path)
        self.puzzle_id = puzzle_id
        self.flush_threshold = flush_threshold
        self._writer: pq.ParquetWriter | None = None
        self._columns: dict[str, list[int | str]] = {
            "puzzle_id": [],
            "generation": [],
            "frontier_size": [],
            "turns_expanded": [],
        }

    def on_generation(self, generation: int, frontier_size: int, turns_expanded: int) -> None:
        self._columns["puzzle_id"].append(self.puzzle_id)
        self._columns["generation"].append(generation)
        self._columns["frontier_size"].append(frontier_size)
        self._columns["turns_expanded"].append(turns_expanded)
        if len(self._columns["puzzle_id"]) >= self.flush_threshold:
            self.flush()

    def on_finish(self, result: SolveResult) -> None:
        self.flush()

    def flush(self) -> None:
        self._writer = flush_trace_columns(self._columns, self.trace_path, self._writer)

    def close(self) -> None:
        self.flush()
        if self._writer is not None:
            self._writer.close()
            self._writer = None

    def __enter__(self) -> TraceRecorder:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class CompositeObserver:
    """Forward every report to each wrapped observer in order."""

    def __init__(self, *observers: SearchObserver) -> None:
        self.observers = observers

    def on_generation(self, generation: int, frontier_size: int, turns_expanded: int) -> None:
        for observer in self.observers:
            observer.on_generation(generation, frontier_size, turns_expanded)

    def on_finish(self, result: SolveResult) -> None:
        for observer in self.observers:
            observer.on_finish(result)
