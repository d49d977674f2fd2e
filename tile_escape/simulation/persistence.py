"""Parquet persistence helpers for the search trace stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from tile_escape.io.schemas import SEARCH_TRACE_SCHEMA


def flush_trace_columns(
    trace_columns: dict[str, list[int | str]],
    trace_path: Path,
    trace_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated trace rows to Parquet and clear in-memory buffers."""
    if not trace_columns["puzzle_id"]:
        return trace_writer
    trace_table = pa.Table.from_pydict(trace_columns, schema=SEARCH_TRACE_SCHEMA)
    if trace_writer is None:
        trace_path.parent.mkdir(parents=True, exist_ok=True)
        trace_writer = pq.ParquetWriter(trace_path, SEARCH_TRACE_SCHEMA)
    trace_writer.write_table(trace_table)
    for values in trace_columns.values():
        values.clear()
    return trace_writer
