"""Parquet schema definitions for search artifacts.

Every module that persists or reads the per-generation search trace works
against the column contract defined here.
"""

from __future__ import annotations

import pyarrow as pa

TRACE_SCHEMA_VERSION = 1

SEARCH_TRACE_SCHEMA = pa.schema(
    [
        ("puzzle_id", pa.string()),
        ("generation", pa.int64()),
        ("frontier_size", pa.int64()),
        ("turns_expanded", pa.int64()),
    ]
)
"""One row per completed generation of one puzzle's search."""
