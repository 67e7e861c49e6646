"""Parquet schema definitions for search artifacts.

Every writer and reader of solution logs works against these column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

SOLUTION_SCHEMA_VERSION = 1

SOLUTION_RANGERS_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("solution_id", pa.int64()),
        ("ranger_id", pa.string()),
        ("station", pa.string()),
        ("north_visits", pa.int64()),
        ("south_visits", pa.int64()),
        ("moved_count", pa.int64()),
        ("co_location", pa.map_(pa.string(), pa.int64())),
    ]
)

SOLUTION_SWAPS_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("solution_id", pa.int64()),
        ("swap_index", pa.int64()),
        ("first", pa.string()),
        ("second", pa.string()),
    ]
)
