"""End-to-end conversion: read rows, optionally transform, write rows."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .models import StreamConfig, TransformConfig
from .sink import OutputLike, write_rows
from .source import InputLike, open_rows
from .transform import MapFn, transform


def convert(
    source: InputLike,
    output: OutputLike,
    map_fn: Optional[MapFn] = None,
    config: TransformConfig | Mapping[str, Any] | None = None,
    source_config: StreamConfig | Mapping[str, Any] | None = None,
    sink_config: StreamConfig | Mapping[str, Any] | None = None,
) -> int:
    """Stream rows from source to output, through map_fn when given.

    Rows are processed one at a time; neither side is held in memory. Both
    the input and the output are released on success and on failure. Rows
    written before a failure are not rolled back.

    Returns:
        Number of rows written.
    """
    rows = open_rows(source, source_config)
    if map_fn is not None:
        rows = transform(rows, map_fn, config)
    try:
        return write_rows(rows, output, sink_config)
    finally:
        rows.close()


__all__ = ["convert"]
