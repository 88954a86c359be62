"""Transform stage: map every row of a source through a caller function."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, List, Mapping

from .errors import TransformError
from .models import TransformConfig, coerce_config
from .tokenizer import Row, parse

# map_fn(row, index) -> new fields, or encoded CSV text when raw_output is set.
# index is 0 for the first (header) row.
MapFn = Callable[[Row, int], Any]


def _to_row(result: Any, index: int, raw_output: bool) -> List[Any]:
    if raw_output:
        if not isinstance(result, str):
            raise TransformError(
                f"Row {index}: raw output must be text, got {type(result).__name__}",
                row_index=index,
            )
        rows = parse(result)
        if len(rows) != 1:
            raise TransformError(
                f"Row {index}: raw output must hold exactly one row, got {len(rows)}",
                row_index=index,
            )
        return rows[0]

    if isinstance(result, (str, bytes)) or result is None:
        raise TransformError(
            f"Row {index}: expected a sequence of fields, got {type(result).__name__}",
            row_index=index,
        )
    try:
        fields = list(result)
    except TypeError as e:
        raise TransformError(
            f"Row {index}: expected a sequence of fields, got {type(result).__name__}",
            row_index=index,
        ) from e
    if not fields:
        raise TransformError(f"Row {index}: a row needs at least one field", row_index=index)
    return fields


def _transform(source: Iterable[Row], map_fn: MapFn, config: TransformConfig) -> Iterator[List[Any]]:
    count = 0
    try:
        for index, row in enumerate(source):
            if index == 0 and not config.include_headers:
                yield row
            else:
                yield _to_row(map_fn(row, index), index, config.raw_output)
            count += 1
    finally:
        # Release the upstream input on early exit as well as on completion
        close = getattr(source, "close", None)
        if close is not None:
            close()

    logging.info(f"Transformed {count} rows")


def transform(
    source: Iterable[Row],
    map_fn: MapFn,
    config: TransformConfig | Mapping[str, Any] | None = None,
) -> Iterator[List[Any]]:
    """Lazily map each row of source through map_fn.

    Exactly one output row is produced per input row, in order. Unless
    include_headers is set, the first row is forwarded untouched and never
    given to map_fn. Output rows may have any number of fields.

    Exceptions raised by map_fn propagate unchanged and stop the stage.

    Example:
        >>> rows = [["a", "b"], ["1", "2"]]
        >>> list(transform(rows, lambda row, i: row + [str(i)]))
        [['a', 'b'], ['1', '2', '1']]
        >>> list(transform(rows, lambda row, i: "x,y", {"includeHeaders": True, "rawOutput": True}))
        [['x', 'y'], ['x', 'y']]
    """
    if not callable(map_fn):
        raise TypeError(f"map_fn must be callable, got {type(map_fn).__name__}")
    return _transform(source, map_fn, coerce_config(TransformConfig, config))


__all__ = ["MapFn", "transform"]
