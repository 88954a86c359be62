"""Writable row sink: rows -> encoded CSV text on an output."""

from __future__ import annotations

import logging
import os
from typing import Any, Iterable, Mapping, TextIO, Union

from .encoder import encode
from .errors import DecodeFailure, IOFailure, SinkClosedError
from .models import StreamConfig, coerce_config
from .source import describe

OutputLike = Union[str, "os.PathLike[str]", TextIO]


class RowSink:
    """Push-based row consumer writing encoded lines in arrival order.

    Paths are opened on construction and closed by close(); streams passed
    in are flushed on close but left open for their owner. The sink is a
    context manager and closes itself on exit, including on error.

    After a failed write the output is released and every further write
    raises SinkClosedError.

    Attributes:
        resource: Description of the output used in messages.
        rows_written: Number of rows accepted so far.
        closed: True once the sink no longer accepts rows.
    """

    def __init__(
        self,
        output: OutputLike,
        config: StreamConfig | Mapping[str, Any] | None = None,
    ) -> None:
        """Acquire the output.

        Raises:
            IOFailure: If a path cannot be opened for writing.
            TypeError: If output is neither a path nor writable.
        """
        self.config = coerce_config(StreamConfig, config)
        self.resource = describe(output)
        self.rows_written = 0
        self.closed = False
        self._failed = False

        if isinstance(output, (str, os.PathLike)):
            try:
                self._handle = open(
                    output,
                    "w",
                    encoding=self.config.encoding,
                    errors=self.config.errors,
                    newline="",
                )
            except OSError as e:
                raise IOFailure(
                    f"Error opening {self.resource} for writing: {e}",
                    resource=self.resource,
                ) from e
            self._owns_handle = True
        elif hasattr(output, "write"):
            self._handle = output
            self._owns_handle = False
        else:
            raise TypeError(
                f"Expected a path or a writable text stream, got {type(output).__name__}"
            )

        logging.debug(f"Opened sink {self.resource}")

    def __enter__(self) -> "RowSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def write(self, row: Iterable[Any]) -> None:
        """Encode row and write it to the output.

        Raises:
            SinkClosedError: If the sink is closed or a previous write failed.
            IOFailure: If the output rejects the write.
            DecodeFailure: If the output encoding cannot represent the row.
        """
        if self.closed:
            state = "failed" if self._failed else "closed"
            raise SinkClosedError(
                f"Sink {self.resource} is {state}", resource=self.resource
            )

        line = encode(row)
        try:
            self._handle.write(line)
        except UnicodeEncodeError as e:
            self._abort()
            raise DecodeFailure(
                f"Cannot encode row {self.rows_written + 1} for {self.resource}: {e}",
                resource=self.resource,
                encoding=e.encoding,
            ) from e
        except OSError as e:
            self._abort()
            raise IOFailure(
                f"Error writing to {self.resource}: {e}", resource=self.resource
            ) from e

        self.rows_written += 1

    def write_rows(self, rows: Iterable[Iterable[Any]]) -> int:
        """Write every row from rows in order; returns rows written so far."""
        for row in rows:
            self.write(row)
        return self.rows_written

    def close(self) -> None:
        """Flush and release the output. Safe to call more than once.

        Raises:
            IOFailure: If flushing or closing the output fails.
        """
        if self.closed:
            return
        self.closed = True

        try:
            try:
                self._handle.flush()
            finally:
                if self._owns_handle:
                    self._handle.close()
        except OSError as e:
            raise IOFailure(
                f"Error closing {self.resource}: {e}", resource=self.resource
            ) from e

        logging.info(f"Wrote {self.rows_written} rows to {self.resource}")

    def _abort(self) -> None:
        """Release the output after a failed write."""
        self.closed = True
        self._failed = True
        if not self._owns_handle:
            return
        try:
            self._handle.close()
        except OSError as e:
            # The write error is the one reported to the caller
            logging.debug(f"Error closing {self.resource} after failed write: {e}")


def open_sink(
    output: OutputLike,
    config: StreamConfig | Mapping[str, Any] | None = None,
) -> RowSink:
    """Open a row sink on a path or writable text stream."""
    return RowSink(output, config)


def write_rows(
    rows: Iterable[Iterable[Any]],
    output: OutputLike,
    config: StreamConfig | Mapping[str, Any] | None = None,
) -> int:
    """Write all rows to output and close the sink.

    Returns:
        Number of rows written.
    """
    with open_sink(output, config) as sink:
        return sink.write_rows(rows)


__all__ = ["RowSink", "open_sink", "write_rows"]
