"""Readable row source: text input -> rows, pulled one at a time."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Mapping, TextIO, Union

from .errors import DecodeFailure, IOFailure
from .models import StreamConfig, coerce_config
from .tokenizer import Row, Tokenizer

InputLike = Union[str, "os.PathLike[str]", TextIO, Iterable[str]]


def describe(resource: Any) -> str:
    """Short human readable name for a path or stream, used in messages."""
    if isinstance(resource, (str, os.PathLike)):
        return os.fspath(resource)
    name = getattr(resource, "name", None)
    if isinstance(name, str):
        return name
    return f"<{type(resource).__name__}>"


def iter_chunks(
    chunks: Iterable[Any],
    resource: str | None = None,
    encoding: str | None = None,
) -> Iterator[str]:
    """Yield text chunks, translating resource errors.

    OSError becomes IOFailure; UnicodeDecodeError or a non-text chunk
    becomes DecodeFailure.
    """
    iterator = iter(chunks)
    while True:
        try:
            chunk = next(iterator)
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            raise DecodeFailure(
                f"Invalid {encoding or 'text'} data in {resource}: {e}",
                resource=resource,
                encoding=encoding,
            ) from e
        except OSError as e:
            raise IOFailure(f"Error reading {resource}: {e}", resource=resource) from e

        if not isinstance(chunk, str):
            raise DecodeFailure(
                f"Expected decoded text from {resource}, got {type(chunk).__name__}",
                resource=resource,
                encoding=encoding,
            )
        yield chunk


@contextmanager
def _open_chunks(source: InputLike, config: StreamConfig) -> Iterator[Iterator[str]]:
    """Acquire the input and yield its chunk iterator.

    Paths are opened here and closed on every exit path. Streams and
    iterables belong to the caller and are left open.
    """
    resource = describe(source)

    if isinstance(source, (str, os.PathLike)):
        try:
            handle = open(
                source,
                "r",
                encoding=config.encoding,
                errors=config.errors,
                newline="",
            )
        except OSError as e:
            raise IOFailure(f"Error opening {resource}: {e}", resource=resource) from e

        logging.debug(f"Opened {resource} for reading ({config.encoding})")
        try:
            reads = iter(lambda: handle.read(config.chunk_size), "")
            yield iter_chunks(reads, resource, config.encoding)
        finally:
            handle.close()
            logging.debug(f"Closed {resource}")

    elif hasattr(source, "read"):
        reads = iter(lambda: source.read(config.chunk_size), "")
        yield iter_chunks(reads, resource, getattr(source, "encoding", None))

    elif isinstance(source, (bytes, bytearray)):
        raise DecodeFailure(
            "Expected decoded text, got bytes", resource=resource, encoding=None
        )

    else:
        yield iter_chunks(source, resource)


def _iter_rows(source: InputLike, config: StreamConfig) -> Iterator[Row]:
    tokenizer = Tokenizer()
    resource = describe(source)

    with _open_chunks(source, config) as chunks:
        for chunk in chunks:
            yield from tokenizer.feed(chunk)
        yield from tokenizer.close()

    logging.info(f"Read {tokenizer.rows_emitted} rows from {resource}")


def open_rows(
    source: InputLike,
    config: StreamConfig | Mapping[str, Any] | None = None,
) -> Iterator[Row]:
    """Open a lazy, pull-based sequence of rows.

    Args:
        source: A file path, an open text stream with read(size), or an
            iterable of already decoded text chunks.
        config: Encoding and chunk size used when reading.

    Returns:
        A generator of rows. Nothing is read until the first row is pulled,
        and each pull reads only as many chunks as the next row needs.
        Closing the generator early releases the input.

    Raises:
        ConfigError: If config is invalid (raised immediately).
        IOFailure: If the input cannot be opened or read.
        DecodeFailure: If the input holds undecodable data.
    """
    return _iter_rows(source, coerce_config(StreamConfig, config))


__all__ = ["describe", "iter_chunks", "open_rows"]
