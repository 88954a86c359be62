"""csvstream: streaming CSV rows to and from text.

- encoder: row -> CSV line
- tokenizer: lenient incremental CSV parser
- source: open_rows, pull-based rows from a path, stream or chunk iterable
- sink: open_sink, push rows to a path or stream
- transform: per-row mapping stage
- pipeline: convert, source -> transform -> sink
"""

from .encoder import encode
from .errors import (
    ConfigError,
    CsvStreamError,
    DecodeFailure,
    IOFailure,
    SinkClosedError,
    TransformError,
)
from .models import StreamConfig, TransformConfig
from .pipeline import convert
from .sink import RowSink, open_sink, write_rows
from .source import open_rows
from .tokenizer import ParserState, Tokenizer, parse, tokenize
from .transform import transform

__all__ = [
    "__version__",
    "ConfigError",
    "CsvStreamError",
    "DecodeFailure",
    "IOFailure",
    "ParserState",
    "RowSink",
    "SinkClosedError",
    "StreamConfig",
    "Tokenizer",
    "TransformConfig",
    "TransformError",
    "convert",
    "encode",
    "open_rows",
    "open_sink",
    "parse",
    "tokenize",
    "transform",
    "write_rows",
]

__version__ = "0.0.1"
