"""Lenient, incremental CSV tokenizer.

The tokenizer is a five-state machine fed one chunk of decoded text at a
time. Chunks may split a field, a quoted run or a CRLF pair anywhere; rows
are yielded as soon as their terminator has been seen.

Quoting policy:
- A quote opens a quoted field only as the first character of a field.
- Inside a quoted field a doubled quote is a literal quote.
- Text after a closing quote is kept literally, including further quotes.
- Quotes inside an unquoted field are plain characters.

Rows end at CRLF or a bare LF. A lone CR is an ordinary character. There
are no error states: every input maps to some sequence of rows.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from .encoder import DELIMITER, QUOTE

Row = List[str]

BOM = "\ufeff"
CR = "\r"
LF = "\n"


class ParserState(Enum):
    """State of the tokenizer state machine."""

    FIELD_START = auto()  # Nothing consumed for the current field yet
    IN_UNQUOTED_FIELD = auto()
    IN_QUOTED_FIELD = auto()
    QUOTE_SEEN_IN_QUOTED_FIELD = auto()  # Closing quote or first half of ""
    AFTER_QUOTED_FIELD = auto()  # Literal text trailing a closed quoted run


class Tokenizer:
    """Stateful CSV tokenizer for one stream.

    A Tokenizer owns its parser state exclusively and cannot be rewound;
    create a new instance for each stream.

    Example:
        >>> t = Tokenizer()
        >>> list(t.feed('a,"b\\r')) + list(t.feed('\\nc",d\\r\\n'))
        [['a', 'b\\r\\nc', 'd']]
        >>> list(t.close())
        []
    """

    def __init__(self) -> None:
        self.state = ParserState.FIELD_START
        self.rows_emitted = 0
        self._field: List[str] = []
        self._row: Row = []
        # CR seen outside quotes; decided by the next character
        self._pending_cr = False
        self._seen_first_chunk = False
        self._closed = False
        self._transitions: Dict[ParserState, Callable[[str], Optional[Row]]] = {
            ParserState.FIELD_START: self._field_start,
            ParserState.IN_UNQUOTED_FIELD: self._unquoted,
            ParserState.IN_QUOTED_FIELD: self._quoted,
            ParserState.QUOTE_SEEN_IN_QUOTED_FIELD: self._quote_seen,
            ParserState.AFTER_QUOTED_FIELD: self._unquoted,
        }

    def feed(self, chunk: str) -> Iterator[Row]:
        """Consume one chunk, yielding every row it completes.

        The returned iterator must be exhausted before the next call to
        feed() or close().
        """
        if self._closed:
            raise ValueError("Tokenizer is closed")
        if not chunk:
            return

        if not self._seen_first_chunk:
            self._seen_first_chunk = True
            if chunk[0] == BOM:
                chunk = chunk[1:]

        for ch in chunk:
            row = self._step(ch)
            if row is not None:
                yield row

    def close(self) -> Iterator[Row]:
        """Signal end of input and yield the final row, if any.

        A terminator at the very end of the input does not start another
        row, but an input with no rows at all still yields [''].
        """
        if self._closed:
            return
        self._closed = True

        if self._pending_cr:
            self._pending_cr = False
            self._field.append(CR)

        at_row_start = (
            self.state is ParserState.FIELD_START
            and not self._row
            and not self._field
        )
        if at_row_start and self.rows_emitted:
            return
        yield self._end_row()

    def _step(self, ch: str) -> Optional[Row]:
        if self._pending_cr:
            self._pending_cr = False
            if ch == LF:
                return self._end_row()
            self._field.append(CR)
        return self._transitions[self.state](ch)

    def _field_start(self, ch: str) -> Optional[Row]:
        if ch == QUOTE:
            self.state = ParserState.IN_QUOTED_FIELD
            return None
        self.state = ParserState.IN_UNQUOTED_FIELD
        return self._unquoted(ch)

    def _unquoted(self, ch: str) -> Optional[Row]:
        if ch == DELIMITER:
            self._end_field()
        elif ch == CR:
            self._pending_cr = True
        elif ch == LF:
            return self._end_row()
        else:
            self._field.append(ch)
        return None

    def _quoted(self, ch: str) -> Optional[Row]:
        if ch == QUOTE:
            self.state = ParserState.QUOTE_SEEN_IN_QUOTED_FIELD
        else:
            self._field.append(ch)
        return None

    def _quote_seen(self, ch: str) -> Optional[Row]:
        if ch == QUOTE:
            self._field.append(QUOTE)
            self.state = ParserState.IN_QUOTED_FIELD
            return None
        self.state = ParserState.AFTER_QUOTED_FIELD
        return self._unquoted(ch)

    def _end_field(self) -> None:
        self._row.append("".join(self._field))
        self._field = []
        self.state = ParserState.FIELD_START

    def _end_row(self) -> Row:
        self._end_field()
        row, self._row = self._row, []
        self.rows_emitted += 1
        return row


def tokenize(chunks: Iterable[str]) -> Iterator[Row]:
    """Lazily tokenize an iterable of text chunks into rows."""
    tokenizer = Tokenizer()
    for chunk in chunks:
        yield from tokenizer.feed(chunk)
    yield from tokenizer.close()


def parse(text: str) -> List[Row]:
    """Tokenize a complete text.

    Example:
        >>> parse('a"b"",x\\n')
        [['a"b""', 'x']]
        >>> parse("")
        [['']]
    """
    return list(tokenize([text]))


__all__ = ["BOM", "ParserState", "Row", "Tokenizer", "parse", "tokenize"]
