"""Row to CSV text encoding.

Fields are quoted only when they contain a delimiter, a quote or a line
terminator character. Every row ends with CRLF.
"""

from typing import Any, Iterable

DELIMITER = ","
QUOTE = '"'
TERMINATOR = "\r\n"

_SPECIAL = frozenset(DELIMITER + QUOTE + "\r\n")


def needs_quoting(field: str) -> bool:
    """Return True if field must be wrapped in quotes."""
    return any(ch in _SPECIAL for ch in field)


def encode_field(value: Any) -> str:
    """Encode one field, doubling embedded quotes when quoting is required.

    Non-string values (numbers returned by a mapping function, for example)
    are rendered with str().
    """
    field = value if isinstance(value, str) else str(value)
    if not needs_quoting(field):
        return field
    return QUOTE + field.replace(QUOTE, QUOTE * 2) + QUOTE


def encode(row: Iterable[Any]) -> str:
    """Encode a row as one CSV line terminated by CRLF.

    Example:
        >>> encode(["a,bc", "12,3"])
        '"a,bc","12,3"\\r\\n'
        >>> encode([""])
        '\\r\\n'
    """
    return DELIMITER.join(encode_field(value) for value in row) + TERMINATOR


__all__ = ["encode", "encode_field", "needs_quoting"]
