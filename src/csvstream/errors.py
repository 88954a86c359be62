"""Exception types raised by csvstream pipelines."""

from __future__ import annotations


class CsvStreamError(Exception):
    """Base class for all csvstream errors."""

    pass


class IOFailure(CsvStreamError):
    """The underlying input or output resource reported an error."""

    def __init__(self, message: str, resource: str | None = None) -> None:
        """Initialize IOFailure.

        Args:
            message: Error message.
            resource: Optional path or description of the failing resource.
        """
        super().__init__(message)
        self.resource = resource


class DecodeFailure(CsvStreamError):
    """The character decoder was fed invalid data."""

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        encoding: str | None = None,
    ) -> None:
        """Initialize DecodeFailure.

        Args:
            message: Error message.
            resource: Optional path or description of the input.
            encoding: The encoding that was attempted.
        """
        super().__init__(message)
        self.resource = resource
        self.encoding = encoding


class SinkClosedError(IOFailure):
    """A row was pushed to a sink that is closed or has failed."""

    pass


class ConfigError(CsvStreamError):
    """Invalid configuration value."""

    def __init__(self, message: str, config_key: str | None = None) -> None:
        super().__init__(message)
        self.config_key = config_key


class TransformError(CsvStreamError):
    """A mapping function returned a value that cannot become a row."""

    def __init__(self, message: str, row_index: int | None = None) -> None:
        super().__init__(message)
        self.row_index = row_index


__all__ = [
    "ConfigError",
    "CsvStreamError",
    "DecodeFailure",
    "IOFailure",
    "SinkClosedError",
    "TransformError",
]
