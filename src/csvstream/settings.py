"""Environment-driven defaults.

Values are read fresh from the environment on every call so tests and
long-running processes can change them without reloading the module.
"""

import os

from .errors import ConfigError

CHUNK_SIZE_ENV = "CSVSTREAM_CHUNK_SIZE"
DEFAULT_CHUNK_SIZE = 64 * 1024


def default_chunk_size() -> int:
    """Return the number of characters read from an input per chunk.

    Resolution order:
    1. $CSVSTREAM_CHUNK_SIZE environment variable
    2. DEFAULT_CHUNK_SIZE

    Raises:
        ConfigError: If the environment value is not a positive integer.
    """
    raw = os.environ.get(CHUNK_SIZE_ENV)
    if not raw:
        return DEFAULT_CHUNK_SIZE

    try:
        size = int(raw)
    except ValueError as e:
        raise ConfigError(
            f"{CHUNK_SIZE_ENV} must be an integer, got {raw!r}",
            config_key=CHUNK_SIZE_ENV,
        ) from e

    if size <= 0:
        raise ConfigError(
            f"{CHUNK_SIZE_ENV} must be positive, got {size}",
            config_key=CHUNK_SIZE_ENV,
        )
    return size
