"""Pydantic models for stream and transform configuration."""

from __future__ import annotations

import codecs
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .settings import default_chunk_size


class StreamConfig(BaseModel):
    """How a source or sink opens and moves text through a path."""

    encoding: str = "utf-8"
    errors: str = "strict"  # codec error policy, see codecs.register_error
    chunk_size: int = Field(default_factory=default_chunk_size, gt=0)

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        """Reject encodings the codec registry does not know."""

        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v


class TransformConfig(BaseModel):
    """Options for the transform stage.

    include_headers: pass the first row to the mapping function too,
        instead of forwarding it untouched.
    raw_output: the mapping function returns encoded CSV text for one row,
        which is tokenized back into fields.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    include_headers: bool = Field(default=False, alias="includeHeaders")
    raw_output: bool = Field(default=False, alias="rawOutput")


ModelT = TypeVar("ModelT", bound=BaseModel)


def coerce_config(
    model: Type[ModelT],
    value: ModelT | Mapping[str, Any] | None,
) -> ModelT:
    """Return value as an instance of model.

    Accepts None (defaults), a mapping (validated) or an existing instance.

    Raises:
        ConfigError: If validation fails.
    """
    if value is None:
        value = {}
    if isinstance(value, model):
        return value

    try:
        return model.model_validate(dict(value))
    except ValidationError as e:
        raise ConfigError(f"Invalid {model.__name__}: {e}") from e
    except TypeError as e:
        raise ConfigError(
            f"{model.__name__} expects a mapping, got {type(value).__name__}"
        ) from e


__all__ = ["StreamConfig", "TransformConfig", "coerce_config"]
