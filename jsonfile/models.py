"""Pydantic models for accessor options."""
from __future__ import annotations

import codecs
from collections.abc import Mapping
from typing import Annotated, Literal, TypeVar

from pydantic import AfterValidator, BaseModel, Field

from jsonfile.config import DEFAULT_ENCODING


def _check_encoding(value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError as exc:
        raise ValueError(f"unknown encoding: {value}") from exc
    return value


def _check_errors(value: str) -> str:
    try:
        codecs.lookup_error(value)
    except LookupError as exc:
        raise ValueError(f"unknown error handler: {value}") from exc
    return value


Encoding = Annotated[str, Field(min_length=1), AfterValidator(_check_encoding)]
ErrorHandler = Annotated[str, AfterValidator(_check_errors)]


class ReadOptions(BaseModel):
    """Options for reading a JSON file."""

    encoding: Encoding = DEFAULT_ENCODING
    errors: ErrorHandler = "strict"
    # Only honored by read_file_sync; storage errors always propagate.
    throws: bool = True

    class Config:
        extra = "forbid"


class WriteOptions(BaseModel):
    """Options for writing or appending a JSON file.

    ``flag`` overrides how the file is opened: ``"w"`` truncates, ``"a"``
    appends, and the ``x`` forms fail if the file already exists. When unset,
    write truncates and append appends.
    """

    encoding: Encoding = DEFAULT_ENCODING
    errors: ErrorHandler = "strict"
    mode: int | None = Field(default=None, ge=0, le=0o7777)
    flag: Literal["w", "wx", "a", "ax"] | None = None

    class Config:
        extra = "forbid"


OptionsT = TypeVar("OptionsT", ReadOptions, WriteOptions)


def coerce_options(
    options: OptionsT | Mapping[str, object] | str | None,
    model: type[OptionsT],
) -> OptionsT:
    """Normalize user-supplied options into a model instance."""
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if isinstance(options, str):
        return model(encoding=options)
    if isinstance(options, Mapping):
        return model.model_validate(dict(options))
    raise TypeError(
        f"options must be {model.__name__}, a mapping, an encoding name or None, "
        f"not {type(options).__name__}"
    )
