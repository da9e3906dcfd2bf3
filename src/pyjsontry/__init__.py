"""pyjsontry - JSON parse, serialize and deserialize without exceptions."""

from __future__ import annotations

import logging

try:
    from pyjsontry._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from collections.abc import Sequence
from typing import Any

from pyjsontry._convert import (
    Diagnostics,
    TryAdapter,
    TryConvert,
    TryResult,
    _default_convert,
    log_diagnostic,
)
from pyjsontry._errors import (
    ConverterError,
    DeclaredTypeMismatchError,
    ErrorKind,
    JsonParseError,
    JsonTryError,
    MaterializationError,
    MaxDepthExceededError,
    SerializationError,
    UnsupportedTypeError,
)
from pyjsontry._typing import zero_value
from pyjsontry.converters import IsoDateTimeConverter, JsonConverter, StringEnumConverter
from pyjsontry.engine import Document, Engine, JsonEngine
from pyjsontry.settings import Formatting, Settings, build_settings

__all__ = [
    "try_parse",
    "try_serialize",
    "try_deserialize",
    "zero_value",
    "build_settings",
    "Diagnostics",
    "ErrorKind",
    "Formatting",
    "Settings",
    "TryAdapter",
    "TryConvert",
    "TryResult",
    "Document",
    "Engine",
    "JsonEngine",
    "JsonConverter",
    "IsoDateTimeConverter",
    "StringEnumConverter",
    "JsonTryError",
    "JsonParseError",
    "MaxDepthExceededError",
    "SerializationError",
    "DeclaredTypeMismatchError",
    "UnsupportedTypeError",
    "MaterializationError",
    "ConverterError",
    "log_diagnostic",
]

logging.getLogger("pyjsontry").addHandler(logging.NullHandler())


def try_parse(json: Any, *, settings: Settings | None = None) -> TryResult[Document]:
    """Parse JSON text into a document.

    Args:
        json: The text to parse.
        settings: Optional settings; ``max_depth`` limits nesting.

    Returns:
        ``(True, document)`` on success, ``(False, None)`` if the text is not
        valid JSON or parsing fails for any other reason.
    """
    return _default_convert.try_parse(json, settings=settings)


def try_serialize(
    value: Any,
    object_type: Any = None,
    *,
    settings: Settings | None = None,
    formatting: Formatting | str | None = None,
    converters: Sequence[JsonConverter] | None = None,
) -> TryResult[str]:
    """Write a value as JSON text.

    Args:
        value: The value to write. None becomes ``null``.
        object_type: Write the value as this type. A value that does not
            conform to it fails instead of being written some other way.
        settings: Base settings for the call.
        formatting: ``Formatting.INDENTED`` for multi-line output.
        converters: Custom converters, tried in order.

    Returns:
        ``(True, text)`` on success, ``(False, None)`` otherwise.
    """
    return _default_convert.try_serialize(
        value,
        object_type,
        settings=settings,
        formatting=formatting,
        converters=converters,
    )


def try_deserialize(
    json: Any,
    object_type: Any = None,
    *,
    settings: Settings | None = None,
    formatting: Formatting | str | None = None,
    converters: Sequence[JsonConverter] | None = None,
) -> TryResult[Any]:
    """Parse JSON text and build a value of ``object_type``.

    Args:
        json: The text to parse.
        object_type: The type to build. None yields plain dicts, lists and
            scalars.
        settings: Base settings for the call.
        formatting: Accepted for symmetry with try_serialize.
        converters: Custom converters, tried in order.

    Returns:
        ``(True, value)`` on success, ``(False, None)`` otherwise.
    """
    return _default_convert.try_deserialize(
        json,
        object_type,
        settings=settings,
        formatting=formatting,
        converters=converters,
    )
