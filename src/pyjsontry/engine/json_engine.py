"""Default engine: stdlib json for text, pydantic for typed values."""

from __future__ import annotations

import dataclasses
import functools
import json
import typing
from typing import Annotated, Any, Literal

from pydantic import PydanticSchemaGenerationError, PlainValidator, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from pyjsontry._constants import (
    COMPACT_SEPARATORS,
    DEFAULT_INDENT,
    DEFAULT_MAX_DEPTH,
    TYPE_ADAPTER_CACHE_SIZE,
)
from pyjsontry._errors import (
    ERR_MSG_CANNOT_MATERIALIZE,
    ERR_MSG_CANNOT_SERIALIZE,
    ERR_MSG_CONVERTER_FAILED,
    ERR_MSG_DEPTH_EXCEEDED,
    ERR_MSG_INVALID_JSON,
    ERR_MSG_TYPE_MISMATCH,
    ERR_MSG_UNSUPPORTED_TYPE,
    ConverterError,
    DeclaredTypeMismatchError,
    JsonParseError,
    JsonTryError,
    MaterializationError,
    MaxDepthExceededError,
    SerializationError,
    UnsupportedTypeError,
)
from pyjsontry._typing import is_loose, is_union, is_value_type
from pyjsontry.converters import JsonConverter
from pyjsontry.engine._base import Document, Engine
from pyjsontry.settings import Formatting, Settings


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _check_depth(root: Any, max_depth: int) -> None:
    """Reject documents with more than ``max_depth`` nested containers."""
    stack: list[tuple[Any, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            continue
        depth += 1
        if depth > max_depth:
            raise MaxDepthExceededError(
                ERR_MSG_DEPTH_EXCEEDED,
                f"depth {depth} exceeds limit {max_depth}",
            )
        stack.extend((child, depth) for child in children)


# ---- Converters ----


def _write_converted(converter: JsonConverter, value: Any) -> Any:
    try:
        return converter.write_json(value)
    except JsonTryError:
        raise
    except Exception as e:
        raise ConverterError(
            ERR_MSG_CONVERTER_FAILED,
            f"{type(converter).__name__} failed writing {type(value).__name__}: {e}",
            wrapped=e,
        ) from e


def _read_converted(converter: JsonConverter, object_type: Any, data: Any) -> Any:
    # ConverterError is not a ValueError, so pydantic lets it through unchanged.
    try:
        return converter.read_json(data, object_type)
    except JsonTryError:
        raise
    except Exception as e:
        raise ConverterError(
            ERR_MSG_CONVERTER_FAILED,
            f"{type(converter).__name__} failed reading {object_type!r}: {e}",
            wrapped=e,
        ) from e


def _with_converters(object_type: Any, converters: tuple[JsonConverter, ...]) -> Any:
    """Attach reading converters to ``object_type`` and its type arguments.

    ``list[Color]`` with a converter for ``Color`` becomes
    ``list[Annotated[Color, PlainValidator(...)]]``. Fields of dataclasses
    and models are left to pydantic.
    """
    if not converters or is_loose(object_type):
        return object_type
    for converter in converters:
        if converter.can_read and converter.can_convert(object_type):
            read = functools.partial(_read_converted, converter, object_type)
            return Annotated[object_type, PlainValidator(read)]

    origin = typing.get_origin(object_type)
    args = typing.get_args(object_type)
    if origin is None or origin is Literal or not args:
        return object_type
    if origin is Annotated:
        inner = _with_converters(args[0], converters)
        return object_type if inner is args[0] else Annotated[(inner, *object_type.__metadata__)]

    new_args = tuple(
        arg if arg is Ellipsis else _with_converters(arg, converters) for arg in args
    )
    if all(new is old for new, old in zip(new_args, args)):
        return object_type
    if is_union(object_type):
        return typing.Union[new_args]
    return origin[new_args]


@functools.lru_cache(maxsize=TYPE_ADAPTER_CACHE_SIZE)
def _type_adapter(object_type: Any, converters: tuple[JsonConverter, ...] = ()) -> TypeAdapter:
    try:
        return TypeAdapter(_with_converters(object_type, converters))
    except PydanticSchemaGenerationError as e:
        raise UnsupportedTypeError(
            ERR_MSG_UNSUPPORTED_TYPE,
            f"no JSON mapping for {object_type!r}",
            wrapped=e,
        ) from e


class _Encoder(json.JSONEncoder):
    """Hands values json cannot write to the converters, then to pydantic."""

    def __init__(self, *, converters: tuple[JsonConverter, ...] = (), **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._converters = converters

    def default(self, o: Any) -> Any:
        for converter in self._converters:
            if converter.can_write and converter.can_convert(type(o)):
                return _write_converted(converter, o)
        if isinstance(o, Document):
            return o.root
        # Shallow, so nested members come back through default().
        if dataclasses.is_dataclass(o) and not isinstance(o, type):
            return {f.name: getattr(o, f.name) for f in dataclasses.fields(o)}
        try:
            return to_jsonable_python(o)
        except PydanticSerializationError as e:
            raise UnsupportedTypeError(
                ERR_MSG_UNSUPPORTED_TYPE,
                f"no JSON representation for {type(o).__name__}",
                wrapped=e,
            ) from e


class JsonEngine(Engine):
    """Parses and writes with the json module; maps types with pydantic.

    Options read from ``Settings.options``: ``max_depth``, ``indent``,
    ``escape_non_ascii`` and ``sort_keys``.
    """

    def parse(self, text: str, settings: Settings | None = None) -> Document | None:
        if not isinstance(text, (str, bytes, bytearray)):
            raise JsonParseError(
                ERR_MSG_INVALID_JSON,
                f"expected str, got {type(text).__name__}",
            )
        try:
            root = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            raise JsonParseError(ERR_MSG_INVALID_JSON, str(e), wrapped=e) from e

        max_depth = DEFAULT_MAX_DEPTH
        if settings is not None:
            max_depth = settings.option("max_depth", DEFAULT_MAX_DEPTH)
        _check_depth(root, max_depth)
        return Document(root)

    def write(
        self,
        value: Any,
        object_type: Any = None,
        settings: Settings | None = None,
    ) -> str:
        settings = settings or Settings()
        data = value
        if value is not None and not is_loose(object_type):
            adapter = _type_adapter(object_type)
            try:
                data = adapter.validate_python(value, strict=True)
            except ValidationError as e:
                raise DeclaredTypeMismatchError(
                    ERR_MSG_TYPE_MISMATCH,
                    f"{type(value).__name__} value cannot be written as {object_type!r}",
                    wrapped=e,
                ) from e

        indent = None
        separators = COMPACT_SEPARATORS
        if settings.formatting is Formatting.INDENTED:
            indent = settings.option("indent", DEFAULT_INDENT)
            separators = None
        try:
            return json.dumps(
                data,
                cls=_Encoder,
                converters=settings.converters,
                indent=indent,
                separators=separators,
                ensure_ascii=settings.option("escape_non_ascii", False),
                sort_keys=settings.option("sort_keys", False),
                allow_nan=False,
            )
        except JsonTryError:
            raise
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(ERR_MSG_CANNOT_SERIALIZE, str(e), wrapped=e) from e

    def materialize(
        self,
        tree: Document,
        object_type: Any = None,
        settings: Settings | None = None,
    ) -> Any:
        settings = settings or Settings()
        if is_loose(object_type):
            return tree.root
        if object_type is Document:
            return tree
        if tree.root is None and not is_value_type(object_type):
            return None

        adapter = _type_adapter(object_type, settings.converters)
        try:
            # JSON-mode strictness: no "5" -> 5, but enum values and ISO dates still read.
            return adapter.validate_json(json.dumps(tree.root), strict=True)
        except ValidationError as e:
            raise MaterializationError(
                ERR_MSG_CANNOT_MATERIALIZE,
                f"cannot convert document to {object_type!r}: {e}",
                wrapped=e,
            ) from e
