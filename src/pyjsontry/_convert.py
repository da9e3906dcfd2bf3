"""TryConvert - the guarded parse / serialize / deserialize operations."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Generic, NamedTuple, TypeVar

from pyjsontry._errors import ErrorKind, JsonTryError
from pyjsontry._typing import zero_value
from pyjsontry.converters import JsonConverter
from pyjsontry.engine import Document, Engine, JsonEngine
from pyjsontry.settings import Formatting, Settings, build_settings

logger = logging.getLogger("pyjsontry")

T = TypeVar("T")

Diagnostics = Callable[[ErrorKind, Exception], None]
"""Callback receiving each failure; advisory only."""


class TryResult(NamedTuple, Generic[T]):
    """Outcome of a try-operation.

    Unpacks as ``ok, value`` and is truthy exactly when ``ok`` is True.
    On failure ``value`` holds the default (None, or a type's zero value).
    """

    ok: bool
    value: T | None = None

    def __bool__(self) -> bool:
        return self.ok


def log_diagnostic(kind: ErrorKind, exc: Exception) -> None:
    """Default diagnostics: one DEBUG line on the ``pyjsontry`` logger."""
    details = exc.internal() if isinstance(exc, JsonTryError) else repr(exc)
    logger.debug("%s failed: %s", kind, details)


class TryConvert:
    """Runs engine calls inside a guard and reports failure as a result.

    Every error raised by the engine is caught at this boundary and turned
    into ``TryResult(False, default)``; nothing derived from ``Exception``
    escapes. A TryConvert holds no per-call state and can be shared between
    threads.

    Args:
        engine: The JSON engine to wrap. Defaults to :class:`JsonEngine`.
        diagnostics: Called with the error kind and exception on every
            failure, or None to report nothing. Its own errors are logged
            and never change the result.
    """

    def __init__(
        self,
        engine: Engine | None = None,
        diagnostics: Diagnostics | None = log_diagnostic,
    ) -> None:
        self._engine = engine if engine is not None else JsonEngine()
        self._diagnostics = diagnostics

    @property
    def engine(self) -> Engine:
        return self._engine

    def try_parse(self, json: Any, *, settings: Settings | None = None) -> TryResult[Document]:
        """Parse JSON text into a document.

        Args:
            json: The text to parse. Anything is accepted; non-text fails.
            settings: Optional settings; the engine may read ``max_depth``.

        Returns:
            ``(True, tree)`` on success, ``(False, None)`` otherwise.
        """
        try:
            tree = self._engine.parse(json, settings)
        except Exception as e:
            self._report(ErrorKind.PARSE, e)
            return TryResult(False, None)
        return TryResult(True, tree)

    def try_serialize(
        self,
        value: Any,
        object_type: Any = None,
        *,
        settings: Settings | None = None,
        formatting: Formatting | str | None = None,
        converters: Sequence[JsonConverter] | None = None,
    ) -> TryResult[str]:
        """Write a value as JSON text.

        Args:
            value: The value to write; None becomes ``null``.
            object_type: Write the value as this type instead of its runtime
                type. A value that does not conform to it fails.
            settings: Base settings for the call.
            formatting: Overrides ``settings.formatting``.
            converters: Overrides ``settings.converters`` when non-empty.

        Returns:
            ``(True, text)`` on success, ``(False, None)`` otherwise.
        """
        return self._serialize(value, object_type, settings, formatting, converters)

    def try_deserialize(
        self,
        json: Any,
        object_type: Any = None,
        *,
        settings: Settings | None = None,
        formatting: Formatting | str | None = None,
        converters: Sequence[JsonConverter] | None = None,
    ) -> TryResult[Any]:
        """Parse JSON text and build a value of the requested type.

        Args:
            json: The text to parse.
            object_type: The type to build. None yields plain dicts, lists
                and scalars.
            settings: Base settings for the call.
            formatting: Overrides ``settings.formatting``.
            converters: Overrides ``settings.converters`` when non-empty.

        Returns:
            ``(True, value)`` on success, ``(False, None)`` otherwise.
        """
        return self._deserialize(json, object_type, settings, formatting, converters, None)

    def _serialize(
        self,
        value: Any,
        object_type: Any,
        settings: Settings | None,
        formatting: Formatting | str | None = None,
        converters: Sequence[JsonConverter] | None = None,
    ) -> TryResult[str]:
        try:
            settings = build_settings(settings, formatting, converters)
            text = self._engine.write(value, object_type, settings)
        except Exception as e:
            self._report(ErrorKind.CONVERSION, e)
            return TryResult(False, None)
        return TryResult(True, text)

    def _deserialize(
        self,
        json: Any,
        object_type: Any,
        settings: Settings | None,
        formatting: Formatting | str | None,
        converters: Sequence[JsonConverter] | None,
        default: Any,
    ) -> TryResult[Any]:
        try:
            settings = build_settings(settings, formatting, converters)
        except Exception as e:
            self._report(ErrorKind.CONVERSION, e)
            return TryResult(False, default)

        # Parse failures are reported by try_parse itself.
        ok, tree = self.try_parse(json, settings=settings)
        if not ok or tree is None:
            return TryResult(False, default)

        try:
            value = self._engine.materialize(tree, object_type, settings)
        except Exception as e:
            self._report(ErrorKind.CONVERSION, e)
            return TryResult(False, default)
        return TryResult(True, value)

    def _report(self, kind: ErrorKind, exc: Exception) -> None:
        if self._diagnostics is None:
            return
        try:
            self._diagnostics(kind, exc)
        except Exception:
            logger.warning("diagnostics callback failed for %s error", kind, exc_info=True)


_default_convert = TryConvert()


class TryAdapter(Generic[T]):
    """Try-operations bound to one target type.

    Failed deserialization reports the type's zero value (``0`` for
    ``int``, ``False`` for ``bool``, None for ``str`` and other types).
    """

    def __init__(
        self,
        object_type: type[T] | Any,
        *,
        settings: Settings | None = None,
        formatting: Formatting | str | None = None,
        converters: Sequence[JsonConverter] | None = None,
        convert: TryConvert | None = None,
    ) -> None:
        self.object_type = object_type
        self._settings = settings
        self._formatting = formatting
        self._converters = converters
        self._convert = convert if convert is not None else _default_convert

    def __repr__(self) -> str:
        return f"TryAdapter({self.object_type!r})"

    def try_serialize(self, value: T | None) -> TryResult[str]:
        return self._convert._serialize(
            value, self.object_type, self._settings, self._formatting, self._converters
        )

    def try_deserialize(self, json: Any) -> TryResult[T]:
        return self._convert._deserialize(
            json,
            self.object_type,
            self._settings,
            self._formatting,
            self._converters,
            zero_value(self.object_type),
        )
