"""Pluggable per-type conversion strategies."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from datetime import date, datetime, time
from typing import Any

from pyjsontry._errors import ERR_MSG_CONVERTER_FAILED, ConverterError
from pyjsontry._typing import is_class


class JsonConverter(ABC):
    """Base class for custom read/write logic applied to specific types.

    The engine asks each converter in order whether it handles a type; the
    first one that does takes over writing or reading values of that type.
    """

    @property
    def can_read(self) -> bool:
        return True

    @property
    def can_write(self) -> bool:
        return True

    @abstractmethod
    def can_convert(self, object_type: Any) -> bool: ...

    def write_json(self, value: Any) -> Any:
        """Return a JSON-compatible stand-in for ``value``."""
        raise NotImplementedError(f"{type(self).__name__} does not write")

    def read_json(self, data: Any, object_type: Any) -> Any:
        """Build an ``object_type`` instance from loosely-typed ``data``."""
        raise NotImplementedError(f"{type(self).__name__} does not read")


class StringEnumConverter(JsonConverter):
    """Write enum members by name instead of by value."""

    def can_convert(self, object_type: Any) -> bool:
        return is_class(object_type) and issubclass(object_type, enum.Enum)

    def write_json(self, value: Any) -> Any:
        return value.name

    def read_json(self, data: Any, object_type: Any) -> Any:
        if isinstance(data, str):
            if data in object_type.__members__:
                return object_type[data]
            folded = data.casefold()
            for name, member in object_type.__members__.items():
                if name.casefold() == folded:
                    return member
        try:
            return object_type(data)
        except ValueError as e:
            raise ConverterError(
                ERR_MSG_CONVERTER_FAILED,
                f"{data!r} is not a member of {object_type.__name__}",
                wrapped=e,
            ) from e


class IsoDateTimeConverter(JsonConverter):
    """Write dates and times as ISO-8601 text or with a fixed format."""

    def __init__(self, fmt: str | None = None) -> None:
        self._fmt = fmt

    def can_convert(self, object_type: Any) -> bool:
        return is_class(object_type) and issubclass(object_type, (date, time))

    def write_json(self, value: Any) -> Any:
        if self._fmt is not None:
            return value.strftime(self._fmt)
        return value.isoformat()

    def read_json(self, data: Any, object_type: Any) -> Any:
        if not isinstance(data, str):
            raise ConverterError(
                ERR_MSG_CONVERTER_FAILED,
                f"expected date/time text for {object_type.__name__}, got {type(data).__name__}",
            )
        try:
            if self._fmt is None:
                return object_type.fromisoformat(data)
            parsed = datetime.strptime(data, self._fmt)
        except ValueError as e:
            raise ConverterError(
                ERR_MSG_CONVERTER_FAILED,
                f"cannot parse {data!r} as {object_type.__name__}",
                wrapped=e,
            ) from e
        if issubclass(object_type, datetime):
            return parsed
        if issubclass(object_type, date):
            return parsed.date()
        return parsed.timetz()
