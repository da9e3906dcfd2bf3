"""Type-introspection helpers shared by the engine and the typed adapters."""

from __future__ import annotations

import enum
import types
import typing
from decimal import Decimal
from typing import Any

_UNION_TYPES = (typing.Union, types.UnionType)

VALUE_TYPES: tuple[type, ...] = (bool, int, float, Decimal, enum.Enum)
"""Types whose values cannot be absent; ``null`` does not materialize to them."""


def is_class(object_type: Any) -> bool:
    """Whether ``object_type`` is a plain class, not a parameterized alias."""
    return isinstance(object_type, type) and not isinstance(object_type, types.GenericAlias)


def is_loose(object_type: Any) -> bool:
    """Whether ``object_type`` asks for no particular shape."""
    return object_type is None or object_type is Any or object_type is object


def is_union(object_type: Any) -> bool:
    return typing.get_origin(object_type) in _UNION_TYPES


def is_value_type(object_type: Any) -> bool:
    return is_class(object_type) and issubclass(object_type, VALUE_TYPES)


def zero_value(object_type: Any) -> Any:
    """The value a failed typed conversion reports for ``object_type``.

    Numbers and booleans get their zero; everything else, strings included,
    is absent.
    """
    if is_class(object_type):
        if issubclass(object_type, bool):
            return False
        if issubclass(object_type, enum.Enum):
            return None
        if issubclass(object_type, (int, float, complex, Decimal)):
            return object_type()
    return None
