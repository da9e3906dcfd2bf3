"""Abstract base class for JSON engines and the document they produce."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from pyjsontry.settings import Settings


@dataclass(frozen=True)
class Document:
    """A parsed JSON document.

    ``root`` is the loosely-typed value of the root node: dicts, lists,
    strings, ints, floats, booleans and None. Wrapping it keeps a parsed
    ``null`` distinct from "no document".
    """

    root: Any


class Engine(ABC):
    """The parse / write / materialize capability the try-operations wrap.

    Implementations raise on failure; catching and normalizing errors is
    the caller's job. ``settings`` is None when the caller asked for engine
    defaults. Engines must not keep per-call state on ``self``.
    """

    @abstractmethod
    def parse(self, text: str, settings: Settings | None = None) -> Document | None:
        """Parse JSON text into a document."""

    @abstractmethod
    def write(
        self,
        value: Any,
        object_type: Any = None,
        settings: Settings | None = None,
    ) -> str:
        """Write ``value`` as JSON text, as ``object_type`` when given."""

    @abstractmethod
    def materialize(
        self,
        tree: Document,
        object_type: Any = None,
        settings: Settings | None = None,
    ) -> Any:
        """Build an ``object_type`` value from a document.

        A None ``object_type`` yields plain dicts, lists and scalars.
        """
