"""Per-call conversion settings."""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pyjsontry.converters import JsonConverter


class Formatting(enum.StrEnum):
    """Whitespace style of written JSON text."""

    COMPACT = "compact"
    INDENTED = "indented"


@dataclass(frozen=True)
class Settings:
    """Immutable bundle of options for a single conversion call.

    ``options`` holds engine-level settings. They are handed to the engine
    untouched; :class:`~pyjsontry.engine.JsonEngine` reads ``max_depth``,
    ``indent``, ``escape_non_ascii`` and ``sort_keys``.
    """

    formatting: Formatting = Formatting.COMPACT
    converters: tuple[JsonConverter, ...] = ()
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "formatting", Formatting(self.formatting))
        object.__setattr__(self, "converters", tuple(self.converters))
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)


def build_settings(
    settings: Settings | None = None,
    formatting: Formatting | str | None = None,
    converters: Sequence[JsonConverter] | None = None,
) -> Settings | None:
    """Assemble the settings for one call from keyword shorthand.

    Args:
        settings: Base settings, or None for engine defaults.
        formatting: Overrides ``settings.formatting`` when given.
        converters: Overrides ``settings.converters`` when non-empty.

    Returns:
        A fresh Settings, or None when nothing was requested.
    """
    overrides: dict[str, Any] = {}
    if formatting is not None:
        overrides["formatting"] = Formatting(formatting)
    if converters:
        overrides["converters"] = tuple(converters)

    if not overrides:
        return settings
    if settings is None:
        return Settings(**overrides)
    return replace(settings, **overrides)
