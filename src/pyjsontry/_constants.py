"""Default limits and formatting constants for JSON conversion."""

DEFAULT_MAX_DEPTH = 64
"""Maximum nesting depth of a parsed document (CWE-674 prevention)."""

DEFAULT_INDENT = 2
"""Spaces per nesting level for indented output."""

COMPACT_SEPARATORS = (",", ":")
"""Item and key separators for compact output."""

TYPE_ADAPTER_CACHE_SIZE = 256
"""Number of built pydantic type adapters kept for reuse."""
