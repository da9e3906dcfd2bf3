"""JSON engines: the parse / write / materialize capability behind the try-operations."""

from pyjsontry.engine._base import Document, Engine
from pyjsontry.engine.json_engine import JsonEngine

__all__ = [
    "Document",
    "Engine",
    "JsonEngine",
]
