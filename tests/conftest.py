"""Shared test fixtures."""

from typing import Any

import pytest

from pyjsontry import Engine, ErrorKind, JsonEngine, TryConvert


class RecordingDiagnostics:
    """Diagnostics callback that keeps every report."""

    def __init__(self) -> None:
        self.records: list[tuple[ErrorKind, Exception]] = []

    def __call__(self, kind: ErrorKind, exc: Exception) -> None:
        self.records.append((kind, exc))

    @property
    def kinds(self) -> list[ErrorKind]:
        return [kind for kind, _ in self.records]


class FakeEngine(Engine):
    """Delegates to JsonEngine unless told to fail or return nothing."""

    def __init__(
        self,
        fail_parse: BaseException | None = None,
        fail_write: BaseException | None = None,
        fail_materialize: BaseException | None = None,
        empty_parse: bool = False,
    ) -> None:
        self._inner = JsonEngine()
        self.fail_parse = fail_parse
        self.fail_write = fail_write
        self.fail_materialize = fail_materialize
        self.empty_parse = empty_parse
        self.materialize_calls = 0

    def parse(self, text, settings=None):
        if self.fail_parse is not None:
            raise self.fail_parse
        if self.empty_parse:
            return None
        return self._inner.parse(text, settings)

    def write(self, value: Any, object_type: Any = None, settings=None) -> str:
        if self.fail_write is not None:
            raise self.fail_write
        return self._inner.write(value, object_type, settings)

    def materialize(self, tree, object_type: Any = None, settings=None) -> Any:
        self.materialize_calls += 1
        if self.fail_materialize is not None:
            raise self.fail_materialize
        return self._inner.materialize(tree, object_type, settings)


@pytest.fixture
def diagnostics():
    return RecordingDiagnostics()


@pytest.fixture
def convert(diagnostics):
    return TryConvert(diagnostics=diagnostics)


@pytest.fixture
def fake_convert(diagnostics):
    """Build a TryConvert around a FakeEngine configured by keyword."""

    def make(**engine_kwargs: Any) -> tuple[TryConvert, FakeEngine]:
        engine = FakeEngine(**engine_kwargs)
        return TryConvert(engine=engine, diagnostics=diagnostics), engine

    return make
