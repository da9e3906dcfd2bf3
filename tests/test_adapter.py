"""TryAdapter tests: try-operations bound to one type."""

from dataclasses import dataclass
from decimal import Decimal

import pytest

from pyjsontry import (
    Formatting,
    StringEnumConverter,
    TryAdapter,
    TryConvert,
    zero_value,
)


@dataclass
class Dummy:
    Id: int = 0
    Name: str | None = None


class TestZeroValue:
    @pytest.mark.parametrize("object_type, expected", [
        (int, 0),
        (float, 0.0),
        (bool, False),
        (Decimal, Decimal(0)),
        (complex, 0j),
        (str, None),
        (Dummy, None),
        (list[int], None),
        (int | None, None),
        (None, None),
    ])
    def test_zero_value(self, object_type, expected):
        assert zero_value(object_type) == expected
        assert type(zero_value(object_type)) is type(expected)


class TestTryAdapter:
    def test_round_trip(self):
        adapter = TryAdapter(Dummy)
        ok, text = adapter.try_serialize(Dummy(2, "xyz"))
        assert ok
        assert adapter.try_deserialize(text) == (True, Dummy(2, "xyz"))

    @pytest.mark.parametrize("object_type, expected", [
        (int, 0),
        (float, 0.0),
        (bool, False),
        (str, None),
        (Dummy, None),
    ])
    def test_failure_reports_zero_value(self, object_type, expected):
        ok, value = TryAdapter(object_type).try_deserialize("not a json")
        assert ok is False
        assert value == expected
        assert type(value) is type(expected)

    def test_materialize_failure_reports_zero_value(self):
        assert TryAdapter(int).try_deserialize('"x"') == (False, 0)

    def test_serialize_checks_bound_type(self):
        assert TryAdapter(list[int]).try_serialize(Dummy(1, "a")) == (False, None)

    def test_null_round_trip(self):
        adapter = TryAdapter(Dummy)
        assert adapter.try_serialize(None) == (True, "null")
        assert adapter.try_deserialize("null") == (True, None)

    def test_bound_formatting(self):
        adapter = TryAdapter(Dummy, formatting=Formatting.INDENTED)
        ok, text = adapter.try_serialize(Dummy(3, "test"))
        assert ok
        assert "\n" in text

    def test_bound_converters(self):
        import enum

        class Color(enum.Enum):
            RED = "red"

        adapter = TryAdapter(list[Color], converters=[StringEnumConverter()])
        assert adapter.try_serialize([Color.RED]) == (True, '["RED"]')
        assert adapter.try_deserialize('["RED", "red"]') == (True, [Color.RED, Color.RED])

    def test_custom_convert(self, diagnostics):
        adapter = TryAdapter(int, convert=TryConvert(diagnostics=diagnostics))
        adapter.try_deserialize("[]")
        assert len(diagnostics.records) == 1

    def test_repr(self):
        assert repr(TryAdapter(int)) == "TryAdapter(<class 'int'>)"
