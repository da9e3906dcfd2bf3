"""Document tree parsing tests."""

import pytest
from pyjsontry import Document, JsonEngine, Settings, try_parse

VALID_JSON = [
    "{}",
    "[]",
    "0",
    "-1.5e3",
    "12345678901234567890",
    '"x"',
    '""',
    "true",
    "false",
    "null",
    '{"a": [1, {"b": null}], "c": "d"}',
    "  [1 , 2 ]  \n",
    '"\\u00e9\\n\\t\\"\\\\\\/"',
    '"café ✓"',
    '{"dup": 1, "dup": 2}',
]

MALFORMED_JSON = [
    "not a json",
    "",
    "   ",
    "{",
    "}",
    "[1,]",
    "[1 2]",
    "{'a': 1}",
    '{"a" 1}',
    '{"a":}',
    "01",
    "1.",
    ".5",
    "+1",
    "tru",
    "True",
    "NaN",
    "-Infinity",
    "1 2",
    '"unterminated',
    '"bad \\q escape"',
    '"raw\ttab"',
    "// comment\n1",
]


class TestValidJson:
    @pytest.mark.parametrize("text", VALID_JSON)
    def test_parses(self, text):
        ok, tree = try_parse(text)
        assert ok is True
        assert tree is not None

    @pytest.mark.parametrize("text", VALID_JSON)
    def test_matches_fresh_parse(self, text):
        _, tree = try_parse(text)
        assert tree == JsonEngine().parse(text)

    def test_document_holds_plain_values(self):
        _, document = try_parse('{"a": [1, 2.5, "x", true, null]}')
        assert isinstance(document, Document)
        assert document.root == {"a": [1, 2.5, "x", True, None]}

    def test_null_is_a_document(self):
        assert try_parse("null") == (True, Document(None))

    def test_big_integers_kept_exact(self):
        _, document = try_parse("12345678901234567890")
        assert document.root == 12345678901234567890

    def test_utf8_bytes(self):
        ok, tree = try_parse('{"k": "é"}'.encode())
        assert ok
        assert tree == JsonEngine().parse('{"k": "é"}')


class TestMalformedJson:
    @pytest.mark.parametrize("text", MALFORMED_JSON)
    def test_fails(self, text):
        assert try_parse(text) == (False, None)

    @pytest.mark.parametrize("value", [None, 42, ["[]"], {"a": 1}])
    def test_non_text_fails(self, value):
        assert try_parse(value) == (False, None)

    def test_invalid_utf8_bytes(self):
        assert try_parse(b'"\xff"') == (False, None)


class TestDepthLimit:
    def test_default_limit_allows_64(self):
        text = "[" * 64 + "]" * 64
        assert try_parse(text).ok

    def test_default_limit_rejects_65(self):
        text = "[" * 65 + "]" * 65
        assert try_parse(text) == (False, None)

    def test_configured_limit(self):
        settings = Settings(options={"max_depth": 2})
        assert try_parse("[[1]]", settings=settings).ok
        assert not try_parse('[{"a": [1]}]', settings=settings).ok

    def test_scalars_have_no_depth(self):
        settings = Settings(options={"max_depth": 0})
        assert try_parse("1", settings=settings).ok
        assert not try_parse("[]", settings=settings).ok
