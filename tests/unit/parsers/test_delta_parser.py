#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for delta intake."""

import logging

import pytest

from delta2html.ast import DeltaInsertOp, InsertDataCustom, InsertDataQuill
from delta2html.constants import DataType
from delta2html.exceptions import ParsingError
from delta2html.options import SanitizeOptions
from delta2html.parsers import (
    convert_insert_value,
    denormalize_insert_op,
    is_delta_insert_op,
    load_delta_json,
    parse_delta,
    tokenize_with_newlines,
)


@pytest.mark.unit
class TestTokenizeWithNewlines:
    """Tests for newline tokenization."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("hello\n\nworld\n ", ["hello", "\n", "\n", "world", "\n", " "]),
            ("\n", ["\n"]),
            ("abc", ["abc"]),
            ("a\n", ["a", "\n"]),
            ("\n\n", ["\n", "\n"]),
        ],
    )
    def test_tokens(self, text, expected):
        assert tokenize_with_newlines(text) == expected


@pytest.mark.unit
class TestDenormalizeInsertOp:
    """Tests for splitting raw ops on newlines."""

    def test_keeps_attributes_on_every_part(self):
        parts = denormalize_insert_op({"insert": "a\nb", "attributes": {"bold": True}})
        assert parts == [
            {"insert": "a", "attributes": {"bold": True}},
            {"insert": "\n", "attributes": {"bold": True}},
            {"insert": "b", "attributes": {"bold": True}},
        ]

    def test_embed_unchanged(self):
        raw = {"insert": {"image": "a.png"}}
        assert denormalize_insert_op(raw) == [raw]

    def test_lone_newline_unchanged(self):
        raw = {"insert": "\n", "attributes": {"header": 1}}
        assert denormalize_insert_op(raw) == [raw]


@pytest.mark.unit
class TestIsDeltaInsertOp:
    """Tests for raw op shape validation."""

    @pytest.mark.parametrize(
        "value",
        [
            {"insert": "x"},
            {"insert": {"image": "a.png"}},
            {"insert": "x", "attributes": {"bold": True}},
            {"insert": "x", "attributes": None},
        ],
    )
    def test_valid(self, value):
        assert is_delta_insert_op(value)

    @pytest.mark.parametrize(
        "value",
        [
            "x",
            None,
            {"retain": 3},
            {"insert": 5},
            {"insert": "x", "attributes": "bold"},
        ],
    )
    def test_invalid(self, value):
        assert not is_delta_insert_op(value)


@pytest.mark.unit
class TestConvertInsertValue:
    """Tests for payload typing."""

    def test_text(self):
        assert convert_insert_value("hi") == InsertDataQuill(DataType.TEXT, "hi")

    def test_image_url_is_sanitized(self):
        assert convert_insert_value({"image": "javascript:x"}) == InsertDataQuill(DataType.IMAGE, "unsafe:javascript:x")

    def test_video(self):
        assert convert_insert_value({"video": "https://v.example/1"}) == InsertDataQuill(
            DataType.VIDEO, "https://v.example/1"
        )

    def test_formula(self):
        assert convert_insert_value({"formula": "e=mc^2"}) == InsertDataQuill(DataType.FORMULA, "e=mc^2")

    def test_custom(self):
        assert convert_insert_value({"chart": {"id": 3}}) == InsertDataCustom("chart", {"id": 3})

    def test_empty_mapping(self):
        assert convert_insert_value({}) is None

    def test_custom_url_sanitizer(self):
        options = SanitizeOptions(url_sanitizer=lambda url: "https://proxy.example/?u=1")
        assert convert_insert_value({"image": "a.png"}, options).value == "https://proxy.example/?u=1"


@pytest.mark.unit
class TestParseDelta:
    """Tests for parse_delta."""

    def test_accepts_ops_mapping(self):
        ops = parse_delta({"ops": [{"insert": "hi\n"}]})
        assert ops == (DeltaInsertOp.text("hi"), DeltaInsertOp.text("\n"))

    def test_accepts_list(self):
        assert parse_delta([{"insert": "hi"}]) == (DeltaInsertOp.text("hi"),)

    def test_drops_malformed_ops(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="delta2html"):
            ops = parse_delta([{"insert": "ok"}, {"retain": 1}, "junk", {"insert": {}}])
        assert ops == (DeltaInsertOp.text("ok"),)
        assert "Dropped 3" in caplog.text

    def test_sanitizes_attributes(self):
        (op,) = parse_delta([{"insert": "x", "attributes": {"bold": 1, "color": "url(evil)", "header": "2"}}])
        assert dict(op.attributes) == {"bold": True, "header": 2}

    def test_missing_ops_list_raises(self):
        with pytest.raises(ParsingError):
            parse_delta({"ops": "nope"})

    def test_wrong_type_raises(self):
        with pytest.raises(ParsingError):
            parse_delta(42)

    def test_result_is_immutable_sequence(self):
        assert isinstance(parse_delta([]), tuple)


@pytest.mark.unit
class TestLoadDeltaJson:
    """Tests for JSON decoding."""

    def test_valid(self):
        assert load_delta_json('{"ops": []}') == {"ops": []}

    def test_invalid(self):
        with pytest.raises(ParsingError) as exc_info:
            load_delta_json("{not json")
        assert exc_info.value.original_error is not None
