"""Tests for the records module."""

import pytest

from shell_split_mcp.records import (
    CommandRecord,
    ControlOperator,
    Cursor,
    RedirectionKind,
    Span,
)
from shell_split_mcp.splitter import split_next_command


def test_span_text_and_length():
    span = Span("echo hello", 5, 10)

    assert span.text == "hello"
    assert str(span) == "hello"
    assert len(span) == 5
    assert not span.is_empty


def test_empty_span():
    span = Span.empty("echo", 4)

    assert span.is_empty
    assert span.text == ""


@pytest.mark.parametrize("begin,end", [(-1, 2), (3, 2), (0, 5)])
def test_span_bounds_are_checked(begin, end):
    with pytest.raises(ValueError):
        Span("abcd", begin, end)


def test_enums_are_distinct():
    assert RedirectionKind.NONE != ControlOperator.NONE
    assert RedirectionKind.OUT_APPEND.value == ">>"
    assert ControlOperator.OR.value == "||"


def test_record_to_dict():
    record = split_next_command("sort -r < in.txt | uniq", Cursor())

    assert record.to_dict() == {
        "text": "sort -r < in.txt",
        "command": {"text": "sort", "begin": 0, "end": 4},
        "parameters": {"text": "-r", "begin": 5, "end": 7},
        "redirection": {
            "kind": "in",
            "symbol": "<",
            "target": {"text": "in.txt", "begin": 10, "end": 16},
        },
        "operator": {"kind": "pipe", "symbol": "|"},
    }


def test_record_to_dict_without_operators():
    record = split_next_command("true", Cursor())
    data = record.to_dict()

    assert data["redirection"]["kind"] == "none"
    assert data["redirection"]["symbol"] is None
    assert data["operator"] == {"kind": "none", "symbol": None}


def test_record_flags():
    empty = Span.empty("", 0)
    record = CommandRecord(empty, empty, RedirectionKind.NONE, empty, ControlOperator.NONE, empty)

    assert record.is_empty
    assert not record.has_redirection


def test_cursor_lifecycle():
    cursor = Cursor()
    assert not cursor.is_bound
    assert cursor.at_end
    assert repr(cursor) == "Cursor(unbound)"

    cursor.bind("ls ; pwd")
    assert cursor.is_bound
    assert cursor.offset == 0
    assert not cursor.at_end

    cursor.advance_to(8)
    assert cursor.at_end
    assert repr(cursor) == "Cursor(offset=8, length=8)"


def test_cursor_rejects_offsets_outside_buffer():
    cursor = Cursor()
    with pytest.raises(ValueError):
        cursor.advance_to(0)

    cursor.bind("ls")
    with pytest.raises(ValueError):
        cursor.advance_to(3)
