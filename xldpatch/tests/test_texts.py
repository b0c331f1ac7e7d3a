# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from xldpatch.log import PatchFormatError
from xldpatch.patch_format import PatchRangeError
from xldpatch.texts import (
    parse_text_table, serialize_text_table, make_text_edits, iter_text_edits,
    patch_texts, patch_text_table,
)

from .utils import text_table_bytes


def test_parse_empty():
    assert parse_text_table(b"") == []
    assert parse_text_table(b"\x00\x00") == []


def test_parse_strips_padding():
    data = text_table_bytes([b"one\0", b"two\0\0\0", b"\0", b"four"])
    assert parse_text_table(data) == ["one", "two", "", "four"]


def test_serialize_terminates_every_entry():
    data = serialize_text_table(["ab", ""])
    assert data == text_table_bytes([b"ab\0", b"\0"])
    assert parse_text_table(data) == ["ab", ""]


def test_code_page():
    data = serialize_text_table(["Straße"], encoding="cp850")
    assert data == text_table_bytes([b"Stra\xe1e\0"])
    assert parse_text_table(data, encoding="cp850") == ["Straße"]


@pytest.mark.parametrize("data", [
    b"\x01",
    b"\x02\x00\x03\x00",
    text_table_bytes([b"abc\0"])[:-1],
])
def test_parse_truncated(data):
    with pytest.raises(PatchFormatError):
        parse_text_table(data)


def test_make_text_edits_layout():
    script = make_text_edits([(3, "hi"), (0, "")])
    assert script == (
        b"\x02\x00" + b"\x04\x00" + b"\x02\x00" +
        b"\x03\x00hi" + b"\x00\x00"
    )
    assert list(iter_text_edits(script)) == [(3, "hi"), (0, "")]


def test_make_text_edits_sorts_mappings():
    assert list(iter_text_edits(make_text_edits({5: "b", 1: "a"}))) == [(1, "a"), (5, "b")]


def test_make_text_edits_range():
    with pytest.raises(PatchRangeError):
        make_text_edits([(-1, "x")])
    with pytest.raises(PatchRangeError):
        make_text_edits([(0x10000, "x")])


def test_edit_text_strips_trailing_nulls():
    script = b"\x01\x00\x06\x00\x00\x00ab\0\0"
    assert list(iter_text_edits(script)) == [(0, "ab")]


def test_edit_length_below_index_size():
    with pytest.raises(PatchRangeError):
        list(iter_text_edits(b"\x01\x00\x01\x00\x00"))


def test_edit_script_truncated():
    script = make_text_edits([(1, "hello")])
    with pytest.raises(PatchFormatError):
        list(iter_text_edits(script[:-2]))
    with pytest.raises(PatchFormatError):
        list(iter_text_edits(script[:3]))


def test_patch_texts_overwrites():
    texts = ["a", "b", "c"]
    assert patch_texts(texts, make_text_edits({1: "B"})) == ["a", "B", "c"]
    assert texts == ["a", "b", "c"]


def test_patch_texts_later_edits_win():
    script = make_text_edits([(0, "x"), (0, "y")])
    assert patch_texts(["a"], script) == ["y"]


def test_text_table_growth():
    data = patch_text_table(b"", make_text_edits({3: "fourth"}))
    assert parse_text_table(data) == ["", "", "", "fourth"]


def test_text_table_growth_keeps_existing():
    base = serialize_text_table(["zero"])
    data = patch_text_table(base, make_text_edits({2: "two"}))
    assert parse_text_table(data) == ["zero", "", "two"]


def test_zero_length_edit_clears_entry():
    base = serialize_text_table(["zero", "one"])
    data = patch_text_table(base, make_text_edits({1: ""}))
    assert parse_text_table(data) == ["zero", ""]


def test_undecodable_edit_text():
    script = b"\x01\x00\x04\x00\x00\x00\xff\xfe"
    with pytest.raises(PatchFormatError) as excinfo:
        patch_text_table(b"", script, encoding="utf-8")
    assert "Text edit 0 is not valid utf-8" in str(excinfo.value)


def test_undecodable_table_entry():
    data = text_table_bytes([b"ok\0", b"\xff\0"])
    with pytest.raises(PatchFormatError) as excinfo:
        parse_text_table(data, encoding="utf-8")
    assert "Text table entry 1" in str(excinfo.value)
