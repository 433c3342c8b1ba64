"""Tests for document-level insert, delete, split and merge."""

import pytest

from late.cursor import Position
from late.document import Document, split_lines, file_extension
from late.row import Row


def make_doc(*lines):
    return Document.from_lines(list(lines))


def test_empty_document():
    doc = Document()
    assert len(doc) == 0
    assert doc.is_empty()
    assert doc.row(0) is None
    assert doc.file_name == "[No Name]"


def test_row_lookup_out_of_range():
    doc = make_doc("a", "b")
    assert doc.row(1) == Row("b")
    assert doc.row(2) is None
    assert doc.row(-1) is None


def test_newline_splits_row():
    doc = make_doc("abcdef")
    doc.insert("\n", Position(column=3, row=0))
    assert doc.lines() == ["abc", "def"]


def test_newline_at_start_and_end_of_row():
    doc = make_doc("abc")
    doc.insert("\n", Position(column=0, row=0))
    assert doc.lines() == ["", "abc"]

    doc = make_doc("abc")
    doc.insert("\n", Position(column=3, row=0))
    assert doc.lines() == ["abc", ""]


def test_newline_past_last_row_appends_one_empty_row():
    doc = make_doc("abc", "def")
    doc.insert("\n", Position(column=5, row=2))
    assert doc.lines() == ["abc", "def", ""]
    assert len(doc) == 3


def test_newline_in_empty_document():
    doc = Document()
    doc.insert("\n", Position(0, 0))
    assert doc.lines() == [""]


def test_insert_beyond_end_is_noop():
    doc = make_doc("abc")
    doc.insert("\n", Position(0, 5))
    doc.insert("x", Position(0, 5))
    assert doc.lines() == ["abc"]
    assert not doc.dirty


def test_insert_character_into_row():
    doc = make_doc("ab", "cd")
    doc.insert("x", Position(column=1, row=1))
    assert doc.lines() == ["ab", "cxd"]
    assert doc.dirty


def test_insert_character_at_end_creates_row():
    doc = make_doc("ab")
    doc.insert("x", Position(column=0, row=1))
    assert doc.lines() == ["ab", "x"]

    doc = Document()
    doc.insert("y", Position(0, 0))
    assert doc.lines() == ["y"]


def test_delete_within_row():
    doc = make_doc("abc")
    doc.delete(Position(column=1, row=0))
    assert doc.lines() == ["ac"]


def test_delete_at_end_of_row_merges_next():
    doc = make_doc("abc", "def")
    doc.delete(Position(column=3, row=0))
    assert doc.lines() == ["abcdef"]
    assert doc.row(0).length == 6


def test_merge_decreases_length_by_one():
    doc = make_doc("one", "two", "three")
    doc.delete(Position(column=3, row=1))
    assert len(doc) == 2
    assert doc.lines() == ["one", "twothree"]


def test_delete_at_end_of_last_row_is_noop():
    doc = make_doc("abc", "def")
    doc.delete(Position(column=3, row=1))
    assert doc.lines() == ["abc", "def"]
    assert not doc.dirty


@pytest.mark.parametrize("pos", [Position(0, 2), Position(0, 10), Position(9, 1)])
def test_delete_out_of_range_is_noop(pos):
    doc = make_doc("abc", "def")
    doc.delete(pos)
    assert doc.lines() == ["abc", "def"]


def test_delete_grapheme_cluster():
    doc = make_doc("aéb")
    doc.delete(Position(column=1, row=0))
    assert doc.lines() == ["ab"]


def test_split_and_merge_restore_rows():
    doc = make_doc("hello world", "next")
    doc.insert("\n", Position(column=5, row=0))
    assert doc.lines() == ["hello", " world", "next"]
    doc.delete(Position(column=5, row=0))
    assert doc.lines() == ["hello world", "next"]


def test_to_text_has_no_trailing_newline():
    assert make_doc("a", "b", "").to_text() == "a\nb\n"
    assert make_doc("a", "b").to_text() == "a\nb"
    assert Document().to_text() == ""


def test_iteration_yields_rows():
    doc = make_doc("a", "b")
    assert [row.text for row in doc] == ["a", "b"]


def test_split_lines():
    assert split_lines("") == []
    assert split_lines("abc") == ["abc"]
    assert split_lines("abc\n") == ["abc"]
    assert split_lines("a\n\nb") == ["a", "", "b"]
    assert split_lines("a\n\n") == ["a", ""]
    assert split_lines("a\r\nb\r\n") == ["a", "b"]


def test_file_extension():
    assert file_extension("src/main.rs") == "rs"
    assert file_extension("archive.tar.gz") == "gz"
    assert file_extension("Makefile") == ""
    assert file_extension("dir.d/notes") == ""
    assert file_extension(".bashrc") == ""


def test_insert_at_negative_row_is_ignored():
    doc = make_doc("abc", "def")
    doc.insert("x", Position(0, -1))
    doc.insert("\n", Position(1, -1))
    assert doc.lines() == ["abc", "def"]
    assert not doc.dirty


def test_delete_at_negative_position_is_ignored():
    doc = make_doc("abc", "def")
    doc.delete(Position(0, -1))
    doc.delete(Position(-1, 0))
    doc.delete(Position(-1, 1))
    assert doc.lines() == ["abc", "def"]
    assert not doc.dirty
