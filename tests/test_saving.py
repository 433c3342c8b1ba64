"""Tests for opening and saving documents."""

import os
import stat

import pytest

from late.cursor import Position
from late.document import Document
from late.errors import DocumentIOError, KeywordSourceError
from late.keywords import KeywordSource


@pytest.fixture
def keyword_dir(tmp_path):
    markup = tmp_path / "markup"
    markup.mkdir()
    (markup / "txt.txt").write_text("TODO\n\n   \nFIXME\n", encoding="utf-8")
    return markup


@pytest.fixture
def source(keyword_dir):
    return KeywordSource([keyword_dir])


def test_open_reads_rows_and_keywords(tmp_path, source):
    path = tmp_path / "notes.txt"
    path.write_text("first\nsecond TODO\nthird", encoding="utf-8")
    doc = Document.open(str(path), source)
    assert doc.lines() == ["first", "second TODO", "third"]
    assert doc.keywords == {"TODO", "FIXME"}
    assert doc.path == str(path)
    assert not doc.dirty


def test_open_missing_file_raises(tmp_path, source):
    with pytest.raises(DocumentIOError):
        Document.open(str(tmp_path / "missing.txt"), source)


def test_open_without_keyword_file_raises(tmp_path, source):
    path = tmp_path / "prog.zz"
    path.write_text("x", encoding="utf-8")
    with pytest.raises(KeywordSourceError):
        Document.open(str(path), source)


def test_open_file_without_extension_has_no_keywords(tmp_path, source):
    path = tmp_path / "README"
    path.write_text("plain", encoding="utf-8")
    doc = Document.open(str(path), source)
    assert doc.keywords == frozenset()
    assert doc.lines() == ["plain"]


def test_open_empty_file_has_no_rows(tmp_path, source):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    doc = Document.open(str(path), source)
    assert doc.is_empty()


def test_save_joins_rows_without_trailing_newline(tmp_path):
    path = tmp_path / "out.txt"
    doc = Document.from_lines(["a", "b", "c"])
    written = doc.save(str(path))
    assert path.read_bytes() == b"a\nb\nc"
    assert written == 5
    assert doc.path == str(path)


def test_save_uses_document_path(tmp_path):
    path = tmp_path / "own.txt"
    doc = Document.from_lines(["x"], path=str(path))
    doc.insert("y", Position(1, 0))
    assert doc.dirty
    doc.save()
    assert path.read_text(encoding="utf-8") == "xy"
    assert not doc.dirty


def test_save_without_path_raises():
    with pytest.raises(DocumentIOError):
        Document.from_lines(["x"]).save()


def test_save_open_round_trip(tmp_path, source):
    path = tmp_path / "round.txt"
    lines = ["café", "", "tab\there", "\U0001F1F3\U0001F1F4 TODO"]
    Document.from_lines(lines).save(str(path))
    assert Document.open(str(path), source).lines() == lines


def test_save_failure_keeps_document_and_file(tmp_path):
    target = tmp_path / "missing_dir" / "out.txt"
    doc = Document.from_lines(["keep"])
    doc.insert("!", Position(4, 0))
    with pytest.raises(DocumentIOError):
        doc.save(str(target))
    assert doc.dirty
    assert doc.path is None
    assert not target.exists()


@pytest.mark.skipif(os.geteuid() == 0, reason="root ignores directory permissions")
def test_save_to_read_only_directory_leaves_no_temp_files(tmp_path):
    read_only = tmp_path / "ro"
    read_only.mkdir()
    read_only.chmod(stat.S_IRUSR | stat.S_IXUSR)
    try:
        with pytest.raises(DocumentIOError):
            Document.from_lines(["x"]).save(str(read_only / "out.txt"))
        assert os.listdir(read_only) == []
    finally:
        read_only.chmod(stat.S_IRWXU)


def test_save_replaces_existing_file(tmp_path):
    path = tmp_path / "existing.txt"
    path.write_text("old content\nmore", encoding="utf-8")
    Document.from_lines(["new"]).save(str(path))
    assert path.read_text(encoding="utf-8") == "new"
    assert sorted(os.listdir(tmp_path)) == ["existing.txt"]
