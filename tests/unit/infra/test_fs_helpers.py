from __future__ import annotations

"""
Unit tests for the FileSystem Infrastructure Layer.
"""

import os

import pytest

from ssinject.infra.fs import (
    ensure_parent_dir,
    mirror_output_path,
    normalize_path,
    read_document,
    safe_mkdir,
    write_document,
)


def test_normalize_path_expands_user_and_falls_back(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    assert normalize_path("~/site", "/unused") == os.path.join(str(tmp_path), "site")
    assert normalize_path("", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)


def test_normalize_path_keeps_spaces_and_dollar_signs(tmp_path, monkeypatch):
    monkeypatch.setenv("NAME", "expanded")

    assert normalize_path(str(tmp_path / " site "), "/unused") == str(tmp_path) + "/ site "
    assert normalize_path(str(tmp_path / "$NAME"), "/unused") == str(tmp_path) + "/$NAME"


def test_mirror_output_path(tmp_path):
    src = tmp_path / "in"
    dst = tmp_path / "out"

    assert mirror_output_path(str(src / "index.html"), str(src), str(dst)) == str(dst / "index.html")
    assert mirror_output_path(str(src / "a" / "b.html"), str(src), str(dst)) == str(dst / "a" / "b.html")


def test_safe_mkdir_is_idempotent(tmp_path):
    target = tmp_path / "x" / "y"

    safe_mkdir(str(target))
    safe_mkdir(str(target))

    assert target.is_dir()


def test_safe_mkdir_raises_when_a_file_is_in_the_way(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(OSError):
        safe_mkdir(str(blocker / "child"))


def test_ensure_parent_dir_creates_ancestors(tmp_path):
    target = tmp_path / "deep" / "er" / "file.txt"

    ensure_parent_dir(str(target))

    assert target.parent.is_dir()
    assert not target.exists()


def test_write_then_read_preserves_newlines(tmp_path):
    target = tmp_path / "nested" / "doc.html"
    content = "line1\r\nline2\nline3\r"

    write_document(str(target), content)

    assert target.read_bytes() == content.encode("utf-8")
    assert read_document(str(target)) == content


def test_read_document_propagates_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_document(str(tmp_path / "missing.html"))
