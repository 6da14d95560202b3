"""Tests for conventio.ui.helpers -- CLI input/output helpers."""

from __future__ import annotations

import pytest

from conventio.ui.helpers import (
    atomic_write,
    default_output_name,
    format_size_kb,
    load_json_object,
    safe_read_file,
)


def test_format_size_kb():
    assert format_size_kb(2048) == "2.0 KB"
    assert format_size_kb(1536) == "1.5 KB"


@pytest.mark.parametrize(
    ("company", "expected"),
    [
        ("Acme Formation", "convention-acme-formation.pdf"),
        ("  Acme   Formation ", "convention-acme-formation.pdf"),
        ("A/B", "convention-a-b.pdf"),
        ("", "convention.pdf"),
        (None, "convention.pdf"),
    ],
)
def test_default_output_name(company, expected):
    assert default_output_name(company) == expected


def test_safe_read_file(tmp_path):
    path = tmp_path / "x.bin"
    path.write_bytes(b"data")
    assert safe_read_file(path) == b"data"


def test_safe_read_file_missing(tmp_path, capsys):
    assert safe_read_file(tmp_path / "nope", "template") is None
    assert "template not found" in capsys.readouterr().err


def test_load_json_object(tmp_path):
    path = tmp_path / "d.json"
    path.write_text('{"a": 1}', encoding="utf-8")
    assert load_json_object(path) == {"a": 1}


def test_load_json_object_invalid(tmp_path, capsys):
    path = tmp_path / "d.json"
    path.write_text("{oops", encoding="utf-8")
    assert load_json_object(path) is None
    assert "not valid JSON" in capsys.readouterr().err


def test_load_json_object_not_object(tmp_path, capsys):
    path = tmp_path / "d.json"
    path.write_text("[]", encoding="utf-8")
    assert load_json_object(path) is None
    assert "JSON object" in capsys.readouterr().err


def test_atomic_write(tmp_path):
    path = tmp_path / "out.pdf"
    atomic_write(path, b"%PDF-1.7")
    assert path.read_bytes() == b"%PDF-1.7"
    assert list(tmp_path.iterdir()) == [path]


def test_atomic_write_replaces(tmp_path):
    path = tmp_path / "out.pdf"
    path.write_bytes(b"old")
    atomic_write(path, b"new")
    assert path.read_bytes() == b"new"
