"""Tests for conventio.core.appearance.stream -- content-stream operators."""

from __future__ import annotations

from conventio.core.appearance.fonts import HELVETICA
from conventio.core.appearance.stream import build_clear_ops, build_image_ops, build_text_ops
from conventio.core.pdf.position import Rect


def test_clear_ops_paint_white():
    ops = build_clear_ops(Rect(55.69, 631.73, 498.59, 11.1))
    assert ops == ["q", "1 1 1 rg", "55.69 631.73 498.59 11.10 re", "f", "Q"]


def test_text_ops_single_line():
    ops = build_text_ops(["Bonjour"], 42.52, 531.69, 11, "/F1", 9, HELVETICA)
    assert ops == [
        "BT",
        "0 0 0 rg",
        "/F1 9.000 Tf",
        "42.52 531.69 Td",
        "(Bonjour) Tj",
        "ET",
    ]


def test_text_ops_lines_step_down_by_leading():
    ops = build_text_ops(["un", "deux", "trois"], 10, 500, 11, "/F1", 9, HELVETICA)
    assert ops[4:] == [
        "(un) Tj",
        "0 -11.00 Td",
        "(deux) Tj",
        "0 -11.00 Td",
        "(trois) Tj",
        "ET",
    ]


def test_text_ops_escape_text():
    ops = build_text_ops(["Durée (2 j)"], 10, 500, 11, "/F1", 9, HELVETICA)
    assert "(Dur\\351e \\(2 j\\)) Tj" in ops


def test_text_ops_empty():
    assert build_text_ops([], 10, 500, 11, "/F1", 9, HELVETICA) == []


def test_image_ops():
    ops = build_image_ops("/Im0", 120, 755.24, 180, 45)
    assert ops == ["q", "180.00 0 0 45.00 120.00 755.24 cm", "/Im0 Do", "Q"]
