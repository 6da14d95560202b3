"""Tests for conventio.core.pdf.render -- field clearing, text drawing, image placement."""

from __future__ import annotations

import io
import logging

import pikepdf
import pytest

from conventio.core.appearance import text_width
from conventio.core.pdf.document import TemplateDocument
from conventio.core.pdf.layout import CONVENTION_LAYOUT, FieldSpec, ImagePlacement
from conventio.core.pdf.render import place_image, render_field
from conventio.errors import ImageError, LayoutError


def _page_content(pdf_bytes, page_index):
    with pikepdf.open(io.BytesIO(pdf_bytes)) as pdf:
        page = pdf.pages[page_index]
        page.contents_coalesce()
        return page.Contents.read_bytes().decode("latin-1")


def test_render_single_line_field(template_bytes):
    spec = CONVENTION_LAYOUT.spec_for("tva_line")
    with TemplateDocument.load(template_bytes) as doc:
        lines = render_field(doc, spec, "• TVA (20%) : 200,00 euros")
        out = doc.to_bytes()

    assert lines == ["• TVA (20%) : 200,00 euros"]
    content = _page_content(out, 1)
    assert "1 1 1 rg" in content
    assert "55.69 632.73 498.59 11.10 re" in content
    assert "56.69 633.73 Td" in content
    assert "(\\225 TVA \\(20%\\) : 200,00 euros) Tj" in content


def test_clear_drawn_before_text(template_bytes):
    spec = CONVENTION_LAYOUT.spec_for("training_line")
    with TemplateDocument.load(template_bytes) as doc:
        render_field(doc, spec, "Sécurité incendie")
        out = doc.to_bytes()
    content = _page_content(out, 0)
    assert content.index(" re") < content.index("BT")


def test_empty_text_clears_without_drawing(template_bytes):
    spec = CONVENTION_LAYOUT.spec_for("participants_line")
    with TemplateDocument.load(template_bytes) as doc:
        assert render_field(doc, spec, "") == []
        out = doc.to_bytes()

    content = _page_content(out, 1)
    assert " re" in content
    assert "BT" not in content
    assert "Tj" not in content


def test_multiline_field_steps_down(template_bytes):
    spec = FieldSpec(0, 50, 100, 9.1, max_width=60, line_height=11, max_lines=3)
    with TemplateDocument.load(template_bytes) as doc:
        lines = render_field(doc, spec, "premier second troisième")
        out = doc.to_bytes()

    assert len(lines) == 3
    content = _page_content(out, 0)
    assert content.count("0 -11.00 Td") == 2
    # Clearing rectangle covers all three lines
    assert f"{9.1 + 2 * 11 + 2:.2f} re" in content


def test_truncation_logged(template_bytes, caplog):
    spec = FieldSpec(0, 50, 100, 9.1, max_width=90)
    with TemplateDocument.load(template_bytes) as doc, caplog.at_level(logging.WARNING):
        lines = render_field(doc, spec, " ".join(["mot"] * 20))
    assert lines == ["mot mot mot mot..."]
    assert text_width(lines[0], 9) <= 90
    assert "truncated" in caplog.text


def test_forced_wide_word_logged(template_bytes, caplog):
    spec = FieldSpec(0, 50, 100, 9.1, max_width=20)
    with TemplateDocument.load(template_bytes) as doc, caplog.at_level(logging.WARNING):
        lines = render_field(doc, spec, "Anticonstitutionnellement")
    assert lines == ["Anticonstitutionnellem..."]
    assert "truncated" in caplog.text


def test_no_truncation_warning_for_fitting_text(template_bytes, caplog):
    spec = FieldSpec(0, 50, 100, 9.1, max_width=480)
    with TemplateDocument.load(template_bytes) as doc, caplog.at_level(logging.WARNING):
        render_field(doc, spec, "Bonjour  le monde")
    assert "truncated" not in caplog.text


def test_default_width_used_when_unset(template_bytes):
    spec = FieldSpec(0, 42.52, 100, 9.1)
    with TemplateDocument.load(template_bytes) as doc:
        lines = render_field(doc, spec, "Bonjour")
    assert lines == ["Bonjour"]


def test_render_field_page_out_of_range(template_bytes):
    with TemplateDocument.load(template_bytes) as doc, pytest.raises(LayoutError):
        render_field(doc, FieldSpec(5, 10, 10, 9.1), "x")


# ── place_image ───────────────────────────────────────────────────


def test_place_image_keeps_aspect_ratio(template_bytes, signature_png):
    placement = CONVENTION_LAYOUT.signature
    with TemplateDocument.load(template_bytes) as doc:
        rect = place_image(doc, signature_png, placement)
        out = doc.to_bytes()

    assert rect.width == 180
    assert rect.height == pytest.approx(45)
    assert rect.x == 120
    assert rect.y == pytest.approx(841.89 - 35.65 - 45 - 6)

    content = _page_content(out, 2)
    assert "180.00 0 0 45.00 120.00 755.24 cm" in content
    assert " Do" in content


def test_place_image_bad_bytes(template_bytes):
    placement = ImagePlacement(0, 10, 10, 100)
    with TemplateDocument.load(template_bytes) as doc, pytest.raises(ImageError):
        place_image(doc, b"not an image", placement)
