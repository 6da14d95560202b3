"""Shared test fixtures for the Conventio test suite."""

from __future__ import annotations

import io
from unittest.mock import patch

import pytest

A4 = (595.28, 841.89)


def make_pdf(pages=3, page_size=A4, content=None):
    """Build a template PDF with pikepdf; ``content`` is drawn on every page."""
    import pikepdf

    pdf = pikepdf.Pdf.new()
    for _ in range(pages):
        pdf.add_blank_page(page_size=page_size)
    if content is not None:
        for page in pdf.pages:
            page.obj.Contents = pdf.make_stream(content)
    buf = io.BytesIO()
    pdf.save(buf)
    return buf.getvalue()


def make_png(size=(400, 100), mode="RGBA", color=(0, 0, 128, 255)):
    from PIL import Image

    img = Image.new(mode, size, color)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def template_bytes():
    """A blank three-page A4 template."""
    return make_pdf()


@pytest.fixture
def printed_template_bytes():
    """A three-page A4 template whose pages already carry content."""
    return make_pdf(content=b"0.5 g 10 10 100 100 re f\n")


@pytest.fixture
def signature_png():
    """A 400x100 px RGBA signature."""
    return make_png()


@pytest.fixture
def details():
    return {
        "company_name": "Acme Formation",
        "company_address": "12 rue des Lilas, 75011 Paris",
        "representative_name": "Claire Martin",
        "representative_role": "Gérante",
        "training_name": "Sécurité incendie",
        "duration": "14 heures",
        "date_start": "02/03/2026",
        "date_end": "03/03/2026",
        "location": "Lyon",
        "instructor": "Paul Durand",
        "participants": "Alice Bernard, Bruno Petit",
        "amount_ht": "1 000,00",
        "amount_tva": "200,00",
        "amount_ttc": "1 200,00",
        "convention_date": "15/02/2026",
    }


@pytest.fixture
def request_lines(details):
    """A complete render request for the convention layout."""
    from conventio.core.fields import compose_lines

    return compose_lines(details)


@pytest.fixture
def config_dir(tmp_path):
    """Redirect config to a temp directory and clear asset env vars."""
    config_file = tmp_path / "config.json"
    with (
        patch("conventio.config._storage.CONFIG_DIR", tmp_path),
        patch("conventio.config._storage.CONFIG_FILE", config_file),
        patch.dict(
            "os.environ",
            {"CONVENTIO_TEMPLATE": "", "CONVENTIO_SIGNATURE": "", "CONVENTIO_OUTPUT_DIR": ""},
        ),
    ):
        yield tmp_path, config_file
