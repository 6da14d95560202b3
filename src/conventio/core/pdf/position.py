"""
Page geometry helpers.

Layouts measure positions top-down from the page's top-left corner;
PDF user space runs bottom-up from the bottom-left.  These helpers do
the conversion and compute the rectangles drawn for each field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from ...constants import CLEAR_RIGHT_MARGIN
from ...errors import LayoutError, TemplateError

if TYPE_CHECKING:
    import pikepdf

    from .layout import FieldSpec


class Rect(NamedTuple):
    """Axis-aligned rectangle in PDF user space (origin bottom-left)."""

    x: float
    y: float
    width: float
    height: float


def y_from_top(page_height: float, top: float, height: float) -> float:
    """Bottom-up baseline for a box ``height`` tall whose top is ``top`` below the page top.

    >>> y_from_top(841.89, 302.1, 9.1)
    531.69
    """
    return round(page_height - top - height + 1, 6)


def default_width(page_width: float, anchor_x: float) -> float:
    """Width from ``anchor_x`` to the right margin."""
    return page_width - anchor_x - CLEAR_RIGHT_MARGIN


def compute_clear_rect(
    page_width: float,
    page_height: float,
    spec: FieldSpec,
    line_count: int,
) -> Rect:
    """Rectangle to paint white before drawing a field's text.

    Covers one box per wrapped line, plus a point of slack on each side.
    A field with no text still clears a single-line box, so stale
    template content never shows through an empty field.

    Args:
        page_width: Page width in PDF points.
        page_height: Page height in PDF points.
        spec: The field's placement.
        line_count: Number of wrapped lines that will be drawn.
    """
    lines = max(line_count, 1)
    width = spec.clear_width if spec.clear_width is not None else default_width(
        page_width, spec.anchor_x
    )
    height = spec.box_height + (lines - 1) * spec.leading + 2
    y = y_from_top(page_height, spec.anchor_top, spec.box_height) - 1
    return Rect(spec.anchor_x - 1, y, width, height)


def compute_image_size(pixel_width: int, pixel_height: int, target_width: float) -> tuple[float, float]:
    """Scale an image to ``target_width`` points, keeping its aspect ratio.

    >>> compute_image_size(400, 100, 180)
    (180.0, 45.0)

    Raises:
        LayoutError: If the target width is not positive.
        ValueError: If the pixel dimensions are not positive.
    """
    if target_width <= 0:
        raise LayoutError(f"Invalid image target width: {target_width:.1f} pt")
    if pixel_width <= 0 or pixel_height <= 0:
        raise ValueError(f"Invalid image dimensions: {pixel_width}x{pixel_height} px")
    scale = target_width / pixel_width
    return float(target_width), pixel_height * scale


def get_page_dimensions(pdf: pikepdf.Pdf, page_index: int) -> tuple[float, float]:
    """Get (width, height) of a page's MediaBox in PDF points.

    Drawing happens in unrotated user space, so /Rotate is ignored.

    Args:
        pdf: An open pikepdf.Pdf object.
        page_index: 0-based page index.

    Raises:
        LayoutError: If the page index is out of range.
        TemplateError: If the page has no usable MediaBox.
    """
    total = len(pdf.pages)
    if not 0 <= page_index < total:
        raise LayoutError(f"Page {page_index} out of range (PDF has {total} page(s), 0-based).")
    page = pdf.pages[page_index]

    box = page.mediabox
    # pikepdf Array supports indexing; extract 4 values explicitly
    x0, y0, x1, y1 = float(box[0]), float(box[1]), float(box[2]), float(box[3])
    w = abs(x1 - x0)
    h = abs(y1 - y0)
    if w <= 0 or h <= 0:
        raise TemplateError(f"Invalid page dimensions on page {page_index}: {w:.1f} x {h:.1f} pt")
    return w, h
