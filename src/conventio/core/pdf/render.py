"""Per-field drawing: the region renderer and the image compositor.

These helpers are called by builder.py's orchestration layer, once per
field and once for the signature.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..appearance import (
    build_clear_ops,
    build_image_ops,
    build_text_ops,
    load_signature_image,
    wrap_lines,
)
from .position import Rect, compute_clear_rect, compute_image_size, default_width, y_from_top

if TYPE_CHECKING:
    from .document import TemplateDocument
    from .layout import FieldSpec, ImagePlacement

_logger = logging.getLogger(__name__)

__all__ = ["place_image", "render_field"]


def render_field(doc: TemplateDocument, spec: FieldSpec, text: str) -> list[str]:
    """Clear a field's box on the template and draw its wrapped text.

    Steps: resolve the page, wrap ``text`` to the field's width and line
    limit, paint the clearing rectangle white, then draw each line at
    the field's baseline, one leading lower per line.

    Calling this twice for the same field clears and redraws it; callers
    draw each field once.

    Args:
        doc: The open template.
        spec: Field placement.
        text: Display text; may be empty (the box is still cleared).

    Returns:
        The lines drawn.

    Raises:
        LayoutError: If the spec's page is out of range.
    """
    page_w, page_h = doc.page_size(spec.page_index)
    max_width = spec.max_width if spec.max_width is not None else default_width(
        page_w, spec.anchor_x
    )

    lines, truncated = wrap_lines(
        text, spec.font_size, max_width, spec.max_lines, measure=doc.font.text_width
    )
    if truncated:
        _logger.warning(
            "Text truncated to %d line(s) on page %d: %r", len(lines), spec.page_index, text
        )

    rect: Rect = compute_clear_rect(page_w, page_h, spec, len(lines))
    ops = build_clear_ops(rect)

    if lines:
        baseline = y_from_top(page_h, spec.anchor_top, spec.box_height)
        ops += build_text_ops(
            lines,
            x=spec.anchor_x,
            baseline=baseline,
            leading=spec.leading,
            font_name=doc.font_resource(spec.page_index),
            font_size=spec.font_size,
            font=doc.font,
        )

    doc.draw(spec.page_index, ops)
    _logger.debug(
        "Field on page %d at (%.2f, %.2f): %d line(s)",
        spec.page_index,
        rect.x,
        rect.y,
        len(lines),
    )
    return lines


def place_image(doc: TemplateDocument, image_bytes: bytes, placement: ImagePlacement) -> Rect:
    """Draw an image at a fixed anchor, scaled to the placement's width.

    Height follows from the image's aspect ratio.  Nothing is cleared
    underneath: the template area is expected to be blank.

    Returns:
        The rectangle the image occupies, in PDF user space.

    Raises:
        ImageError: If the bytes cannot be decoded.
        LayoutError: If the placement's page is out of range.
    """
    _page_w, page_h = doc.page_size(placement.page_index)
    image = load_signature_image(image_bytes)

    width, height = compute_image_size(image["width"], image["height"], placement.target_width)
    y = page_h - placement.anchor_top - height - placement.drop

    name = doc.image_resource(placement.page_index, image)
    doc.draw(placement.page_index, build_image_ops(name, placement.anchor_x, y, width, height))
    _logger.debug(
        "Image %dx%d px placed on page %d at (%.2f, %.2f), %.2f x %.2f pt",
        image["width"],
        image["height"],
        placement.page_index,
        placement.anchor_x,
        y,
        width,
        height,
    )
    return Rect(float(placement.anchor_x), y, width, height)
