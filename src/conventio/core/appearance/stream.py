"""
PDF content-stream operators for filled template fields.

Each builder returns a list of operator lines; the document joins them
and appends the result to the target page.  Coordinates are PDF user
space (origin bottom-left, points).

A filled field is two blocks:

  q 1 1 1 rg  x y w h re f  Q       opaque white over the template area
  BT /F1 9 Tf  x y Td (line 1) Tj
     0 -11 Td (line 2) Tj  ET       the wrapped text, solid black
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..pdf.position import Rect
    from .fonts import Font

__all__ = ["build_clear_ops", "build_image_ops", "build_text_ops"]

_WHITE = "1 1 1"
_BLACK = "0 0 0"


def build_clear_ops(rect: Rect) -> list[str]:
    """Paint ``rect`` opaque white, hiding whatever the template printed there."""
    return [
        "q",
        f"{_WHITE} rg",
        f"{rect.x:.2f} {rect.y:.2f} {rect.width:.2f} {rect.height:.2f} re",
        "f",
        "Q",
    ]


def build_text_ops(
    lines: list[str],
    x: float,
    baseline: float,
    leading: float,
    font_name: str,
    font_size: float,
    font: Font,
) -> list[str]:
    """Draw ``lines`` left-aligned at ``x``, the first on ``baseline``.

    Each following line sits ``leading`` points lower.  Returns an empty
    list when there is nothing to draw.
    """
    if not lines:
        return []

    ops = [
        "BT",
        f"{_BLACK} rg",
        f"{font_name} {font_size:.3f} Tf",
        f"{x:.2f} {baseline:.2f} Td",
    ]
    for i, line in enumerate(lines):
        if i > 0:
            ops.append(f"0 {-leading:.2f} Td")
        ops.append(f"{font.pdf_escape(line)} Tj")
    ops.append("ET")
    return ops


def build_image_ops(image_name: str, x: float, y: float, width: float, height: float) -> list[str]:
    """Draw an image XObject scaled into the ``width`` x ``height`` box at (x, y)."""
    return [
        "q",
        f"{width:.2f} 0 0 {height:.2f} {x:.2f} {y:.2f} cm",
        f"{image_name} Do",
        "Q",
    ]
