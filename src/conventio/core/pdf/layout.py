"""
Field placement tables for fixed-layout templates.

A layout maps each field identifier to where its text goes on the
template: page, anchor, box height, font size, and how many lines it
may wrap to.  Coordinates are hand-tuned against one specific template
PDF and are measured top-down from the page's top-left corner, the way
they read in a PDF viewer.  A template change needs a matching layout
change.

Field order in a layout is the draw order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ...constants import DEFAULT_FONT_SIZE, DEFAULT_LAYOUT, LINE_GAP, SIGNATURE_DROP
from ...errors import LayoutError

__all__ = [
    "BUILTIN_LAYOUTS",
    "CONVENTION_LAYOUT",
    "FieldSpec",
    "ImagePlacement",
    "TemplateLayout",
    "get_layout",
]


@dataclass(frozen=True)
class FieldSpec:
    """Geometry and formatting for one template field.

    Attributes:
        page_index: 0-based page the field is drawn on.
        anchor_x: Left edge of the text, in points from the page's left edge.
        anchor_top: Top of the field box, in points from the page's top edge.
        box_height: Height of one line's box in points.
        font_size: Font size in points.
        max_width: Wrap width in points. None means up to the right margin.
        clear_width: Width of the white-out rectangle. None means up to
            the right margin.
        line_height: Distance between baselines. None means
            ``font_size + 2``.
        max_lines: Maximum number of wrapped lines (at least 1).
    """

    page_index: int
    anchor_x: float
    anchor_top: float
    box_height: float
    font_size: float = DEFAULT_FONT_SIZE
    max_width: float | None = None
    clear_width: float | None = None
    line_height: float | None = None
    max_lines: int = 1

    @property
    def leading(self) -> float:
        """Effective distance between baselines."""
        if self.line_height is not None:
            return self.line_height
        return self.font_size + LINE_GAP

    def check(self, field_id: str, page_count: int) -> None:
        """Raise LayoutError if this spec cannot be drawn on a ``page_count``-page template."""
        if not 0 <= self.page_index < page_count:
            raise LayoutError(
                f"Field {field_id!r}: page {self.page_index} out of range "
                f"(template has {page_count} page(s), 0-based)"
            )
        if self.max_lines < 1:
            raise LayoutError(f"Field {field_id!r}: max_lines must be at least 1")
        if self.font_size <= 0 or self.box_height <= 0:
            raise LayoutError(
                f"Field {field_id!r}: invalid size "
                f"(font {self.font_size:.1f} pt, box {self.box_height:.1f} pt)"
            )
        for name, value in (("max_width", self.max_width), ("clear_width", self.clear_width)):
            if value is not None and value <= 0:
                raise LayoutError(f"Field {field_id!r}: {name} must be positive, got {value}")


@dataclass(frozen=True)
class ImagePlacement:
    """Where the signature image goes.

    Height is not stored: it follows from ``target_width`` and the
    image's aspect ratio.

    Attributes:
        page_index: 0-based page.
        anchor_x: Left edge in points from the page's left edge.
        anchor_top: Reference line in points from the page's top edge.
        target_width: Drawn width in points.
        drop: Extra distance below ``anchor_top`` for the image's top edge.
    """

    page_index: int
    anchor_x: float
    anchor_top: float
    target_width: float
    drop: float = SIGNATURE_DROP

    def check(self, page_count: int) -> None:
        if not 0 <= self.page_index < page_count:
            raise LayoutError(
                f"Signature: page {self.page_index} out of range "
                f"(template has {page_count} page(s), 0-based)"
            )
        if self.target_width <= 0:
            raise LayoutError(f"Signature: target width must be positive, got {self.target_width}")


@dataclass(frozen=True)
class TemplateLayout:
    """Complete placement table for one template."""

    name: str
    fields: Mapping[str, FieldSpec]
    signature: ImagePlacement | None = None
    description: str = ""

    @property
    def field_ids(self) -> tuple[str, ...]:
        return tuple(self.fields)

    @property
    def required_pages(self) -> int:
        """Minimum page count a template needs for this layout."""
        indices = [spec.page_index for spec in self.fields.values()]
        if self.signature is not None:
            indices.append(self.signature.page_index)
        return max(indices, default=-1) + 1

    def spec_for(self, field_id: str) -> FieldSpec:
        """Exact-key lookup; an unknown identifier is a programming error."""
        try:
            return self.fields[field_id]
        except KeyError:
            raise LayoutError(f"Layout {self.name!r} has no field {field_id!r}") from None

    def validate(self, page_count: int) -> None:
        """Check every entry against a template with ``page_count`` pages.

        Runs over the whole table before anything is drawn, so a bad
        entry fails the render up front rather than halfway through.

        Raises:
            LayoutError: On the first invalid entry.
        """
        if not self.fields:
            raise LayoutError(f"Layout {self.name!r} has no fields")
        for field_id, spec in self.fields.items():
            spec.check(field_id, page_count)
        if self.signature is not None:
            self.signature.check(page_count)


# ── Built-in layouts ────────────────────────────────────────────────

_WIDTH = 480.0
_BOX = 9.1
_LEFT = 42.52  # flush with the template's body text
_INDENT = 56.69  # bullet list indent

CONVENTION_LAYOUT = TemplateLayout(
    name="convention",
    description="Convention de formation professionnelle, 3 pages",
    fields=MappingProxyType(
        {
            # Page 1: parties and training
            "company_line": FieldSpec(
                0, _LEFT, 302.1, _BOX, max_width=_WIDTH, line_height=11, max_lines=2
            ),
            "representative_line": FieldSpec(0, _LEFT, 347.46, _BOX, max_width=_WIDTH),
            "training_line": FieldSpec(0, _LEFT, 503.36, _BOX, max_width=_WIDTH),
            "duration_line": FieldSpec(0, _INDENT, 681.95, _BOX, max_width=_WIDTH),
            "dates_line": FieldSpec(0, _INDENT, 704.62, _BOX, max_width=_WIDTH),
            "location_line": FieldSpec(0, _INDENT, 727.3, _BOX, max_width=_WIDTH),
            "instructor_line": FieldSpec(0, _INDENT, 749.98, _BOX, max_width=_WIDTH),
            # Page 2: participants, price, signatures
            "participants_line": FieldSpec(
                1, _INDENT, 75.33, _BOX, max_width=_WIDTH, line_height=11, max_lines=3
            ),
            "amount_ht_line": FieldSpec(1, _INDENT, 177.38, _BOX, max_width=_WIDTH),
            "tva_line": FieldSpec(1, _INDENT, 200.06, _BOX, max_width=_WIDTH),
            "amount_ttc_line": FieldSpec(1, _INDENT, 222.73, _BOX, max_width=_WIDTH),
            "closing_line": FieldSpec(1, _LEFT, 506.2, _BOX, max_width=_WIDTH),
            "client_name_line": FieldSpec(1, _LEFT, 560.06, _BOX, max_width=_WIDTH),
            "client_role_line": FieldSpec(1, _LEFT, 582.73, _BOX, max_width=_WIDTH),
        }
    ),
    # Page 3: organisation's signature
    signature=ImagePlacement(page_index=2, anchor_x=120, anchor_top=35.65, target_width=180),
)

BUILTIN_LAYOUTS: dict[str, TemplateLayout] = {
    CONVENTION_LAYOUT.name: CONVENTION_LAYOUT,
}


def get_layout(name: str | None = None) -> TemplateLayout:
    """Look up a built-in layout by name (default: the convention layout).

    Raises:
        LayoutError: If no such layout exists.
    """
    key = (name or DEFAULT_LAYOUT).strip().lower()
    layout = BUILTIN_LAYOUTS.get(key)
    if layout is None:
        raise LayoutError(f"Unknown layout {name!r}. Available: {', '.join(sorted(BUILTIN_LAYOUTS))}")
    return layout
