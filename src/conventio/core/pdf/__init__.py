"""Template PDF handling: placement tables, geometry, drawing, and assembly."""

from .builder import check_request, fill_template
from .document import TemplateDocument
from .layout import (
    BUILTIN_LAYOUTS,
    CONVENTION_LAYOUT,
    FieldSpec,
    ImagePlacement,
    TemplateLayout,
    get_layout,
)
from .position import (
    Rect,
    compute_clear_rect,
    compute_image_size,
    default_width,
    get_page_dimensions,
    y_from_top,
)
from .render import place_image, render_field

__all__ = [
    "BUILTIN_LAYOUTS",
    "CONVENTION_LAYOUT",
    "FieldSpec",
    "ImagePlacement",
    "Rect",
    "TemplateDocument",
    "TemplateLayout",
    "check_request",
    "compute_clear_rect",
    "compute_image_size",
    "default_width",
    "fill_template",
    "get_layout",
    "get_page_dimensions",
    "place_image",
    "render_field",
    "y_from_top",
]
