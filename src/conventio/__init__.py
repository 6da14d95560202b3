"""
conventio — Fill fixed-layout PDF contract templates.

Draws field text at hand-tuned positions on a pre-printed template,
wrapping and truncating it to each field's box, and places a signature
image.  Built for the "convention de formation" training agreement.
"""

from __future__ import annotations

from .api import fill_convention, render_convention
from .constants import __version__
from .core.appearance import get_font, text_width, wrap_text
from .core.fields import compose_lines
from .core.pdf import (
    CONVENTION_LAYOUT,
    FieldSpec,
    ImagePlacement,
    TemplateLayout,
    fill_template,
    get_layout,
)
from .errors import (
    ConfigError,
    ConventioError,
    ImageError,
    LayoutError,
    MissingFieldError,
    TemplateError,
)

__all__ = [
    "CONVENTION_LAYOUT",
    "ConfigError",
    "ConventioError",
    "FieldSpec",
    "ImageError",
    "ImagePlacement",
    "LayoutError",
    "MissingFieldError",
    "TemplateError",
    "TemplateLayout",
    "__version__",
    "compose_lines",
    "fill_convention",
    "fill_template",
    "get_font",
    "get_layout",
    "render_convention",
    "text_width",
    "wrap_text",
]
