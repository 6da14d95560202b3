"""Field appearance: fonts, line wrapping, images, and content-stream operators."""

from .fonts import (
    AVAILABLE_FONTS,
    COURIER,
    DEFAULT_FONT,
    HELVETICA,
    Font,
    get_default_font,
    get_font,
    text_width,
    winansi_code,
)
from .image import SignatureImageData, load_signature_image
from .stream import build_clear_ops, build_image_ops, build_text_ops
from .wrap import Measure, WrappedText, truncate_line, wrap_lines, wrap_text

__all__ = [
    "AVAILABLE_FONTS",
    "COURIER",
    "DEFAULT_FONT",
    "HELVETICA",
    "Font",
    "Measure",
    "SignatureImageData",
    "WrappedText",
    "build_clear_ops",
    "build_image_ops",
    "build_text_ops",
    "get_default_font",
    "get_font",
    "load_signature_image",
    "text_width",
    "truncate_line",
    "winansi_code",
    "wrap_lines",
    "wrap_text",
]
