"""
Application-wide constants for Conventio.

Rendering defaults, size limits, and environment variable names are
centralized here for easy maintenance and configuration.
"""

from __future__ import annotations

import importlib.metadata

try:
    __version__ = importlib.metadata.version("conventio")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "BYTES_PER_MB",
    "CLEAR_RIGHT_MARGIN",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_LAYOUT",
    "ENV_OUTPUT_DIR",
    "ENV_SIGNATURE",
    "ENV_TEMPLATE",
    "LINE_GAP",
    "PDF_MAGIC",
    "SIGNATURE_DROP",
    "TRUNCATION_MARKER",
    "__version__",
]

# ── Size units ────────────────────────────────────────────────────────

# Bytes per megabyte -- used for size limit formatting and calculations
BYTES_PER_MB = 1024 * 1024


# ── Text layout (PDF points) ──────────────────────────────────────────

# Font size used when a field does not set one
DEFAULT_FONT_SIZE = 9.0

# Default leading is font size plus this gap
LINE_GAP = 2.0

# Distance kept from the right page edge by the clearing rectangle,
# and by the wrap width when a field leaves it unset
CLEAR_RIGHT_MARGIN = 40.0

# Appended to the last line of a field whose content did not fit
TRUNCATION_MARKER = "..."


# ── Image placement ───────────────────────────────────────────────────

# The signature sits this far below its anchor (PDF points)
SIGNATURE_DROP = 6.0


# ── Environment variable names ──────────────────────────────────────

ENV_TEMPLATE = "CONVENTIO_TEMPLATE"
ENV_SIGNATURE = "CONVENTIO_SIGNATURE"
ENV_OUTPUT_DIR = "CONVENTIO_OUTPUT_DIR"


# ── Template defaults ───────────────────────────────────────────────

# Built-in layout used when none is requested
DEFAULT_LAYOUT = "convention"

# PDF file magic bytes
PDF_MAGIC = b"%PDF-"
