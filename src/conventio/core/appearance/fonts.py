"""
Standard PDF fonts and text measurement.

Fields are drawn with one of the base-14 fonts, referenced by name and
encoded with WinAnsiEncoding, so nothing has to be embedded in the
output.  Widths come from the Adobe Font Metrics (AFM) files and are in
1/1000 of the font size.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

_logger = logging.getLogger(__name__)

# ── WinAnsiEncoding ───────────────────────────────────────────────────

# Codes 128-159 differ from Latin-1; everything else maps to itself.
_WIN_ANSI_HIGH: dict[int, int] = {
    0x20AC: 128,  # euro
    0x201A: 130,
    0x0192: 131,
    0x201E: 132,
    0x2026: 133,  # ellipsis
    0x2020: 134,
    0x2021: 135,
    0x02C6: 136,
    0x2030: 137,
    0x0160: 138,
    0x2039: 139,
    0x0152: 140,
    0x017D: 142,
    0x2018: 145,
    0x2019: 146,  # right single quote (French apostrophe)
    0x201C: 147,
    0x201D: 148,
    0x2022: 149,  # bullet
    0x2013: 150,
    0x2014: 151,
    0x02DC: 152,
    0x2122: 153,
    0x0161: 154,
    0x203A: 155,
    0x0153: 156,
    0x017E: 158,
    0x0178: 159,
}

_REPLACEMENT_CODE = ord("?")


def winansi_code(char: str) -> int | None:
    """Return the WinAnsiEncoding byte for a character, or None if unmappable."""
    cp = ord(char)
    if 0x20 <= cp < 0x7F or 0xA0 <= cp <= 0xFF:
        return cp
    return _WIN_ANSI_HIGH.get(cp)


# ── Glyph widths ──────────────────────────────────────────────────────

_HELVETICA_ASCII = (
    # 32-63:  space ! " # $ % & ' ( ) * + , - . / 0-9 : ; < = > ?
    278, 278, 355, 556, 556, 889, 667, 191, 333, 333, 389, 584, 278, 333, 278, 278,
    556, 556, 556, 556, 556, 556, 556, 556, 556, 556, 278, 278, 584, 584, 584, 556,
    # 64-95:  @ A-Z [ \ ] ^ _
    1015, 667, 667, 722, 722, 667, 611, 778, 722, 278, 500, 667, 556, 833, 722, 778,
    667, 778, 722, 667, 611, 722, 667, 944, 667, 667, 611, 278, 278, 278, 469, 556,
    # 96-126: ` a-z { | } ~
    333, 556, 556, 500, 556, 556, 278, 556, 556, 222, 222, 500, 222, 833, 556, 556,
    556, 556, 333, 500, 278, 556, 500, 722, 500, 500, 500, 334, 260, 334, 584,
)  # fmt: skip

_HELVETICA_HIGH = {
    128: 556, 130: 222, 131: 556, 132: 333, 133: 1000, 134: 556, 135: 556, 136: 333,
    137: 1000, 138: 667, 139: 333, 140: 1000, 142: 611, 145: 222, 146: 222, 147: 333,
    148: 333, 149: 350, 150: 556, 151: 1000, 152: 333, 153: 1000, 154: 500, 155: 333,
    156: 944, 158: 500, 159: 667,
}  # fmt: skip

_HELVETICA_LATIN1 = (
    # 160-191
    278, 333, 556, 556, 556, 556, 260, 556, 333, 737, 370, 556, 584, 333, 737, 333,
    400, 584, 333, 333, 333, 556, 537, 278, 333, 333, 365, 556, 834, 834, 834, 611,
    # 192-223: À-ß
    667, 667, 667, 667, 667, 667, 1000, 722, 667, 667, 667, 667, 278, 278, 278, 278,
    722, 722, 778, 778, 778, 778, 778, 584, 778, 722, 722, 722, 722, 667, 667, 611,
    # 224-255: à-ÿ
    556, 556, 556, 556, 556, 556, 889, 500, 556, 556, 556, 556, 278, 278, 278, 278,
    556, 556, 556, 556, 556, 556, 556, 584, 611, 556, 556, 556, 556, 500, 556, 500,
)  # fmt: skip


def _helvetica_widths() -> dict[int, int]:
    widths = {32 + i: w for i, w in enumerate(_HELVETICA_ASCII)}
    widths.update(_HELVETICA_HIGH)
    widths.update({160 + i: w for i, w in enumerate(_HELVETICA_LATIN1)})
    return widths


def _courier_widths() -> dict[int, int]:
    codes = [*range(32, 127), *_HELVETICA_HIGH, *range(160, 256)]
    return dict.fromkeys(codes, 600)


# ── Font ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Font:
    """A base-14 PDF font with its WinAnsi glyph widths.

    Attributes:
        key: Registry key, e.g. "helvetica".
        base_font: PDF /BaseFont name, e.g. "Helvetica".
        widths: WinAnsi code -> advance width (1/1000 em).
        missing_width: Width used for codes absent from ``widths``.
    """

    key: str
    base_font: str
    widths: Mapping[int, int] = field(repr=False)
    missing_width: int = 0

    def encode(self, text: str) -> bytes:
        """Encode text as WinAnsi bytes, replacing unmappable characters with '?'.

        Logs a warning when characters are replaced, as this indicates
        data loss in the PDF output.
        """
        out = bytearray()
        replaced = 0
        for char in text:
            code = winansi_code(char)
            if code is None:
                code = _REPLACEMENT_CODE
                replaced += 1
            out.append(code)
        if replaced:
            _logger.warning(
                "%d character(s) not representable in %s replaced with '?' in: %r",
                replaced,
                self.base_font,
                text,
            )
        return bytes(out)

    def text_width(self, text: str, font_size: float) -> float:
        """Width of ``text`` in PDF points at ``font_size``."""
        if not text:
            return 0.0
        units = 0
        for char in text:
            code = winansi_code(char)
            if code is None:
                code = _REPLACEMENT_CODE
            units += self.widths.get(code, self.missing_width)
        return units * font_size / 1000.0

    def pdf_escape(self, text: str) -> str:
        """Encode text as an ASCII-only PDF literal string, e.g. ``(caf\\351)``."""
        parts: list[str] = ["("]
        for code in self.encode(text):
            if code in (0x28, 0x29, 0x5C):  # ( ) backslash
                parts.append("\\" + chr(code))
            elif 0x20 <= code < 0x7F:
                parts.append(chr(code))
            else:
                parts.append(f"\\{code:03o}")
        parts.append(")")
        return "".join(parts)


HELVETICA = Font(
    key="helvetica",
    base_font="Helvetica",
    widths=MappingProxyType(_helvetica_widths()),
    missing_width=278,
)

COURIER = Font(
    key="courier",
    base_font="Courier",
    widths=MappingProxyType(_courier_widths()),
    missing_width=600,
)

_FONTS: dict[str, Font] = {f.key: f for f in (HELVETICA, COURIER)}

AVAILABLE_FONTS = tuple(_FONTS)
DEFAULT_FONT = HELVETICA.key


def get_font(key: str | None = None) -> Font:
    """Look up a font by registry key (case-insensitive).

    Args:
        key: Registry key such as "helvetica". None selects the default.

    Raises:
        ValueError: If the key is unknown.
    """
    if key is None:
        return _FONTS[DEFAULT_FONT]
    font = _FONTS.get(key.strip().lower())
    if font is None:
        raise ValueError(f"Unknown font {key!r}. Available: {', '.join(AVAILABLE_FONTS)}")
    return font


def get_default_font() -> Font:
    return _FONTS[DEFAULT_FONT]


def text_width(text: str, font_size: float) -> float:
    """Measure text with the default font."""
    return get_default_font().text_width(text, font_size)
