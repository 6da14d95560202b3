"""
Width-bounded line breaking for template fields.

A field box shows a fixed number of lines.  Text is broken greedily on
whitespace until the box is full; words that do not fit are dropped.
When that happens, or when the last line is a single word wider than
the box, the last line's final three characters are replaced with a
truncation marker.  The chopped line is not measured again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from ...constants import TRUNCATION_MARKER
from .fonts import text_width

__all__ = ["Measure", "WrappedText", "truncate_line", "wrap_lines", "wrap_text"]

Measure = Callable[[str, float], float]

# Characters removed from the last line before the marker
_TRUNCATE_CHARS = 3


class WrappedText(NamedTuple):
    """Lines for one field, and whether anything was cut to make them fit."""

    lines: list[str]
    truncated: bool


def truncate_line(line: str) -> str:
    """Chop the last characters of ``line`` and append the truncation marker."""
    return line[:-_TRUNCATE_CHARS].rstrip() + TRUNCATION_MARKER


def wrap_lines(
    text: str,
    font_size: float,
    max_width: float,
    max_lines: int = 1,
    measure: Measure = text_width,
) -> WrappedText:
    """Break ``text`` into at most ``max_lines`` lines no wider than ``max_width``.

    A word wider than ``max_width`` is never split: it is placed alone on
    its line.  That is the only way a line can exceed ``max_width``
    before the marker is applied.

    Args:
        text: Display text; runs of whitespace separate words.
        font_size: Font size in PDF points.
        max_width: Maximum line width in PDF points.
        max_lines: Maximum number of lines (at least 1).
        measure: ``(text, font_size) -> width`` function. Defaults to
            the default font's metrics.

    Returns:
        WrappedText; ``truncated`` is set when words were dropped or the
        last line was chopped.

    Raises:
        ValueError: If ``max_lines`` is less than 1.
    """
    if max_lines < 1:
        raise ValueError(f"max_lines must be at least 1, got {max_lines}")

    words = text.split()
    lines: list[str] = []
    current = ""
    dropped = False

    for word in words:
        candidate = f"{current} {word}" if current else word
        if not current or measure(candidate, font_size) <= max_width:
            current = candidate
            continue
        lines.append(current)
        if len(lines) == max_lines:
            # Box is full: this word and everything after it are lost
            current = ""
            dropped = True
            break
        current = word

    if current:
        lines.append(current)

    truncated = False
    if len(lines) == max_lines:
        last = lines[-1]
        if dropped or measure(last, font_size) > max_width:
            lines[-1] = truncate_line(last)
            truncated = True

    return WrappedText(lines, truncated)


def wrap_text(
    text: str,
    font_size: float,
    max_width: float,
    max_lines: int = 1,
    measure: Measure = text_width,
) -> list[str]:
    """Lines of :func:`wrap_lines`, without the truncation flag.

    Returns:
        Ordered lines; empty when ``text`` has no words.
    """
    return wrap_lines(text, font_size, max_width, max_lines, measure).lines
