"""Core template filling: appearance primitives and PDF assembly."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import ConventioError

if TYPE_CHECKING:
    import types

__all__: list[str] = []


def require_pikepdf() -> types.ModuleType:
    """Import pikepdf on first use.

    Keeps ``conventio --help`` and the pure layout helpers free of the C
    extension's import cost.  pikepdf is still a hard dependency.
    """
    try:
        import pikepdf
    except ImportError as exc:
        raise ConventioError("Filling templates needs pikepdf: pip install pikepdf") from exc
    return pikepdf
