"""High-level convenience API for filling the convention template.

Provides :func:`render_convention` and :func:`fill_convention`, which
resolve the template and signature from configuration, read them, and
fill the template.

For lower-level control, use :func:`~conventio.core.pdf.fill_template`
directly with template and image bytes.
"""

from __future__ import annotations

__all__ = ["fill_convention", "render_convention"]

import logging
import os
from collections.abc import Mapping

from .config import get_asset_paths, get_layout_name, read_assets
from .core.fields import compose_lines
from .core.pdf import fill_template, get_layout

_logger = logging.getLogger(__name__)


def render_convention(
    request: Mapping[str, object],
    *,
    template: str | os.PathLike[str] | None = None,
    signature: str | os.PathLike[str] | None = None,
    layout: str | None = None,
) -> bytes:
    """Fill the configured template with already-composed display lines.

    Both assets are read before any drawing starts.

    Args:
        request: Line id -> display string for every field of the layout.
        template: Template PDF path.  Defaults to configuration.
        signature: Signature image path.  Defaults to configuration.
        layout: Built-in layout name.  Defaults to configuration.

    Returns:
        The filled PDF bytes.

    Raises:
        ConfigError: If an asset is not configured or cannot be read.
        MissingFieldError: If the request lacks a field.
    """
    layout_obj = get_layout(layout or get_layout_name())
    paths = get_asset_paths(template=template, signature=signature)
    template_bytes, signature_bytes = read_assets(
        paths, need_signature=layout_obj.signature is not None
    )
    _logger.debug("Rendering %r from %s", layout_obj.name, paths.template)
    return fill_template(template_bytes, request, signature_bytes, layout=layout_obj)


def fill_convention(
    details: Mapping[str, object],
    *,
    template: str | os.PathLike[str] | None = None,
    signature: str | os.PathLike[str] | None = None,
) -> bytes:
    """Compose the convention's display lines from ``details`` and render them.

    ``details`` carries pre-formatted values (dates, amounts); see
    :data:`~conventio.core.fields.DETAIL_KEYS`.  Details are checked
    before any file is read.

    Raises:
        MissingFieldError: If a detail is absent or blank.
        ConfigError: If an asset is not configured or cannot be read.
    """
    lines = compose_lines(details)
    return render_convention(lines, template=template, signature=signature, layout="convention")
