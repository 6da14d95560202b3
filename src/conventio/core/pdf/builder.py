"""Template filling: the document assembler.

Turns a render request (field id -> display string) plus a signature
image into the filled PDF bytes.  Everything happens on a private copy
of the template; bytes are returned only if every step succeeded.

Per-field drawing is in render.py.
Field placement tables are in layout.py.
Geometry helpers are in position.py.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from ...errors import ConfigError, MissingFieldError
from .document import TemplateDocument
from .layout import CONVENTION_LAYOUT
from .render import place_image, render_field

if TYPE_CHECKING:
    from ..appearance import Font
    from .layout import TemplateLayout

_logger = logging.getLogger(__name__)

__all__ = ["check_request", "fill_template"]


def check_request(request: Mapping[str, object], layout: TemplateLayout) -> dict[str, str]:
    """Return the layout's fields from ``request`` as strings, in draw order.

    A field is missing when its key is absent or its value is None.
    Keys the layout does not know are ignored.

    Raises:
        MissingFieldError: Naming every missing field at once.
    """
    missing = [fid for fid in layout.fields if request.get(fid) is None]
    if missing:
        raise MissingFieldError(missing)

    extra = sorted(set(request) - set(layout.fields))
    if extra:
        _logger.debug("Ignoring fields not in layout %r: %s", layout.name, ", ".join(extra))

    return {fid: str(request[fid]) for fid in layout.fields}


def fill_template(
    template_bytes: bytes,
    request: Mapping[str, object],
    image_bytes: bytes | None = None,
    *,
    layout: TemplateLayout | None = None,
    font: Font | None = None,
) -> bytes:
    """Fill a template with field text and the signature image.

    Orchestration: check the request, open the template, validate the
    whole placement table against its page count, draw every field in
    table order, place the signature, serialize.

    Args:
        template_bytes: The template PDF.
        request: Field identifier -> pre-formatted display string.  Every
            field of the layout must be present.
        image_bytes: Encoded signature image.  Required when the layout
            has a signature placement.
        layout: Placement table.  Defaults to the convention layout.
        font: Text font.  Defaults to Helvetica.

    Returns:
        The filled PDF.

    Raises:
        MissingFieldError: If the request lacks a field.
        ConfigError: If the signature image is required but not given.
        LayoutError: If a placement does not fit the template.
        TemplateError: If the template cannot be read or written.
        ImageError: If the signature image cannot be decoded.
    """
    layout = layout or CONVENTION_LAYOUT
    texts = check_request(request, layout)
    if layout.signature is not None and image_bytes is None:
        raise ConfigError(f"Layout {layout.name!r} needs a signature image")

    with TemplateDocument.load(template_bytes, font) as doc:
        page_count = doc.page_count
        layout.validate(page_count)

        for field_id, text in texts.items():
            render_field(doc, layout.spec_for(field_id), text)

        if layout.signature is not None and image_bytes is not None:
            place_image(doc, image_bytes, layout.signature)

        result = doc.to_bytes()

    _logger.info(
        "Filled template with layout %r: %d field(s), %d page(s), %d bytes",
        layout.name,
        len(texts),
        page_count,
        len(result),
    )
    return result
