"""
Template document: one render's private copy of the template PDF.

A TemplateDocument is opened from the template bytes, drawn on, then
serialized once.  Pages are never added or removed.  Operators queued
for a page are appended to it as a single content stream at save time;
the page's original content is wrapped in ``q``/``Q`` first so its
graphics state cannot leak into the fill.

Each render opens its own document from immutable bytes, so concurrent
renders share no mutable state.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

from ...constants import PDF_MAGIC
from ...errors import LayoutError, TemplateError
from .. import require_pikepdf as _require_pikepdf
from ..appearance import get_default_font
from .position import get_page_dimensions

if TYPE_CHECKING:
    import types

    import pikepdf

    from ..appearance import Font, SignatureImageData

_logger = logging.getLogger(__name__)

__all__ = ["TemplateDocument"]


class TemplateDocument:
    """A template PDF open for filling.

    Use :meth:`load` to open one; use it as a context manager so the
    underlying pikepdf handle is always closed.
    """

    def __init__(self, pdf: pikepdf.Pdf, font: Font | None = None) -> None:
        self._pikepdf: types.ModuleType = _require_pikepdf()
        self._pdf = pdf
        self.font = font or get_default_font()
        self._font_ref: pikepdf.Object | None = None
        self._font_names: dict[int, str] = {}
        self._pending: dict[int, list[str]] = {}
        self._saved = False

    @classmethod
    def load(cls, template_bytes: bytes, font: Font | None = None) -> TemplateDocument:
        """Parse template bytes.

        Raises:
            TemplateError: If the bytes are not a readable PDF.
        """
        pikepdf = _require_pikepdf()
        if not template_bytes.lstrip()[:5].startswith(PDF_MAGIC):
            raise TemplateError("Template is not a PDF (missing %PDF- header)")
        try:
            pdf = pikepdf.open(io.BytesIO(template_bytes))
        except (pikepdf.PdfError, ValueError, OSError) as exc:
            raise TemplateError(f"Cannot parse template PDF: {exc}") from exc
        _logger.debug("Loaded template: %d page(s), %d bytes", len(pdf.pages), len(template_bytes))
        return cls(pdf, font)

    # ── Context manager ──────────────────────────────────────────────

    def __enter__(self) -> TemplateDocument:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._pdf.close()

    # ── Geometry ─────────────────────────────────────────────────────

    @property
    def page_count(self) -> int:
        return len(self._pdf.pages)

    def page_size(self, page_index: int) -> tuple[float, float]:
        """(width, height) of a page in points; raises LayoutError if out of range."""
        return get_page_dimensions(self._pdf, page_index)

    # ── Resources ────────────────────────────────────────────────────

    def _own_resources(self, page_index: int) -> pikepdf.Dictionary:
        """The page's own /Resources, seeded from an inherited one if needed.

        Subdictionaries are copied so that adding to them never changes
        sibling pages sharing the inherited dictionary.
        """
        pikepdf = self._pikepdf
        page_obj = self._pdf.pages[page_index].obj
        if "/Resources" in page_obj:
            return page_obj.Resources

        inherited = None
        node = page_obj.get("/Parent")
        while node is not None and inherited is None:
            inherited = node.get("/Resources")
            node = node.get("/Parent")

        own = pikepdf.Dictionary()
        if inherited is not None:
            for key, value in inherited.items():
                if isinstance(value, pikepdf.Dictionary):
                    value = pikepdf.Dictionary(dict(value.items()))
                own[key] = value
        page_obj.Resources = own
        return page_obj.Resources

    def _add_resource(self, page_index: int, obj: pikepdf.Object, category: str, prefix: str) -> str:
        """Register ``obj`` under the first free ``/<prefix><n>`` name (n >= 1).

        Names depend only on what the page already holds, so identical
        renders produce identical resource dictionaries.
        """
        pikepdf = self._pikepdf
        resources = self._own_resources(page_index)
        if category not in resources:
            resources[category] = pikepdf.Dictionary()
        entries = resources[category]

        n = 1
        while f"/{prefix}{n}" in entries:
            n += 1
        name = f"/{prefix}{n}"
        entries[name] = obj
        return name

    def font_resource(self, page_index: int) -> str:
        """Resource name (e.g. "/F1") of the shared text font on a page.

        The font dictionary is created once per document and referenced
        from every page that needs it.
        """
        name = self._font_names.get(page_index)
        if name is not None:
            return name
        pikepdf = self._pikepdf
        if self._font_ref is None:
            self._font_ref = self._pdf.make_indirect(
                pikepdf.Dictionary(
                    Type=pikepdf.Name.Font,
                    Subtype=pikepdf.Name.Type1,
                    BaseFont=pikepdf.Name("/" + self.font.base_font),
                    Encoding=pikepdf.Name.WinAnsiEncoding,
                )
            )
        name = self._add_resource(page_index, self._font_ref, "/Font", "F")
        self._font_names[page_index] = name
        return name

    def image_resource(self, page_index: int, image: SignatureImageData) -> str:
        """Embed an image XObject (with soft mask when present) on a page.

        Returns:
            The XObject resource name, e.g. "/Im1".
        """
        pikepdf = self._pikepdf
        pdf = self._pdf

        xobject = pikepdf.Stream(pdf, b"")
        xobject.write(image["samples"], filter=pikepdf.Name.FlateDecode)
        xobject.Type = pikepdf.Name.XObject
        xobject.Subtype = pikepdf.Name.Image
        xobject.Width = image["width"]
        xobject.Height = image["height"]
        xobject.ColorSpace = pikepdf.Name.DeviceRGB
        xobject.BitsPerComponent = image["bpc"]

        smask_data = image["smask"]
        if smask_data is not None:
            smask = pikepdf.Stream(pdf, b"")
            smask.write(smask_data, filter=pikepdf.Name.FlateDecode)
            smask.Type = pikepdf.Name.XObject
            smask.Subtype = pikepdf.Name.Image
            smask.Width = image["width"]
            smask.Height = image["height"]
            smask.ColorSpace = pikepdf.Name.DeviceGray
            smask.BitsPerComponent = image["bpc"]
            xobject.SMask = pdf.make_indirect(smask)

        return self._add_resource(page_index, pdf.make_indirect(xobject), "/XObject", "Im")

    # ── Drawing ──────────────────────────────────────────────────────

    def draw(self, page_index: int, ops: list[str]) -> None:
        """Queue content-stream operators for a page, in call order.

        Raises:
            LayoutError: If the page index is out of range.
        """
        if not ops:
            return
        if not 0 <= page_index < self.page_count:
            raise LayoutError(
                f"Page {page_index} out of range (PDF has {self.page_count} page(s), 0-based)."
            )
        self._pending.setdefault(page_index, []).extend(ops)

    def _flush(self) -> None:
        pdf = self._pdf
        for page_index in sorted(self._pending):
            body = ("\n".join(self._pending[page_index]) + "\n").encode("ascii")
            page = pdf.pages[page_index]
            if "/Contents" in page.obj:
                page.contents_add(pdf.make_stream(b"q\n"), prepend=True)
                page.contents_add(pdf.make_stream(b"Q\n" + body))
            else:
                page.obj.Contents = pdf.make_stream(body)
        self._pending.clear()

    def to_bytes(self) -> bytes:
        """Apply queued drawing and serialize the document.

        Output depends only on the template and what was drawn: the
        document /ID is derived from content, so identical renders give
        identical bytes.  A document can be serialized only once.

        Raises:
            TemplateError: If called twice or if pikepdf cannot write the PDF.
        """
        if self._saved:
            raise TemplateError("Document already serialized")
        self._flush()
        buf = io.BytesIO()
        try:
            self._pdf.save(buf, deterministic_id=True)
        except self._pikepdf.PdfError as exc:
            raise TemplateError(f"Cannot write filled PDF: {exc}") from exc
        self._saved = True
        return buf.getvalue()
