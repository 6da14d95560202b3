# pyright: reportUnknownMemberType=false
"""
Signature image decoding for the signature block.

Turns encoded image bytes into Flate-compressed RGB samples plus an
optional alpha soft mask, the two streams a PDF image XObject needs.
Size limits are checked on the encoded bytes and on the header before
any pixel data is decompressed.
"""

from __future__ import annotations

import io
import zlib
from typing import TYPE_CHECKING, TypedDict

from ...errors import ImageError

if TYPE_CHECKING:
    from PIL import Image as PILImage


class SignatureImageData(TypedDict):
    """Decoded signature, ready for TemplateDocument.image_resource()."""

    samples: bytes  # Flate-compressed 8-bit RGB
    smask: bytes | None  # Flate-compressed 8-bit alpha; None when opaque
    width: int
    height: int
    bpc: int


# Longest side after decoding.  The signature prints about 180 pt wide,
# so 1200 px is well above 300 dpi.
_MAX_IMAGE_PX = 1200

# Encoded size cap (5 MB)
_MAX_FILE_SIZE = 5 * 1024 * 1024

# Header-level pixel cap, checked before decompression
_MAX_IMAGE_PIXELS = 4000 * 4000

# Pillow format names
_ALLOWED_FORMATS = frozenset({"PNG", "JPEG", "GIF", "BMP", "TIFF", "WEBP"})

_ALPHA_MODES = ("RGBA", "LA", "PA")


def _check_encoded(image_bytes: bytes) -> None:
    if not image_bytes:
        raise ImageError("Signature image is empty")
    if len(image_bytes) > _MAX_FILE_SIZE:
        raise ImageError(
            f"Signature image too large: {len(image_bytes) / 1024 / 1024:.1f} MB "
            f"(max {_MAX_FILE_SIZE // (1024 * 1024)} MB)"
        )


def _check_header(img: PILImage.Image) -> None:
    pixels = img.width * img.height
    if pixels > _MAX_IMAGE_PIXELS:
        raise ImageError(
            f"Image too large: {img.width}x{img.height} ({pixels:,} pixels). "
            f"Maximum: {_MAX_IMAGE_PIXELS:,} pixels."
        )
    if img.format not in _ALLOWED_FORMATS:
        raise ImageError(
            f"Unsupported image format: {img.format or 'unknown'}. "
            f"Supported: {', '.join(sorted(_ALLOWED_FORMATS))}"
        )


def _fit(img: PILImage.Image) -> PILImage.Image:
    """Downscale so the longest side is at most _MAX_IMAGE_PX."""
    from PIL import Image

    longest = max(img.size)
    if longest <= _MAX_IMAGE_PX:
        return img
    scale = _MAX_IMAGE_PX / longest
    size = (max(1, round(img.width * scale)), max(1, round(img.height * scale)))
    return img.resize(size, Image.Resampling.LANCZOS)


def _split_alpha(img: PILImage.Image) -> tuple[PILImage.Image, PILImage.Image | None]:
    """(RGB image, alpha band or None)."""
    has_alpha = img.mode in _ALPHA_MODES or (img.mode == "P" and "transparency" in img.info)
    if not has_alpha:
        return (img if img.mode == "RGB" else img.convert("RGB")), None
    if img.mode in ("P", "PA"):
        img = img.convert("RGBA")
    return img.convert("RGB"), img.getchannel("A")


def load_signature_image(image_bytes: bytes) -> SignatureImageData:
    """Decode a signature image for embedding.

    Args:
        image_bytes: Encoded PNG, JPEG (or GIF, BMP, TIFF, WebP) data.

    Returns:
        SignatureImageData; ``width``/``height`` are the decoded size,
        after any downscaling.

    Raises:
        ImageError: If the bytes are empty, too large, not an image, in
            an unsupported format, or corrupt.
    """
    _check_encoded(image_bytes)

    from PIL import Image

    try:
        img = Image.open(io.BytesIO(image_bytes))
    except OSError as exc:
        # UnidentifiedImageError is an OSError
        raise ImageError(f"Cannot decode signature image: {exc}") from exc

    with img:
        _check_header(img)
        try:
            rgb, alpha = _split_alpha(_fit(img))
            samples = zlib.compress(rgb.tobytes())
            smask = zlib.compress(alpha.tobytes()) if alpha is not None else None
        except OSError as exc:
            # Truncated pixel data only shows up once decoding starts
            raise ImageError(f"Cannot decode signature image: {exc}") from exc

    return {
        "samples": samples,
        "smask": smask,
        "width": rgb.width,
        "height": rgb.height,
        "bpc": 8,
    }
