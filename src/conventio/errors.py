"""Conventio error types."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "ConfigError",
    "ConventioError",
    "ImageError",
    "LayoutError",
    "MissingFieldError",
    "TemplateError",
]


class ConventioError(Exception):
    """Base error for Conventio operations."""


class ConfigError(ConventioError):
    """Broken deployment: bad configuration or unusable template assets."""


class LayoutError(ConfigError):
    """Field placement table is inconsistent with itself or the template."""


class TemplateError(ConfigError):
    """Template PDF is unreadable, corrupt, or too short."""


class ImageError(ConfigError):
    """Signature image is empty, oversized, or cannot be decoded."""


class MissingFieldError(ConventioError):
    """A render request lacks one or more required fields.

    Args:
        missing: Identifiers of every absent field, in table order.
    """

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Missing required field(s): {', '.join(self.missing)}")

    def __reduce__(self) -> tuple[type[MissingFieldError], tuple[tuple[str, ...]]]:
        """Preserve the missing-field list across pickle/unpickle."""
        return (type(self), (self.missing,))
