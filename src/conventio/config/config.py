"""
Asset configuration for Conventio.

Locates the template PDF and the signature image.  Locations come from,
in priority order: explicit arguments, environment variables, then
~/.conventio/config.json.  There is no built-in template: a deployment
must provide one.
"""

from __future__ import annotations

__all__ = [
    "AssetPaths",
    "get_asset_paths",
    "get_layout_name",
    "read_assets",
    "reset_config",
    "save_asset_paths",
]

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..constants import DEFAULT_LAYOUT, ENV_OUTPUT_DIR, ENV_SIGNATURE, ENV_TEMPLATE
from ..errors import ConfigError
from ._storage import load_config, save_config, update_config

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetPaths:
    """Resolved asset locations; any may be None when not configured."""

    template: Path | None = None
    signature: Path | None = None
    output_dir: Path | None = None


def _pick(explicit: str | os.PathLike[str] | None, env_name: str, config_value: str | None) -> Path | None:
    if explicit is not None:
        return Path(explicit).expanduser()
    env_value = os.environ.get(env_name, "").strip()
    if env_value:
        return Path(env_value).expanduser()
    if config_value:
        return Path(config_value).expanduser()
    return None


def get_asset_paths(
    template: str | os.PathLike[str] | None = None,
    signature: str | os.PathLike[str] | None = None,
    output_dir: str | os.PathLike[str] | None = None,
) -> AssetPaths:
    """Resolve asset locations.

    Priority: explicit arguments > env vars > config file.

    Returns:
        AssetPaths with whatever could be resolved.
    """
    config = load_config()
    paths = AssetPaths(
        template=_pick(template, ENV_TEMPLATE, config.get("template")),
        signature=_pick(signature, ENV_SIGNATURE, config.get("signature")),
        output_dir=_pick(output_dir, ENV_OUTPUT_DIR, config.get("output_dir")),
    )
    _logger.debug("Resolved asset paths: %s", paths)
    return paths


def get_layout_name() -> str:
    """Layout name from config, or the built-in default."""
    return load_config().get("layout", DEFAULT_LAYOUT)


def _read_asset(path: Path | None, kind: str, env_name: str) -> bytes:
    if path is None:
        raise ConfigError(
            f"No {kind} configured. Pass it explicitly, set {env_name}, "
            f"or run `conventio config --{kind} PATH`."
        )
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise ConfigError(f"{kind.capitalize()} not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read {kind} {path}: {exc}") from exc


def read_assets(paths: AssetPaths, *, need_signature: bool = True) -> tuple[bytes, bytes | None]:
    """Read the template and signature bytes, template first.

    Raises:
        ConfigError: If a needed asset is not configured or unreadable.
    """
    template_bytes = _read_asset(paths.template, "template", ENV_TEMPLATE)
    signature_bytes = None
    if need_signature:
        signature_bytes = _read_asset(paths.signature, "signature", ENV_SIGNATURE)
    return template_bytes, signature_bytes


def save_asset_paths(
    template: str | os.PathLike[str] | None = None,
    signature: str | os.PathLike[str] | None = None,
    output_dir: str | os.PathLike[str] | None = None,
    layout: str | None = None,
) -> None:
    """Persist asset locations; arguments left as None keep their saved value.

    Paths are stored absolute so the config works from any directory.
    """

    def absolute(value: str | os.PathLike[str] | None) -> str | None:
        return None if value is None else str(Path(value).expanduser().resolve())

    update_config(
        {
            "template": absolute(template),
            "signature": absolute(signature),
            "output_dir": absolute(output_dir),
            "layout": layout,
        }
    )


def reset_config() -> None:
    """Clear all saved configuration."""
    save_config({})
