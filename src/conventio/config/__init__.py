"""
Configuration management.

Unified API for config-related functionality. Import from this package
rather than from the individual submodules.
"""

from __future__ import annotations

from ._storage import CONFIG_DIR, CONFIG_FILE
from .config import (
    AssetPaths,
    get_asset_paths,
    get_layout_name,
    read_assets,
    reset_config,
    save_asset_paths,
)

__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "AssetPaths",
    "get_asset_paths",
    "get_layout_name",
    "read_assets",
    "reset_config",
    "save_asset_paths",
]
