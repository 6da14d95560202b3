"""
On-disk settings for Conventio: ~/.conventio/config.json.

The file holds where the deployment keeps its template PDF and signature
image, an optional output directory, and the default layout name.  Reads
are lenient (a broken file is reported and treated as empty); writes
replace the whole file atomically and keep it private to the user.
"""

from __future__ import annotations

__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "load_config",
    "load_raw_config",
    "save_config",
    "update_config",
]

import json
import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import TypedDict

_logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".conventio"
CONFIG_FILE = CONFIG_DIR / "config.json"


class ConfigDict(TypedDict, total=False):
    """Known settings.  Paths are stored absolute."""

    template: str
    signature: str
    output_dir: str
    layout: str


_SETTING_KEYS: tuple[str, ...] = tuple(ConfigDict.__annotations__)


def load_raw_config() -> dict[str, object]:
    """Every key of the config file, including ones this version does not know.

    Returns an empty dict when the file is absent, unreadable, not JSON,
    or not a JSON object.
    """
    try:
        text = CONFIG_FILE.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as e:
        _logger.warning("Cannot read %s: %s", CONFIG_FILE, e)
        return {}

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        _logger.warning("Ignoring corrupt %s: %s", CONFIG_FILE, e)
        return {}
    if not isinstance(data, dict):
        _logger.warning("Ignoring %s: top level is %s, not an object", CONFIG_FILE, type(data).__name__)
        return {}
    return data


def load_config() -> ConfigDict:
    """Known settings with non-empty string values; anything else is dropped."""
    raw = load_raw_config()
    settings: ConfigDict = {}
    for key in _SETTING_KEYS:
        value = raw.get(key)
        if value is None:
            continue
        if isinstance(value, str) and value.strip():
            settings[key] = value.strip()  # type: ignore[literal-required]
        else:
            _logger.warning("Ignoring setting %s=%r: expected a non-empty string", key, value)
    return settings


def _write_private(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` via a 0600 temp file in the same directory."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".config-", suffix=".tmp")
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        if os.name != "nt":
            try:
                tmp.chmod(0o600)
            except OSError:
                _logger.warning("Cannot restrict permissions on %s", tmp)
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def save_config(config: Mapping[str, object]) -> None:
    """Write ``config`` as the whole config file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True, mode=0o700)
    _write_private(CONFIG_FILE, json.dumps(dict(config), indent=2, ensure_ascii=False) + "\n")


def update_config(changes: Mapping[str, str | None]) -> None:
    """Merge ``changes`` into the config file.

    A value of None leaves that key as it is.  Keys not mentioned,
    including unknown ones, are kept.
    """
    config = load_raw_config()
    config.update({key: value for key, value in changes.items() if value is not None})
    save_config(config)
