"""
Small file and formatting helpers shared by the CLI commands.
"""

from __future__ import annotations

import json
import os
import re
import sys
import tempfile
from pathlib import Path

__all__ = [
    "atomic_write",
    "default_output_name",
    "format_size_kb",
    "load_json_object",
    "safe_read_file",
]

_BYTES_PER_KB = 1024

_WHITESPACE = re.compile(r"\s+")


def format_size_kb(size_bytes: int) -> str:
    """Format a byte count as a human-readable KB string (e.g. '123.4 KB')."""
    return f"{size_bytes / _BYTES_PER_KB:.1f} KB"


def default_output_name(company_name: str | None = None) -> str:
    """Output file name for a filled convention: 'convention-<company>.pdf'.

    >>> default_output_name("Acme Formation")
    'convention-acme-formation.pdf'
    """
    if not company_name or not company_name.strip():
        return "convention.pdf"
    slug = _WHITESPACE.sub("-", company_name.strip().lower()).replace("/", "-")
    return f"convention-{slug}.pdf"


def safe_read_file(path: Path, kind: str = "file") -> bytes | None:
    """Read ``path``, printing ``Error: ...`` to stderr and returning None on failure.

    >>> safe_read_file(Path("missing.json"), "data file")  # doctest: +SKIP
    Error: data file not found: missing.json
    """
    try:
        return path.read_bytes()
    except FileNotFoundError:
        print(f"Error: {kind} not found: {path}", file=sys.stderr)
    except OSError as e:
        print(f"Error: cannot read {kind} {path}: {e}", file=sys.stderr)
    return None


def load_json_object(path: Path) -> dict[str, object] | None:
    """Read a JSON file holding an object; print an error and return None otherwise."""
    raw = safe_read_file(path, "data file")
    if raw is None:
        return None
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        print(f"Error: {path} is not valid JSON: {e}", file=sys.stderr)
        return None
    if not isinstance(data, dict):
        print(f"Error: {path} must contain a JSON object", file=sys.stderr)
        return None
    return data


def atomic_write(path: Path, data: bytes) -> None:
    """Write a filled PDF so readers never see a half-written file.

    The bytes go to a temp file next to ``path`` which then replaces it.
    The parent directory is created if needed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}-", suffix=".part")
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
