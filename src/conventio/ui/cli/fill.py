"""Fill command handler for Conventio CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ...config import get_asset_paths, get_layout_name, read_assets
from ...core.fields import compose_lines
from ...core.pdf import fill_template, get_layout
from ...errors import ConventioError
from ..helpers import atomic_write, default_output_name, format_size_kb, load_json_object


def _output_path(args: argparse.Namespace, output_dir: Path | None, company: str | None) -> Path:
    if args.output:
        return Path(args.output)
    return (output_dir or Path.cwd()) / default_output_name(company)


def cmd_fill(args: argparse.Namespace) -> None:
    """Fill the template from a JSON data file and write the PDF."""
    data = load_json_object(Path(args.data))
    if data is None:
        sys.exit(1)

    try:
        if args.lines:
            request: dict[str, object] = data
            company = None
        else:
            request = dict(compose_lines(data))
            company = str(data.get("company_name") or data.get("companyName") or "")

        layout = get_layout(args.layout or get_layout_name())
        paths = get_asset_paths(template=args.template, signature=args.signature)
        template_bytes, signature_bytes = read_assets(
            paths, need_signature=layout.signature is not None
        )
        pdf_bytes = fill_template(template_bytes, request, signature_bytes, layout=layout)
    except ConventioError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    out_path = _output_path(args, paths.output_dir, company)
    try:
        atomic_write(out_path, pdf_bytes)
    except OSError as e:
        print(f"Error: cannot write {out_path}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Wrote {out_path} ({format_size_kb(len(pdf_bytes))})")
