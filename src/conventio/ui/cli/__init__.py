"""
Command-line interface for Conventio.

Argument parsing, dispatch, and the small non-filling subcommands.
Filling lives in ``fill``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ...config import CONFIG_FILE, get_asset_paths, get_layout_name
from ...constants import __version__
from ...core.pdf import TemplateDocument, get_layout
from ...errors import ConventioError
from ..helpers import safe_read_file
from .fill import cmd_fill


def _fmt_opt(value: float | None) -> str:
    return "-" if value is None else f"{value:g}"


def _cmd_layout(args: argparse.Namespace) -> None:
    """Print a layout's placement table, optionally checking it against a template."""
    try:
        layout = get_layout(args.layout or get_layout_name())
    except ConventioError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Layout {layout.name!r}: {layout.description or 'no description'}")
    print(f"  {'field':<22}{'page':>5}{'x':>8}{'top':>9}{'box':>6}{'size':>6}{'width':>7}{'lines':>6}")
    for field_id, spec in layout.fields.items():
        print(
            f"  {field_id:<22}{spec.page_index:>5}{spec.anchor_x:>8g}{spec.anchor_top:>9g}"
            f"{spec.box_height:>6g}{spec.font_size:>6g}{_fmt_opt(spec.max_width):>7}"
            f"{spec.max_lines:>6}"
        )
    sig = layout.signature
    if sig is not None:
        print(
            f"  {'(signature)':<22}{sig.page_index:>5}{sig.anchor_x:>8g}{sig.anchor_top:>9g}"
            f"   width {sig.target_width:g}"
        )

    template = get_asset_paths(template=args.template).template
    if template is None:
        return

    template_bytes = safe_read_file(template, "template")
    if template_bytes is None:
        sys.exit(1)
    try:
        with TemplateDocument.load(template_bytes) as doc:
            layout.validate(doc.page_count)
            print(f"\n  {template.name}: {doc.page_count} page(s), layout OK")
    except ConventioError as e:
        print(f"\n  {template.name}: {e}", file=sys.stderr)
        sys.exit(1)


def _cmd_config(args: argparse.Namespace) -> None:
    """Show or update saved asset locations."""
    from ...config import reset_config, save_asset_paths

    if args.reset:
        reset_config()
        print("Configuration cleared.")
        return

    if any(v is not None for v in (args.template, args.signature, args.output_dir, args.layout)):
        if args.layout is not None:
            try:
                get_layout(args.layout)
            except ConventioError as e:
                print(f"Error: {e}", file=sys.stderr)
                sys.exit(1)
        save_asset_paths(
            template=args.template,
            signature=args.signature,
            output_dir=args.output_dir,
            layout=args.layout,
        )
        print(f"Saved to {CONFIG_FILE}")

    paths = get_asset_paths()
    for label, value in (
        ("template", paths.template),
        ("signature", paths.signature),
        ("output_dir", paths.output_dir),
    ):
        shown = str(value) if value is not None else "(not set)"
        missing = "" if value is None or Path(value).exists() else "  [missing]"
        print(f"  {label:<11}{shown}{missing}")
    print(f"  {'layout':<11}{get_layout_name()}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="conventio",
        description="Fill a fixed-layout PDF training agreement template.",
        epilog=(
            "Environment variables:\n"
            "  CONVENTIO_TEMPLATE    Template PDF path\n"
            "  CONVENTIO_SIGNATURE   Signature image path (PNG or JPEG)\n"
            "  CONVENTIO_OUTPUT_DIR  Directory for filled PDFs (default: current directory)\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-V", "--version", action="version", version=f"conventio {__version__}")

    sub = parser.add_subparsers(dest="command", help="Available commands")

    # fill
    p_fill = sub.add_parser("fill", help="Fill the template from a JSON data file")
    p_fill.add_argument("data", help="JSON file with convention details")
    p_fill.add_argument("-o", "--output", help="Output PDF path")
    p_fill.add_argument("--template", default=None, help="Template PDF (default: from config)")
    p_fill.add_argument("--signature", default=None, help="Signature image (default: from config)")
    p_fill.add_argument("--layout", default=None, help="Built-in layout name (default: convention)")
    p_fill.add_argument(
        "--lines",
        action="store_true",
        default=False,
        help="DATA already maps line ids to display text; skip composing lines",
    )

    # layout
    p_layout = sub.add_parser("layout", help="Show the field placement table")
    p_layout.add_argument("--template", default=None, help="Check the layout against this PDF")
    p_layout.add_argument("--layout", default=None, help="Built-in layout name")

    # config
    p_config = sub.add_parser("config", help="Show or save asset locations")
    p_config.add_argument("--template", default=None, help="Template PDF path to save")
    p_config.add_argument("--signature", default=None, help="Signature image path to save")
    p_config.add_argument("--output-dir", default=None, help="Output directory to save")
    p_config.add_argument("--layout", default=None, help="Default layout name to save")
    p_config.add_argument("--reset", action="store_true", default=False, help="Clear all saved settings")

    args = parser.parse_args(argv)

    if args.command == "fill":
        cmd_fill(args)
    elif args.command == "layout":
        _cmd_layout(args)
    elif args.command == "config":
        _cmd_config(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
