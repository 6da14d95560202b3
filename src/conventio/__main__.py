"""
Entry point for `python -m conventio`.

Usage:
    python -m conventio fill details.json -o convention.pdf
    python -m conventio layout --template convention.pdf
"""

from .ui.cli import main

main()
