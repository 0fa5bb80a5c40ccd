"""Command-line interface for punchcard.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Encode text to card files and decode card files to text
- Convert between binary, EBCDIC, text and JSON card files
- Punch diagrams of cards
- IBM 1130 example cards and format validation
"""

from punchcard.cli.app import cli, main

__all__ = ["cli", "main"]
