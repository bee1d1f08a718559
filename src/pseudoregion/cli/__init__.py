"""Command-line interface for pseudoregion.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Corner classification summary per kind
- Boundary side table
- Per-polygon corner counts in verbose mode
- Detailed error reporting
"""

from pseudoregion.cli.app import cli, main

__all__ = ["cli", "main"]
