"""Command-line interface for shapekit.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Convex hull, clockwise sort and area commands on x,y point arguments
- Filename sanitizing
- Table or JSON output
"""

from shapekit.cli.app import cli, main

__all__ = ["cli", "main"]
