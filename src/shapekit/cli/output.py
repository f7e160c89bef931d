"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

import json
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from shapekit.domain import Point, WindingDirection
from shapekit.io import points_to_json

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Shapekit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_points_table(title: str, points: Sequence[Point], precision: int) -> None:
    """Print points as a numbered table.

    Args:
        title: Table title
        points: Points to list, in order
        precision: Decimal places for coordinates
    """
    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")

    for i, p in enumerate(points):
        table.add_row(str(i), f"{p.x:.{precision}f}", f"{p.y:.{precision}f}")

    console.print(table)
    console.print(f"  {len(points)} points", highlight=False)


def print_points_json(points: Sequence[Point], precision: int) -> None:
    """Print points as a JSON array."""
    console.print(points_to_json(points, precision), markup=False, highlight=False, soft_wrap=True)


def _direction_label(direction: WindingDirection) -> str:
    return direction.name.lower()


def print_area_table(
    signed: float,
    unsigned: float,
    direction: WindingDirection,
    precision: int,
) -> None:
    """Print polygon area and orientation.

    Args:
        signed: Signed area (screen coordinates)
        unsigned: Absolute area
        direction: Winding direction
        precision: Decimal places for areas
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("field", style="bold")
    table.add_column("value", justify="right")
    table.add_row("Signed area", f"{signed:.{precision}f}")
    table.add_row("Area", f"{unsigned:.{precision}f}")
    table.add_row("Winding", _direction_label(direction))
    console.print(table)


def print_area_json(
    signed: float,
    unsigned: float,
    direction: WindingDirection,
    precision: int,
) -> None:
    """Print polygon area and orientation as a JSON object."""
    console.print(
        json.dumps(
            {
                "signed_area": round(signed, precision),
                "area": round(unsigned, precision),
                "winding": _direction_label(direction),
                "clockwise": direction is WindingDirection.CLOCKWISE,
            }
        ),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def print_value(label: str, value: str) -> None:
    """Print a single labelled result.

    Args:
        label: What the value is
        value: The value, printed verbatim
    """
    line = Text(f"  {label} ")
    line.append(value, style="bold")
    console.print(line, soft_wrap=True)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
