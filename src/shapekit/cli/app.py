"""CLI application entry point for shapekit.

This module provides the main CLI interface using Typer.
"""

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Annotated

import structlog
import typer

from shapekit import __version__
from shapekit.cli.output import (
    console,
    print_area_json,
    print_area_table,
    print_error,
    print_header,
    print_points_json,
    print_points_table,
    print_step,
    print_value,
)
from shapekit.config import (
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    ShapekitSettings,
    TextConfig,
)
from shapekit.core import area, convex_hull, signed_area, sorted_clockwise, winding_direction
from shapekit.domain import Point
from shapekit.exceptions import ShapekitError
from shapekit.io import parse_points
from shapekit.text import filename_safe
from shapekit.utils import CommandLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="shapekit",
    help="Point-set geometry and string helpers.",
    add_completion=False,
    no_args_is_help=True,
)

# Lets negative coordinates such as -1,2 through as arguments
POINT_COMMAND_SETTINGS = {"ignore_unknown_options": True}

PointsArgument = Annotated[
    list[str],
    typer.Argument(
        help="Points as x,y (put -- before the first point to pass negative values)",
        show_default=False,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Shapekit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Result format (table|json)",
        ),
    ] = "table",
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            "-p",
            help="Decimal places in printed results (0-12)",
            min=0,
            max=12,
        ),
    ] = 6,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print results",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Run geometry and string helpers from the command line.

    Example:
        shapekit hull 0,0 4,0 4,4 0,4 2,2
    """
    try:
        fmt = OutputFormat(output_format.lower())
    except ValueError:
        print_error(
            f"Invalid format: {output_format}",
            details="Valid values: table, json",
        )
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = ShapekitSettings(
        output=OutputConfig(precision=precision, format=fmt),
        logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    # JSON output stays machine-readable
    show_header = not quiet and fmt is OutputFormat.TABLE
    if show_header and ctx.invoked_subcommand is not None:
        print_header(__version__)

    ctx.obj = (settings, show_header)


def _run_points_command(
    ctx: typer.Context,
    name: str,
    tokens: Sequence[str],
    operation: Callable[[list[Point]], list[Point]],
    title: str,
) -> None:
    """Parse points, apply a point-set operation and print the result."""
    settings, show_header = ctx.obj
    command_logger = CommandLogger(structlog.get_logger("shapekit.cli"), name)

    try:
        points = parse_points(tokens)
    except ShapekitError as e:
        command_logger.log_error(e)
        print_error(str(e))
        raise typer.Exit(code=1)

    command_logger.log_start(len(points))
    result = operation(points)
    command_logger.log_complete(len(result))

    if settings.output.format is OutputFormat.JSON:
        print_points_json(result, settings.output.precision)
        return

    if show_header:
        print_step(title)
    print_points_table(title, result, settings.output.precision)


@app.command(context_settings=POINT_COMMAND_SETTINGS)
def hull(ctx: typer.Context, points: PointsArgument) -> None:
    """Print the convex hull, counter-clockwise from the lowest point."""
    _run_points_command(ctx, "hull", points, convex_hull, "Convex hull")


@app.command(name="sort", context_settings=POINT_COMMAND_SETTINGS)
def sort_points(ctx: typer.Context, points: PointsArgument) -> None:
    """Print the points in clockwise order (screen coordinates, Y down)."""
    _run_points_command(ctx, "sort", points, sorted_clockwise, "Clockwise order")


@app.command(name="area", context_settings=POINT_COMMAND_SETTINGS)
def polygon_area(ctx: typer.Context, points: PointsArgument) -> None:
    """Print the signed area, area and winding direction of a polygon."""
    settings, show_header = ctx.obj
    command_logger = CommandLogger(structlog.get_logger("shapekit.cli"), "area")

    try:
        polygon = parse_points(points)
    except ShapekitError as e:
        command_logger.log_error(e)
        print_error(str(e))
        raise typer.Exit(code=1)

    command_logger.log_start(len(polygon))
    signed = signed_area(polygon)
    unsigned = area(polygon)
    direction = winding_direction(polygon)
    command_logger.log_complete(1)

    precision = settings.output.precision
    if settings.output.format is OutputFormat.JSON:
        print_area_json(signed, unsigned, direction, precision)
        return

    if show_header:
        print_step("Polygon area")
    print_area_table(signed, unsigned, direction, precision)


@app.command()
def filename(
    ctx: typer.Context,
    text: Annotated[
        str,
        typer.Argument(help="Text to turn into a filename", show_default=False),
    ],
    max_length: Annotated[
        int | None,
        typer.Option(
            "--max-length",
            "-m",
            help="Maximum filename length (default: 255)",
            min=1,
            max=4096,
        ),
    ] = None,
) -> None:
    """Print a filesystem-safe version of TEXT."""
    settings, show_header = ctx.obj
    if max_length is not None:
        settings.text = TextConfig(filename_max_length=max_length)

    command_logger = CommandLogger(structlog.get_logger("shapekit.cli"), "filename")
    command_logger.log_start(1)
    result = filename_safe(text, settings.text.filename_max_length)
    command_logger.log_complete(1)

    if settings.output.format is OutputFormat.JSON:
        console.print(json.dumps({"filename": result}), markup=False, highlight=False, soft_wrap=True)
        return

    if show_header:
        print_step("Filename")
        print_value("Safe name", result)
    else:
        console.print(result, markup=False, highlight=False, soft_wrap=True)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
