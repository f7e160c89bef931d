"""Converters between textual point notation and domain models.

Points are written as ``x,y`` with optional surrounding parentheses and
whitespace, e.g. ``3,4``, ``(3.5, -1)`` or ``1e3,0``.
"""

import json
import math
from collections.abc import Iterable, Sequence

from shapekit.domain import Point
from shapekit.exceptions import PointParseError


def parse_point(token: str) -> Point:
    """Parse a single ``x,y`` token.

    Args:
        token: Text of the point

    Returns:
        Point with float coordinates

    Raises:
        PointParseError: If the token is not two finite comma-separated numbers
    """
    text = token.strip()
    if text.startswith("(") and text.endswith(")"):
        text = text[1:-1]

    parts = text.split(",")
    if len(parts) != 2:
        raise PointParseError(token, "expected two comma-separated coordinates")

    try:
        x, y = float(parts[0]), float(parts[1])
    except ValueError as e:
        raise PointParseError(token, "coordinates must be numbers") from e

    if not (math.isfinite(x) and math.isfinite(y)):
        raise PointParseError(token, "coordinates must be finite")

    return Point(x, y)


def parse_points(tokens: Iterable[str]) -> list[Point]:
    """Parse every token into a point, preserving order."""
    return [parse_point(token) for token in tokens]


def format_point(point: Point, precision: int = 6) -> str:
    """Render a point as ``x,y`` rounded to ``precision`` decimal places."""
    return f"{point.x:.{precision}f},{point.y:.{precision}f}"


def points_to_json(points: Sequence[Point], precision: int = 6) -> str:
    """Serialize points to a JSON array of ``{"x": ..., "y": ...}`` objects."""
    return json.dumps(
        [{"x": round(p.x, precision), "y": round(p.y, precision)} for p in points]
    )
