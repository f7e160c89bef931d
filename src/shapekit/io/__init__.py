"""Point notation layer for shapekit.

Converts between the ``x,y`` text notation used on the command line and the
domain models.

Key functions:
- parse_point / parse_points: Text to Point
- format_point / points_to_json: Point to text
"""

from shapekit.io.converter import format_point, parse_point, parse_points, points_to_json

__all__ = [
    "format_point",
    "parse_point",
    "parse_points",
    "points_to_json",
]
