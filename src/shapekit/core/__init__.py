"""Core geometry algorithms for shapekit.

All functions are designed to be:
- Stateless (safe to call concurrently on unshared inputs)
- Pure (no side effects, apart from the in-place ``sort_clockwise``)

Key functions:
- cross: 2D cross product turn test
- convex_hull: Graham scan convex hull
- centroid: Mean position of a point set
- sorted_clockwise / sort_clockwise: Clockwise ordering around the centroid
- signed_area / area: Shoelace polygon area
- is_clockwise / winding_direction: Polygon orientation
"""

from shapekit.core.geometry import (
    area,
    centroid,
    convex_hull,
    cross,
    is_clockwise,
    signed_area,
    sort_clockwise,
    sorted_clockwise,
    winding_direction,
)

__all__ = [
    "area",
    "centroid",
    "convex_hull",
    "cross",
    "is_clockwise",
    "signed_area",
    "sort_clockwise",
    "sorted_clockwise",
    "winding_direction",
]
