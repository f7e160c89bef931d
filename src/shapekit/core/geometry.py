"""Geometric operations on ordered point sets.

This module provides the point-set geometry core:
- Cross product turn test
- Convex hull (Graham scan)
- Clockwise ordering around the centroid
- Signed area, area and orientation (shoelace formula)

Clockwise ordering, signed area and orientation assume screen coordinates,
where Y grows downward. All functions are pure and stateless; inputs are
never modified except by ``sort_clockwise``, which exists to reorder a list
in place.
"""

import logging
from collections.abc import MutableSequence, Sequence
from functools import cmp_to_key

from shapekit.domain import Point, WindingDirection

logger = logging.getLogger(__name__)


def cross(o: Point, a: Point, b: Point) -> float:
    """Cross product of vectors OA and OB.

    Positive for a counter-clockwise turn O -> A -> B, zero when the three
    points are collinear, negative for a clockwise turn.

    Examples:
        >>> cross(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0))
        1.0
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _distance_sq(a: Point, b: Point) -> float:
    return (a.x - b.x) * (a.x - b.x) + (a.y - b.y) * (a.y - b.y)


def convex_hull(points: Sequence[Point]) -> list[Point]:
    """Calculate the convex hull of a point set using a Graham scan.

    The pivot is the lowest point (smallest y, ties broken by smallest x).
    The remaining points are ordered counter-clockwise around the pivot by
    the sign of their cross product; points collinear with the pivot are
    ordered nearest first. A stack scan then drops every point that does not
    make a strict counter-clockwise turn.

    Args:
        points: Points to enclose, in any order

    Returns:
        Hull vertices in counter-clockwise order starting at the pivot.
        Inputs with fewer than 3 points are returned unchanged. Collinear or
        duplicate-only inputs may produce a 1 or 2 point hull.

    Examples:
        >>> square = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
        >>> convex_hull(square + [Point(2, 2)]) == square
        True
    """
    if len(points) < 3:
        return list(points)

    ordered = sorted(points, key=lambda p: (p.y, p.x))
    p0 = ordered[0]

    def by_angle(a: Point, b: Point) -> int:
        turn = cross(p0, a, b)
        if turn > 0:
            return -1
        if turn < 0:
            return 1
        da, db = _distance_sq(p0, a), _distance_sq(p0, b)
        return (da > db) - (da < db)

    hull = [p0]
    for point in sorted(ordered[1:], key=cmp_to_key(by_angle)):
        while len(hull) > 1 and cross(hull[-2], hull[-1], point) <= 0:
            hull.pop()
        hull.append(point)

    logger.debug("Convex hull: %d of %d points", len(hull), len(points))
    return hull


def centroid(points: Sequence[Point]) -> Point:
    """Arithmetic mean of a point set.

    Each point contributes ``p / n`` to the running sum. An empty input
    yields the origin.
    """
    n = len(points)
    cx = cy = 0.0
    for p in points:
        cx += p.x / n
        cy += p.y / n
    return Point(cx, cy)


def _clockwise_less(center: Point, a: Point, b: Point) -> bool:
    """Whether ``a`` precedes ``b`` in clockwise order around ``center``."""
    ax, ay = a.x - center.x, a.y - center.y
    bx, by = b.x - center.x, b.y - center.y

    if ax >= 0 and bx < 0:
        return False
    if ax < 0 and bx >= 0:
        return True
    if ax == 0 and bx == 0:
        if ay >= 0 or by >= 0:
            return a.y < b.y
        return b.y < a.y

    # (center -> a) x (center -> b)
    det = ax * by - bx * ay
    if det < 0:
        return False
    if det > 0:
        return True

    # Same ray from the center: farther point first
    return ax * ax + ay * ay > bx * bx + by * by


def sorted_clockwise(points: Sequence[Point]) -> list[Point]:
    """Return the points ordered clockwise around their centroid.

    Uses screen coordinates (Y grows downward). The result is a permutation
    of the input that starts with the input's first point.

    Args:
        points: Points to order

    Returns:
        New list in clockwise order, or ``[]`` for empty input

    Examples:
        >>> pts = [Point(0, 0), Point(0, 4), Point(4, 4), Point(4, 0)]
        >>> sorted_clockwise(pts)
        [Point(x=0, y=0), Point(x=4, y=0), Point(x=4, y=4), Point(x=0, y=4)]
    """
    if not points:
        return []

    center = centroid(points)

    def compare(i: int, j: int) -> int:
        if _clockwise_less(center, points[i], points[j]):
            return -1
        if _clockwise_less(center, points[j], points[i]):
            return 1
        return 0

    # Sort indices so the first input point is found by position, not value
    order = sorted(range(len(points)), key=cmp_to_key(compare))
    start = order.index(0)
    logger.debug("Clockwise sort: rotating by %d", start)

    return [points[i] for i in order[start:] + order[:start]]


def sort_clockwise(points: MutableSequence[Point]) -> None:
    """Reorder ``points`` in place clockwise around their centroid.

    See ``sorted_clockwise`` for the ordering rules.
    """
    points[:] = sorted_clockwise(points)


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Sums ``(p2.x - p1.x) * (p2.y + p1.y)`` over consecutive vertices,
    wrapping from the last vertex to the first. In screen coordinates
    (Y grows downward) the sign indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: Vertices in traversal order

    Returns:
        Signed area in square units. Returns 0.0 for fewer than 2 points.

    Examples:
        >>> signed_area([Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)])
        -16.0
        >>> signed_area([Point(0, 0), Point(0, 4), Point(4, 4), Point(4, 0)])
        16.0
    """
    n = len(points)
    total = 0.0
    for i in range(n):
        p1 = points[i]
        p2 = points[(i + 1) % n]
        total += (p2.x - p1.x) * (p2.y + p1.y)

    return total / 2.0


def area(points: Sequence[Point]) -> float:
    """Calculate the non-negative area of a polygon."""
    return abs(signed_area(points))


def is_clockwise(points: Sequence[Point]) -> bool:
    """Determine if the vertices are ordered clockwise in screen coordinates.

    A polygon with zero signed area (collinear or degenerate) counts as
    clockwise.
    """
    return signed_area(points) <= 0


def winding_direction(points: Sequence[Point]) -> WindingDirection:
    """Classify the winding direction of a polygon.

    Args:
        points: Vertices in traversal order

    Returns:
        WindingDirection.CLOCKWISE when ``is_clockwise`` holds, otherwise
        WindingDirection.COUNTER_CLOCKWISE
    """
    if is_clockwise(points):
        return WindingDirection.CLOCKWISE
    return WindingDirection.COUNTER_CLOCKWISE
