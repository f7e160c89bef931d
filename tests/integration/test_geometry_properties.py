"""Property checks for the geometry core over seeded random point sets.

Tests cover:
- Hull containment and idempotence
- Area invariance under rotation of the vertex order
- Orientation flip under reversal
- Clockwise sort as a permutation of its input
"""

import random
from collections import Counter

import pytest

from shapekit.core import (
    area,
    convex_hull,
    cross,
    is_clockwise,
    signed_area,
    sorted_clockwise,
)
from shapekit.domain import Point

SEEDS = list(range(25))


def _random_points(seed: int, n: int | None = None, integer: bool = False) -> list[Point]:
    rng = random.Random(seed)
    count = n if n is not None else rng.randint(3, 60)
    if integer:
        # Small grid so duplicates and collinear runs are common
        return [Point(float(rng.randint(-5, 5)), float(rng.randint(-5, 5))) for _ in range(count)]
    return [Point(rng.uniform(-100, 100), rng.uniform(-100, 100)) for _ in range(count)]


def _is_inside_or_on(hull: list[Point], p: Point, tol: float = 1e-9) -> bool:
    n = len(hull)
    return all(cross(hull[i], hull[(i + 1) % n], p) >= -tol for i in range(n))


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("integer", [False, True])
def test_hull_contains_every_point(seed, integer):
    """Every input point lies on or inside the hull."""
    points = _random_points(seed, integer=integer)
    hull = convex_hull(points)
    if len(hull) < 3:
        pytest.skip("degenerate hull")

    scale = max(max(abs(p.x), abs(p.y)) for p in points) or 1.0
    for p in points:
        assert _is_inside_or_on(hull, p, tol=1e-9 * scale * scale)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("integer", [False, True])
def test_hull_is_strictly_convex(seed, integer):
    """Consecutive hull vertices always make a strict counter-clockwise turn."""
    hull = convex_hull(_random_points(seed, integer=integer))
    n = len(hull)
    if n < 3:
        pytest.skip("degenerate hull")
    for i in range(n):
        assert cross(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) > 0


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("integer", [False, True])
def test_hull_idempotent(seed, integer):
    """The hull of a hull is the same polygon."""
    hull = convex_hull(_random_points(seed, integer=integer))
    again = convex_hull(hull)
    assert len(again) == len(hull)
    assert set(again) == set(hull)


@pytest.mark.parametrize("seed", SEEDS)
def test_hull_starts_at_lowest_point(seed):
    points = _random_points(seed)
    lowest = min(points, key=lambda p: (p.y, p.x))
    assert convex_hull(points)[0] == lowest


@pytest.mark.parametrize("seed", SEEDS)
def test_area_invariant_under_rotation(seed):
    """Starting the traversal at a different vertex does not change the area."""
    polygon = _random_points(seed)
    expected = area(polygon)
    for k in range(len(polygon)):
        rotated = polygon[k:] + polygon[:k]
        assert area(rotated) == pytest.approx(expected, rel=1e-9, abs=1e-9)


@pytest.mark.parametrize("seed", SEEDS)
def test_reversal_flips_orientation(seed):
    """Reversing a simple polygon's vertex order flips its orientation."""
    polygon = sorted_clockwise(convex_hull(_random_points(seed)))
    if abs(signed_area(polygon)) < 1e-9:
        pytest.skip("zero-area polygon")
    assert is_clockwise(polygon) != is_clockwise(list(reversed(polygon)))
    assert signed_area(list(reversed(polygon))) == pytest.approx(-signed_area(polygon))


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("integer", [False, True])
def test_sorted_clockwise_is_permutation(seed, integer):
    """Clockwise sort keeps every point, duplicates included."""
    points = _random_points(seed, integer=integer)
    result = sorted_clockwise(points)
    assert Counter(result) == Counter(points)
    assert result[0] == points[0]


@pytest.mark.parametrize("seed", SEEDS)
def test_sorted_convex_polygon_is_clockwise(seed):
    """Shuffled hull vertices sort back into a clockwise polygon."""
    hull = convex_hull(_random_points(seed))
    if len(hull) < 3:
        pytest.skip("degenerate hull")
    shuffled = list(hull)
    random.Random(seed).shuffle(shuffled)

    result = sorted_clockwise(shuffled)
    assert is_clockwise(result)
    assert area(result) == pytest.approx(area(hull))
