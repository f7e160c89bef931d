"""Tests for domain models to verify they work correctly."""

import pytest

from shapekit.domain import Point, Rect, Size, WindingDirection


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_from_tuple(self) -> None:
        """Test point creation from an (x, y) pair."""
        p = Point.from_tuple((3, 4))
        assert p == Point(3.0, 4.0)
        assert isinstance(p.x, float)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, -200.5)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_equality_is_exact(self) -> None:
        """Points compare equal only when both coordinates match exactly."""
        assert Point(0.1 + 0.2, 0.0) != Point(0.3, 0.0)
        assert Point(1.0, 2.0) == Point(1.0, 2.0)

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestWindingDirection:
    """Tests for WindingDirection enum."""

    def test_members(self) -> None:
        assert {d.name for d in WindingDirection} == {"CLOCKWISE", "COUNTER_CLOCKWISE"}


class TestRect:
    """Tests for Rect and Size."""

    def test_numeric_constructor_coerces_to_float(self) -> None:
        """Integer arguments are stored as floats."""
        rect = Rect(1, 2, 3, 4)
        assert rect == Rect(1.0, 2.0, 3.0, 4.0)
        assert isinstance(rect.width, float)

    def test_from_origin_size(self) -> None:
        """Test construction from origin and size."""
        rect = Rect.from_origin_size(Point(5.0, 6.0), Size(10.0, 20.0))
        assert rect.origin == Point(5.0, 6.0)
        assert rect.size == Size(10.0, 20.0)

    def test_from_size(self) -> None:
        """Size-only construction puts the origin at zero."""
        rect = Rect.from_size(Size(8.0, 2.0))
        assert rect == Rect(0.0, 0.0, 8.0, 2.0)

    def test_edges(self) -> None:
        """Test derived edge and midpoint properties."""
        rect = Rect(10, 20, 30, 40)
        assert (rect.min_x, rect.min_y) == (10.0, 20.0)
        assert (rect.max_x, rect.max_y) == (40.0, 60.0)
        assert (rect.mid_x, rect.mid_y) == (25.0, 40.0)

    def test_inset(self) -> None:
        """Inset moves every edge inward by delta."""
        assert Rect(0, 0, 10, 10).inset(2) == Rect(2, 2, 6, 6)

    def test_negative_inset_grows(self) -> None:
        assert Rect(0, 0, 10, 10).inset(-1) == Rect(-1, -1, 12, 12)

    def test_expand_is_negated_inset(self) -> None:
        """Expand moves every edge outward by delta."""
        rect = Rect(5, 5, 10, 4)
        assert rect.expand(3) == Rect(2, 2, 16, 10)
        assert rect.expand(3) == rect.inset(-3)

    def test_inset_past_size_collapses(self) -> None:
        """An inset larger than half the size collapses that axis at its midpoint."""
        rect = Rect(0, 0, 10, 4).inset(3)
        assert rect == Rect(3, 2, 4, 0)

        fully = Rect(0, 0, 4, 4).inset(5)
        assert fully == Rect(2, 2, 0, 0)

    def test_standardized(self) -> None:
        assert Rect(10, 5, -10, -5).standardized() == Rect(0, 0, 10, 5)
        assert Rect(1, 2, 3, 4).standardized() == Rect(1, 2, 3, 4)

    def test_inset_negative_size(self) -> None:
        """A rectangle with negative size is standardized before insetting."""
        assert Rect(0, 0, -10, -10).inset(1) == Rect(-9, -9, 8, 8)
        assert Rect(0, 0, -4, 10).inset(3) == Rect(-2, 3, 0, 4)

    def test_rect_immutable(self) -> None:
        rect = Rect(0, 0, 1, 1)
        with pytest.raises(AttributeError):
            rect.width = 2.0  # type: ignore
