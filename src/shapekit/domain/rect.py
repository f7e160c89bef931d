"""Rectangle and size value types."""

from dataclasses import dataclass

from shapekit.domain.point import Point


@dataclass(frozen=True, slots=True)
class Size:
    """A width/height pair.

    Attributes:
        width: Horizontal extent
        height: Vertical extent
    """

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle.

    Constructed directly from numbers (``Rect(x, y, width, height)``), or via
    ``from_origin_size`` and ``from_size``. Integer arguments are stored as
    floats.

    Attributes:
        x: X coordinate of the origin
        y: Y coordinate of the origin
        width: Horizontal extent
        height: Vertical extent
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        # frozen: coerce through object.__setattr__
        for name in ("x", "y", "width", "height"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def from_origin_size(cls, origin: Point, size: Size) -> "Rect":
        """Create a rectangle from its origin and size."""
        return cls(origin.x, origin.y, size.width, size.height)

    @classmethod
    def from_size(cls, size: Size) -> "Rect":
        """Create a rectangle of the given size at the zero origin."""
        return cls.from_origin_size(Point(0.0, 0.0), size)

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2.0

    def standardized(self) -> "Rect":
        """Return the same area with a non-negative width and height."""
        x, y, width, height = self.x, self.y, self.width, self.height
        if width < 0:
            x, width = x + width, -width
        if height < 0:
            y, height = y + height, -height
        return Rect(x, y, width, height)

    def inset(self, delta: float) -> "Rect":
        """Return a rectangle with every edge moved inward by ``delta``.

        The rectangle is standardized first, so a negative width or height
        is treated as the same area with a positive size. A negative
        ``delta`` moves the edges outward. When the inset consumes the whole
        width (or height), that axis collapses to zero at the rectangle's
        midpoint.

        Args:
            delta: Distance to move each edge

        Returns:
            The inset rectangle

        Examples:
            >>> Rect(0, 0, 10, 10).inset(2)
            Rect(x=2.0, y=2.0, width=6.0, height=6.0)
        """
        rect = self.standardized()
        x, width = rect.x + delta, rect.width - 2 * delta
        y, height = rect.y + delta, rect.height - 2 * delta

        if width < 0:
            x, width = rect.mid_x, 0.0
        if height < 0:
            y, height = rect.mid_y, 0.0

        return Rect(x, y, width, height)

    def expand(self, delta: float) -> "Rect":
        """Return a rectangle with every edge moved outward by ``delta``."""
        return self.inset(-delta)
