"""Core point types.

This module defines the fundamental types for point-set geometry:
- Point: An immutable 2D point
- WindingDirection: Enum for polygon winding direction
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class WindingDirection(Enum):
    """Polygon winding direction.

    Directions are reported in screen coordinates, where Y grows downward.
    A polygon with zero area is reported as clockwise.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. Equality is exact
    comparison of both coordinates.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, values: tuple[float, float]) -> "Point":
        """Create a point from an (x, y) pair."""
        x, y = values
        return cls(float(x), float(y))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))
