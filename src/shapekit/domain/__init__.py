"""Domain models for shapekit.

All models are immutable value types (frozen dataclasses with slots) with no
identity beyond their coordinates.

Key classes:
- Point: A 2D point
- Size: A width/height pair
- Rect: An axis-aligned rectangle with inset/expand helpers
- WindingDirection: Polygon orientation
"""

from shapekit.domain.point import Point, WindingDirection
from shapekit.domain.rect import Rect, Size

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Rect",
    "Size",
]
