"""
2D geometry helpers.
NO UI DEPENDENCIES.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position on the map."""
    x: float
    y: float

    def distance_to(self, other: 'Point') -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def offset(self, dx: float, dy: float) -> 'Point':
        """Return a new point shifted by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


ORIGIN = Point(0.0, 0.0)


def distance_to(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return a.distance_to(b)
