"""Core geometric value types for tessellation input.

This module defines the plain geometric types handed to the topology core by
the tessellation generator:
- Point: An immutable 2D coordinate
- Segment: An immutable line segment between two points
- Polygon: An ordered ring of points
"""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. Equality is exact
    coordinate equality.

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

    def distance_sq(self, x: float, y: float) -> float:
        """Squared Euclidean distance to (x, y)."""
        dx = self.x - x
        dy = self.y - y
        return dx * dx + dy * dy


@dataclass(frozen=True, slots=True)
class Segment:
    """A closed line segment from (x1, y1) to (x2, y2).

    Attributes:
        x1: X coordinate of the start point
        y1: Y coordinate of the start point
        x2: X coordinate of the end point
        y2: Y coordinate of the end point
    """

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def start(self) -> Point:
        """Start point of the segment."""
        return Point(self.x1, self.y1)

    @property
    def end(self) -> Point:
        """End point of the segment."""
        return Point(self.x2, self.y2)

    def length_sq(self) -> float:
        """Squared length of the segment."""
        dx = self.x2 - self.x1
        dy = self.y2 - self.y1
        return dx * dx + dy * dy

    def length(self) -> float:
        """Length of the segment."""
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)


@dataclass(eq=False)
class Polygon:
    """An ordered ring of points, closed implicitly from last to first.

    Polygons are compared by identity so that two coincident polygons from
    different tessellations stay distinguishable as dictionary keys and in
    association lists.

    Attributes:
        points: Vertices in ring order, without repeating the first point
    """

    points: list[Point]
    _cached_area: float | None = field(default=None, repr=False, init=False)

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[Sequence[float]]) -> "Polygon":
        """Build a polygon from a sequence of (x, y) pairs.

        Args:
            coordinates: Vertex coordinates in ring order

        Returns:
            Polygon instance
        """
        return cls(points=[Point(float(c[0]), float(c[1])) for c in coordinates])

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Iterate over the ring's edges, including the closing edge.

        Yields:
            (start, end) point pairs
        """
        n = len(self.points)
        for i in range(n):
            yield self.points[i], self.points[(i + 1) % n]

    def area(self) -> float:
        """Calculate the unsigned area using the shoelace formula.

        Result is cached; the point list is treated as read-only.

        Returns:
            Area of the polygon, 0.0 for fewer than three points
        """
        if self._cached_area is not None:
            return self._cached_area

        n = len(self.points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        self._cached_area = abs(area) / 2.0
        return self._cached_area

    def to_coordinates(self) -> list[tuple[float, float]]:
        """Convert to a list of (x, y) tuples."""
        return [p.to_tuple() for p in self.points]
