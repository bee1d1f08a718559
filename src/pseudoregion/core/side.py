"""Boundary sides of a pseudo-region tessellation.

A boundary side is an edge shared by two pseudo-region polygons. Such an
edge is a pseudo separator: fine-tessellation cells on either side meet
along it, and every fine vertex lying on it has to be known in order, so a
fine edge running along the side can be expanded into all the corners in
between.
"""

from collections.abc import Callable

from pseudoregion.core.geometry import DistanceToPoint, distance_sq, is_on_segment
from pseudoregion.domain import Point, Polygon, Segment


def is_on_side(x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> bool:
    """Check whether (x, y) lies on the side (x1, y1)->(x2, y2).

    Same test as BoundarySide.is_on_side without building a side.
    """
    return is_on_segment(x1, y1, x2, y2, x, y)


class BoundarySide:
    """An internal edge of the pseudo-region tessellation.

    Points on the side start as the two endpoints and grow through
    add_point. Index-based lookups (points_between) are only meaningful
    after sort_points has been called.

    Attributes:
        x1: X coordinate of the first endpoint
        y1: Y coordinate of the first endpoint
        x2: X coordinate of the second endpoint
        y2: Y coordinate of the second endpoint
        length_sq: Squared length of the side
        associated_polygons: Pseudo-region polygons having this side as an edge
        points: Points lying on the side
    """

    def __init__(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        key: Callable[[float, float], tuple[float, float]] | None = None,
    ) -> None:
        """Initialize a side from its two endpoints.

        Args:
            x1: X coordinate of the first endpoint
            y1: Y coordinate of the first endpoint
            x2: X coordinate of the second endpoint
            y2: Y coordinate of the second endpoint
            key: Maps a coordinate to the key points are matched by (exact by default)
        """
        self._key = key if key is not None else _exact_key
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2
        self.length_sq = distance_sq(x1, y1, x2, y2)
        self.associated_polygons: list[Polygon] = []
        self.points: list[Point] = [Point(x1, y1), Point(x2, y2)]

    @classmethod
    def from_points(
        cls,
        start: Point,
        end: Point,
        key: Callable[[float, float], tuple[float, float]] | None = None,
    ) -> "BoundarySide":
        return cls(start.x, start.y, end.x, end.y, key)

    @property
    def segment(self) -> Segment:
        return Segment(self.x1, self.y1, self.x2, self.y2)

    @property
    def associated_polygon_count(self) -> int:
        return len(self.associated_polygons)

    def add_associated_polygon(self, polygon: Polygon) -> None:
        self.associated_polygons.append(polygon)

    def is_equal_side(self, x1: float, y1: float, x2: float, y2: float) -> bool:
        """Check whether (x1, y1)->(x2, y2) has the same endpoints, in either order."""
        if x1 == self.x1 and y1 == self.y1 and x2 == self.x2 and y2 == self.y2:
            return True
        return x2 == self.x1 and y2 == self.y1 and x1 == self.x2 and y1 == self.y2

    def is_on_side(self, x: float, y: float) -> bool:
        """Check whether (x, y) lies exactly on this side.

        The point must be exactly collinear with the endpoints and within
        the side's squared length of both of them. No tolerance is applied.
        """
        return is_on_segment(self.x1, self.y1, self.x2, self.y2, x, y)

    def is_on_same_straight_line(self, other: "BoundarySide") -> bool:
        """Check whether other lies on the same straight line as this side.

        Both sides must fit on the longest segment spanned by their four
        endpoints, which means they overlap or touch end to end.
        """
        if self.is_equal_side(other.x1, other.y1, other.x2, other.y2):
            return True
        longest = self._longest_side(other)
        return (
            longest.is_on_side(other.x1, other.y1)
            and longest.is_on_side(other.x2, other.y2)
            and longest.is_on_side(self.x1, self.y1)
            and longest.is_on_side(self.x2, self.y2)
        )

    def shares_endpoint(self, other: "BoundarySide") -> bool:
        ends = {(self.x1, self.y1), (self.x2, self.y2)}
        return (other.x1, other.y1) in ends or (other.x2, other.y2) in ends

    def index_of_point(self, x: float, y: float) -> int:
        """Position of the point matching (x, y) by key, or -1."""
        target = self._key(x, y)
        for i, point in enumerate(self.points):
            if self._key(point.x, point.y) == target:
                return i
        return -1

    def add_point(self, x: float, y: float) -> bool:
        """Add (x, y) if it lies on this side and no point with its key is present.

        Returns:
            True if the point was added
        """
        if self.is_on_side(x, y) and self.index_of_point(x, y) < 0:
            self.points.append(Point(x, y))
            return True
        return False

    def sort_points(self) -> None:
        """Order the points by squared distance to the first endpoint."""
        self.points.sort(key=DistanceToPoint(self.x1, self.y1))

    def points_between(self, xa: float, ya: float, xb: float, yb: float) -> list[Point]:
        """Points from (xa, ya) to (xb, yb) along this side, both inclusive.

        The run follows the direction from the first point to the second.
        An empty list means the edge does not run along this side: either
        point is unknown to the side, or both are the same point.
        """
        index_a = self.index_of_point(xa, ya)
        index_b = self.index_of_point(xb, yb)
        if index_a < 0 or index_b < 0 or index_a == index_b:
            return []
        if index_a < index_b:
            return self.points[index_a:index_b + 1]
        return self.points[index_b:index_a + 1][::-1]

    def merge(self, other: "BoundarySide") -> "BoundarySide":
        """Combine this side with a collinear side into the longest one.

        The result spans the two farthest apart of the four endpoints and
        carries the points and associated polygons of both sides, sorted.
        If one of the two sides already is the longest, that side object is
        returned, extended in place.

        Args:
            other: A side on the same straight line as this one

        Returns:
            The merged side
        """
        merged = self._longest_side(other)
        for point in self.points:
            merged.add_point(point.x, point.y)
        for point in other.points:
            merged.add_point(point.x, point.y)
        for polygon in self.associated_polygons:
            if polygon not in merged.associated_polygons:
                merged.add_associated_polygon(polygon)
        for polygon in other.associated_polygons:
            if polygon not in merged.associated_polygons:
                merged.add_associated_polygon(polygon)
        merged.sort_points()
        return merged

    def _longest_side(self, other: "BoundarySide") -> "BoundarySide":
        d1 = distance_sq(self.x1, self.y1, self.x2, self.y2)
        d2 = distance_sq(other.x1, other.y1, other.x2, other.y2)
        d3 = distance_sq(other.x1, other.y1, self.x2, self.y2)
        d4 = distance_sq(other.x1, other.y1, self.x1, self.y1)
        d5 = distance_sq(other.x2, other.y2, self.x2, self.y2)
        d6 = distance_sq(other.x2, other.y2, self.x1, self.y1)

        if d1 >= d2 and d1 >= d3 and d1 >= d4 and d1 >= d5 and d1 >= d6:
            return self
        if d2 >= d3 and d2 >= d4 and d2 >= d5 and d2 >= d6:
            return other
        if d3 >= d4 and d3 >= d5 and d3 >= d6:
            return BoundarySide(other.x1, other.y1, self.x2, self.y2, self._key)
        if d4 >= d5 and d4 >= d6:
            return BoundarySide(other.x1, other.y1, self.x1, self.y1, self._key)
        if d5 >= d6:
            return BoundarySide(other.x2, other.y2, self.x2, self.y2, self._key)
        return BoundarySide(other.x2, other.y2, self.x1, self.y1, self._key)

    def __repr__(self) -> str:
        return (
            f"BoundarySide(({self.x1}, {self.y1}) -> ({self.x2}, {self.y2}), "
            f"points={len(self.points)})"
        )

    def __str__(self) -> str:
        return f"{self.x1} {self.y1} --> {self.x2} {self.y2}"


def _exact_key(x: float, y: float) -> tuple[float, float]:
    return (x, y)
