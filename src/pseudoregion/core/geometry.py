"""Geometric predicates for corner classification and boundary sides.

This module provides the exact predicates the topology core relies on:
- Relative orientation of a point to a segment (exact, no tolerance)
- Squared distances and point-to-line distance
- On-segment testing
- Projection of a point onto a closed segment
- Unsigned shoelace area

All functions work on plain floats and are pure and stateless.
"""

import math
from collections.abc import Sequence

from pseudoregion.domain import Point


def distance_sq(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared Euclidean distance between (x1, y1) and (x2, y2)."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


def relative_ccw(
    x1: float, y1: float, x2: float, y2: float, px: float, py: float
) -> int:
    """Orientation of point (px, py) relative to the segment (x1, y1)->(x2, y2).

    Uses the sign of the cross product. For collinear points the result
    tells whether the point lies before the start (-1), beyond the end (1)
    or on the closed segment (0).

    Args:
        x1: X coordinate of the segment start
        y1: Y coordinate of the segment start
        x2: X coordinate of the segment end
        y2: Y coordinate of the segment end
        px: X coordinate of the point
        py: Y coordinate of the point

    Returns:
        -1, 0 or 1

    Examples:
        >>> relative_ccw(0.0, 0.0, 10.0, 0.0, 5.0, 7.0)
        -1
        >>> relative_ccw(0.0, 0.0, 10.0, 0.0, 5.0, 0.0)
        0
        >>> relative_ccw(0.0, 0.0, 10.0, 0.0, 15.0, 0.0)
        1
    """
    x2 -= x1
    y2 -= y1
    px -= x1
    py -= y1

    ccw = px * y2 - py * x2
    if ccw == 0.0:
        # Collinear: project onto the segment to see which side of it we are on
        ccw = px * x2 + py * y2
        if ccw > 0.0:
            px -= x2
            py -= y2
            ccw = px * x2 + py * y2
            if ccw < 0.0:
                ccw = 0.0

    if ccw < 0.0:
        return -1
    if ccw > 0.0:
        return 1
    return 0


def point_line_distance(
    x1: float, y1: float, x2: float, y2: float, px: float, py: float
) -> float:
    """Distance from (px, py) to the infinite line through the two points.

    Returns the distance to (x1, y1) when both line points coincide.
    """
    x2 -= x1
    y2 -= y1
    px -= x1
    py -= y1

    length_sq = x2 * x2 + y2 * y2
    if length_sq == 0.0:
        return math.hypot(px, py)

    dot = px * x2 + py * y2
    dist_sq = px * px + py * py - dot * dot / length_sq
    if dist_sq < 0.0:
        dist_sq = 0.0
    return math.sqrt(dist_sq)


def is_on_segment(
    x1: float, y1: float, x2: float, y2: float, x: float, y: float
) -> bool:
    """Check whether (x, y) lies exactly on the closed segment.

    The point must be exactly collinear with the endpoints and no farther
    from either endpoint than the segment is long.

    Args:
        x1: X coordinate of the segment start
        y1: Y coordinate of the segment start
        x2: X coordinate of the segment end
        y2: Y coordinate of the segment end
        x: X coordinate of the point
        y: Y coordinate of the point

    Returns:
        True if the point is on the segment
    """
    if relative_ccw(x1, y1, x2, y2, x, y) != 0:
        return False
    length_sq = distance_sq(x1, y1, x2, y2)
    if distance_sq(x1, y1, x, y) > length_sq:
        return False
    return distance_sq(x2, y2, x, y) <= length_sq


def project_onto_segment(
    x1: float, y1: float, x2: float, y2: float, x: float, y: float
) -> tuple[float, float] | None:
    """Move (x, y) onto the closed segment along the segment's normal.

    The point is shifted by its distance to the line along the unit normal,
    towards the line. If the shifted point falls outside the segment it snaps
    to whichever endpoint is nearer to it.

    Args:
        x1: X coordinate of the segment start
        y1: Y coordinate of the segment start
        x2: X coordinate of the segment end
        y2: Y coordinate of the segment end
        x: Desired X coordinate
        y: Desired Y coordinate

    Returns:
        The location on the segment, or None for a zero-length segment

    Examples:
        >>> project_onto_segment(0.0, 0.0, 10.0, 0.0, 5.0, 7.0)
        (5.0, 0.0)
        >>> project_onto_segment(0.0, 0.0, 10.0, 0.0, 15.0, 3.0)
        (10.0, 0.0)
    """
    dx = x2 - x1
    dy = y2 - y1
    length = math.sqrt(dx * dx + dy * dy)
    if length == 0.0:
        return None

    dist_to_line = point_line_distance(x1, y1, x2, y2, x, y)
    offset_x = -dy * dist_to_line / length
    offset_y = dx * dist_to_line / length

    side = relative_ccw(x1, y1, x2, y2, x, y)
    nx = x + offset_x * side
    ny = y + offset_y * side

    dist_to_start = math.sqrt(distance_sq(x1, y1, nx, ny))
    dist_to_end = math.sqrt(distance_sq(x2, y2, nx, ny))
    if dist_to_start > length or dist_to_end > length:
        if dist_to_start < dist_to_end:
            return (x1, y1)
        return (x2, y2)

    return (nx, ny)


def shoelace_area(coordinates: Sequence[tuple[float, float]]) -> float:
    """Unsigned area of a ring of coordinates.

    Sums (y_i + y_{i+1}) * (x_i - x_{i+1}) over consecutive vertices,
    including the closing pair.

    Args:
        coordinates: Ring of (x, y) tuples

    Returns:
        Area of the ring, 0.0 for an empty ring

    Examples:
        >>> shoelace_area([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
        1.0
    """
    n = len(coordinates)
    if n == 0:
        return 0.0

    total = 0.0
    for i in range(n):
        xi, yi = coordinates[i]
        xj, yj = coordinates[(i + 1) % n]
        total += (yi + yj) * (xi - xj)
    return abs(total * 0.5)


class DistanceToPoint:
    """Sort key ordering points by squared distance to a base point.

    Example:
        points.sort(key=DistanceToPoint(0.0, 0.0))
    """

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = x
        self.y = y

    def __call__(self, point: Point) -> float:
        return point.distance_sq(self.x, self.y)
