"""Corner points and their location-update kinds.

A corner point is a classified vertex shared by every polygon and boundary
side that touches its coordinate. How it may move is decided once, at
classification time, by its kind:

- FixedKind: never moves
- FreeKind: moves anywhere
- LineConstrainedKind: slides along a captured reference segment

Corners are created only through a CornerRegistry, which owns them and
indexes them by coordinate key.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pseudoregion.core.geometry import project_onto_segment
from pseudoregion.domain import Point, Segment
from pseudoregion.exceptions import CornerLookupError

if TYPE_CHECKING:
    from pseudoregion.core.deformable import DeformablePolygon


@dataclass(frozen=True, slots=True)
class FixedKind:
    """Location updates are ignored."""

    name = "fixed"


@dataclass(frozen=True, slots=True)
class FreeKind:
    """Location updates are applied verbatim."""

    name = "free"


@dataclass(frozen=True, slots=True)
class LineConstrainedKind:
    """Location updates are projected onto a reference segment.

    The segment is a value copy, so later changes to the edge it came
    from do not affect the corner.

    Attributes:
        segment: The segment the corner always stays on
    """

    segment: Segment

    name = "line_constrained"


CornerKind = FixedKind | FreeKind | LineConstrainedKind


def update_location(
    kind: CornerKind, current: tuple[float, float], x: float, y: float
) -> tuple[float, float]:
    """Compute where a corner of the given kind ends up when asked to move.

    Args:
        kind: The corner's kind
        current: The corner's current (x, y)
        x: Desired X coordinate
        y: Desired Y coordinate

    Returns:
        The new (x, y) location
    """
    match kind:
        case FixedKind():
            return current
        case FreeKind():
            return (x, y)
        case LineConstrainedKind(segment=s):
            projected = project_onto_segment(s.x1, s.y1, s.x2, s.y2, x, y)
            return current if projected is None else projected
    raise TypeError(f"Unknown corner kind: {kind!r}")


class CornerPoint:
    """A classified vertex shared across polygons and boundary sides.

    Attributes:
        index: Position of this corner in its owning registry
        kind: Location-update rule, fixed at creation
        visited: Transient marker for graph traversals
        incident_corners: Corners sharing a polygon edge with this one.
            A neighbour appears once per polygon edge that links them.
        associated_polygons: Deformable polygons referencing this corner
    """

    __slots__ = (
        "_x",
        "_y",
        "associated_polygons",
        "incident_corners",
        "index",
        "kind",
        "visited",
    )

    def __init__(self, x: float, y: float, kind: CornerKind, index: int = -1) -> None:
        self._x = x
        self._y = y
        self.kind = kind
        self.index = index
        self.visited = False
        self.incident_corners: list[CornerPoint] = []
        self.associated_polygons: list[DeformablePolygon] = []

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def is_fixed(self) -> bool:
        return isinstance(self.kind, FixedKind)

    def to_tuple(self) -> tuple[float, float]:
        return (self._x, self._y)

    def to_point(self) -> Point:
        """Snapshot of the current location."""
        return Point(self._x, self._y)

    def set_location(self, x: float, y: float) -> tuple[float, float]:
        """Move as close to (x, y) as this corner's kind allows.

        Args:
            x: Desired X coordinate
            y: Desired Y coordinate

        Returns:
            The location actually taken
        """
        self._x, self._y = update_location(self.kind, (self._x, self._y), x, y)
        return (self._x, self._y)

    def add_incident_corner(self, corner: CornerPoint) -> None:
        self.incident_corners.append(corner)

    def add_associated_polygon(self, polygon: DeformablePolygon) -> None:
        self.associated_polygons.append(polygon)

    def __repr__(self) -> str:
        return f"CornerPoint(x={self._x!r}, y={self._y!r}, kind={self.kind.name}, index={self.index})"


class CornerRegistry:
    """Arena of corner points addressed by index and by coordinate key.

    The registry is the only place corners are created. Registering a
    coordinate that is already present returns the existing corner
    untouched, so the first registration decides the kind.

    Example:
        registry = CornerRegistry()
        corner = registry.register(1.0, 2.0, lambda x, y: FreeKind())[0]
        assert registry.get(1.0, 2.0) is corner
    """

    def __init__(
        self,
        key: Callable[[float, float], tuple[float, float]] | None = None,
    ) -> None:
        """Initialize an empty registry.

        Args:
            key: Maps a coordinate to its deduplication key (exact by default)
        """
        self._key = key if key is not None else _exact_key
        self._corners: list[CornerPoint] = []
        self._index_by_key: dict[tuple[float, float], int] = {}

    def register(
        self, x: float, y: float, classify: Callable[[float, float], CornerKind]
    ) -> tuple[CornerPoint, bool]:
        """Return the corner at (x, y), creating it if needed.

        Args:
            x: X coordinate
            y: Y coordinate
            classify: Called with (x, y) only when the coordinate is new, to pick its kind

        Returns:
            Tuple of (corner, created)
        """
        key = self._key(x, y)
        index = self._index_by_key.get(key)
        if index is not None:
            return self._corners[index], False

        corner = CornerPoint(x, y, classify(x, y), index=len(self._corners))
        self._corners.append(corner)
        self._index_by_key[key] = corner.index
        return corner, True

    def find(self, x: float, y: float) -> CornerPoint | None:
        """Return the corner at (x, y), or None if not registered."""
        index = self._index_by_key.get(self._key(x, y))
        return None if index is None else self._corners[index]

    def get(self, x: float, y: float) -> CornerPoint:
        """Return the corner at (x, y).

        Raises:
            CornerLookupError: If no corner is registered at the coordinate
        """
        corner = self.find(x, y)
        if corner is None:
            raise CornerLookupError(x, y)
        return corner

    def __getitem__(self, index: int) -> CornerPoint:
        return self._corners[index]

    def __contains__(self, coordinate: object) -> bool:
        if not isinstance(coordinate, tuple) or len(coordinate) != 2:
            return False
        return self._key(*coordinate) in self._index_by_key

    def __len__(self) -> int:
        return len(self._corners)

    def __iter__(self) -> Iterator[CornerPoint]:
        return iter(self._corners)

    def as_mapping(self) -> dict[tuple[float, float], CornerPoint]:
        """Coordinate key to corner mapping, as registered."""
        return {key: self._corners[i] for key, i in self._index_by_key.items()}

    def reset_visited(self) -> None:
        """Clear the visited flag of every corner."""
        for corner in self._corners:
            corner.visited = False


def _exact_key(x: float, y: float) -> tuple[float, float]:
    return (x, y)
