"""Deformable polygons built from shared corner points."""

from collections.abc import Sequence

from pseudoregion.core.corner import CornerPoint
from pseudoregion.core.geometry import shoelace_area
from pseudoregion.domain import Polygon


class DeformablePolygon:
    """A polygon whose vertices are shared, movable corner points.

    Construction wires the corner graph: every corner records this polygon,
    and every pair of consecutive corners (including the closing pair)
    records each other as incident neighbours.

    Attributes:
        corners: Corner references in ring order (not copies)
        target_area: Area the polygon should be driven towards
    """

    def __init__(self, corners: Sequence[CornerPoint], target_area: float) -> None:
        self.corners: list[CornerPoint] = list(corners)
        self.target_area = target_area
        self._connect_corners()

    def current_area(self) -> float:
        """Current area from the corners' present locations (shoelace).

        Assumes the ring is simple.
        """
        return shoelace_area([corner.to_tuple() for corner in self.corners])

    def area_error(self) -> float:
        """Signed difference between current and target area."""
        return self.current_area() - self.target_area

    def to_polygon(self) -> Polygon:
        """Snapshot the current corner locations as a plain polygon."""
        return Polygon(points=[corner.to_point() for corner in self.corners])

    def __len__(self) -> int:
        return len(self.corners)

    def __repr__(self) -> str:
        return f"DeformablePolygon(corners={len(self.corners)}, target_area={self.target_area!r})"

    def _connect_corners(self) -> None:
        n = len(self.corners)
        for i, corner in enumerate(self.corners):
            corner.add_associated_polygon(self)
            neighbor = self.corners[(i + 1) % n]
            corner.add_incident_corner(neighbor)
            neighbor.add_incident_corner(corner)
