"""Discovery of boundary sides in a pseudo-region tessellation.

Every edge of every pseudo-region polygon becomes a candidate side. Only
candidates shared by exactly two pseudo-region polygons are internal
separators; edges on the outer boundary (one polygon) and artifacts are
dropped. Each surviving side is then populated with the fine-tessellation
vertices that lie on it.
"""

from collections.abc import Callable, Sequence

from pseudoregion.core.side import BoundarySide
from pseudoregion.domain import Polygon
from pseudoregion.utils import TopologyLogger


class BoundarySideFactory:
    """Detects the boundary sides of a pseudo-region tessellation.

    Sides are computed on first access of ``sides`` and cached.

    Example:
        factory = BoundarySideFactory(pseudo_regions, tessellation)
        for side in factory.sides:
            print(side, len(side.points))
    """

    def __init__(
        self,
        pseudo_regions: Sequence[Polygon],
        tessellation: Sequence[Polygon],
        topology_logger: TopologyLogger | None = None,
        key: Callable[[float, float], tuple[float, float]] | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            pseudo_regions: Polygons of the pseudo-region tessellation
            tessellation: Polygons of the fine tessellation
            topology_logger: Logger collecting build statistics
            key: Coordinate key sides match points by (exact if None)
        """
        self._pseudo_regions = pseudo_regions
        self._tessellation = tessellation
        self._log = topology_logger if topology_logger is not None else TopologyLogger()
        self._key = key
        self._sides: list[BoundarySide] | None = None

    @property
    def sides(self) -> list[BoundarySide]:
        """Boundary sides, detected and populated on first access."""
        if self._sides is None:
            candidates = self._detect_candidate_sides()
            self._sides = [side for side in candidates if side.associated_polygon_count == 2]
            self._log.log_sides_discovered(len(candidates), len(self._sides))
            for side in self._sides:
                self._add_tessellation_points(side)
                side.sort_points()
                self._log.log_side_points(str(side), len(side.points))
        return self._sides

    def merge_collinear(self) -> list[BoundarySide]:
        """Fuse sides that share an endpoint and lie on one straight line.

        Runs until no further pair can be merged. Replaces the cached side
        list and returns it.

        Returns:
            The merged side list
        """
        sides = list(self.sides)
        before = len(sides)

        merged_any = True
        while merged_any:
            merged_any = False
            for i in range(len(sides)):
                for j in range(i + 1, len(sides)):
                    first, second = sides[i], sides[j]
                    if first.shares_endpoint(second) and first.is_on_same_straight_line(second):
                        sides[i] = first.merge(second)
                        del sides[j]
                        merged_any = True
                        break
                if merged_any:
                    break

        self._sides = sides
        self._log.log_sides_merged(before, len(sides))
        return sides

    def _detect_candidate_sides(self) -> list[BoundarySide]:
        candidates: list[BoundarySide] = []
        for polygon in self._pseudo_regions:
            for start, end in polygon.edges():
                side = self._find_side(candidates, start.x, start.y, end.x, end.y)
                if side is None:
                    side = BoundarySide(start.x, start.y, end.x, end.y, self._key)
                    candidates.append(side)
                side.add_associated_polygon(polygon)
        return candidates

    @staticmethod
    def _find_side(
        sides: list[BoundarySide], x1: float, y1: float, x2: float, y2: float
    ) -> BoundarySide | None:
        for side in sides:
            if side.is_equal_side(x1, y1, x2, y2):
                return side
        return None

    def _add_tessellation_points(self, side: BoundarySide) -> None:
        for polygon in self._tessellation:
            for point in polygon.points:
                side.add_point(point.x, point.y)
