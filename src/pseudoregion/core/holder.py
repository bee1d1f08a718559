"""Holder for a nested tessellation and its classified corner graph.

The holder ties the base polygon, the pseudo-region tessellation and the
fine tessellation to the boundary sides and corners derived from them. It is
the entry point for turning fine-tessellation polygons into deformable
polygons that share corner points.
"""

import time
from collections.abc import Sequence

import structlog

from pseudoregion.config import ClassificationConfig
from pseudoregion.core.corner import CornerPoint, CornerRegistry
from pseudoregion.core.corner_factory import CornerMapFactory
from pseudoregion.core.deformable import DeformablePolygon
from pseudoregion.core.side import BoundarySide
from pseudoregion.core.side_factory import BoundarySideFactory
from pseudoregion.domain import Point, Polygon
from pseudoregion.utils import TopologyLogger, TopologyStats


class TessellationHolder:
    """Geometric structures of a tessellation with pseudo regions.

    Boundary sides and the corner registry are built once, at construction,
    and not rebuilt afterwards. The input polygons are referenced, not
    copied.

    Example:
        holder = TessellationHolder(base, pseudo_regions, tessellation)
        for polygon in holder.deformable_polygons():
            print(polygon.current_area(), polygon.target_area)
    """

    def __init__(
        self,
        base_polygon: Polygon,
        pseudo_regions: Sequence[Polygon],
        tessellation: Sequence[Polygon],
        config: ClassificationConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Build sides and corners for a nested tessellation.

        Args:
            base_polygon: Fixed outer boundary polygon
            pseudo_regions: Pseudo-region tessellation of the base polygon
            tessellation: Fine tessellation inside the pseudo regions
            config: Classification settings (defaults if None)
            logger: Structured logger (package logger if None)
        """
        self.base_polygon = base_polygon
        self.pseudo_regions = pseudo_regions
        self.tessellation = tessellation
        self.config = config if config is not None else ClassificationConfig()
        self._log = TopologyLogger(logger)
        self._log.stats.start_time = time.time()

        side_factory = BoundarySideFactory(
            pseudo_regions, tessellation, self._log, key=self.config.coordinate_key
        )
        sides = side_factory.sides
        if self.config.merge_collinear_sides:
            sides = side_factory.merge_collinear()
        self._sides: tuple[BoundarySide, ...] = tuple(sides)

        corner_factory = CornerMapFactory(base_polygon, pseudo_regions, self.config, self._log)
        self._corners: CornerRegistry = corner_factory.create(tessellation)

        self._deformables: list[DeformablePolygon] | None = None

        self._log.stats.end_time = time.time()
        self._log.log_holder_built(
            len(tessellation), self._log.stats.duration_seconds * 1000
        )

    @property
    def sides(self) -> tuple[BoundarySide, ...]:
        """Boundary sides between pseudo regions."""
        return self._sides

    @property
    def corners(self) -> CornerRegistry:
        """Registry of every classified corner."""
        return self._corners

    @property
    def stats(self) -> TopologyStats:
        """Statistics collected while building."""
        return self._log.stats

    def corner(self, x: float, y: float) -> CornerPoint:
        """Corner registered at (x, y).

        Raises:
            CornerLookupError: If the coordinate belongs to none of the input polygons
        """
        return self._corners.get(x, y)

    def corners_for_polygon(self, polygon: Polygon) -> list[CornerPoint]:
        """All corners of a fine polygon, in ring order, starting at its first vertex.

        An edge running along a boundary side contributes every corner the
        side holds between the edge's endpoints, so the result can be longer
        than the polygon's vertex list. Each edge contributes its run without
        the end point, which the next edge starts with. Vertices sharing a
        coordinate key collapse into one corner, so no corner follows itself.

        Args:
            polygon: A polygon of the fine tessellation

        Returns:
            Shared corner points of the polygon

        Raises:
            CornerLookupError: If a vertex was never classified
        """
        corners: list[CornerPoint] = []
        for start, end in polygon.edges():
            run = self._points_on_edge(start, end)
            for point in run[:-1]:
                corner = self._corners.get(point.x, point.y)
                if not corners or corners[-1] is not corner:
                    corners.append(corner)
        if len(corners) > 1 and corners[-1] is corners[0]:
            corners.pop()
        return corners

    def deformable_polygons(self) -> list[DeformablePolygon]:
        """One deformable polygon per fine polygon, in tessellation order.

        Target areas are the fine polygons' measured areas. The list is
        built on first call, since building it wires the corner graph.
        """
        if self._deformables is None:
            self._deformables = [
                DeformablePolygon(self.corners_for_polygon(polygon), polygon.area())
                for polygon in self.tessellation
            ]
        return self._deformables

    def side_containing_edge(self, start: Point, end: Point) -> BoundarySide | None:
        """Boundary side holding both edge endpoints as distinct points, if any."""
        for side in self._sides:
            if side.points_between(start.x, start.y, end.x, end.y):
                return side
        return None

    def reset_visited(self) -> None:
        """Clear the visited flag of every corner."""
        self._corners.reset_visited()

    def _points_on_edge(self, start: Point, end: Point) -> list[Point]:
        for side in self._sides:
            points = side.points_between(start.x, start.y, end.x, end.y)
            if points:
                return points
        self._log.log_side_lookup_fallback(start.x, start.y, end.x, end.y)
        return [start, end]
