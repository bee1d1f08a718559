"""Corner classification for every vertex of a nested tessellation.

Vertices are registered in a fixed order, and the first registration of a
coordinate decides its kind:

1. Base polygon vertices are fixed.
2. Pseudo-region vertices on a base polygon edge slide along that edge;
   all other pseudo-region vertices are free.
3. Fine-tessellation vertices follow the configured FineVertexPolicy.
"""

from collections.abc import Callable, Sequence

from pseudoregion.config import ClassificationConfig, FineVertexPolicy
from pseudoregion.core.corner import (
    CornerKind,
    CornerRegistry,
    FixedKind,
    FreeKind,
    LineConstrainedKind,
)
from pseudoregion.core.side import is_on_side
from pseudoregion.domain import Polygon, Segment
from pseudoregion.utils import TopologyLogger


class CornerClassifier:
    """Decides the kind of a single vertex from its position.

    The classifier only looks at the base polygon and the pseudo-region
    polygons; it does not know which coordinates are already registered.
    """

    def __init__(self, base_polygon: Polygon, pseudo_regions: Sequence[Polygon]) -> None:
        self.base_polygon = base_polygon
        self.pseudo_regions = pseudo_regions

    def base_edge_containing(self, x: float, y: float) -> Segment | None:
        """First base polygon edge the point lies on, or None."""
        return _edge_containing(self.base_polygon, x, y)

    def pseudo_region_edge_containing(self, x: float, y: float) -> Segment | None:
        """First pseudo-region polygon edge the point lies on, or None."""
        for polygon in self.pseudo_regions:
            edge = _edge_containing(polygon, x, y)
            if edge is not None:
                return edge
        return None

    def classify_pseudo_region_vertex(self, x: float, y: float) -> CornerKind:
        """Line-constrained on a base edge, free otherwise."""
        edge = self.base_edge_containing(x, y)
        if edge is not None:
            return LineConstrainedKind(edge)
        return FreeKind()

    def classify_tessellation_vertex(self, x: float, y: float) -> CornerKind:
        """Re-test a fine vertex against base and pseudo-region edges.

        Fixed on a base edge, free on a pseudo-region edge, fixed otherwise.
        """
        if self.base_edge_containing(x, y) is not None:
            return FixedKind()
        if self.pseudo_region_edge_containing(x, y) is not None:
            return FreeKind()
        return FixedKind()


class CornerMapFactory:
    """Builds the coordinate to corner registry for a nested tessellation.

    Example:
        factory = CornerMapFactory(base, pseudo_regions)
        registry = factory.create(tessellation)
        corner = registry.get(2.0, 2.0)
    """

    def __init__(
        self,
        base_polygon: Polygon,
        pseudo_regions: Sequence[Polygon],
        config: ClassificationConfig | None = None,
        topology_logger: TopologyLogger | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            base_polygon: Fixed outer boundary polygon
            pseudo_regions: Polygons of the pseudo-region tessellation
            config: Classification settings (defaults if None)
            topology_logger: Logger collecting build statistics
        """
        self.classifier = CornerClassifier(base_polygon, pseudo_regions)
        self.config = config if config is not None else ClassificationConfig()
        self._log = topology_logger if topology_logger is not None else TopologyLogger()

    def create(self, tessellation: Sequence[Polygon]) -> CornerRegistry:
        """Classify every vertex of the base, pseudo-region and fine polygons.

        Args:
            tessellation: Polygons of the fine tessellation

        Returns:
            Registry holding exactly one corner per distinct coordinate key
        """
        registry = CornerRegistry(key=self.config.coordinate_key)

        for point in self.classifier.base_polygon.points:
            self._register(registry, point.x, point.y, _fixed, "base")

        for polygon in self.classifier.pseudo_regions:
            for point in polygon.points:
                self._register(
                    registry,
                    point.x,
                    point.y,
                    self.classifier.classify_pseudo_region_vertex,
                    "pseudo_region",
                )

        if self.config.fine_vertex_policy == FineVertexPolicy.RETEST:
            classify_fine = self.classifier.classify_tessellation_vertex
        else:
            classify_fine = _fixed

        for polygon in tessellation:
            for point in polygon.points:
                self._register(registry, point.x, point.y, classify_fine, "tessellation")

        return registry

    def _register(
        self,
        registry: CornerRegistry,
        x: float,
        y: float,
        classify: Callable[[float, float], CornerKind],
        source: str,
    ) -> None:
        corner, created = registry.register(x, y, classify)
        if created:
            self._log.log_corner_classified(x, y, corner.kind.name, source)


def _fixed(x: float, y: float) -> CornerKind:  # noqa: ARG001
    return FixedKind()


def _edge_containing(polygon: Polygon, x: float, y: float) -> Segment | None:
    for start, end in polygon.edges():
        if is_on_side(start.x, start.y, end.x, end.y, x, y):
            return Segment(start.x, start.y, end.x, end.y)
    return None
