"""Core topology algorithms for pseudoregion.

This module contains the core algorithms for:

- Exact geometric predicates (orientation, on-segment, projection, area)
- Corner points and their location-update kinds
- Boundary side discovery between pseudo regions
- Corner classification across base, pseudo-region and fine polygons
- Deformable polygons sharing corner points

Key functions:
- relative_ccw: Orientation of a point relative to a segment
- is_on_segment: Exact on-segment test
- project_onto_segment: Clamp a desired location onto a segment
- shoelace_area: Unsigned ring area
- update_location: Apply a corner kind's update rule

Key classes:
- CornerPoint, CornerRegistry: Shared corners and their arena
- BoundarySide, BoundarySideFactory: Internal pseudo-region separators
- CornerClassifier, CornerMapFactory: Corner classification
- DeformablePolygon: Polygon over shared corners
- TessellationHolder: Orchestrates all of the above
"""

from pseudoregion.core.corner import (
    CornerKind,
    CornerPoint,
    CornerRegistry,
    FixedKind,
    FreeKind,
    LineConstrainedKind,
    update_location,
)
from pseudoregion.core.corner_factory import CornerClassifier, CornerMapFactory
from pseudoregion.core.deformable import DeformablePolygon
from pseudoregion.core.geometry import (
    DistanceToPoint,
    distance_sq,
    is_on_segment,
    point_line_distance,
    project_onto_segment,
    relative_ccw,
    shoelace_area,
)
from pseudoregion.core.holder import TessellationHolder
from pseudoregion.core.side import BoundarySide, is_on_side
from pseudoregion.core.side_factory import BoundarySideFactory

__all__ = [
    # Side classes
    "BoundarySide",
    "BoundarySideFactory",
    # Corner classes
    "CornerClassifier",
    "CornerKind",
    "CornerMapFactory",
    "CornerPoint",
    "CornerRegistry",
    "DeformablePolygon",
    "DistanceToPoint",
    "FixedKind",
    "FreeKind",
    "LineConstrainedKind",
    # Holder
    "TessellationHolder",
    # Geometry functions
    "distance_sq",
    "is_on_segment",
    "is_on_side",
    "point_line_distance",
    "project_onto_segment",
    "relative_ccw",
    "shoelace_area",
    "update_location",
]
