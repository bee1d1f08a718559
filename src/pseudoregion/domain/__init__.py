"""Domain models for pseudoregion.

This module contains the plain geometric value types that describe the
tessellations handed to the topology core. They carry no classification
state; corner classification lives in ``pseudoregion.core``.

Key classes:
- Point: An immutable 2D coordinate
- Segment: An immutable line segment
- Polygon: An ordered ring of points
"""

from pseudoregion.domain.polygon import Point, Polygon, Segment

__all__: list[str] = [
    "Point",
    "Polygon",
    "Segment",
]
