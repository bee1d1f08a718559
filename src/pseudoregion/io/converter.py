"""Conversion of tessellation documents into domain models.

A tessellation document is plain JSON:

    {
        "base": [[x, y], ...],
        "pseudo_regions": [[[x, y], ...], ...],
        "tessellation": [[[x, y], ...], ...]
    }

Rings list each vertex once, without repeating the first vertex at the end.
"""

from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from pseudoregion.domain import Polygon

Coordinate = Annotated[list[float], Field(min_length=2, max_length=2)]
Ring = Annotated[list[Coordinate], Field(min_length=1)]


class TessellationDocument(BaseModel):
    """Schema of a tessellation document."""

    model_config = ConfigDict(extra="forbid")

    base: Ring
    pseudo_regions: list[Ring] = Field(min_length=1)
    tessellation: list[Ring] = Field(min_length=1)


@dataclass
class TessellationInput:
    """The three polygon sets a tessellation holder is built from.

    Attributes:
        base_polygon: Fixed outer boundary
        pseudo_regions: Coarse partition of the base polygon
        tessellation: Fine cells inside the pseudo regions
    """

    base_polygon: Polygon
    pseudo_regions: list[Polygon]
    tessellation: list[Polygon]

    @property
    def vertex_count(self) -> int:
        """Total number of vertices over all three polygon sets."""
        return (
            len(self.base_polygon)
            + sum(len(p) for p in self.pseudo_regions)
            + sum(len(p) for p in self.tessellation)
        )


def document_to_domain(document: TessellationDocument) -> TessellationInput:
    """Convert a validated document into domain polygons.

    Args:
        document: Validated tessellation document

    Returns:
        TessellationInput with one Polygon per ring
    """
    return TessellationInput(
        base_polygon=Polygon.from_coordinates(document.base),
        pseudo_regions=[Polygon.from_coordinates(ring) for ring in document.pseudo_regions],
        tessellation=[Polygon.from_coordinates(ring) for ring in document.tessellation],
    )

