"""Pseudoregion - Corner classification for deformable tessellations.

Pseudoregion classifies every vertex of a nested polygon tessellation as fixed,
free or constrained to a base-polygon edge, and groups the internal separators
of a coarse pseudo-region tessellation into boundary sides. The resulting
shared corner graph lets a downstream deformation step move corners without
breaking the topology of the fine tessellation.

Example:
    $ pseudoregion inspect treemap.json

This prints the classified corners and the boundary sides found in the
tessellation described by treemap.json.
"""

__version__ = "0.1.0"
__author__ = "Julia Schueler"

__all__ = ["__author__", "__version__"]
