"""Shared tessellation fixtures.

All fixtures live inside the square (0,0)-(4,4).
"""

import pytest

from pseudoregion.domain import Polygon


def square(size: float = 4.0) -> Polygon:
    return Polygon.from_coordinates([(0, 0), (size, 0), (size, size), (0, size)])


@pytest.fixture
def base_square() -> Polygon:
    """Base polygon (0,0),(4,0),(4,4),(0,4)."""
    return square()


@pytest.fixture
def diagonal_regions() -> list[Polygon]:
    """Two triangles split along the diagonal (0,0)-(4,4)."""
    return [
        Polygon.from_coordinates([(0, 0), (4, 0), (4, 4)]),
        Polygon.from_coordinates([(0, 0), (4, 4), (0, 4)]),
    ]


@pytest.fixture
def diagonal_cells() -> list[Polygon]:
    """Fine cells whose vertices put (1,1) and (3,3) on the diagonal."""
    return [
        Polygon.from_coordinates([(0, 0), (4, 0), (4, 4)]),
        Polygon.from_coordinates([(0, 0), (4, 4), (0, 4)]),
        Polygon.from_coordinates([(1, 1), (2, 1), (1.5, 0.5)]),
        Polygon.from_coordinates([(3, 3), (3, 2), (4, 2)]),
    ]


@pytest.fixture
def split_regions() -> list[Polygon]:
    """Two rectangles split by the vertical line x = 2."""
    return [
        Polygon.from_coordinates([(0, 0), (2, 0), (2, 4), (0, 4)]),
        Polygon.from_coordinates([(2, 0), (4, 0), (4, 4), (2, 4)]),
    ]


@pytest.fixture
def star_regions() -> list[Polygon]:
    """Three regions meeting at the free interior vertex (2,2)."""
    return [
        Polygon.from_coordinates([(0, 0), (4, 0), (2, 2)]),
        Polygon.from_coordinates([(4, 0), (4, 4), (2, 2)]),
        Polygon.from_coordinates([(4, 4), (0, 4), (0, 0), (2, 2)]),
    ]
