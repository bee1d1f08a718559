"""Unit tests for boundary side discovery."""

from unittest.mock import MagicMock

from pseudoregion.core.side_factory import BoundarySideFactory
from pseudoregion.domain import Point
from pseudoregion.utils import TopologyLogger


class TestDiscovery:
    """Tests for detecting sides shared by two pseudo regions."""

    def test_diagonal_split(self, diagonal_regions, diagonal_cells):
        """Only the shared diagonal survives."""
        factory = BoundarySideFactory(diagonal_regions, diagonal_cells)
        sides = factory.sides

        assert len(sides) == 1
        side = sides[0]
        assert side.is_equal_side(0.0, 0.0, 4.0, 4.0)
        assert side.associated_polygons == diagonal_regions

    def test_fine_vertices_added_in_order(self, diagonal_regions, diagonal_cells):
        """Fine vertices on the side are collected and sorted from x1, y1."""
        side = BoundarySideFactory(diagonal_regions, diagonal_cells).sides[0]
        assert side.points[0] == Point(side.x1, side.y1)
        assert side.points[-1] == Point(side.x2, side.y2)
        assert set(side.points) == {
            Point(0.0, 0.0),
            Point(1.0, 1.0),
            Point(3.0, 3.0),
            Point(4.0, 4.0),
        }
        assert side.points_between(0.0, 0.0, 4.0, 4.0) == [
            Point(0.0, 0.0),
            Point(1.0, 1.0),
            Point(3.0, 3.0),
            Point(4.0, 4.0),
        ]

    def test_vertical_split(self, split_regions):
        """The vertical line between two rectangles is the only side."""
        sides = BoundarySideFactory(split_regions, split_regions).sides
        assert len(sides) == 1
        assert sides[0].is_equal_side(2.0, 0.0, 2.0, 4.0)
        assert len(sides[0].points) == 2

    def test_star_has_three_sides(self, star_regions):
        """Three regions meeting at one point give three sides."""
        sides = BoundarySideFactory(star_regions, star_regions).sides
        assert len(sides) == 3
        assert all(side.associated_polygon_count == 2 for side in sides)
        assert any(side.is_equal_side(4.0, 0.0, 2.0, 2.0) for side in sides)
        assert any(side.is_equal_side(0.0, 0.0, 2.0, 2.0) for side in sides)
        assert any(side.is_equal_side(4.0, 4.0, 2.0, 2.0) for side in sides)

    def test_single_region_has_no_sides(self, base_square):
        """A single pseudo region has only outer edges."""
        assert BoundarySideFactory([base_square], [base_square]).sides == []

    def test_sides_are_cached(self, diagonal_regions, diagonal_cells):
        """Repeated access returns the same list."""
        factory = BoundarySideFactory(diagonal_regions, diagonal_cells)
        assert factory.sides is factory.sides

    def test_stats_recorded(self, diagonal_regions, diagonal_cells):
        """Candidate and kept counts reach the topology logger."""
        topology_logger = TopologyLogger(MagicMock())
        _ = BoundarySideFactory(diagonal_regions, diagonal_cells, topology_logger).sides
        assert topology_logger.stats.candidate_side_count == 5
        assert topology_logger.stats.boundary_side_count == 1


class TestMergeCollinear:
    """Tests for the collinear merge pass."""

    def test_star_diagonal_merged(self, star_regions):
        """The two halves of the diagonal fuse into one side."""
        factory = BoundarySideFactory(star_regions, star_regions)
        sides = factory.merge_collinear()

        assert len(sides) == 2
        merged = next(side for side in sides if side.is_equal_side(0.0, 0.0, 4.0, 4.0))
        assert merged.associated_polygon_count == 3
        assert set(merged.points) == {Point(0.0, 0.0), Point(2.0, 2.0), Point(4.0, 4.0)}
        assert merged.points[1] == Point(2.0, 2.0)
        assert factory.sides is sides

    def test_no_merge_at_corners(self, split_regions):
        """Nothing to merge leaves the sides unchanged."""
        factory = BoundarySideFactory(split_regions, split_regions)
        before = list(factory.sides)
        assert factory.merge_collinear() == before

    def test_merge_stats(self, star_regions):
        """Merged count is before minus after."""
        topology_logger = TopologyLogger(MagicMock())
        BoundarySideFactory(star_regions, star_regions, topology_logger).merge_collinear()
        assert topology_logger.stats.merged_side_count == 1
        assert topology_logger.stats.boundary_side_count == 2
