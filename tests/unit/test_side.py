"""Unit tests for boundary sides."""

import pytest

from pseudoregion.core.side import BoundarySide, is_on_side
from pseudoregion.domain import Point, Polygon


def diagonal_side() -> BoundarySide:
    """Side (0,0)->(4,4) holding (1,1) and (3,3), sorted."""
    side = BoundarySide(0.0, 0.0, 4.0, 4.0)
    side.add_point(3.0, 3.0)
    side.add_point(1.0, 1.0)
    side.sort_points()
    return side


class TestIsOnSide:
    """Tests for the module level is_on_side."""

    @pytest.mark.parametrize(
        "point,expected",
        [
            ((2.0, 2.0), True),
            ((0.0, 0.0), True),
            ((4.0, 4.0), True),
            ((5.0, 5.0), False),
            ((2.0, 2.5), False),
        ],
    )
    def test_diagonal(self, point, expected):
        """Points on a diagonal side."""
        assert is_on_side(0.0, 0.0, 4.0, 4.0, *point) is expected

    def test_matches_method(self):
        """Module function agrees with the method."""
        side = BoundarySide(0.0, 0.0, 4.0, 0.0)
        for x, y in [(1.0, 0.0), (1.0, 1.0), (-1.0, 0.0)]:
            assert side.is_on_side(x, y) == is_on_side(0.0, 0.0, 4.0, 0.0, x, y)


class TestConstruction:
    """Tests for side construction."""

    def test_initial_points(self):
        """A new side holds its two endpoints."""
        side = BoundarySide(0.0, 0.0, 3.0, 4.0)
        assert side.points == [Point(0.0, 0.0), Point(3.0, 4.0)]
        assert side.length_sq == 25.0
        assert side.associated_polygon_count == 0

    def test_from_points(self):
        """Sides can be built from two points."""
        side = BoundarySide.from_points(Point(1.0, 2.0), Point(3.0, 4.0))
        assert (side.x1, side.y1, side.x2, side.y2) == (1.0, 2.0, 3.0, 4.0)
        assert side.segment.end == Point(3.0, 4.0)

    def test_str(self):
        """String form lists both endpoints."""
        assert str(BoundarySide(0.0, 0.0, 4.0, 4.0)) == "0.0 0.0 --> 4.0 4.0"

    def test_associated_polygons(self):
        """Associated polygons are recorded in order."""
        side = BoundarySide(0.0, 0.0, 4.0, 4.0)
        first = Polygon.from_coordinates([(0, 0), (4, 0), (4, 4)])
        second = Polygon.from_coordinates([(0, 0), (4, 4), (0, 4)])
        side.add_associated_polygon(first)
        side.add_associated_polygon(second)
        assert side.associated_polygons == [first, second]
        assert side.associated_polygon_count == 2


class TestIsEqualSide:
    """Tests for endpoint equality."""

    def test_same_order(self):
        """Same endpoints in the same order."""
        assert BoundarySide(0.0, 0.0, 4.0, 4.0).is_equal_side(0.0, 0.0, 4.0, 4.0)

    def test_reversed_order(self):
        """Same endpoints in reversed order."""
        assert BoundarySide(0.0, 0.0, 4.0, 4.0).is_equal_side(4.0, 4.0, 0.0, 0.0)

    def test_different_side(self):
        """Overlapping but different sides are not equal."""
        side = BoundarySide(0.0, 0.0, 4.0, 4.0)
        assert not side.is_equal_side(0.0, 0.0, 2.0, 2.0)
        assert not side.is_equal_side(0.0, 0.0, 4.0, 0.0)


class TestPoints:
    """Tests for point accumulation and ordering."""

    def test_add_point_on_side(self):
        """A point on the side is added once."""
        side = BoundarySide(0.0, 0.0, 4.0, 4.0)
        assert side.add_point(2.0, 2.0) is True
        assert side.add_point(2.0, 2.0) is False
        assert len(side.points) == 3

    def test_add_endpoint_is_duplicate(self):
        """Endpoints are already present."""
        side = BoundarySide(0.0, 0.0, 4.0, 4.0)
        assert side.add_point(4.0, 4.0) is False
        assert len(side.points) == 2

    def test_add_point_off_side(self):
        """Points off the side are rejected."""
        side = BoundarySide(0.0, 0.0, 4.0, 4.0)
        assert side.add_point(2.0, 3.0) is False
        assert side.add_point(5.0, 5.0) is False
        assert len(side.points) == 2

    def test_sort_points(self):
        """Points are ordered from the first endpoint."""
        side = diagonal_side()
        assert side.points == [
            Point(0.0, 0.0),
            Point(1.0, 1.0),
            Point(3.0, 3.0),
            Point(4.0, 4.0),
        ]

    def test_sort_from_second_orientation(self):
        """Ordering follows x1, y1 even when it is the larger endpoint."""
        side = BoundarySide(4.0, 4.0, 0.0, 0.0)
        side.add_point(1.0, 1.0)
        side.sort_points()
        assert side.points == [Point(4.0, 4.0), Point(1.0, 1.0), Point(0.0, 0.0)]

    def test_index_of_point(self):
        """Index lookup is exact."""
        side = diagonal_side()
        assert side.index_of_point(3.0, 3.0) == 2
        assert side.index_of_point(2.0, 2.0) == -1


class TestPointsBetween:
    """Tests for points_between."""

    def test_forward_run(self):
        """Run from first to last endpoint."""
        side = diagonal_side()
        assert side.points_between(0.0, 0.0, 4.0, 4.0) == [
            Point(0.0, 0.0),
            Point(1.0, 1.0),
            Point(3.0, 3.0),
            Point(4.0, 4.0),
        ]

    def test_reverse_run(self):
        """Run in the opposite direction is reversed."""
        side = diagonal_side()
        assert side.points_between(4.0, 4.0, 0.0, 0.0) == [
            Point(4.0, 4.0),
            Point(3.0, 3.0),
            Point(1.0, 1.0),
            Point(0.0, 0.0),
        ]

    def test_inner_run(self):
        """Runs between interior points."""
        side = diagonal_side()
        assert side.points_between(1.0, 1.0, 3.0, 3.0) == [Point(1.0, 1.0), Point(3.0, 3.0)]
        assert side.points_between(3.0, 3.0, 0.0, 0.0) == [
            Point(3.0, 3.0),
            Point(1.0, 1.0),
            Point(0.0, 0.0),
        ]

    def test_same_point(self):
        """Identical endpoints give no run."""
        assert diagonal_side().points_between(1.0, 1.0, 1.0, 1.0) == []

    def test_unknown_point(self):
        """A point not on the side gives no run."""
        side = diagonal_side()
        assert side.points_between(0.0, 0.0, 2.0, 2.0) == []
        assert side.points_between(9.0, 9.0, 4.0, 4.0) == []

    def test_run_is_a_copy(self):
        """Mutating a run does not change the side."""
        side = diagonal_side()
        run = side.points_between(0.0, 0.0, 4.0, 4.0)
        run.clear()
        assert len(side.points) == 4


class TestCollinearity:
    """Tests for is_on_same_straight_line and shares_endpoint."""

    def test_continuation(self):
        """Two sides continuing each other lie on one line."""
        first = BoundarySide(0.0, 0.0, 2.0, 2.0)
        second = BoundarySide(2.0, 2.0, 4.0, 4.0)
        assert first.is_on_same_straight_line(second)
        assert second.is_on_same_straight_line(first)
        assert first.shares_endpoint(second)

    def test_corner(self):
        """Sides meeting at an angle are not on one line."""
        first = BoundarySide(0.0, 0.0, 2.0, 2.0)
        second = BoundarySide(2.0, 2.0, 4.0, 2.0)
        assert first.shares_endpoint(second)
        assert not first.is_on_same_straight_line(second)

    def test_equal_sides(self):
        """A side is on the same line as its reversed copy."""
        first = BoundarySide(0.0, 0.0, 2.0, 2.0)
        assert first.is_on_same_straight_line(BoundarySide(2.0, 2.0, 0.0, 0.0))

    def test_parallel_sides(self):
        """Parallel sides on different lines do not match."""
        first = BoundarySide(0.0, 0.0, 2.0, 0.0)
        second = BoundarySide(2.0, 1.0, 4.0, 1.0)
        assert not first.is_on_same_straight_line(second)
        assert not first.shares_endpoint(second)


class TestMerge:
    """Tests for merging collinear sides."""

    def test_merge_continuation(self):
        """Merged side spans the two outer endpoints."""
        first = BoundarySide(0.0, 0.0, 2.0, 2.0)
        second = BoundarySide(2.0, 2.0, 4.0, 4.0)
        merged = first.merge(second)

        assert {(merged.x1, merged.y1), (merged.x2, merged.y2)} == {(0.0, 0.0), (4.0, 4.0)}
        assert set(merged.points) == {Point(0.0, 0.0), Point(2.0, 2.0), Point(4.0, 4.0)}
        assert merged.points[0] == Point(merged.x1, merged.y1)
        assert merged.points[1] == Point(2.0, 2.0)

    def test_merge_keeps_polygons_once(self):
        """Associated polygons of both sides are combined without duplicates."""
        a = Polygon.from_coordinates([(0, 0), (4, 0), (2, 2)])
        b = Polygon.from_coordinates([(4, 4), (0, 4), (2, 2)])
        c = Polygon.from_coordinates([(4, 0), (4, 4), (2, 2)])
        first = BoundarySide(0.0, 0.0, 2.0, 2.0)
        first.add_associated_polygon(a)
        first.add_associated_polygon(b)
        second = BoundarySide(2.0, 2.0, 4.0, 4.0)
        second.add_associated_polygon(b)
        second.add_associated_polygon(c)

        merged = first.merge(second)

        assert merged.associated_polygons == [a, b, c]

    def test_merge_contained_side_returns_longer(self):
        """Merging a contained side extends the longer side in place."""
        longer = BoundarySide(0.0, 0.0, 4.0, 0.0)
        shorter = BoundarySide(1.0, 0.0, 2.0, 0.0)
        merged = longer.merge(shorter)
        assert merged is longer
        assert merged.points == [
            Point(0.0, 0.0),
            Point(1.0, 0.0),
            Point(2.0, 0.0),
            Point(4.0, 0.0),
        ]

    def test_merge_other_is_longest(self):
        """When the other side is longest it is the result."""
        shorter = BoundarySide(1.0, 0.0, 2.0, 0.0)
        longer = BoundarySide(0.0, 0.0, 4.0, 0.0)
        assert shorter.merge(longer) is longer


class TestCoordinateKey:
    """Tests for sides matching points by a rounding key."""

    @staticmethod
    def rounded(x: float, y: float) -> tuple[float, float]:
        return (round(x, 6), round(y, 6))

    def test_nearly_equal_point_not_added(self):
        """A point sharing a key with a stored point is a duplicate."""
        side = BoundarySide(0.0, 0.0, 4.0, 4.0, key=self.rounded)
        assert side.add_point(2.0, 2.0) is True
        assert side.add_point(2.0000000001, 2.0000000001) is False
        assert len(side.points) == 3

    def test_lookup_by_key(self):
        """Runs are found from nearly equal endpoints."""
        side = BoundarySide(0.0, 0.0, 4.0, 4.0, key=self.rounded)
        side.add_point(2.0, 2.0)
        side.sort_points()
        assert side.points_between(4.0000000001, 4.0, 2.0, 2.0) == [
            Point(4.0, 4.0),
            Point(2.0, 2.0),
        ]

    def test_exact_by_default(self):
        """Without a key nearly equal points stay distinct."""
        side = BoundarySide(0.0, 0.0, 4.0, 4.0)
        side.add_point(2.0, 2.0)
        assert side.add_point(2.0000000001, 2.0000000001) is True

    def test_merge_keeps_key(self):
        """A side created by merging matches points by the same key."""
        first = BoundarySide(0.0, 0.0, 2.0, 2.0, key=self.rounded)
        second = BoundarySide(2.0, 2.0, 4.0, 4.0, key=self.rounded)
        merged = first.merge(second)
        assert merged is not first and merged is not second
        assert merged.index_of_point(2.0000000001, 2.0) == 1
