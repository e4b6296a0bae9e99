"""Tests for point-in-polygon, contained tiles, simplification and duplicates."""

import pytest

from map_areas.geometry import (
    contained_tiles,
    contains_tile,
    duplicate_indices,
    is_redundant,
    simplify_positions,
)
from map_areas.model import Path, PolyArea, Position

TRIANGLE = [(0, 0), (10, 0), (0, 10)]


class TestContainsTile:
    """Tests for the scalar tile-centre ray cast."""

    def test_square_contains_centre(self, square_polygon):
        assert square_polygon.contains(Position(5, 5))

    def test_square_excludes_outside_tiles(self, square_polygon):
        """Tiles just outside either side are not contained."""
        assert not square_polygon.contains(Position(-1, 5))
        assert not square_polygon.contains(Position(11, 5))

    def test_edge_tiles(self, square_polygon):
        """The tile at the min corner is inside, the tile at the max vertex is not."""
        assert square_polygon.contains(Position(0, 0))
        assert square_polygon.contains(Position(9, 9))
        assert not square_polygon.contains(Position(10, 5))

    def test_triangle(self):
        assert contains_tile(1, 1, TRIANGLE)
        assert not contains_tile(8, 8, TRIANGLE)

    def test_degenerate_polygon(self):
        """Fewer than three vertices enclose nothing."""
        assert not contains_tile(0, 0, [(0, 0), (5, 5)])
        assert not contains_tile(0, 0, [])


class TestContainedTiles:
    """Tests for the vectorized containment grid."""

    def test_square_tile_count(self, square_polygon):
        tiles = square_polygon.contained_tiles()
        assert len(tiles) == 100
        assert tiles[0] == Position(0, 0)
        assert tiles[-1] == Position(9, 9)

    def test_row_major_order(self, square_polygon):
        tiles = square_polygon.contained_tiles()
        assert tiles[1] == Position(1, 0)
        assert tiles[10] == Position(0, 1)

    def test_matches_scalar_test(self):
        """Every tile agrees with the scalar ray cast."""
        expected = {
            (x, y)
            for x in range(-2, 12)
            for y in range(-2, 12)
            if contains_tile(x, y, TRIANGLE)
        }
        assert set(contained_tiles(TRIANGLE)) == expected
        assert (1, 1) in expected

    def test_tiles_carry_polygon_plane(self):
        polygon = PolyArea([Position(0, 0, 2), Position(2, 0, 2), Position(2, 2, 2), Position(0, 2, 2)])
        assert {pos.z for pos in polygon.contained_tiles()} == {2}

    def test_path_needs_three_points(self):
        """A path previews its enclosed tiles only once it has three points."""
        path = Path([Position(0, 0), Position(4, 0)])
        assert path.contained_tiles() == []
        path.add(Position(4, 4))
        path.add(Position(0, 4))
        assert len(path.contained_tiles()) == 16


class TestSimplify:
    """Tests for lossy path simplification."""

    def test_horizontal_run_collapses(self, horizontal_path):
        """Five collinear points reduce to their endpoints."""
        removed = horizontal_path.simplify()
        assert removed == 3
        assert horizontal_path.positions == [Position(0, 0), Position(4, 0)]

    def test_idempotent(self, horizontal_path):
        """Simplifying twice is a no-op the second time."""
        horizontal_path.simplify()
        once = list(horizontal_path.positions)
        assert horizontal_path.simplify() == 0
        assert horizontal_path.positions == once

    def test_reversal_is_kept(self):
        """A back-and-forth turn is collinear but not redundant."""
        positions = [Position(0, 0), Position(5, 0), Position(2, 0)]
        assert simplify_positions(positions) == positions

    def test_corner_is_kept(self):
        positions = [Position(0, 0), Position(1, 0), Position(2, 0), Position(2, 1), Position(2, 2)]
        assert simplify_positions(positions) == [Position(0, 0), Position(2, 0), Position(2, 2)]

    def test_diagonal_run(self):
        positions = [Position(i, i) for i in range(4)]
        assert simplify_positions(positions) == [Position(0, 0), Position(3, 3)]

    def test_plane_change_is_kept(self):
        a, b, c = Position(0, 0, 0), Position(1, 0, 1), Position(2, 0, 1)
        assert not is_redundant(a, b, c)
        assert simplify_positions([a, b, c]) == [a, b, c]

    def test_short_paths_untouched(self):
        assert simplify_positions([Position(0, 0), Position(1, 0)]) == [Position(0, 0), Position(1, 0)]


class TestDuplicates:
    """Tests for duplicate vertex detection."""

    def test_duplicate_indices(self):
        """Duplicates match on x/y only and every member is reported."""
        positions = [
            Position(0, 0),
            Position(1, 1),
            Position(0, 0, 1),
            Position(2, 2),
            Position(1, 1),
        ]
        assert duplicate_indices(positions) == [0, 1, 2, 4]

    def test_no_duplicates(self, square_polygon):
        assert square_polygon.duplicate_indices() == []


class TestVertexChainEdits:
    """Tests for moving chains and editing single vertices."""

    def test_polygon_move_shifts_every_vertex(self):
        polygon = PolyArea([Position(0, 0, 2), Position(10, 0, 2), Position(10, 10, 2)])
        polygon.move(5, -3)
        assert polygon.positions == [Position(5, -3, 2), Position(15, -3, 2), Position(15, 7, 2)]
        assert polygon.plane == 2

    def test_path_move(self, horizontal_path):
        horizontal_path.move(1, 1)
        assert horizontal_path.positions == [Position(x + 1, 1) for x in range(5)]

    def test_move_changes_containment(self, square_polygon):
        """Containment follows the moved vertices."""
        square_polygon.move(20, 0)
        assert not square_polygon.contains(Position(5, 5))
        assert square_polygon.contains(Position(25, 5))

    def test_set_vertex(self, square_polygon):
        square_polygon.set_vertex(2, Position(20, 20))
        assert square_polygon[2] == Position(20, 20)
        assert len(square_polygon) == 4
        assert square_polygon.contains(Position(15, 15))

    def test_set_vertex_out_of_range(self, horizontal_path):
        with pytest.raises(IndexError):
            horizontal_path.set_vertex(5, Position(0, 0))
