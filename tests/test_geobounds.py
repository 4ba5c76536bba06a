"""Tests for GeoBounds construction, algebra and sampling."""

import numpy as np
import pytest

from telluris.errors import ContractViolation
from telluris.spatial import Geographic, GeoBounds
from telluris.utils.constants import MIN_LAT, MAX_LAT, MIN_LON, MAX_LON, MIN_ALT, MAX_ALT


@pytest.fixture
def europe():
    """Bounds roughly covering Europe, from sea level to 10 km."""
    return GeoBounds(Geographic(35.0, -10.0, 0.0), Geographic(70.0, 40.0, 10_000.0))


class TestFactories:
    """Tests for world, surface and direct construction."""

    def test_world_covers_domain(self):
        w = GeoBounds.world()
        assert (w.south, w.west, w.floor) == (MIN_LAT, MIN_LON, MIN_ALT)
        assert (w.north, w.east, w.top) == (MAX_LAT, MAX_LON, MAX_ALT)

    def test_surface_is_flat_world(self):
        s = GeoBounds.surface()
        assert s.floor == 0.0 and s.top == 0.0
        assert (s.south, s.west, s.north, s.east) == (MIN_LAT, MIN_LON, MAX_LAT, MAX_LON)

    def test_from_edges(self):
        b = GeoBounds.from_edges(south=-10.0, west=-20.0, north=10.0, east=20.0, top=5.0)
        assert b == GeoBounds(Geographic(-10.0, -20.0, 0.0), Geographic(10.0, 20.0, 5.0))

    def test_inverted_corners_rejected(self):
        """Corner ordering is enforced at construction."""
        with pytest.raises(ContractViolation):
            GeoBounds(Geographic(10.0, 0.0, 0.0), Geographic(0.0, 10.0, 0.0))
        with pytest.raises(ContractViolation):
            GeoBounds(Geographic(0.0, 10.0, 0.0), Geographic(10.0, 0.0, 0.0))
        with pytest.raises(ContractViolation):
            GeoBounds(Geographic(0.0, 0.0, 10.0), Geographic(10.0, 10.0, 0.0))

    def test_degenerate_bounds_allowed(self):
        """Zero-span bounds are valid."""
        p = Geographic(1.0, 2.0, 3.0)
        b = GeoBounds(p, p)
        assert b.span_lat == 0.0 and b.span_lon == 0.0 and b.height == 0.0


class TestEdges:
    """Tests for edge accessors and extents."""

    def test_edges(self, europe):
        assert europe.west == -10.0
        assert europe.east == 40.0
        assert europe.south == 35.0
        assert europe.north == 70.0
        assert europe.floor == 0.0
        assert europe.top == 10_000.0

    def test_extents(self, europe):
        assert europe.span_lon == 50.0
        assert europe.span_lat == 35.0
        assert europe.height == 10_000.0

    def test_center(self, europe):
        assert europe.center() == Geographic(52.5, 15.0, 5_000.0)

    def test_corners(self, europe):
        corners = list(europe.corners())
        assert len(corners) == 8
        assert len(set(corners)) == 8
        assert Geographic(35.0, -10.0, 0.0) in corners
        assert Geographic(70.0, 40.0, 10_000.0) in corners


class TestAlgebra:
    """Tests for expand, grow, shrink and flatten."""

    def test_expand(self):
        a = GeoBounds(Geographic(0.0, 0.0, 0.0), Geographic(10.0, 10.0, 100.0))
        b = GeoBounds(Geographic(-5.0, 5.0, 50.0), Geographic(5.0, 20.0, 500.0))
        expected = GeoBounds(Geographic(-5.0, 0.0, 0.0), Geographic(10.0, 20.0, 500.0))
        assert a.expand(b) == expected
        assert GeoBounds.union(a, b) == expected
        assert b.expand(a) == expected

    def test_grow(self, europe):
        g = europe.grow(5.0, 2.0)
        assert (g.west, g.east) == (-15.0, 45.0)
        assert (g.south, g.north) == (33.0, 72.0)
        assert (g.floor, g.top) == (europe.floor, europe.top)

    def test_grow_clamps_to_domain(self, europe):
        g = europe.grow(1000.0, 1000.0)
        assert (g.south, g.west, g.north, g.east) == (MIN_LAT, MIN_LON, MAX_LAT, MAX_LON)

    def test_shrink(self, europe):
        s = europe.shrink(5.0, 2.0)
        assert (s.west, s.east) == (-5.0, 35.0)
        assert (s.south, s.north) == (37.0, 68.0)
        assert (s.floor, s.top) == (europe.floor, europe.top)

    def test_shrink_collapses_longitude_to_center(self, europe):
        """Crossing longitude edges collapse onto the center meridian."""
        s = europe.shrink(30.0, 0.0)
        assert s.west == s.east == 15.0
        assert (s.south, s.north) == (europe.south, europe.north)

    def test_shrink_collapses_latitude_to_center(self, europe):
        """Crossing latitude edges collapse onto the center parallel."""
        s = europe.shrink(0.0, 20.0)
        assert s.south == s.north == 52.5
        assert (s.west, s.east) == (europe.west, europe.east)

    def test_shrink_exactly_half_span_meets_in_middle(self, europe):
        s = europe.shrink(25.0, 17.5)
        assert s.span_lon == 0.0 and s.span_lat == 0.0

    @pytest.mark.parametrize("horizontal,vertical", [(-1.0, 0.0), (0.0, -1.0), (-0.1, -0.1)])
    def test_shrink_negative_raises(self, europe, horizontal, vertical):
        with pytest.raises(ContractViolation):
            europe.shrink(horizontal, vertical)

    def test_flatten(self):
        b = GeoBounds(Geographic(0.0, 0.0, -500.0), Geographic(1.0, 1.0, 500.0))
        f = b.flatten()
        assert f.floor == 0.0 and f.top == 0.0
        assert (f.south, f.west, f.north, f.east) == (0.0, 0.0, 1.0, 1.0)

    def test_operations_return_new_instances(self, europe):
        original = GeoBounds(europe.min, europe.max)
        europe.grow(1.0, 1.0)
        europe.shrink(1.0, 1.0)
        europe.flatten()
        europe.expand(GeoBounds.world())
        assert europe == original


class TestSample:
    """Tests for sample."""

    def test_corners_are_exact(self, europe):
        assert europe.sample(0.0, 0.0, 0.0) == europe.min
        assert europe.sample(1.0, 1.0, 1.0) == europe.max

    def test_axis_mapping(self, europe):
        """x runs along longitude, y along latitude, z along elevation."""
        p = europe.sample(0.2, 0.4, 0.6)
        assert np.isclose(p.lon, -10.0 + 50.0 * 0.2)
        assert np.isclose(p.lat, 35.0 + 35.0 * 0.4)
        assert np.isclose(p.elevation, 6_000.0)

    def test_extrapolation_not_rejected(self, europe):
        """Parameters outside [0, 1] extrapolate."""
        p = europe.sample(-0.1, 1.1, 2.0)
        assert np.isclose(p.lon, -15.0)
        assert np.isclose(p.lat, 73.5)
        assert np.isclose(p.elevation, 20_000.0)
        assert not europe.contains(p)


class TestGrid:
    """Tests for grid."""

    def test_world_2x2(self):
        """2x2 grid of the flat world yields the four corners, row-major."""
        out = [Geographic()] * 4
        GeoBounds.world().flatten().grid(out, 2, 2)

        expected = [
            Geographic(MIN_LAT, MIN_LON, 0.0),
            Geographic(MIN_LAT, MAX_LON, 0.0),
            Geographic(MAX_LAT, MIN_LON, 0.0),
            Geographic(MAX_LAT, MAX_LON, 0.0),
        ]
        for actual, wanted in zip(out, expected):
            assert actual.is_close(wanted, epsilon=0.001)

    def test_layout_is_south_to_north_west_to_east(self, europe):
        out = [Geographic()] * 12
        europe.grid(out, 4, 3)

        lats = [p.lat for p in out]
        lons = [p.lon for p in out]
        assert lats == [35.0] * 4 + [52.5] * 4 + [70.0] * 4
        assert np.allclose(lons, [-10.0, -10.0 + 50.0 / 3, -10.0 + 100.0 / 3, 40.0] * 3)

    def test_samples_lie_on_floor(self, europe):
        out = [Geographic()] * 9
        europe.grid(out, 3, 3)
        assert all(p.elevation == europe.floor for p in out)

    def test_larger_buffer_tail_untouched(self, europe):
        sentinel = Geographic(1.0, 1.0, 1.0)
        out = [sentinel] * 6
        europe.grid(out, 2, 2)
        assert out[4] == sentinel and out[5] == sentinel

    @pytest.mark.parametrize("x_count,y_count", [(1, 2), (2, 1), (0, 5), (1, 1)])
    def test_counts_too_small_raise(self, europe, x_count, y_count):
        out = [Geographic()] * 25
        with pytest.raises(ContractViolation):
            europe.grid(out, x_count, y_count)

    def test_buffer_too_small_raises_without_writing(self, europe):
        sentinel = Geographic(1.0, 1.0, 1.0)
        out = [sentinel] * 8
        with pytest.raises(ContractViolation):
            europe.grid(out, 3, 3)
        assert out == [sentinel] * 8


class TestPredicates:
    """Tests for contains and intersects."""

    def test_contains_inclusive(self, europe):
        assert europe.contains(europe.min)
        assert europe.contains(europe.max)
        assert europe.contains(Geographic(35.0, 15.0, 5_000.0))
        assert europe.contains(europe.center())

    def test_contains_rejects_outside(self, europe):
        assert not europe.contains(Geographic(34.999, 15.0, 5_000.0))
        assert not europe.contains(Geographic(50.0, 40.001, 5_000.0))
        assert not europe.contains(Geographic(50.0, 15.0, 10_000.1))
        assert not europe.contains(Geographic(50.0, 15.0, -0.1))

    def test_intersects_overlap(self, europe):
        other = GeoBounds(Geographic(60.0, 30.0, 5_000.0), Geographic(80.0, 60.0, 20_000.0))
        assert europe.intersects(other)
        assert other.intersects(europe)

    def test_touching_faces_do_not_intersect(self, europe):
        """Sharing only a face is not an intersection, unlike contains."""
        east_neighbour = GeoBounds(Geographic(35.0, 40.0, 0.0), Geographic(70.0, 60.0, 10_000.0))
        assert not europe.intersects(east_neighbour)
        assert europe.contains(east_neighbour.min)

    def test_disjoint(self, europe):
        other = GeoBounds(Geographic(-40.0, 100.0, 0.0), Geographic(-10.0, 150.0, 10.0))
        assert not europe.intersects(other)

    def test_flat_bounds_never_intersect(self):
        """Zero height fails the strict elevation overlap."""
        a = GeoBounds.surface()
        assert not a.intersects(a)

    def test_is_close(self, europe):
        nudged = GeoBounds(Geographic(35.0001, -10.0, 0.0), Geographic(70.0, 40.0, 10_000.0005))
        assert europe.is_close(nudged, epsilon=0.001)
        assert not europe.is_close(europe.grow(1.0, 0.0), epsilon=0.001)
