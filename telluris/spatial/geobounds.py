"""
Geographic Bounds
=================

Axis-aligned volume in geographic space, bounded by a south-west-floor
``min`` corner and a north-east-top ``max`` corner.

All operations are pure and return new instances. Degenerate results are
handled by saturation rather than failure:

- ``grow`` clamps latitude/longitude edges into the valid domain
- ``shrink`` collapses an axis onto its center line instead of inverting it
"""

import logging
from dataclasses import dataclass
from typing import Iterator, MutableSequence

import numpy as np

from telluris.errors import require, debug_require
from telluris.spatial.geographic import Geographic
from telluris.utils.constants import (
    MIN_LAT,
    MAX_LAT,
    MIN_LON,
    MAX_LON,
    MIN_ALT,
    MAX_ALT,
    DEFAULT_EPSILON,
)

logger = logging.getLogger(__name__)


def _lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation, exact at t=0 and t=1.

    For t in [0, 1] the result never leaves [start, end] through rounding.
    Other values of t extrapolate.
    """
    value = (1.0 - t) * start + t * end
    if 0.0 <= t <= 1.0:
        value = min(max(value, start), end)
    return value


@dataclass(frozen=True)
class GeoBounds:
    """Volume bounded by two geographic corners.

    Attributes
    ----------
    min : Geographic
        South-west-floor corner
    max : Geographic
        North-east-top corner

    Notes
    -----
    ``min <= max`` on every axis is checked at construction unless Python
    runs with ``-O``. Callers on optimised paths must order the corners
    themselves.
    """
    min: Geographic
    max: Geographic

    def __post_init__(self):
        debug_require(
            self.min.latitude <= self.max.latitude,
            f"inverted latitude edges: {self.min.latitude} > {self.max.latitude}",
        )
        debug_require(
            self.min.longitude <= self.max.longitude,
            f"inverted longitude edges: {self.min.longitude} > {self.max.longitude}",
        )
        debug_require(
            self.min.elevation <= self.max.elevation,
            f"inverted elevation edges: {self.min.elevation} > {self.max.elevation}",
        )

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def world(cls) -> "GeoBounds":
        """Bounds encompassing the whole supported domain."""
        return cls(
            Geographic(MIN_LAT, MIN_LON, MIN_ALT),
            Geographic(MAX_LAT, MAX_LON, MAX_ALT),
        )

    @classmethod
    def surface(cls) -> "GeoBounds":
        """Bounds encompassing the whole ellipsoid surface."""
        return cls.world().flatten()

    @classmethod
    def from_edges(
        cls,
        south: float,
        west: float,
        north: float,
        east: float,
        floor: float = 0.0,
        top: float = 0.0,
    ) -> "GeoBounds":
        """Build bounds from individual edge values."""
        return cls(Geographic(south, west, floor), Geographic(north, east, top))

    # =========================================================================
    # Edges and extents
    # =========================================================================

    @property
    def west(self) -> float:
        """Western edge (minimal longitude)."""
        return self.min.longitude

    @property
    def east(self) -> float:
        """Eastern edge (maximal longitude)."""
        return self.max.longitude

    @property
    def south(self) -> float:
        """Southern edge (minimal latitude)."""
        return self.min.latitude

    @property
    def north(self) -> float:
        """Northern edge (maximal latitude)."""
        return self.max.latitude

    @property
    def floor(self) -> float:
        """Minimal elevation."""
        return self.min.elevation

    @property
    def top(self) -> float:
        """Maximal elevation."""
        return self.max.elevation

    @property
    def span_lon(self) -> float:
        """Longitude span in degrees (``east - west``)."""
        return self.east - self.west

    @property
    def span_lat(self) -> float:
        """Latitude span in degrees (``north - south``)."""
        return self.north - self.south

    @property
    def height(self) -> float:
        """Elevation span in meters (``top - floor``)."""
        return self.top - self.floor

    # =========================================================================
    # Algebra
    # =========================================================================

    def flatten(self) -> "GeoBounds":
        """Return bounds with both corners on the ellipsoid surface."""
        return GeoBounds(self.min.flatten(), self.max.flatten())

    def expand(self, other: "GeoBounds") -> "GeoBounds":
        """Return the smallest bounds containing both this one and ``other``."""
        return GeoBounds(
            Geographic(
                min(self.south, other.south),
                min(self.west, other.west),
                min(self.floor, other.floor),
            ),
            Geographic(
                max(self.north, other.north),
                max(self.east, other.east),
                max(self.top, other.top),
            ),
        )

    @staticmethod
    def union(a: "GeoBounds", b: "GeoBounds") -> "GeoBounds":
        """Return the union of two bounds."""
        return a.expand(b)

    def grow(self, horizontal: float, vertical: float) -> "GeoBounds":
        """
        Widen the bounds outward, in degrees.

        Parameters
        ----------
        horizontal : float
            Amount moved west by the western edge and east by the eastern edge
        vertical : float
            Amount moved south by the southern edge and north by the northern edge

        Returns
        -------
        GeoBounds
            Grown bounds, clamped into the latitude/longitude domain.
            Elevations are untouched.
        """
        south = float(np.clip(self.south - vertical, MIN_LAT, MAX_LAT))
        north = float(np.clip(self.north + vertical, MIN_LAT, MAX_LAT))
        west = float(np.clip(self.west - horizontal, MIN_LON, MAX_LON))
        east = float(np.clip(self.east + horizontal, MIN_LON, MAX_LON))

        return GeoBounds(
            Geographic(south, west, self.floor),
            Geographic(north, east, self.top),
        )

    def shrink(self, horizontal: float, vertical: float) -> "GeoBounds":
        """
        Narrow the bounds inward, in degrees.

        If the shrink amount would make two edges cross each other, both
        edges of that axis are placed on the axis center line instead, so the
        result is never inverted. Elevations are untouched.

        Parameters
        ----------
        horizontal : float
            Non-negative amount removed from both the western and eastern edges
        vertical : float
            Non-negative amount removed from both the southern and northern edges

        Raises
        ------
        ContractViolation
            If either amount is negative
        """
        require(horizontal >= 0.0, f"horizontal shrink must be non-negative, got {horizontal}")
        require(vertical >= 0.0, f"vertical shrink must be non-negative, got {vertical}")

        south = self.south + vertical
        north = self.north - vertical
        west = self.west + horizontal
        east = self.east - horizontal

        center = self.center()

        if south > north:
            south = north = center.latitude

        if west > east:
            west = east = center.longitude

        return GeoBounds(
            Geographic(south, west, self.floor),
            Geographic(north, east, self.top),
        )

    # =========================================================================
    # Sampling
    # =========================================================================

    def sample(self, x: float, y: float, z: float) -> Geographic:
        """
        Return the coordinate at normalized position ``(x, y, z)``.

        ``x`` runs west to east, ``y`` south to north and ``z`` floor to top.
        Values in [0, 1] stay inside the bounds; values outside that range
        are not rejected and extrapolate.
        """
        return Geographic(
            _lerp(self.south, self.north, y),
            _lerp(self.west, self.east, x),
            _lerp(self.floor, self.top, z),
        )

    def center(self) -> Geographic:
        """Geographic center of the volume."""
        return self.sample(0.5, 0.5, 0.5)

    def grid(self, out: MutableSequence[Geographic], x_count: int, y_count: int) -> None:
        """
        Fill ``out`` with evenly spaced samples on the floor of the bounds.

        Samples are laid out row after row, south to north, each row running
        west to east. Corners are always included.

        Parameters
        ----------
        out : mutable sequence of Geographic
            Destination buffer, at least ``x_count * y_count`` long
        x_count : int
            Samples per row, greater than 1
        y_count : int
            Number of rows, greater than 1

        Raises
        ------
        ContractViolation
            If a count is too small or the buffer too short. Nothing is
            written in that case.
        """
        require(x_count > 1, f"x_count must be greater than 1, got {x_count}")
        require(y_count > 1, f"y_count must be greater than 1, got {y_count}")
        require(
            len(out) >= x_count * y_count,
            "the provided buffer is not big enough to store the grid "
            f"({len(out)} < {x_count * y_count})",
        )

        k = 0
        for row in range(y_count):
            v = row / (y_count - 1)
            for column in range(x_count):
                u = column / (x_count - 1)
                out[k] = self.sample(u, v, 0.0)
                k += 1

        logger.debug(f"Sampled {x_count}x{y_count} grid over {self}")

    def corners(self) -> Iterator[Geographic]:
        """Yield the eight corners, floor first then top."""
        for elevation in (self.floor, self.top):
            for latitude in (self.south, self.north):
                for longitude in (self.west, self.east):
                    yield Geographic(latitude, longitude, elevation)

    # =========================================================================
    # Predicates
    # =========================================================================

    def contains(self, point: Geographic) -> bool:
        """True if ``point`` lies inside the bounds, borders included."""
        return (
            self.south <= point.latitude <= self.north
            and self.west <= point.longitude <= self.east
            and self.floor <= point.elevation <= self.top
        )

    def intersects(self, other: "GeoBounds") -> bool:
        """True if the two volumes overlap. Touching faces do not count."""
        return (
            self.west < other.east
            and self.east > other.west
            and self.south < other.north
            and self.north > other.south
            and self.floor < other.top
            and self.top > other.floor
        )

    def is_close(self, other: "GeoBounds", epsilon: float = DEFAULT_EPSILON) -> bool:
        """Corner-wise absolute comparison within ``epsilon``."""
        return self.min.is_close(other.min, epsilon) and self.max.is_close(other.max, epsilon)
