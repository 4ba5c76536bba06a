"""
Earth-Centered, Earth-Fixed Transform
=====================================

Converts geodetic coordinates on an oblate reference ellipsoid into the
cartesian frame used for rendering.

Frames
------
The intermediate (geodetic) frame has north along positive Z, the
intersection of the prime meridian and the equator (0N, 0E) on positive X,
and (0N, 90E) on positive Y.

The render frame swaps Y and Z so that the "up" axis of render space is the
polar axis of the ellipsoid: a render-space vector is ``(x, z, y)`` of the
intermediate frame.

References
----------
- Cozzi, P. and Ring, K. (2011). 3D Engine Design for Virtual Globes. CRC Press.
- Bowring, B.R. (1976). Transformation from spatial to geographical
  coordinates. Survey Review, 23(181).
"""

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from telluris.errors import require
from telluris.spatial.geographic import Geographic
from telluris.spatial.transformations.base import SpatialReference
from telluris.utils.constants import (
    MIN_LAT,
    MAX_LAT,
    MIN_LON,
    MAX_LON,
    MIN_ALT,
    MAX_ALT,
    WGS84_SEMI_MAJOR_AXIS,
    WGS84_SEMI_MINOR_AXIS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ellipsoid:
    """Parameters defining an oblate reference ellipsoid.

    Attributes
    ----------
    semi_major_axis : float
        Equatorial radius in meters
    semi_minor_axis : float
        Polar radius in meters
    name : str
        Identifier for the ellipsoid
    """
    semi_major_axis: float
    semi_minor_axis: float
    name: str = "custom"

    def __post_init__(self):
        require(self.semi_minor_axis > 0.0, "semi-minor axis must be positive")
        require(
            self.semi_major_axis >= self.semi_minor_axis,
            "semi-major axis must not be shorter than the semi-minor axis",
        )

    @property
    def flattening(self) -> float:
        """f = (a - b) / a"""
        return (self.semi_major_axis - self.semi_minor_axis) / self.semi_major_axis

    @property
    def eccentricity_squared(self) -> float:
        """First eccentricity squared: e² = (a² - b²) / a²"""
        return 1.0 - (self.semi_minor_axis / self.semi_major_axis) ** 2

    @property
    def second_eccentricity_squared(self) -> float:
        """Second eccentricity squared: e'² = (a² - b²) / b²"""
        return (self.semi_major_axis / self.semi_minor_axis) ** 2 - 1.0

    @property
    def radii_squared(self) -> np.ndarray:
        """Squared radii (a², a², b²) in the intermediate frame."""
        a2 = self.semi_major_axis * self.semi_major_axis
        b2 = self.semi_minor_axis * self.semi_minor_axis
        return np.array([a2, a2, b2], dtype=np.float64)


WGS84 = Ellipsoid(WGS84_SEMI_MAJOR_AXIS, WGS84_SEMI_MINOR_AXIS, "WGS84")


def _to_render_frame(v: np.ndarray) -> np.ndarray:
    # (x, y, z) -> (x, z, y); works on single vectors and (N, 3) stacks
    return v[..., [0, 2, 1]]


class ECEF(SpatialReference):
    """Earth-centered, earth-fixed spatial reference.

    Parameters
    ----------
    ellipsoid : Ellipsoid
        Reference ellipsoid, WGS84 by default

    Notes
    -----
    The object holds no mutable state and can be shared between threads.
    """

    def __init__(self, ellipsoid: Ellipsoid = WGS84):
        self.ellipsoid = ellipsoid
        self._radii_squared = ellipsoid.radii_squared

    def __repr__(self) -> str:
        return f"ECEF(ellipsoid={self.ellipsoid.name!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, ECEF) and other.ellipsoid == self.ellipsoid

    def __hash__(self) -> int:
        return hash(("ECEF", self.ellipsoid))

    @staticmethod
    def _direction(latitude_deg, longitude_deg) -> np.ndarray:
        """Unit direction (cos φ cos λ, cos φ sin λ, sin φ), last axis = xyz."""
        lat = np.radians(latitude_deg)
        lon = np.radians(longitude_deg)
        cos_lat = np.cos(lat)
        return np.stack(
            [cos_lat * np.cos(lon), cos_lat * np.sin(lon), np.sin(lat)],
            axis=-1,
        )

    def convert(self, geo: Geographic) -> np.ndarray:
        """
        Convert a geographic coordinate to a render-space position.

        Parameters
        ----------
        geo : Geographic
            Coordinate to convert

        Returns
        -------
        position : ndarray, shape (3,), float32
            Render-space position in meters (Y/Z swapped, see module notes)
        """
        n = self._direction(geo.latitude, geo.longitude)
        k = self._radii_squared * n
        gamma = np.sqrt(np.dot(k, n))
        surface = k / gamma
        result = surface + geo.elevation * n

        return _to_render_frame(result).astype(np.float32)

    def convert_all(self, points: Iterable[Geographic]) -> np.ndarray:
        """Vectorised ``convert`` returning an (N, 3) float32 array."""
        points = list(points)
        if not points:
            return np.zeros((0, 3), dtype=np.float32)

        coords = np.array(
            [(p.latitude, p.longitude, p.elevation) for p in points],
            dtype=np.float64,
        )
        n = self._direction(coords[:, 0], coords[:, 1])
        k = self._radii_squared * n
        gamma = np.sqrt(np.sum(k * n, axis=1))
        result = k / gamma[:, np.newaxis] + coords[:, 2:3] * n

        logger.debug(f"Converted {len(points)} coordinates with {self!r}")
        return _to_render_frame(result).astype(np.float32)

    def normal(self, geo: Geographic) -> np.ndarray:
        """
        Return the unit direction used by ``convert`` for this coordinate.

        The vector depends on latitude and longitude only and is expressed in
        the intermediate frame, without the render-frame Y/Z swap.

        Notes
        -----
        This is the direction from which ``convert`` builds the position, not
        the normal of the ellipsoid at the converted position. Use
        ``surface_normal`` for the latter.
        """
        return self._direction(geo.latitude, geo.longitude).astype(np.float32)

    def surface_normal(self, position) -> np.ndarray:
        """
        Return the true ellipsoid normal at a render-space position.

        Parameters
        ----------
        position : array_like, shape (3,)
            Render-space position, e.g. the output of ``convert``

        Returns
        -------
        normal : ndarray, shape (3,), float32
            Unit normal in the render frame
        """
        p = _to_render_frame(np.asarray(position, dtype=np.float64))
        m = p / self._radii_squared
        length = np.linalg.norm(m)
        require(length > 0.0, "the ellipsoid normal is undefined at the origin")

        return _to_render_frame(m / length).astype(np.float32)

    def to_geographic(self, position) -> Geographic:
        """
        Convert a render-space position back to geographic coordinates.

        Uses Bowring's closed-form approximation. The result is clamped into
        the geographic domain; precision is bounded by the float32 positions
        produced by ``convert``.

        Parameters
        ----------
        position : array_like, shape (3,)
            Render-space position in meters

        Returns
        -------
        Geographic
            Geodetic latitude/longitude in degrees, elevation in meters
        """
        x, y, z = _to_render_frame(np.asarray(position, dtype=np.float64))

        a = self.ellipsoid.semi_major_axis
        b = self.ellipsoid.semi_minor_axis
        e2 = self.ellipsoid.eccentricity_squared
        ep2 = self.ellipsoid.second_eccentricity_squared

        lon = np.degrees(np.arctan2(y, x))

        p = np.hypot(x, y)
        theta = np.arctan2(z * a, p * b)

        lat = np.arctan2(
            z + ep2 * b * np.sin(theta)**3,
            p - e2 * a * np.cos(theta)**3,
        )

        sin_lat = np.sin(lat)
        alt = p * np.cos(lat) + z * sin_lat - a * np.sqrt(1.0 - e2 * sin_lat**2)

        return Geographic(
            float(np.clip(np.degrees(lat), MIN_LAT, MAX_LAT)),
            float(np.clip(lon, MIN_LON, MAX_LON)),
            float(np.clip(alt, MIN_ALT, MAX_ALT)),
        )
