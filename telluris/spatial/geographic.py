"""
Geographic Coordinates
======================

A point on or near the reference ellipsoid, expressed as latitude and
longitude in degrees and elevation in meters above (or below) the ellipsoid.

Values are immutable: every transform returns a new instance.
"""

from dataclasses import dataclass, replace

import numpy as np

from telluris.errors import debug_require
from telluris.utils.constants import (
    MIN_LAT,
    MAX_LAT,
    MIN_LON,
    MAX_LON,
    MIN_ALT,
    MAX_ALT,
    DEFAULT_EPSILON,
)


@dataclass(frozen=True, order=True)
class Geographic:
    """Geographic coordinate.

    Attributes
    ----------
    latitude : float
        Angle to/from the equator in degrees, in [-90, 90]
    longitude : float
        Angle to/from the reference meridian in degrees, in [-180, 180]
    elevation : float
        Meters above or below the ellipsoid, in [-11 000, 50 000 000]

    Notes
    -----
    The domain is checked at construction unless Python runs with ``-O``.
    Ordering compares latitude, then longitude, then elevation.
    """
    latitude: float = 0.0
    longitude: float = 0.0
    elevation: float = 0.0

    def __post_init__(self):
        debug_require(
            MIN_LAT <= self.latitude <= MAX_LAT,
            f"latitude {self.latitude} outside [{MIN_LAT}, {MAX_LAT}]",
        )
        debug_require(
            MIN_LON <= self.longitude <= MAX_LON,
            f"longitude {self.longitude} outside [{MIN_LON}, {MAX_LON}]",
        )
        debug_require(
            MIN_ALT <= self.elevation <= MAX_ALT,
            f"elevation {self.elevation} outside [{MIN_ALT}, {MAX_ALT}]",
        )

    @property
    def lat(self) -> float:
        """Latitude in degrees."""
        return self.latitude

    @property
    def lon(self) -> float:
        """Longitude in degrees."""
        return self.longitude

    def flatten(self) -> "Geographic":
        """Return a copy lying on the ellipsoid (elevation set to zero)."""
        return replace(self, elevation=0.0)

    def raise_by(self, delta: float) -> "Geographic":
        """
        Return a copy with elevation raised (or lowered) by ``delta`` meters.

        The new elevation saturates at the elevation domain boundaries
        instead of violating the construction contract.

        Parameters
        ----------
        delta : float
            Elevation offset in meters (negative lowers the point)

        Returns
        -------
        Geographic
            Raised coordinate, latitude and longitude unchanged
        """
        elevation = float(np.clip(self.elevation + delta, MIN_ALT, MAX_ALT))
        return replace(self, elevation=elevation)

    def is_close(self, other: "Geographic", epsilon: float = DEFAULT_EPSILON) -> bool:
        """Component-wise absolute comparison within ``epsilon``."""
        return (
            abs(self.latitude - other.latitude) <= epsilon
            and abs(self.longitude - other.longitude) <= epsilon
            and abs(self.elevation - other.elevation) <= epsilon
        )

    def to_array(self) -> np.ndarray:
        """Return ``[latitude, longitude, elevation]`` as a float64 array."""
        return np.array([self.latitude, self.longitude, self.elevation], dtype=np.float64)
