"""
Coordinate transformations from ``Geographic`` to a cartesian frame.

A ``SpatialReference`` converts geographic samples into render-space
positions and surface normals.

Implementations
---------------
ECEF
    Earth-centered, earth-fixed frame over an oblate reference ellipsoid
"""

from telluris.spatial.transformations.base import SpatialReference
from telluris.spatial.transformations.ecef import ECEF, Ellipsoid, WGS84

__all__ = [
    "SpatialReference",
    "ECEF",
    "Ellipsoid",
    "WGS84",
]
