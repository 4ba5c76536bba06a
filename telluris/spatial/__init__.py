"""
Coordinates and spatial data structures.

Types prefixed with ``Geo`` relate to geographic coordinates, where angles
are expressed in degrees. Types without this prefix relate to a cartesian
frame. Surface modelling is easier with geographic types; problems such as
horizon culling are more naturally expressed in a cartesian frame.

Modules
-------
geographic
    Geographic coordinate value type
geobounds
    Axis-aligned geographic volumes and their algebra
transformations
    Geographic to cartesian conversions (ECEF)
index
    Quadtree addressing
arbitrary
    Random generation of valid values
"""

from telluris.spatial.geographic import Geographic
from telluris.spatial.geobounds import GeoBounds
from telluris.spatial.transformations import (
    SpatialReference,
    ECEF,
    Ellipsoid,
    WGS84,
)
from telluris.spatial.index import (
    MAX_DEPTH,
    Quadrant,
    GeoIndex,
    QuadtreeNode,
)

__all__ = [
    "Geographic",
    "GeoBounds",
    "SpatialReference",
    "ECEF",
    "Ellipsoid",
    "WGS84",
    "MAX_DEPTH",
    "Quadrant",
    "GeoIndex",
    "QuadtreeNode",
]
