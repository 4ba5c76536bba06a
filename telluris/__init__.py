"""
telluris: geodesy and spatial-volume core of a planet-rendering engine.

Value types and pure operations describing locations on (and volumes
around) an ellipsoidal body, and their conversion into the cartesian frame
used for rendering.

Modules
-------
spatial
    Geographic coordinates, geographic bounds and their algebra,
    geographic to cartesian transforms (ECEF), quadtree addressing
tiler
    Tile value consumed by the subdivision and rendering layers
config
    YAML/JSON configuration of the reference ellipsoid, sampling and logging
utils
    Domain constants, logging setup, identifier allocation
errors
    Contract violation signalling
"""

__version__ = "0.1.0"

from telluris.errors import ContractViolation
from telluris.spatial import (
    Geographic,
    GeoBounds,
    SpatialReference,
    ECEF,
    Ellipsoid,
    WGS84,
)
from telluris.tiler import Tile

__all__ = [
    "ContractViolation",
    "Geographic",
    "GeoBounds",
    "SpatialReference",
    "ECEF",
    "Ellipsoid",
    "WGS84",
    "Tile",
]
