"""
Utility functions and constants.

Constants
---------
MIN_LAT, MAX_LAT : float
    Latitude domain in degrees
MIN_LON, MAX_LON : float
    Longitude domain in degrees
MIN_ALT, MAX_ALT : float
    Elevation domain in meters
WGS84_SEMI_MAJOR_AXIS, WGS84_SEMI_MINOR_AXIS : float
    WGS84 reference ellipsoid radii in meters

Functions
---------
setup_logging
    Configure stdout logging

Classes
-------
IdAllocator
    Injectable identifier source for renderer resources
"""

from telluris.utils.constants import (
    MIN_LON,
    MAX_LON,
    MIN_LAT,
    MAX_LAT,
    MIN_ALT,
    MAX_ALT,
    WGS84_SEMI_MAJOR_AXIS,
    WGS84_SEMI_MINOR_AXIS,
    DEFAULT_EPSILON,
)
from telluris.utils.ids import IdAllocator, NULL_ID
from telluris.utils.log import setup_logging

__all__ = [
    "MIN_LON",
    "MAX_LON",
    "MIN_LAT",
    "MAX_LAT",
    "MIN_ALT",
    "MAX_ALT",
    "WGS84_SEMI_MAJOR_AXIS",
    "WGS84_SEMI_MINOR_AXIS",
    "DEFAULT_EPSILON",
    "IdAllocator",
    "NULL_ID",
    "setup_logging",
]
