"""
Domain constants for geographic coordinates and reference ellipsoids.

Angles are in degrees, lengths in meters.
"""

# Geographic domain
MIN_LON = -180.0  # westernmost longitude
MAX_LON = 180.0  # easternmost longitude
MIN_LAT = -90.0  # southernmost latitude
MAX_LAT = 90.0  # northernmost latitude
MIN_ALT = -11_000.0  # deepest ocean trench
MAX_ALT = 50_000_000.0  # well above geostationary orbit

# WGS84 ellipsoid parameters
WGS84_SEMI_MAJOR_AXIS = 6_378_137.0  # equatorial radius
WGS84_SEMI_MINOR_AXIS = 6_356_752.314245  # polar radius

# Default tolerance for approximate comparisons of sampled coordinates
DEFAULT_EPSILON = 1e-3
