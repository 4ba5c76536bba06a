"""
Tile model consumed by the subdivision and rendering layers.
"""

from telluris.tiler.tile import Tile

__all__ = ["Tile"]
