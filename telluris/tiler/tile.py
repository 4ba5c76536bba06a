"""
Tiles, the fundamental spatial element of the rendering pipeline.
"""

from dataclasses import dataclass

from telluris.spatial.geobounds import GeoBounds
from telluris.spatial.geographic import Geographic


@dataclass(frozen=True)
class Tile:
    """A region of the planet, as seen by the tile subdivider and renderer.

    Attributes:
        bounds: Geographic volume covered by the tile
    """
    bounds: GeoBounds

    def geo_index(self) -> Geographic:
        """Locate the tile by the center of its bounds."""
        return self.bounds.center()

    def contains(self, point: Geographic) -> bool:
        return self.bounds.contains(point)
