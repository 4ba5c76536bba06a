"""
Base class for coordinate transformations.

Positions and normals are returned as float32 numpy vectors, matching the
GPU-facing representation; interior math is done in double precision.
"""

from abc import ABC, abstractmethod
from typing import Iterable

import numpy as np

from telluris.spatial.geographic import Geographic


class SpatialReference(ABC):
    """Conversion between geographic coordinates and a cartesian frame."""

    @abstractmethod
    def convert(self, geo: Geographic) -> np.ndarray:
        """Convert geographic coordinates into a float32 cartesian position."""

    @abstractmethod
    def normal(self, geo: Geographic) -> np.ndarray:
        """Return the float32 normal vector at the given coordinate."""

    def convert_all(self, points: Iterable[Geographic]) -> np.ndarray:
        """
        Convert many coordinates at once.

        Parameters
        ----------
        points : iterable of Geographic
            Coordinates to convert

        Returns
        -------
        positions : ndarray, shape (N, 3), float32
            One row per input coordinate, in input order
        """
        rows = [self.convert(p) for p in points]
        if not rows:
            return np.zeros((0, 3), dtype=np.float32)
        return np.stack(rows).astype(np.float32)
