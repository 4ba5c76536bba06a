"""
Spatial index addressing.

Quadtree nodes are addressed by (row, column, depth). How a node's bounds are
split into children belongs to the tile subdivider and is not defined here.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, runtime_checkable

from telluris.errors import require
from telluris.spatial.geographic import Geographic

MAX_DEPTH = 23


class Quadrant(IntEnum):
    """A division of a planar space."""
    NORTH_WEST = 0
    NORTH_EAST = 1
    SOUTH_WEST = 2
    SOUTH_EAST = 3


@runtime_checkable
class GeoIndex(Protocol):
    """Anything that can be located by a single geographic coordinate."""

    def geo_index(self) -> Geographic:
        ...


@dataclass(frozen=True)
class QuadtreeNode:
    """Address of a node in a geographic quadtree.

    Attributes:
        row: Row index, in [0, 2**depth)
        column: Column index, in [0, 2**depth)
        depth: Level in the tree, 0 being the root, at most MAX_DEPTH
    """
    row: int
    column: int
    depth: int

    def __post_init__(self):
        require(0 <= self.depth <= MAX_DEPTH, f"depth {self.depth} outside [0, {MAX_DEPTH}]")
        size = self.size
        require(0 <= self.row < size, f"row {self.row} outside [0, {size})")
        require(0 <= self.column < size, f"column {self.column} outside [0, {size})")

    @property
    def size(self) -> int:
        """Number of rows (and columns) at this node's depth."""
        return 1 << self.depth

    @property
    def is_root(self) -> bool:
        return self.depth == 0
