"""
Random generation of valid geographic values.

Used by property tests and by callers needing synthetic samples. All
functions draw from a ``numpy.random.Generator`` so results are reproducible
from a seed.
"""

from typing import Iterator, Optional, Tuple

import numpy as np

from telluris.spatial.geographic import Geographic
from telluris.spatial.geobounds import GeoBounds
from telluris.utils.constants import (
    MIN_LAT,
    MAX_LAT,
    MIN_LON,
    MAX_LON,
    MIN_ALT,
    MAX_ALT,
)


def default_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a numpy generator, seeded when ``seed`` is given."""
    return np.random.default_rng(seed)


def random_geographic(rng: np.random.Generator) -> Geographic:
    """Draw a coordinate uniformly from the whole geographic domain."""
    return Geographic(
        float(rng.uniform(MIN_LAT, MAX_LAT)),
        float(rng.uniform(MIN_LON, MAX_LON)),
        float(rng.uniform(MIN_ALT, MAX_ALT)),
    )


def random_geobounds(rng: np.random.Generator) -> GeoBounds:
    """Draw bounds whose corners come from two random coordinates.

    Each axis is ordered independently so the result always satisfies
    ``min <= max``.
    """
    a = random_geographic(rng)
    b = random_geographic(rng)

    return GeoBounds(
        Geographic(
            min(a.latitude, b.latitude),
            min(a.longitude, b.longitude),
            min(a.elevation, b.elevation),
        ),
        Geographic(
            max(a.latitude, b.latitude),
            max(a.longitude, b.longitude),
            max(a.elevation, b.elevation),
        ),
    )


def random_unit_triplet(rng: np.random.Generator) -> Tuple[float, float, float]:
    """Draw normalized sampling parameters in [0, 1)."""
    x, y, z = rng.uniform(0.0, 1.0, size=3)
    return float(x), float(y), float(z)


def geographics(rng: np.random.Generator, count: int) -> Iterator[Geographic]:
    """Yield ``count`` random coordinates."""
    for _ in range(count):
        yield random_geographic(rng)


def geobounds(rng: np.random.Generator, count: int) -> Iterator[GeoBounds]:
    """Yield ``count`` random bounds."""
    for _ in range(count):
        yield random_geobounds(rng)
