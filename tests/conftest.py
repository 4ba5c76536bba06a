"""Shared fixtures for telluris tests."""

import numpy as np
import pytest

from telluris.spatial.arbitrary import default_rng

# Number of random cases drawn by each property test
N_CASES = 200


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so property tests are reproducible."""
    return default_rng(20240611)


@pytest.fixture
def n_cases() -> int:
    return N_CASES
