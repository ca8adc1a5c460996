"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_state(rng):
    """Normalised random pure state on dims [2, 3, 2], as a column vector."""
    psi = rng.standard_normal(12) + 1j * rng.standard_normal(12)
    return (psi / np.linalg.norm(psi)).reshape(-1, 1)


@pytest.fixture
def random_density(rng):
    """Random density matrix on dims [2, 3]."""
    G = rng.standard_normal((6, 6)) + 1j * rng.standard_normal((6, 6))
    rho = G @ G.conj().T
    return rho / np.trace(rho)
