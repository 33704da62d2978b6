"""Shared matrix builders for the test suite."""

import numpy as np
import pytest
import scipy.sparse


def laplacian_spd(n: int, shift: float = 1.0) -> scipy.sparse.csr_matrix:
    """Full (both triangles) SPD tridiagonal matrix: 1-D Laplacian + shift*I."""
    main = (2.0 + shift) * np.ones(n)
    off = -1.0 * np.ones(n - 1)
    return scipy.sparse.diags([off, main, off], [-1, 0, 1], format="csr")


def random_spd(n: int, density: float, seed: int) -> scipy.sparse.csr_matrix:
    """Random sparse SPD matrix made diagonally dominant."""
    rng = np.random.default_rng(seed)
    R = rng.random((n, n)) * (rng.random((n, n)) < density)
    S = np.tril(R, -1)
    S = S + S.T
    S += np.diag(np.abs(S).sum(axis=1) + 1.0)
    return scipy.sparse.csr_matrix(S)


@pytest.fixture
def spd_matrix():
    """20x20 random sparse SPD matrix in CSR format."""
    return random_spd(20, 0.15, seed=1)
