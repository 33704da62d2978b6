"""Tests for the scipy LinearOperator adapters."""

import numpy as np
import scipy.linalg
import scipy.sparse
from scipy.sparse.linalg import LinearOperator, eigsh

from geigop import SparseRegularInverse, as_linear_operators
from geigop.algebra.protocols import RegularInverseOperation
from conftest import laplacian_spd


def test_adapters_apply_operations(spd_matrix):
    """M and Minv compute B x and B^{-1} x."""
    op = SparseRegularInverse(scipy.sparse.tril(spd_matrix, format="csr"))
    M, Minv = as_linear_operators(op)
    x = np.linspace(0.0, 1.0, 20)

    assert isinstance(M, LinearOperator)
    assert M.shape == (20, 20)
    assert np.allclose(M.matvec(x), spd_matrix @ x)
    assert np.allclose(M.rmatvec(x), spd_matrix @ x)
    assert np.allclose(spd_matrix @ Minv.matvec(x), x, atol=1e-8)


def test_adapters_accept_column_vectors():
    """scipy may pass (n, 1) arrays; shape is preserved."""
    op = SparseRegularInverse(laplacian_spd(4))
    M, Minv = as_linear_operators(op)
    x = np.ones((4, 1))

    assert M.matvec(x).shape == (4, 1)
    assert Minv.matvec(x).shape == (4, 1)


def test_operator_satisfies_protocol():
    """The operator exposes the surface eigensolvers rely on."""
    op: RegularInverseOperation = SparseRegularInverse(laplacian_spd(3))

    for name in ("rows", "cols", "mat_prod", "solve"):
        assert callable(getattr(op, name))


def test_eigsh_regular_inverse_mode():
    """ARPACK driven through the adapters finds the generalized eigenvalues."""
    n = 12
    A = scipy.sparse.diags(np.arange(1.0, n + 1.0), format="csr")
    B = laplacian_spd(n, shift=2.0)
    op = SparseRegularInverse(scipy.sparse.tril(B, format="csr"))
    M, Minv = as_linear_operators(op)

    vals = eigsh(A, k=3, M=M, Minv=Minv, which="LA", return_eigenvectors=False)
    expected = scipy.linalg.eigh(A.toarray(), B.toarray(), eigvals_only=True)[-3:]

    assert np.allclose(np.sort(vals), expected, rtol=1e-6)
