"""Adapters from geigop operators to scipy.sparse.linalg.LinearOperator."""

import numpy as np
from scipy.sparse.linalg import LinearOperator
from numpy.typing import NDArray

from geigop.algebra.protocols import MatProdOperation, RegularInverseOperation


def _column(fn):
    """Lift a vector map to accept the (n,) or (n, 1) inputs scipy passes."""
    def apply(x: NDArray) -> NDArray:
        x = np.asarray(x)
        if x.ndim == 2:
            return fn(x[:, 0]).reshape(-1, 1)
        return fn(x)
    return apply


def _dtype(op) -> np.dtype:
    return getattr(op, "dtype", np.dtype(np.float64))


def as_mat_prod_operator(op: MatProdOperation) -> LinearOperator:
    """
    Wrap the forward product as a symmetric LinearOperator.

    Args:
        op: Any object with rows/cols/mat_prod

    Returns:
        LinearOperator computing B @ x (B^T @ x is the same product)
    """
    matvec = _column(op.mat_prod)
    return LinearOperator(
        shape=(op.rows(), op.cols()),
        matvec=matvec,
        rmatvec=matvec,
        dtype=_dtype(op),
    )


def as_solve_operator(op: RegularInverseOperation) -> LinearOperator:
    """Wrap the inverse solve as a symmetric LinearOperator computing B^{-1} @ x."""
    matvec = _column(op.solve)
    return LinearOperator(
        shape=(op.rows(), op.cols()),
        matvec=matvec,
        rmatvec=matvec,
        dtype=_dtype(op),
    )


def as_linear_operators(
    op: RegularInverseOperation,
) -> tuple[LinearOperator, LinearOperator]:
    """
    (M, Minv) pair for scipy.sparse.linalg.eigsh in regular inverse mode.

    Usage:
        M, Minv = as_linear_operators(op)
        vals, vecs = eigsh(A, k=k, M=M, Minv=Minv)
    """
    return as_mat_prod_operator(op), as_solve_operator(op)
