"""Argument checks run once at operator construction."""

import scipy.sparse

from geigop.core.errors import InvalidDimension


def require_sparse(name: str, mat) -> None:
    """Raise a clear error if `mat` is not a scipy.sparse matrix or array."""
    if not scipy.sparse.issparse(mat):
        raise TypeError(
            f"{name} must be a scipy.sparse matrix, received {type(mat).__name__}"
        )


def require_square(mat) -> int:
    """Return the dimension of a square matrix, or raise InvalidDimension."""
    rows, cols = mat.shape
    if rows != cols:
        raise InvalidDimension(rows, cols)
    return rows
