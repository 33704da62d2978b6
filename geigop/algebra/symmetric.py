"""Symmetric view over a sparse matrix with one stored triangle."""

from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import NDArray


class Uplo(Enum):
    """Which triangle of a symmetric matrix is physically stored."""
    LOWER = "lower"
    UPPER = "upper"


def _entry_coordinates(mat) -> tuple[NDArray, NDArray]:
    """Row and column index of every stored entry, in `mat.data` order."""
    fmt = mat.format
    if fmt == "csr":
        counts = np.diff(mat.indptr)
        rows = np.repeat(np.arange(mat.shape[0], dtype=mat.indices.dtype), counts)
        return rows, mat.indices
    if fmt == "csc":
        counts = np.diff(mat.indptr)
        cols = np.repeat(np.arange(mat.shape[1], dtype=mat.indices.dtype), counts)
        return mat.indices, cols
    if fmt == "coo":
        return mat.row, mat.col
    raise ValueError(
        f"Unsupported sparse format '{fmt}': expected csr, csc or coo"
    )


class SymmetricSparseView:
    """
    Read-only symmetric view over one triangle of a square sparse matrix.

    Only entries on the diagonal and in the selected triangle are read;
    anything stored in the other triangle is skipped. Off-diagonal entries
    are applied twice, once as b_ij and once as its mirror b_ji.

    The matrix is borrowed, not copied: `data` is read from the caller's
    object on every product, so it must stay alive and unmodified.
    """

    def __init__(self, mat, uplo: Uplo = Uplo.LOWER):
        """
        Index the stored triangle of a square sparse matrix.

        Args:
            mat: scipy.sparse matrix or array in csr, csc or coo format
            uplo: Stored triangle
        """
        if mat.shape[0] != mat.shape[1]:
            raise ValueError(f"Symmetric view needs a square matrix, got {mat.shape}")

        self._mat = mat
        self.uplo = Uplo(uplo)
        self.n = mat.shape[0]

        rows, cols = _entry_coordinates(mat)
        if self.uplo is Uplo.LOWER:
            in_triangle = rows >= cols
        else:
            in_triangle = rows <= cols
        on_diagonal = rows == cols

        # Positions into mat.data, split by how each entry is applied
        self._diag_pos = np.flatnonzero(on_diagonal)
        self._off_pos = np.flatnonzero(in_triangle & ~on_diagonal)
        self._diag_idx = rows[self._diag_pos]
        self._off_rows = rows[self._off_pos]
        self._off_cols = cols[self._off_pos]

    @property
    def matrix(self):
        """The borrowed matrix."""
        return self._mat

    @property
    def dtype(self) -> np.dtype:
        return self._mat.dtype

    @property
    def nnz_stored(self) -> int:
        """Number of entries read by the view (diagonal plus one triangle)."""
        return int(self._diag_pos.size + self._off_pos.size)

    def diagonal(self) -> NDArray:
        """Diagonal of the matrix, summing duplicate entries."""
        data = self._mat.data
        return np.bincount(
            self._diag_idx, weights=data[self._diag_pos], minlength=self.n
        ).astype(self.dtype, copy=False)

    def matvec(self, x: NDArray, out: Optional[NDArray] = None) -> NDArray:
        """
        Compute B @ x treating the stored triangle as symmetric.

        Args:
            x: Vector of length n
            out: Optional preallocated result buffer of length n

        Returns:
            B @ x (written into `out` when given)
        """
        data = self._mat.data
        off = data[self._off_pos]

        y = np.bincount(
            self._diag_idx,
            weights=data[self._diag_pos] * x[self._diag_idx],
            minlength=self.n,
        )
        y += np.bincount(
            self._off_rows, weights=off * x[self._off_cols], minlength=self.n
        )
        y += np.bincount(
            self._off_cols, weights=off * x[self._off_rows], minlength=self.n
        )

        if out is None:
            return y.astype(np.result_type(self.dtype, x.dtype), copy=False)
        out[:] = y
        return out

    def to_dense(self) -> NDArray:
        """Full dense symmetric matrix (for inspection and testing)."""
        dense = np.zeros((self.n, self.n), dtype=self.dtype)
        data = self._mat.data
        np.add.at(dense, (self._diag_idx, self._diag_idx), data[self._diag_pos])
        off = data[self._off_pos]
        np.add.at(dense, (self._off_rows, self._off_cols), off)
        np.add.at(dense, (self._off_cols, self._off_rows), off)
        return dense
