"""Matrix operations for the regular inverse mode of a generalized eigensolver."""

import logging
from typing import Optional, Union
import numpy as np
from numpy.typing import NDArray

from geigop.algebra.symmetric import SymmetricSparseView, Uplo
from geigop.core.config import SolverConfig
from geigop.solvers.base import IterativeSolver, SolveInfo
from geigop.solvers.factory import create_solver
from geigop.utils.checks import require_sparse, require_square
from geigop.utils.logging import log_event

logger = logging.getLogger(__name__)


class SparseRegularInverse:
    """
    y = B x and y = B^{-1} x for sparse symmetric positive definite B.

    Intended for generalized eigenproblems A x = λ B x solved in regular
    inverse mode, where the eigensolver needs only these two operations.
    Only one triangle of B is read (see `uplo`); the inverse is applied
    with a conjugate gradient solver computed once here and reused for
    every `solve`.

    B is borrowed: it must outlive this object and must not be modified
    while it is in use. The solver reuses internal work vectors, so an
    instance must not be called from several threads at once.
    """

    def __init__(
        self,
        mat,
        uplo: Union[Uplo, str] = Uplo.LOWER,
        config: Optional[SolverConfig] = None,
    ):
        """
        Build the operator and compute the solver.

        Args:
            mat: Square scipy.sparse matrix (csr, csc or coo)
            uplo: Stored triangle of B
            config: Solver settings (defaults used if None)

        Raises:
            InvalidDimension: If B is not square
        """
        require_sparse("mat", mat)
        self._n = require_square(mat)
        self._mat = mat
        self._view = SymmetricSparseView(mat, Uplo(uplo))
        self._solver: IterativeSolver = create_solver(config).compute(self._view)

        log_event(
            logger,
            "operator_ready",
            n=self._n,
            nnz=self._view.nnz_stored,
            uplo=self._view.uplo.value,
        )

    def rows(self) -> int:
        """Number of rows of B."""
        return self._n

    def cols(self) -> int:
        """Number of columns of B."""
        return self._n

    @property
    def shape(self) -> tuple[int, int]:
        return (self._n, self._n)

    @property
    def dtype(self) -> np.dtype:
        return np.result_type(self._mat.dtype, np.float32)

    @property
    def uplo(self) -> Uplo:
        return self._view.uplo

    @property
    def last_info(self) -> Optional[SolveInfo]:
        """Iterations and residual of the latest `solve`; None before any."""
        return self._solver.info

    def mat_prod(self, x_in: NDArray, y_out: Optional[NDArray] = None) -> NDArray:
        """
        Perform y = B x using the stored triangle.

        Args:
            x_in: Vector of length n
            y_out: Optional caller-allocated result of length n

        Returns:
            B x (y_out itself when given)
        """
        return self._view.matvec(np.asarray(x_in), out=y_out)

    def solve(self, x_in: NDArray, y_out: Optional[NDArray] = None) -> NDArray:
        """
        Perform y = B^{-1} x with the computed CG solver.

        Never raises on non-convergence: the best iterate is returned and
        the outcome is available through `last_info`.

        Args:
            x_in: Vector of length n
            y_out: Optional caller-allocated result of length n

        Returns:
            Approximate B^{-1} x (y_out itself when given)
        """
        return self._solver.solve(x_in, out=y_out)
