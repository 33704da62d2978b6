"""Preconditioned conjugate gradient with reusable state."""

import logging
from typing import Optional
import numpy as np
from numpy.typing import NDArray

from geigop.algebra.symmetric import SymmetricSparseView
from geigop.solvers.base import IterativeSolver, SolveInfo
from geigop.solvers.preconditioners import JacobiPreconditioner, Preconditioner
from geigop.utils.logging import log_event

logger = logging.getLogger(__name__)


class ConjugateGradient(IterativeSolver):
    """
    Preconditioned CG for symmetric positive definite B.

    Each solve starts from a zero guess and stops once
    ||b - B y|| <= tol * ||b|| or after `max_iterations` steps, returning
    the current iterate either way. Work vectors are allocated by
    `compute` and overwritten by every solve, so one instance must not
    be shared between threads.
    """

    def __init__(
        self,
        tolerance: Optional[float] = None,
        max_iterations: Optional[int] = None,
        preconditioner: Optional[Preconditioner] = None,
    ) -> None:
        """
        Args:
            tolerance: Relative residual target (default: dtype epsilon)
            max_iterations: Iteration cap (default: 2n)
            preconditioner: Defaults to JacobiPreconditioner
        """
        super().__init__()
        self._requested_tol = tolerance
        self._requested_max_iter = max_iterations
        self.preconditioner = preconditioner or JacobiPreconditioner()

        self.tolerance: float = 0.0
        self.max_iterations: int = 0
        self._dtype: Optional[np.dtype] = None
        self._r: Optional[NDArray] = None
        self._z: Optional[NDArray] = None
        self._p: Optional[NDArray] = None
        self._q: Optional[NDArray] = None

    def compute(self, view: SymmetricSparseView) -> "ConjugateGradient":
        """Bind to `view`, resolve defaults, build preconditioner and workspace."""
        n = view.n
        dtype = np.result_type(view.dtype, np.float32)

        self.tolerance = (
            float(np.finfo(dtype).eps)
            if self._requested_tol is None
            else float(self._requested_tol)
        )
        self.max_iterations = (
            2 * n if self._requested_max_iter is None else int(self._requested_max_iter)
        )
        self.preconditioner.compute(view, dtype)

        self._dtype = dtype
        self._r = np.empty(n, dtype=dtype)
        self._z = np.empty(n, dtype=dtype)
        self._p = np.empty(n, dtype=dtype)
        self._q = np.empty(n, dtype=dtype)
        self._view = view
        return self

    def solve(self, b: NDArray, out: Optional[NDArray] = None) -> NDArray:
        """Approximate B^{-1} b; see class docstring for stopping rules."""
        if self._view is None:
            raise RuntimeError("ConjugateGradient.solve() called before compute()")

        view = self._view
        r, z, p, q = self._r, self._z, self._p, self._q
        b = np.asarray(b, dtype=self._dtype)
        x = np.zeros(view.n, dtype=self._dtype)

        rhs_norm2 = float(np.dot(b, b))
        if rhs_norm2 == 0.0:
            return self._finish(x, out, SolveInfo(0, 0.0, True))

        threshold = max(self.tolerance**2 * rhs_norm2, np.finfo(self._dtype).tiny)

        # x0 = 0 so the initial residual is b itself
        np.copyto(r, b)
        residual_norm2 = rhs_norm2
        if residual_norm2 < threshold:
            return self._finish(x, out, SolveInfo(0, 0.0, True))

        self.preconditioner.apply(r, z)
        np.copyto(p, z)
        abs_new = float(np.dot(r, z))

        iterations = 0
        converged = False
        while iterations < self.max_iterations:
            view.matvec(p, out=q)
            denom = float(np.dot(p, q))
            if denom == 0.0:
                break
            alpha = abs_new / denom
            x += alpha * p
            r -= alpha * q
            iterations += 1

            residual_norm2 = float(np.dot(r, r))
            if residual_norm2 < threshold:
                converged = True
                break

            self.preconditioner.apply(r, z)
            abs_old = abs_new
            abs_new = float(np.dot(r, z))
            p *= abs_new / abs_old
            p += z

        error = float(np.sqrt(residual_norm2 / rhs_norm2))
        return self._finish(x, out, SolveInfo(iterations, error, converged))

    def _finish(
        self, x: NDArray, out: Optional[NDArray], info: SolveInfo
    ) -> NDArray:
        self._info = info
        log_event(
            logger,
            "cg_solve",
            iterations=info.iterations,
            error=info.error,
            converged=info.converged,
        )
        if out is None:
            return x
        out[:] = x
        return out
