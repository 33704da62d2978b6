"""Base iterative solver interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
from numpy.typing import NDArray

from geigop.algebra.symmetric import SymmetricSparseView


@dataclass(frozen=True)
class SolveInfo:
    """Diagnostics of the most recent solve."""

    iterations: int
    error: float        # relative residual ||b - B y|| / ||b||
    converged: bool


class IterativeSolver(ABC):
    """
    Two-phase solver for B y = x with symmetric positive definite B.

    `compute` binds the solver to a matrix and builds everything that can be
    reused; `solve` may then be called any number of times.
    """

    def __init__(self) -> None:
        self._view: Optional[SymmetricSparseView] = None
        self._info: Optional[SolveInfo] = None

    @property
    def is_computed(self) -> bool:
        return self._view is not None

    @property
    def info(self) -> Optional[SolveInfo]:
        """Diagnostics of the last `solve`, None before the first one."""
        return self._info

    @abstractmethod
    def compute(self, view: SymmetricSparseView) -> "IterativeSolver":
        """
        Build reusable solver state for the matrix behind `view`.

        Args:
            view: Symmetric view of B

        Returns:
            self, for chaining
        """
        ...

    @abstractmethod
    def solve(self, b: NDArray, out: Optional[NDArray] = None) -> NDArray:
        """
        Approximate B^{-1} b.

        Args:
            b: Right-hand side of length n
            out: Optional preallocated result buffer

        Returns:
            Approximate solution; never raises for non-convergence
        """
        ...
