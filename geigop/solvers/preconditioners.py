"""Preconditioners for the conjugate gradient solver."""

from abc import ABC, abstractmethod
import numpy as np
from numpy.typing import NDArray

from geigop.algebra.symmetric import SymmetricSparseView


class Preconditioner(ABC):
    """Approximate inverse M^{-1} applied once per CG iteration."""

    @abstractmethod
    def compute(self, view: SymmetricSparseView, dtype: np.dtype) -> None:
        ...

    @abstractmethod
    def apply(self, r: NDArray, out: NDArray) -> NDArray:
        """Write M^{-1} r into `out`."""
        ...


class IdentityPreconditioner(Preconditioner):
    """No preconditioning: M = I."""

    def compute(self, view: SymmetricSparseView, dtype: np.dtype) -> None:
        pass

    def apply(self, r: NDArray, out: NDArray) -> NDArray:
        np.copyto(out, r)
        return out


class JacobiPreconditioner(Preconditioner):
    """
    Diagonal preconditioner M = diag(B).

    Zero diagonal entries are replaced by one so the inverse stays finite.
    """

    def __init__(self) -> None:
        self._inv_diag: NDArray | None = None

    def compute(self, view: SymmetricSparseView, dtype: np.dtype) -> None:
        diag = view.diagonal().astype(dtype)
        inv_diag = np.ones_like(diag)
        nonzero = diag != 0
        inv_diag[nonzero] = 1.0 / diag[nonzero]
        self._inv_diag = inv_diag

    def apply(self, r: NDArray, out: NDArray) -> NDArray:
        if self._inv_diag is None:
            raise RuntimeError("Preconditioner used before compute()")
        np.multiply(self._inv_diag, r, out=out)
        return out


PRECONDITIONERS = {
    "jacobi": JacobiPreconditioner,
    "identity": IdentityPreconditioner,
}


def make_preconditioner(name: str) -> Preconditioner:
    """Instantiate a preconditioner by name."""
    try:
        return PRECONDITIONERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown preconditioner '{name}', expected one of {sorted(PRECONDITIONERS)}"
        ) from None
