"""Operator protocols consumed by generalized eigensolvers."""

from typing import Optional, Protocol
from numpy.typing import NDArray


class MatProdOperation(Protocol):
    """
    Protocol for the forward product y = B x.
    Eigensolvers only see this surface, never B's storage.
    """

    def rows(self) -> int:
        """Number of rows of B."""
        ...

    def cols(self) -> int:
        """Number of columns of B."""
        ...

    def mat_prod(self, x_in: NDArray, y_out: Optional[NDArray] = None) -> NDArray:
        """
        Compute y = B x.

        Args:
            x_in: Vector of length n
            y_out: Optional caller-allocated result of length n

        Returns:
            B x
        """
        ...


class RegularInverseOperation(MatProdOperation, Protocol):
    """
    Operations needed by the regular inverse mode of A x = λ B x:
    the forward product with B and an (approximate) solve with B.
    """

    def solve(self, x_in: NDArray, y_out: Optional[NDArray] = None) -> NDArray:
        """
        Compute y ≈ B^{-1} x.

        Args:
            x_in: Vector of length n
            y_out: Optional caller-allocated result of length n

        Returns:
            Approximate B^{-1} x
        """
        ...
