"""Symmetric sparse storage, operator protocols and scipy adapters."""

from geigop.algebra.symmetric import SymmetricSparseView, Uplo
from geigop.algebra.protocols import MatProdOperation, RegularInverseOperation
from geigop.algebra.operators import as_linear_operators

__all__ = [
    "SymmetricSparseView",
    "Uplo",
    "MatProdOperation",
    "RegularInverseOperation",
    "as_linear_operators",
]
