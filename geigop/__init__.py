"""
geigop: matrix operations for generalized symmetric eigensolvers.

Provides the operator an iterative eigensolver needs to solve
A x = λ B x in regular inverse mode, with B sparse symmetric positive
definite:
- Forward product B x reading one stored triangle
- Inverse solve B^{-1} x by a conjugate gradient solver built once
- Adapters to scipy.sparse.linalg.LinearOperator for eigsh
"""

__version__ = "0.1.0"

from geigop.algebra.symmetric import Uplo
from geigop.algebra.operators import as_linear_operators
from geigop.core.config import SolverConfig
from geigop.core.errors import GeigopError, InvalidDimension
from geigop.modes.regular_inverse import SparseRegularInverse
from geigop.solvers.base import SolveInfo

__all__ = [
    "Uplo",
    "as_linear_operators",
    "SolverConfig",
    "GeigopError",
    "InvalidDimension",
    "SparseRegularInverse",
    "SolveInfo",
]
