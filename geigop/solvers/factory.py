"""Solver factory."""

from typing import Optional

from geigop.core.config import SolverConfig
from geigop.solvers.base import IterativeSolver
from geigop.solvers.cg import ConjugateGradient
from geigop.solvers.preconditioners import make_preconditioner


def create_solver(config: Optional[SolverConfig] = None) -> IterativeSolver:
    """
    Build an uncomputed solver from configuration.

    Args:
        config: Solver settings (defaults used if None)

    Returns:
        Solver ready for `compute`
    """
    if config is None:
        config = SolverConfig()

    return ConjugateGradient(
        tolerance=config.tolerance,
        max_iterations=config.max_iterations,
        preconditioner=make_preconditioner(config.preconditioner),
    )
