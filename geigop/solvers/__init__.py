"""Iterative linear solvers for B y = x."""

from geigop.solvers.base import IterativeSolver, SolveInfo
from geigop.solvers.cg import ConjugateGradient
from geigop.solvers.factory import create_solver

__all__ = [
    "IterativeSolver",
    "SolveInfo",
    "ConjugateGradient",
    "create_solver",
]
