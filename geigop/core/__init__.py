"""Core types: configuration and errors."""

from geigop.core.config import SolverConfig
from geigop.core.errors import GeigopError, InvalidDimension

__all__ = [
    "SolverConfig",
    "GeigopError",
    "InvalidDimension",
]
