"""Matrix operations for generalized eigensolver modes."""

from geigop.modes.regular_inverse import SparseRegularInverse

__all__ = [
    "SparseRegularInverse",
]
