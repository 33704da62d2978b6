"""Shared helpers."""

from geigop.utils.checks import require_sparse, require_square
from geigop.utils.logging import log_event

__all__ = [
    "require_sparse",
    "require_square",
    "log_event",
]
