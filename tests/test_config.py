"""Tests for solver configuration."""

import pytest
from pydantic import ValidationError

from geigop.core.config import SolverConfig


def test_defaults():
    """Unset values defer to matrix-dependent defaults."""
    config = SolverConfig()

    assert config.tolerance is None
    assert config.max_iterations is None
    assert config.preconditioner == "jacobi"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tolerance": 0.0},
        {"tolerance": -1e-6},
        {"max_iterations": 0},
        {"preconditioner": "ilu"},
        {"restart": 10},
    ],
)
def test_invalid_values_rejected(kwargs):
    """Out-of-range values and unknown keys fail validation."""
    with pytest.raises(ValidationError):
        SolverConfig(**kwargs)


def test_config_is_frozen():
    """Settings cannot change after the solver is built."""
    config = SolverConfig(tolerance=1e-8)
    with pytest.raises(ValidationError):
        config.tolerance = 1e-4
