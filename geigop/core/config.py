"""Iterative solver configuration."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SolverConfig(BaseModel):
    """
    Conjugate-gradient settings fixed when the solver is computed.

    `None` selects the classic sparse-CG defaults, resolved against the
    matrix: machine epsilon of its dtype and twice its dimension.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tolerance: Optional[float] = Field(default=None, gt=0.0)
    max_iterations: Optional[int] = Field(default=None, ge=1)
    preconditioner: Literal["jacobi", "identity"] = "jacobi"
