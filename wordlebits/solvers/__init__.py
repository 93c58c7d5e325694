from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, SolverConfig, register

from . import entropy  # noqa: F401
from . import entropy_weighted  # noqa: F401

DEFAULT_SOLVER = "weighted"


def create_solver(solver_id: str = DEFAULT_SOLVER, config: SolverConfig | None = None) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(config)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
