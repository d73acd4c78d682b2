from __future__ import annotations
from typing import List, Sequence
from .base import BaseSolver, SolverState, REGISTRY, register

from wordler.engine import WordFilter

from . import diversity  # noqa: F401
from . import random_consistent  # noqa: F401

DEFAULT_SOLVER = "diversity"


def create_solver(solver_id: str) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def new_solver(
        loader,
        *,
        solver_id: str = DEFAULT_SOLVER,
        filters: Sequence[WordFilter] = (),
        seed: int | None = None,
        hard: bool = False,
) -> BaseSolver:
    """
    Create a solver and fill it from `loader` (filters applied in order).
    Loader errors propagate; no solver is returned in that case.
    """
    solver = create_solver(solver_id)
    solver.reset(words=loader.load(filters), seed=seed, hard=hard)
    return solver


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseSolver", "SolverState", "REGISTRY", "register",
    "create_solver", "new_solver", "get_solver_ids", "DEFAULT_SOLVER",
]
