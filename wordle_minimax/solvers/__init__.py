from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, Selection, register

from . import minimax  # noqa: F401
from . import random_consistent  # noqa: F401


def create_solver(solver_id: str, **kwargs) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.

    Extra keyword arguments go to the solver's constructor
    (e.g. create_solver("minimax", workers=4)).
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseSolver", "REGISTRY", "Selection", "register", "create_solver", "get_solver_ids"]
