from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Dict, Type

from wordle_minimax.engine.constraints import ConstraintState
from wordle_minimax.engine.store import DictionaryStore

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


@dataclass(frozen=True)
class Selection:
    """
    Outcome of one selection call.

    index     : position of the chosen entry in the store's live region,
                or None when the store is empty
    guarantee : entries this guess eliminates under every feedback pattern
    """
    index: int | None
    guarantee: int


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.rng = random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def select(self, state: ConstraintState, store: DictionaryStore) -> Selection:
        raise NotImplementedError("Override in subclass")
