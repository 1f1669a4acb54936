from .session import Session, Suggestion, Round
from .core import run_case, run_batch, WORDLE_MAX_TURNS
from .io import write_csv, write_manifest

__all__ = ["Session", "Suggestion", "Round", "run_case", "run_batch", "WORDLE_MAX_TURNS",
           "write_csv", "write_manifest"]
