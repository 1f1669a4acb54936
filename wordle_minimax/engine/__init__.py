from .letters import WORD_LENGTH, ALPHABET
from .errors import (WordleError, InvalidWordError, InvalidFeedbackError,
                     InconsistentFeedbackError, NoCandidatesError)
from .entry import DictionaryEntry
from .feedback import LetterResult, parse_feedback, format_feedback, all_patterns, is_solved
from .constraints import ConstraintState, fits, apply
from .store import DictionaryStore
from .scoring import score
from .validation import is_valid_word, normalize_word

__all__ = [
    "WORD_LENGTH", "ALPHABET",
    "WordleError", "InvalidWordError", "InvalidFeedbackError",
    "InconsistentFeedbackError", "NoCandidatesError",
    "DictionaryEntry", "LetterResult", "parse_feedback", "format_feedback",
    "all_patterns", "is_solved", "ConstraintState", "fits", "apply",
    "DictionaryStore", "score", "is_valid_word", "normalize_word",
]
