"""
Exception types raised by the engine.

Drivers (CLI, harness) catch these and turn them into user messages; the
engine itself never retries anything.
"""


class WordleError(Exception):
    """Base class for all solver errors."""


class InvalidWordError(WordleError, ValueError):
    """A dictionary word has the wrong length or a non A–Z character."""


class InvalidFeedbackError(WordleError, ValueError):
    """A feedback pattern has the wrong length or an unknown symbol."""


class InconsistentFeedbackError(WordleError):
    """Feedback contradicts what earlier rounds established."""


class NoCandidatesError(WordleError):
    """There is no pending guess to attach feedback to."""
