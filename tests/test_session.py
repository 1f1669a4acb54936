import pytest
from wordle_minimax.engine import InconsistentFeedbackError, InvalidFeedbackError, NoCandidatesError, score
from wordle_minimax.harness import Session
from wordle_minimax.solvers import create_solver

WORDS = ["CRANE", "SLATE", "TRACE", "GRAPE", "PLANE"]


def _session():
    return Session.from_words(WORDS, solver=create_solver("minimax", workers=2))


def test_round_flow_until_solved():
    s = _session()
    answer = "PLANE"
    for _ in range(len(WORDS)):
        sug = s.next_guess()
        assert sug is not None
        assert sug.word in s.remaining()
        assert 0 <= sug.guarantee <= s.remaining_count
        before = s.remaining_count
        removed = s.submit(score(sug.word, answer))
        assert s.remaining_count == before - removed
        if s.solved:
            break
    assert s.solved
    assert s.history[-1].guess == answer
    assert s.history[-1].pattern == "OOOOO"
    assert "PLANE" in s.remaining()


def test_explicit_guess_and_remaining_snapshot():
    s = _session()
    s.submit("xooxo", guess="crane")
    assert s.remaining() == ["GRAPE"]
    assert s.history[0].guarantee is None
    assert s.history[0].removed == 4


def test_submit_without_pending_guess():
    with pytest.raises(NoCandidatesError):
        _session().submit("XXXXX")


def test_invalid_feedback_is_rejected():
    s = _session()
    s.next_guess()
    with pytest.raises(InvalidFeedbackError):
        s.submit("XOQXO")
    assert s.remaining_count == len(WORDS)


def test_contradictory_feedback_is_not_committed():
    s = _session()
    s.submit("XXXXX", guess="CRANE")
    state_before = s.state.copy()
    left = s.remaining()
    with pytest.raises(InconsistentFeedbackError):
        s.submit("OOOOO", guess="CRANE")
    assert s.state == state_before
    assert s.remaining() == left
    assert len(s.history) == 1


def test_exhausted_dictionary_returns_no_suggestion():
    s = _session()
    s.submit("XOXXO", guess="CRANE")
    assert s.remaining_count == 0
    assert s.next_guess() is None


def test_correct_on_a_ruled_out_position_is_rejected():
    s = _session()
    s.submit("-XXXX", guess="CLOTH")
    state_before = s.state.copy()
    # C is in the word but not at position 0; the count bounds still allow it.
    with pytest.raises(InconsistentFeedbackError):
        s.submit("OXXXX", guess="CRANE")
    assert s.state == state_before
    assert len(s.history) == 1
