import pytest
from wordle_minimax.engine import (
    ConstraintState, DictionaryEntry, InvalidFeedbackError, InvalidWordError, LetterResult,
    all_patterns, apply, fits, format_feedback, is_valid_word, parse_feedback, score,
)
from wordle_minimax.engine.constraints import _apply_pattern, contradicts_positions
from wordle_minimax.engine.letters import letter_index

X, M, O = LetterResult.INCORRECT, LetterResult.MISPLACED, LetterResult.CORRECT


def _bounds(state, ch):
    return state.count_bounds[letter_index(ch)]


# --- reference scoring goldens (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "XO---"),
    ("level", "level", "OOOOO"),
    ("lemon", "level", "OOXXX"),
    ("cools", "scoop", "--OX-"),
    ("crane", "crane", "OOOOO"),
    ("raise", "crane", "--XXO"),
    ("stare", "crane", "XXO-O"),
    ("crane", "grape", "XOOXO"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected


def test_parse_feedback_codes_are_case_insensitive():
    assert parse_feedback("xO-xo") == (X, O, M, X, O)
    assert parse_feedback([0, 2, 1, 0, 2]) == (X, O, M, X, O)
    assert format_feedback((X, O, M, X, O)) == "XO-XO"


@pytest.mark.parametrize("bad", ["XO-X", "XO-XOO", "XO?XO", "GYGYG"])
def test_parse_feedback_rejects_bad_input(bad):
    with pytest.raises(InvalidFeedbackError):
        parse_feedback(bad)


def test_all_patterns_visits_each_once():
    pats = list(all_patterns(5))
    assert len(pats) == 3 ** 5
    assert len(set(pats)) == 3 ** 5
    assert pats[0] == (X,) * 5
    assert pats[-1] == (O,) * 5
    assert len(list(all_patterns(2))) == 9


def test_entry_caches_letters_masks_and_counts():
    e = DictionaryEntry.from_word("eerie")
    assert e.word == "EERIE"
    assert e.letter_at == (4, 4, 17, 8, 4)
    assert e.position_mask[2] == 1 << 17
    assert e.letter_count[letter_index("E")] == 3
    assert sum(e.letter_count) == 5


@pytest.mark.parametrize("bad", ["cranes", "cran", "cr4ne", "", "crème"])
def test_entry_rejects_malformed_words(bad):
    with pytest.raises(InvalidWordError):
        DictionaryEntry.from_word(bad)
    assert not is_valid_word(bad)


def test_invalid_word_is_a_value_error():
    with pytest.raises(ValueError):
        DictionaryEntry.from_word("toolong")


def test_unconstrained_state_admits_everything():
    s0 = ConstraintState.initial()
    for w in ["CRANE", "EERIE", "QAJAQ", "ZZZZZ", "ABCDE"]:
        assert fits(DictionaryEntry.from_word(w), s0)
    assert s0.is_satisfiable()


@pytest.mark.parametrize("guess,answer", [
    ("crane", "crane"),
    ("llama", "hello"),
    ("speed", "abide"),
    ("eerie", "there"),
    ("belle", "level"),
    ("stare", "crane"),
])
def test_real_feedback_keeps_the_answer(guess, answer):
    g = DictionaryEntry.from_word(guess)
    a = DictionaryEntry.from_word(answer)
    state = apply(ConstraintState.initial(), g, score(guess, answer))
    assert fits(a, state)
    assert state.is_satisfiable()


def test_repeated_letter_with_mixed_feedback_bounds_count():
    state = apply(ConstraintState.initial(), DictionaryEntry.from_word("EERIE"), "OXXXO")
    assert _bounds(state, "E") == (2, 2)
    assert _bounds(state, "R") == (0, 0)
    assert _bounds(state, "I") == (0, 0)
    # position 1 saw an incorrect E
    assert not state.position_possible[1] & (1 << letter_index("E"))
    assert state.position_possible[0] == 1 << letter_index("E")

    one = apply(ConstraintState.initial(), DictionaryEntry.from_word("EERIE"), "XOXXX")
    assert _bounds(one, "E") == (1, 1)


def test_misplaced_only_raises_min():
    state = apply(ConstraintState.initial(), DictionaryEntry.from_word("SLATE"), "-XXXX")
    assert _bounds(state, "S") == (1, 5)
    assert not state.position_possible[0] & (1 << letter_index("S"))


def test_apply_does_not_mutate_input():
    s0 = ConstraintState.initial()
    before = s0.copy()
    apply(s0, DictionaryEntry.from_word("CRANE"), "XOXXO")
    assert s0 == before


def test_bounds_never_loosen():
    s1 = apply(ConstraintState.initial(), DictionaryEntry.from_word("STEAL"), "XXXXX")
    assert _bounds(s1, "E") == (0, 0)
    # Claiming an E now contradicts round one instead of re-opening E.
    s2 = apply(s1, DictionaryEntry.from_word("CRANE"), "XXXXO")
    assert _bounds(s2, "E") == (1, 0)
    assert not s2.is_satisfiable()


def test_apply_rejects_feedback_of_wrong_length():
    with pytest.raises(InvalidFeedbackError):
        apply(ConstraintState.initial(), DictionaryEntry.from_word("CRANE"), "XOX")


def test_validate_word_n5():
    assert is_valid_word("crane") is True
    assert is_valid_word(" CRANE\n") is True
    assert is_valid_word("cranes") is False
    assert is_valid_word("???") is False
    assert is_valid_word(None) is False


def test_entry_rejects_surrounding_whitespace():
    for raw in [" CRANE\n", "CRANE ", "\tcrane"]:
        with pytest.raises(InvalidWordError):
            DictionaryEntry.from_word(raw)


def test_correct_sets_position_to_the_guessed_letter():
    cloth = DictionaryEntry.from_word("CLOTH")
    crane = DictionaryEntry.from_word("CRANE")
    s1 = apply(ConstraintState.initial(), cloth, "-XXXX")
    assert not s1.position_possible[0] & (1 << letter_index("C"))

    s2 = apply(s1, crane, "OOOOO")
    assert s2.position_possible[0] == 1 << letter_index("C")
    assert fits(crane, s2)


def test_self_feedback_after_real_rounds_keeps_the_guess():
    slate = DictionaryEntry.from_word("SLATE")
    crane = DictionaryEntry.from_word("CRANE")
    s1 = apply(ConstraintState.initial(), slate, score("SLATE", "CRANE"))
    s2 = apply(s1, crane, "OOOOO")
    assert fits(crane, s2)
    assert s2.is_satisfiable()


def test_contradicts_positions():
    cloth = DictionaryEntry.from_word("CLOTH")
    crane = DictionaryEntry.from_word("CRANE")
    s1 = apply(ConstraintState.initial(), cloth, "-XXXX")
    assert contradicts_positions(s1, crane, parse_feedback("OXXXX"))
    assert not contradicts_positions(s1, crane, parse_feedback("-XXXX"))
    assert not contradicts_positions(ConstraintState.initial(), crane, parse_feedback("OOOOO"))


def test_apply_pattern_matches_apply():
    eerie = DictionaryEntry.from_word("EERIE")
    s1 = apply(ConstraintState.initial(), DictionaryEntry.from_word("THERE"), "XX-XO")
    for pattern in all_patterns(5):
        assert _apply_pattern(s1, eerie, pattern) == apply(s1, eerie, pattern)
