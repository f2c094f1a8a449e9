"""
Testing pure game logic.
"""
from itertools import permutations

from game_logic import (
    Score,
    calculate_score,
    format_combination,
    is_winner,
    parse_combination,
    validate_combination,
    validate_level,
    validate_score,
)


def test_score_no_matches():
    assert calculate_score((4, 5, 6, 7), (0, 1, 2, 3)) == Score(0, 0)


def test_score_some_position_matches():
    score = calculate_score((0, 2, 4, 6), (0, 1, 3, 5))
    assert score.right_position == 1
    assert score.wrong_position == 0


def test_score_all_digits_misplaced():
    assert calculate_score((3, 2, 1, 0), (0, 1, 2, 3)) == Score(0, 4)


def test_score_mixed():
    assert calculate_score((1, 2, 4, 3), (1, 2, 3, 4)) == Score(2, 2)


def test_score_does_not_reuse_matched_positions():
    # The second 1 is already matched in place; only one 0 can count
    assert calculate_score((1, 1, 0, 0), (0, 1, 2, 3)) == Score(1, 1)


def test_score_against_itself_is_full_match():
    for code in permutations(range(10), 4):
        assert calculate_score(code, code) == Score(4, 0)


def test_is_winner():
    assert is_winner(Score(4, 0)) is True
    assert is_winner(Score(2, 2)) is False


def test_validate_combination_accepts_valid_input():
    assert validate_combination("0123") == (True, "")
    assert validate_combination("  9876\n") == (True, "")
    assert validate_combination("3210", level=4) == (True, "")


def test_validate_combination_rejects_bad_input():
    valid, msg = validate_combination("012")
    assert not valid and "exactly 4" in msg

    valid, msg = validate_combination("01a3")
    assert not valid and "digits only" in msg

    valid, msg = validate_combination("0125", level=5)
    assert not valid and "between 0 and 4" in msg

    valid, msg = validate_combination("0112")
    assert not valid and "unique" in msg

    assert validate_combination(None)[0] is False
    assert validate_combination("")[0] is False


def test_validate_level_bounds():
    assert validate_level(4)[0] is True
    assert validate_level(10)[0] is True
    assert validate_level(3)[0] is False
    assert validate_level(11)[0] is False
    assert validate_level("5")[0] is False
    assert validate_level(True)[0] is False


def test_validate_score():
    assert validate_score(2, 2) == (True, "")
    assert validate_score(0, 0) == (True, "")
    assert validate_score(3, 2)[0] is False
    assert validate_score(-1, 0)[0] is False
    assert validate_score(5, 0)[0] is False


def test_parse_and_format_combination():
    assert parse_combination(" 0123 ") == (0, 1, 2, 3)
    assert format_combination((9, 0, 4, 2)) == "9042"
