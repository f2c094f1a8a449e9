"""
game_logic.py - Core game logic for DigitMind
"""

from typing import NamedTuple

CODE_LENGTH = 4
MIN_LEVEL = 4
MAX_LEVEL = 10


class Score(NamedTuple):
    """Feedback for one guess: (right position, wrong position)."""
    right_position: int
    wrong_position: int


def validate_level(level):
    """
    Validate the difficulty level (number of digit values in play).
    Returns (is_valid: bool, error_message: str)
    """
    if not isinstance(level, int) or isinstance(level, bool):
        return False, "Level must be a whole number."

    if level < MIN_LEVEL or level > MAX_LEVEL:
        return False, f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}."

    return True, ""


def validate_combination(number_str, level=MAX_LEVEL):
    """
    Validate that the input is a 4-digit combination with all unique digits,
    each digit below `level`.
    Returns (is_valid: bool, error_message: str)
    """
    if not number_str or not isinstance(number_str, str):
        return False, "Input must be a string."

    number_str = number_str.strip()

    if len(number_str) != CODE_LENGTH:
        return False, f"Combination must be exactly {CODE_LENGTH} digits."

    if not all(ch in "0123456789" for ch in number_str):
        return False, "Combination must contain digits only."

    if any(int(ch) >= level for ch in number_str):
        return False, f"Digits must be between 0 and {level - 1}."

    if len(set(number_str)) != CODE_LENGTH:
        return False, "All digits must be unique (no repeating digits)."

    return True, ""


def validate_score(right_position, wrong_position):
    """
    Validate feedback counts given by a human.
    Returns (is_valid: bool, error_message: str)
    """
    if not (0 <= right_position <= CODE_LENGTH and 0 <= wrong_position <= CODE_LENGTH):
        return False, f"Counts must be between 0 and {CODE_LENGTH}."

    if right_position + wrong_position > CODE_LENGTH:
        return False, f"Counts must add up to at most {CODE_LENGTH}."

    return True, ""


def parse_combination(number_str):
    """Turn '0123' into (0, 1, 2, 3). Call validate_combination first."""
    return tuple(int(ch) for ch in number_str.strip())


def format_combination(combination):
    return ''.join(str(digit) for digit in combination)


def calculate_score(guess, code):
    """
    Calculate the score of a guess against the secret code.

    Right position = correct digit in correct position
    Wrong position = digit present in the code but elsewhere

    Positional matches are counted first. Each remaining code position can
    then account for at most one wrong-position match.
    """
    right_position = 0
    wrong_position = 0
    unmatched = []

    for i in range(CODE_LENGTH):
        if guess[i] == code[i]:
            right_position += 1
        else:
            unmatched.append(i)

    leftover = [code[i] for i in unmatched]
    for i in unmatched:
        if guess[i] in leftover:
            wrong_position += 1
            leftover.remove(guess[i])

    return Score(right_position, wrong_position)


def is_winner(score):
    """Check if the guess was right (all digits in the right position)."""
    return score.right_position == CODE_LENGTH
