"""
ai_solver.py - Computer guesser for DigitMind using an elimination strategy.

The solver maintains a list of all possible 4-digit combinations with unique
digits below the chosen level. After each guess + feedback, it filters out
any combination that would NOT produce the same score, narrowing the
candidate set. This is the filtering half of Knuth's Mastermind algorithm;
the next guess is simply a random remaining candidate.

Key design:
- The human THINKS of a combination; it is never stored.
- The solver learns purely from the feedback the human provides.
- Contradictory feedback empties the candidate set: is_stuck turns true
  and make_guess raises InconsistentFeedbackError.
"""

import logging
import random
from itertools import permutations

from game_logic import CODE_LENGTH, calculate_score, is_winner, validate_level

log = logging.getLogger(__name__)


class InconsistentFeedbackError(ValueError):
    """No combination is consistent with the feedback given so far."""


def generate_all_combinations(level):
    """
    Generate all combinations of 4 distinct digits from 0 to level-1.
    Leading zeros are allowed (e.g. (0, 1, 2, 3) is valid).
    Returns a list of tuples in lexicographic order.
    """
    valid, msg = validate_level(level)
    if not valid:
        raise ValueError(msg)
    return list(permutations(range(level), CODE_LENGTH))


def filter_candidates(candidates, guess, score):
    """
    Keep only candidates that would produce the same score
    if 'guess' were applied to them as the secret.
    """
    return [candidate for candidate in candidates
            if calculate_score(guess, candidate) == score]


def select_random_combination(candidates, rng=random):
    """Pick one candidate uniformly at random."""
    if not candidates:
        raise ValueError("Cannot select from an empty candidate list.")
    return rng.choice(candidates)


class ComputerGuesser:
    """
    Stateful solver for the computer-guesses mode.
    The solver never knows the human's secret, it only uses feedback.
    """

    def __init__(self, level, rng=random):
        self.level = level
        self.rng = rng
        self.candidates = generate_all_combinations(level)
        self.history = []           # list of (guess, score)
        self.current_guess = None   # pending guess awaiting feedback
        self.solved = False
        log.debug("Solver started at level %d with %d candidates",
                  level, len(self.candidates))

    @property
    def is_stuck(self):
        return not self.solved and not self.candidates

    @property
    def guess_count(self):
        return len(self.history)

    def make_guess(self):
        """Choose the next guess at random from the remaining candidates."""
        if not self.candidates:
            raise InconsistentFeedbackError(
                "No valid combinations remain; the feedback was inconsistent.")
        self.current_guess = select_random_combination(self.candidates, self.rng)
        return self.current_guess

    def apply_feedback(self, score):
        """
        Record the human's feedback for the pending guess.
        Returns the number of remaining candidates.
        """
        guess = self.current_guess
        if guess is None:
            raise RuntimeError("No pending guess to apply feedback to.")

        self.history.append((guess, score))
        self.current_guess = None

        if is_winner(score):
            self.solved = True
            self.candidates = [guess]
            return 1

        before = len(self.candidates)
        self.candidates = filter_candidates(self.candidates, guess, score)
        log.debug("Guess %s scored %s: %d -> %d candidates",
                  guess, tuple(score), before, len(self.candidates))

        if not self.candidates:
            log.warning("Feedback history %s leaves no candidates", self.history)
        return len(self.candidates)
