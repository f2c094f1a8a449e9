"""
digitmind.py - Console application for DigitMind (Mastermind with digits)

Two game modes:
1. The computer guesses a combination the human thinks of, using the
   human's feedback to eliminate candidates.
2. The human guesses a combination the computer has selected.
"""

import argparse
import logging
import os
import random
import sys

from rich.console import Console
from rich.prompt import IntPrompt

from ai_solver import (
    ComputerGuesser,
    generate_all_combinations,
    select_random_combination,
)
from digitmind_logger import setup_logger
from game_logic import (
    CODE_LENGTH,
    MAX_LEVEL,
    MIN_LEVEL,
    Score,
    calculate_score,
    format_combination,
    is_winner,
    parse_combination,
    validate_combination,
    validate_level,
    validate_score,
)

log = logging.getLogger("digitmind")

# ─────────────────────────────────────────────
# CONFIGURATION
# ─────────────────────────────────────────────
# Environment defaults, read at startup; command-line flags take precedence.
LOG_LEVEL_ENV = 'DIGITMIND_LOG_LEVEL'
SEED_ENV = 'DIGITMIND_SEED'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

MENU_TEXT = (
    "\nChoose game mode:\n"
    "0. Quit\n"
    "1. Computer guesses your combination\n"
    "2. You guess the combination the computer has selected\n"
)

QUIT, COMPUTER_GUESSES, HUMAN_GUESSES = 0, 1, 2


# ─────────────────────────────────────────────
# PROMPTS
# ─────────────────────────────────────────────

def menu(console):
    """Show the menu until the user picks 0, 1 or 2."""
    console.print(MENU_TEXT)
    return IntPrompt.ask(
        "Enter the number of your chosen option",
        console=console,
        choices=[str(QUIT), str(COMPUTER_GUESSES), str(HUMAN_GUESSES)],
    )


def get_difficulty_level(console):
    """Ask for a level between MIN_LEVEL and MAX_LEVEL, re-prompting on bad input."""
    return IntPrompt.ask(
        f"Please enter the difficulty level (from {MIN_LEVEL} to {MAX_LEVEL})",
        console=console,
        choices=[str(n) for n in range(MIN_LEVEL, MAX_LEVEL + 1)],
        show_choices=False,
    )


def prompt_count(console, label):
    while True:
        raw = console.input(label).strip()
        try:
            return int(raw)
        except ValueError:
            console.print("[red]Please enter a whole number.[/]")


def prompt_score(console):
    """
    Ask the human to score the computer's guess.
    The wrong-position count is skipped when all positions are right.
    """
    while True:
        right = prompt_count(console, "Enter number of digits in the correct position: ")
        if right == CODE_LENGTH:
            return Score(right, 0)

        wrong = prompt_count(console, "Enter number of correct digits in the wrong position: ")
        valid, msg = validate_score(right, wrong)
        if valid:
            return Score(right, wrong)
        console.print(f"[red]{msg}[/]")


def prompt_guess(console, level):
    while True:
        raw = console.input(
            f"Enter your guess ({CODE_LENGTH} distinct digits between 0 and {level - 1}): ")
        valid, msg = validate_combination(raw, level)
        if valid:
            return parse_combination(raw)
        console.print(f"[red]{msg}[/]")


# ─────────────────────────────────────────────
# GAME MODES
# ─────────────────────────────────────────────

def computer_player(console, level, rng=random):
    """
    The computer guesses the human's combination.
    Returns True when the code was guessed, False when the feedback
    became inconsistent and the game must restart.
    """
    guesser = ComputerGuesser(level, rng)

    while True:
        guess = guesser.make_guess()
        console.print(f"Computer's guess: [bold]{format_combination(guess)}[/]")
        score = prompt_score(console)
        guesser.apply_feedback(score)

        if guesser.is_stuck:
            console.print("[yellow]Input error detected, restarting game...[/]")
            return False

        if guesser.solved:
            console.print("[green]The computer has guessed your combination![/]")
            console.print(f"It took {guesser.guess_count} guess(es).")
            log.info("Computer solved level %d in %d guesses", level, guesser.guess_count)
            return True


def human_player(console, level, rng=random):
    """
    The computer selects a secret and the human guesses it.
    Returns the number of guesses used.
    """
    secret = select_random_combination(generate_all_combinations(level), rng)
    log.debug("Secret selected at level %d", level)

    guesses = 0
    while True:
        guess = prompt_guess(console, level)
        guesses += 1
        score = calculate_score(guess, secret)

        console.print(f"Digits in the right position: {score.right_position}")
        console.print(f"Correct digits in wrong position: {score.wrong_position}")

        if is_winner(score):
            console.print("[green]Congratulations, you have guessed the combination![/]")
            console.print(f"It took you {guesses} guess(es).")
            log.info("Human solved level %d in %d guesses", level, guesses)
            return guesses


def play(console, rng=random, level=None):
    """Menu loop: runs games until the user chooses to quit."""
    while True:
        choice = menu(console)
        if choice == QUIT:
            console.print("Goodbye.")
            return

        game_level = level or get_difficulty_level(console)

        if choice == COMPUTER_GUESSES:
            computer_player(console, game_level, rng)
        elif choice == HUMAN_GUESSES:
            human_player(console, game_level, rng)


# ─────────────────────────────────────────────
# ENTRY POINT
# ─────────────────────────────────────────────

def level_type(value):
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid level: {value!r}")
    valid, msg = validate_level(level)
    if not valid:
        raise argparse.ArgumentTypeError(msg)
    return level


def log_level_type(value):
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"invalid log level: {value!r} (choose from {', '.join(LOG_LEVELS)})")
    return level


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="digitmind",
        description="Guess a combination of 4 distinct digits, or let the computer guess yours.",
    )
    parser.add_argument("--level", type=level_type, default=None,
                        help=f"Difficulty level ({MIN_LEVEL}-{MAX_LEVEL}); asked interactively if omitted")
    # String defaults go through `type`, so bad environment values get a usage error
    parser.add_argument("--seed", type=int, default=os.environ.get(SEED_ENV),
                        help=f"Random seed (default: ${SEED_ENV})")
    parser.add_argument("--log-level", type=log_level_type,
                        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
                        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Shortcut for --log-level DEBUG")
    return parser.parse_args(argv)


def main(argv=None, console=None):
    args = parse_args(argv)
    setup_logger("DEBUG" if args.verbose else args.log_level)

    console = console or Console()
    rng = random.Random(args.seed)

    console.print("[bold]-- Welcome to DigitMind --[/]")
    try:
        play(console, rng, args.level)
    except (EOFError, KeyboardInterrupt):
        console.print("\nGoodbye.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
