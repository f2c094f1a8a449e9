"""
- Provide a console fixture whose output is captured in memory.
- Provide scripted stdin: lines are handed to input() one by one and
  EOFError is raised once they run out.
- Provide an honest player that scores the computer's guesses.
"""
import io
import re
import pytest

from rich.console import Console

from game_logic import calculate_score, parse_combination

GUESS_RE = re.compile(r"Computer's guess: (\d{4})")


def output_of(console):
    return console.file.getvalue()


class ScriptedInput:
    """Replacement for builtins.input fed from a list of lines."""

    def __init__(self, lines):
        self.lines = list(lines)

    def __call__(self, prompt=""):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class HonestPlayer(ScriptedInput):
    """
    Answers the feedback prompts truthfully for `secret`; every other
    prompt (menu, level) is answered from the scripted lines.
    """

    def __init__(self, console, secret, lines=()):
        super().__init__(lines)
        self.console = console
        self.secret = secret

    def __call__(self, prompt=""):
        out = output_of(self.console).rstrip()
        if out.endswith("correct position:") or out.endswith("wrong position:"):
            guess = parse_combination(GUESS_RE.findall(out)[-1])
            score = calculate_score(guess, self.secret)
            if out.endswith("correct position:"):
                return str(score.right_position)
            return str(score.wrong_position)
        return super().__call__(prompt)


@pytest.fixture
def console():
    # Wide, colourless console so assertions see plain text on one line
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)


@pytest.fixture
def feed_input(monkeypatch):
    def _feed(lines):
        scripted = ScriptedInput(lines)
        monkeypatch.setattr("builtins.input", scripted)
        return scripted
    return _feed


@pytest.fixture
def honest_player(monkeypatch, console):
    def _play(secret, lines=()):
        player = HonestPlayer(console, secret, lines)
        monkeypatch.setattr("builtins.input", player)
        return player
    return _play
