"""Wordle game rules: scoring guesses and tracking a game."""

from __future__ import annotations

import bisect
import random as _random
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from itertools import product
from os import PathLike
from pathlib import Path
from typing import Iterable

from .word import WORD_LENGTH, Word

MAX_ROUNDS = 6


class CharResult(Enum):
    """Outcome for one letter of a guess."""

    GREEN = "green"
    YELLOW = "yellow"
    NONE = "none"


class GameStatus(Enum):
    """State of a game."""

    CORRECT = "correct"
    INCOMPLETE = "incomplete"
    FAIL = "fail"


class GameOverError(RuntimeError):
    """Raised when a guess is made after all rounds are used."""


def all_possible_results() -> list[tuple[CharResult, ...]]:
    """All 243 result patterns, counted in base three (none, yellow, green)."""
    digits = (CharResult.NONE, CharResult.YELLOW, CharResult.GREEN)
    return list(product(digits, repeat=WORD_LENGTH))


@dataclass(frozen=True)
class WordResult:
    """A guess together with its per-letter result."""

    input: Word
    result: tuple[CharResult, ...]

    @classmethod
    def compare_guess(cls, guess: Word, answer: Word) -> "WordResult":
        """Score ``guess`` against ``answer``."""
        result = [CharResult.NONE] * WORD_LENGTH
        remaining: Counter[int] = Counter()
        for i, (g, a) in enumerate(zip(guess, answer)):
            if g == a:
                result[i] = CharResult.GREEN
            else:
                remaining[a] += 1
        for i, g in enumerate(guess):
            if result[i] is CharResult.GREEN:
                continue
            if remaining[g] > 0:
                result[i] = CharResult.YELLOW
                remaining[g] -= 1
        return cls(guess, tuple(result))


def parse_word_list(text: str) -> list[Word]:
    """Parse one word per line into a sorted list; blank lines are skipped."""
    words = []
    for line in text.splitlines():
        if not line:
            continue
        try:
            words.append(Word(line))
        except ValueError as exc:
            raise ValueError(
                f"Failed to parse '{line}' from valid wordle words"
            ) from exc
    words.sort()
    return words


def load_word_list(path: str | PathLike[str]) -> list[Word]:
    """Read and parse a word list file."""
    return parse_word_list(Path(path).read_text(encoding="utf-8"))


def _to_word(value: Word | str | bytes) -> Word:
    return value if isinstance(value, Word) else Word(value)


class Game:
    """A single game of six guesses against a fixed answer."""

    def __init__(self, answer: Word | str, words: Iterable[Word | str]) -> None:
        try:
            self._answer = _to_word(answer)
        except ValueError as exc:
            raise ValueError("Failed to parse answer as wordle word.") from exc
        self._words = sorted(_to_word(w) for w in words)
        self._history: list[WordResult] = []
        self._status = GameStatus.INCOMPLETE

    @classmethod
    def random(
        cls, words: Iterable[Word | str], rng: _random.Random | None = None
    ) -> "Game":
        """Start a game whose answer is drawn at random from ``words``."""
        word_list = sorted(_to_word(w) for w in words)
        if not word_list:
            raise ValueError("cannot choose an answer from an empty word list")
        chooser = rng if rng is not None else _random.Random()
        return cls(chooser.choice(word_list), word_list)

    def is_guess_valid(self, word: Word | str) -> bool:
        """Whether ``word`` appears in the list of allowed guesses."""
        try:
            target = _to_word(word)
        except ValueError:
            return False
        index = bisect.bisect_left(self._words, target)
        return index < len(self._words) and self._words[index] == target

    def guess(self, word: Word | str) -> WordResult:
        """Record a guess, update the status and return its result."""
        if len(self._history) >= MAX_ROUNDS:
            raise GameOverError("no rounds left")
        guess = _to_word(word)
        outcome = WordResult.compare_guess(guess, self._answer)
        self._history.append(outcome)
        if guess == self._answer:
            self._status = GameStatus.CORRECT
        elif len(self._history) == MAX_ROUNDS:
            self._status = GameStatus.FAIL
        return outcome

    @property
    def history(self) -> tuple[WordResult, ...]:
        """Results of the guesses made so far, in order."""
        return tuple(self._history)

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def round(self) -> int:
        """Number of guesses made."""
        return len(self._history)

    @property
    def possible_guesses(self) -> list[Word]:
        """The sorted list of allowed guesses."""
        return list(self._words)