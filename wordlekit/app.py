"""Text front end for playing a game of Wordle."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence

from .game import CharResult, Game, GameOverError, GameStatus, load_word_list
from .word import WORD_LENGTH, Word

TITLE = "Wordle"
WELCOME = "Guess the 5-letter word!"

_SYMBOLS = {
    CharResult.GREEN: "G",
    CharResult.YELLOW: "Y",
    CharResult.NONE: "_",
}


class WordleApp:
    """Holds a game, the pending input and the message shown to the player."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.current_input = ""
        self.message = WELCOME

    def submit(self, text: str) -> str:
        """Try ``text`` as a guess and return the resulting message."""
        self.current_input = text
        if len(text.encode("utf-8")) != WORD_LENGTH:
            self.message = "Word must be 5 characters"
            return self.message
        try:
            word = Word(text)
        except ValueError:
            self.message = "Failed to parse word"
            return self.message
        if not self.game.is_guess_valid(word):
            self.message = "Word not in valid word list"
            return self.message
        try:
            self.game.guess(word)
        except GameOverError:
            self.message = "No rounds left"
            return self.message
        self.message = f"Guess submitted: {text}"
        self.current_input = ""
        return self.message

    def rows(self) -> list[str]:
        """One line of G, Y and _ for each guess made."""
        return [
            "".join(_SYMBOLS[mark] for mark in outcome.result)
            for outcome in self.game.history
        ]

    def outcome(self) -> str | None:
        """The end-of-game line, or None while the game goes on."""
        if self.game.status is GameStatus.CORRECT:
            return "You won!"
        if self.game.status is GameStatus.FAIL:
            return "You lost!"
        return None


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wordlekit", description="Play Wordle.")
    parser.add_argument("words", help="file with one allowed five-letter word per line")
    parser.add_argument("--answer", help="use this answer instead of a random one")
    parser.add_argument("--seed", type=int, help="seed for choosing the answer")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game on standard input and output."""
    args = _parse_args(argv)
    parser_error = argparse.ArgumentParser(prog="wordlekit").error
    try:
        words = load_word_list(args.words)
    except (OSError, ValueError) as exc:
        parser_error(str(exc))
    try:
        if args.answer is not None:
            game = Game(args.answer, words)
        else:
            game = Game.random(words, random.Random(args.seed))
    except ValueError as exc:
        parser_error(str(exc))

    app = WordleApp(game)
    print(TITLE)
    print(app.message)
    for line in sys.stdin:
        app.submit(line.rstrip("\r\n"))
        print(app.message)
        for row in app.rows():
            print(row)
        result = app.outcome()
        if result is not None:
            print(result)
            break
    return 0