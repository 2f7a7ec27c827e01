"""Five-letter word guessing game: words, scoring, games, a text front end and guess strategy."""

__version__ = "0.1.0"

__all__ = ["__version__"]