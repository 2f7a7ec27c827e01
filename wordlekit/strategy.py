"""Narrowing the candidate answers and picking the most informative guess."""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable, Sequence

from .game import WordResult
from .word import Word


def _consistent(candidate: Word, context: WordResult) -> bool:
    """Whether ``candidate`` as the answer would have produced ``context``."""
    return WordResult.compare_guess(context.input, candidate).result == context.result


def new_possibility_space(context: WordResult, space: Iterable[Word]) -> list[Word]:
    """Keep only the words that could still be the answer given ``context``."""
    return [word for word in space if _consistent(word, context)]


def new_possibility_space_size(context: WordResult, space: Iterable[Word]) -> int:
    """Count the words that could still be the answer given ``context``."""
    return sum(1 for word in space if _consistent(word, context))


def entropy(word: Word, space: Sequence[Word]) -> float:
    """Expected information, in bits, gained by guessing ``word`` against ``space``.

    Each possible result pattern splits the space; the entropy of that
    split is returned. Patterns that no candidate produces add nothing.
    """
    total = len(space)
    if total == 0:
        return 0.0
    buckets = Counter(WordResult.compare_guess(word, answer).result for answer in space)
    result = 0.0
    for size in buckets.values():
        p = size / total
        result -= p * math.log2(p)
    return result


def max_information(space: Sequence[Word]) -> Word:
    """The word of ``space`` with the highest entropy; the first wins a tie."""
    if not space:
        raise ValueError("cannot choose a guess from an empty possibility space")
    best_word = space[0]
    best_value = -math.inf
    for word in space:
        value = entropy(word, space)
        if best_value < value:
            best_value = value
            best_word = word
    return best_word