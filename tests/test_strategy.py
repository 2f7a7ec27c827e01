import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from wordlekit.game import WordResult
from wordlekit.strategy import (
    entropy,
    max_information,
    new_possibility_space,
    new_possibility_space_size,
)
from wordlekit.word import Word

words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=5, max_size=5).map(Word)
spaces = st.lists(words, min_size=1, max_size=12)


def _space(*texts):
    return [Word(t) for t in texts]


def test_filter_keeps_answer_and_drops_guess():
    context = WordResult.compare_guess(Word("crane"), Word("candy"))
    space = _space("crane", "candy", "apple")
    assert new_possibility_space(context, space) == [Word("candy")]


def test_size_matches_filtered_list():
    context = WordResult.compare_guess(Word("crane"), Word("candy"))
    space = _space("crane", "candy", "apple", "sport")
    assert new_possibility_space_size(context, space) == len(
        new_possibility_space(context, space)
    )


def test_filter_of_empty_space_is_empty():
    context = WordResult.compare_guess(Word("apple"), Word("apple"))
    assert new_possibility_space(context, []) == []
    assert new_possibility_space_size(context, []) == 0


def test_entropy_of_single_word_space_is_zero():
    assert entropy(Word("apple"), _space("apple")) == 0.0


def test_entropy_of_even_split_is_one_bit():
    space = _space("abcde", "fghij")
    assert entropy(Word("abcde"), space) == pytest.approx(1.0)


def test_entropy_of_empty_space_is_zero():
    assert entropy(Word("apple"), []) == 0.0


def test_max_information_prefers_first_on_tie():
    assert max_information(_space("abcde", "fghij")) == Word("abcde")


def test_max_information_rejects_empty_space():
    with pytest.raises(ValueError):
        max_information([])


@settings(max_examples=60)
@given(guess=words, answer=words, space=spaces)
def test_answer_survives_filtering(guess, answer, space):
    full = space + [answer]
    context = WordResult.compare_guess(guess, answer)
    filtered = new_possibility_space(context, full)
    assert answer in filtered
    assert all(word in full for word in filtered)
    assert new_possibility_space_size(context, full) == len(filtered)


@settings(max_examples=60)
@given(word=words, space=spaces)
def test_entropy_is_bounded(word, space):
    value = entropy(word, space)
    assert -1e-9 <= value <= math.log2(len(space)) + 1e-9


@settings(max_examples=30)
@given(space=spaces)
def test_max_information_is_member_with_top_entropy(space):
    best = max_information(space)
    assert best in space
    top = entropy(best, space)
    assert all(entropy(w, space) <= top + 1e-12 for w in space)