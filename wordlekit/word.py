"""Five-letter words stored as raw bytes."""

from __future__ import annotations

from functools import total_ordering
from typing import Iterable, Union

WORD_LENGTH = 5

WordLike = Union["Word", str, bytes, bytearray, Iterable[int]]


@total_ordering
class Word:
    """An immutable word of exactly five bytes, ordered bytewise."""

    __slots__ = ("_chars",)

    def __init__(self, value: WordLike) -> None:
        if isinstance(value, Word):
            chars = value._chars
        elif isinstance(value, str):
            chars = value.encode("utf-8")
        elif isinstance(value, int):
            raise TypeError("a Word cannot be built from an integer")
        else:
            chars = bytes(value)
        if len(chars) != WORD_LENGTH:
            raise ValueError(
                f"a word must be {WORD_LENGTH} bytes long, got {len(chars)}"
            )
        self._chars = chars

    @property
    def chars(self) -> bytes:
        """The raw bytes of the word."""
        return self._chars

    def as_str(self) -> str:
        """Decode the word as UTF-8; raises UnicodeDecodeError if invalid."""
        return self._chars.decode("utf-8")

    def positions_with_count(self, character: int | str) -> tuple[tuple[int, ...], int]:
        """Return the positions where ``character`` occurs and how many there are."""
        byte = _as_byte(character)
        positions = tuple(i for i, c in enumerate(self._chars) if c == byte)
        return positions, len(positions)

    def __getitem__(self, index):
        return self._chars[index]

    def __iter__(self):
        return iter(self._chars)

    def __len__(self) -> int:
        return WORD_LENGTH

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        try:
            return f"Word({self.as_str()!r})"
        except UnicodeDecodeError:
            return f"Word({self._chars!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Word):
            return self._chars == other._chars
        if isinstance(other, str):
            return self._chars == other.encode("utf-8")
        if isinstance(other, (bytes, bytearray)):
            return self._chars == bytes(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Word):
            return self._chars < other._chars
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._chars)


def _as_byte(character: int | str) -> int:
    if isinstance(character, int):
        if not 0 <= character <= 255:
            raise ValueError(f"byte value out of range: {character}")
        return character
    encoded = character.encode("utf-8")
    if len(encoded) != 1:
        raise ValueError(f"expected a single-byte character, got {character!r}")
    return encoded[0]