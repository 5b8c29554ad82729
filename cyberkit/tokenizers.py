"""Token and offset types, and a whitespace/punctuation tokenizer."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

__all__ = [
    "Offsets",
    "StringOffsetsPair",
    "BaseTokenizer",
    "get_strings",
    "get_offsets",
    "is_whitespace",
    "is_punctuation",
]


@dataclass(frozen=True)
class Offsets:
    """A ``(start, end)`` pair: start inclusive, end exclusive, in characters."""

    start: int = 0
    end: int = 0


@dataclass(frozen=True)
class StringOffsetsPair:
    """A token string with its position in the text it came from."""

    string: str
    offsets: Offsets = Offsets()


def get_strings(tokens: Iterable[StringOffsetsPair]) -> list[str]:
    """Return the strings of the given tokens."""
    return [token.string for token in tokens]


def get_offsets(tokens: Iterable[StringOffsetsPair]) -> list[Offsets]:
    """Return the offsets of the given tokens."""
    return [token.offsets for token in tokens]


def _is_ascii_punctuation(char: str) -> bool:
    code = ord(char)
    return (
        0x21 <= code <= 0x2F
        or 0x3A <= code <= 0x40
        or 0x5B <= code <= 0x60
        or 0x7B <= code <= 0x7E
    )


def is_whitespace(char: str) -> bool:
    """Tell whether a character separates words."""
    if char in " \t\n\r":
        return True
    return unicodedata.category(char) == "Zs"


def is_punctuation(char: str) -> bool:
    """Tell whether a character is punctuation; the hyphen is not."""
    if char == "-":
        return False
    return _is_ascii_punctuation(char) or unicodedata.category(char).startswith("P")


def _split_on(
    text: str, should_split: Callable[[str], bool], keep_separators: bool
) -> Iterator[StringOffsetsPair]:
    word_start = 0
    for offset, char in enumerate(text):
        if not should_split(char):
            continue
        if offset > word_start:
            yield StringOffsetsPair(text[word_start:offset], Offsets(word_start, offset))
        if keep_separators:
            yield StringOffsetsPair(char, Offsets(offset, offset + 1))
        word_start = offset + 1
    if len(text) > word_start:
        yield StringOffsetsPair(text[word_start:], Offsets(word_start, len(text)))


class BaseTokenizer:
    """Splits text on whitespace and punctuation, keeping character offsets.

    Words registered as special are kept whole even if they hold punctuation.
    """

    def __init__(self, special_words: Iterable[str] = ()) -> None:
        self.special_words = set(special_words)

    def tokenize(self, text: str) -> list[StringOffsetsPair]:
        """Split ``text`` into words, numbers and punctuation signs."""
        result: list[StringOffsetsPair] = []
        for space_token in _split_on(text, is_whitespace, False):
            if space_token.string in self.special_words:
                result.append(space_token)
                continue
            base = space_token.offsets.start
            result.extend(
                StringOffsetsPair(
                    token.string,
                    Offsets(base + token.offsets.start, base + token.offsets.end),
                )
                for token in _split_on(space_token.string, is_punctuation, True)
            )
        return result