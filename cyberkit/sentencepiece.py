"""A SentencePiece unigram encoder built on a trie of scored pieces."""

from __future__ import annotations

import struct
import unicodedata
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

__all__ = [
    "SEPARATOR",
    "UNKNOWN_TOKEN",
    "Token",
    "SentencePiece",
    "normalize",
    "is_control",
    "detokenize",
]

SEPARATOR = "\u2581"
"""The piece marking a word start."""

UNKNOWN_TOKEN = "<unk>"

_MIN_SCORE = -3.4028234663852886e38

_SPACES = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_CONTROL_CHARS = frozenset(
    chr(c)
    for c in (
        0x007F, 0x00AD, 0x0600, 0x0601, 0x0602, 0x0603, 0x0604, 0x0605, 0x061C,
        0x06DD, 0x070F, 0x08E2, 0x180E, 0x200B, 0x200C, 0x200D, 0x200E, 0x200F,
        0x202A, 0x202B, 0x202C, 0x202D, 0x202E, 0x2060, 0x2061, 0x2062, 0x2063,
        0x2064, 0x2066, 0x2067, 0x2068, 0x2069, 0x206A, 0x206B, 0x206C, 0x206D,
        0x206E, 0x206F, 0xFEFF, 0xFFF9, 0xFFFA, 0xFFFB, 0x110BD, 0x110CD,
        0x13430, 0x13431, 0x13432, 0x13433, 0x13434, 0x13435, 0x13436, 0x13437,
        0x13438, 0x1BCA0, 0x1BCA1, 0x1BCA2, 0x1BCA3, 0x1D173, 0x1D174, 0x1D175,
        0x1D176, 0x1D177, 0x1D178, 0x1D179, 0x1D17A, 0xE0001,
    )
)


def _f32(value: float) -> float:
    """Round to single precision, as the piece scores are stored."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _is_space(char: str) -> bool:
    return char in _SPACES


def is_control(char: str) -> bool:
    """Tell whether a character is a control or format character to be dropped."""
    if char in " \n\r\t":
        return False
    c = ord(char)
    return (
        c <= 0x001F
        or 0x0080 <= c <= 0x009F
        or 0xE0020 <= c <= 0xE007F
        or 0xE000 <= c <= 0xF8FF
        or 0xF0000 <= c <= 0xFFFFD
        or 0x100000 <= c <= 0x10FFFD
        or 0xD800 <= c <= 0xDFFF
        or char in _CONTROL_CHARS
    )


def normalize(text: str) -> str:
    """Drop control characters, turn whitespace into spaces, then apply NFKC."""
    cleaned = "".join(
        " " if _is_space(char) else char for char in text if not is_control(char)
    )
    return unicodedata.normalize("NFKC", cleaned)


def _lower(text: str) -> str:
    # One character in, one character out, like a per-rune case mapping.
    return "".join(
        lowered if len(lowered := char.lower()) == 1 else lowered[0] for char in text
    )


def detokenize(tokens: Iterable[str]) -> str:
    """Join pieces into text, turning word-start markers into spaces."""
    parts: List[str] = []
    for i, token in enumerate(tokens):
        if token.startswith(SEPARATOR):
            if i > 0:
                parts.append(" ")
            token = token[len(SEPARATOR):]
        parts.append(token)
    return "".join(parts)


@dataclass(frozen=True)
class Token:
    """A piece of tokenised text with its vocabulary ID."""

    id: int
    text: str


class _TrieNode:
    __slots__ = ("level", "score", "index", "end", "children")

    def __init__(self, level: int) -> None:
        self.level = level
        self.score = 0.0
        self.index = 0
        self.end = False
        self.children: Dict[str, _TrieNode] = {}


@dataclass
class _Slice:
    score: float
    index: int
    start: int
    end: int


class SentencePiece:
    """A SentencePiece model: scored pieces, an unknown ID and control words."""

    def __init__(self, lowercase: bool = False) -> None:
        self.lowercase = lowercase
        self.unknown_index = 0
        self._root = _TrieNode(0)
        self._control_words: Dict[str, int] = {}

    def insert(self, word: str, score: float, index: int) -> None:
        """Add a piece with its score and vocabulary ID."""
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = _TrieNode(node.level + 1)
                node.children[char] = child
            node = child
        if word:
            node.end = True
            node.score = _f32(score)
            node.index = index

    def control_word(self, word: str) -> Optional[int]:
        """Return the ID of a control word, or ``None`` if it is not one."""
        return self._control_words.get(word)

    def set_control_word(self, word: str, index: int) -> None:
        """Register a control word with its ID."""
        self._control_words[word] = index

    def tokenize(self, text: str) -> List[Token]:
        """Split ``text`` into the pieces with the best total score.

        A run of consecutive unknown pieces yields only its first piece.
        """
        text = normalize(text)
        if self.lowercase:
            text = _lower(text)
        if not text.startswith(SEPARATOR):
            text = SEPARATOR + text
        runes = "".join(SEPARATOR if _is_space(char) else char for char in text)
        slices = self._decode_backwards(self._decode_forward(runes))
        return [
            Token(piece.index, runes[piece.start:piece.end])
            for piece in self._merge_unknown(slices)
        ]

    def tokenize_to_ids(self, text: str) -> List[int]:
        """Return the vocabulary IDs of the pieces of ``text``."""
        return [token.id for token in self.tokenize(text)]

    def _common_prefix_search(self, runes: str, start: int) -> List[_TrieNode]:
        found: List[_TrieNode] = []
        node = self._root
        for char in runes[start:]:
            node = node.children.get(char)
            if node is None:
                break
            if node.end:
                found.append(node)
        return found

    def _decode_forward(self, runes: str) -> List[_Slice]:
        size = len(runes) + 1
        scores = [_MIN_SCORE] * size
        slices = [_Slice(0.0, self.unknown_index, -1, 0) for _ in range(size)]
        scores[0] = 0.0
        for i in range(len(runes)):
            for node in self._common_prefix_search(runes, i):
                local_score = _f32(scores[i] + node.score)
                char_end = i + node.level
                if local_score > scores[char_end]:
                    slices[char_end] = _Slice(local_score, node.index, i, char_end)
                    scores[char_end] = local_score
            if scores[i + 1] <= _MIN_SCORE:
                slices[i + 1] = _Slice(_MIN_SCORE, self.unknown_index, i, i + 1)
                scores[i + 1] = 0.0
        return slices

    @staticmethod
    def _decode_backwards(slices: List[_Slice]) -> List[_Slice]:
        best: List[_Slice] = []
        index = len(slices) - 1
        while True:
            piece = slices[index]
            if piece.start == -1:
                break
            best.append(piece)
            index = piece.start
        best.reverse()
        return best

    def _merge_unknown(self, slices: List[_Slice]) -> List[_Slice]:
        result: List[_Slice] = []
        previous_unknown = False
        for piece in slices:
            is_unknown = piece.index == self.unknown_index
            if not (previous_unknown and is_unknown):
                result.append(piece)
            previous_unknown = is_unknown
        return result