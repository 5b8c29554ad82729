"""A vocabulary of term/ID associations."""

from __future__ import annotations

import json
import os
from typing import Iterable, Iterator, Optional, Union

__all__ = ["Vocabulary", "vocabulary_from_file", "vocabulary_from_bytes"]


class Vocabulary:
    """Assigns consecutive integer IDs to terms, in order of first insertion."""

    def __init__(self, terms: Iterable[str] = ()) -> None:
        self._ids: dict[str, int] = {}
        self._terms: list[str] = []
        for term in terms:
            self.add(term)

    def items(self) -> list[str]:
        """Return all terms, ordered by ID."""
        return list(self._terms)

    def id(self, term: str) -> Optional[int]:
        """Return the ID of ``term``, or ``None`` if it is unknown."""
        return self._ids.get(term)

    def must_id(self, term: str) -> int:
        """Return the ID of ``term``; raise ``KeyError`` if it is unknown."""
        try:
            return self._ids[term]
        except KeyError:
            raise KeyError(f"vocabulary: term `{term}` not found.") from None

    def term(self, id_: int) -> Optional[str]:
        """Return the term with ID ``id_``, or ``None`` if there is none.

        Only IDs below :meth:`size` are looked up, so the most recently
        added term is never returned.
        """
        if id_ < 0 or id_ >= self.size():
            return None
        return self._terms[id_]

    def must_term(self, id_: int) -> str:
        """Return the term with ID ``id_``; raise ``KeyError`` if there is none."""
        term = self.term(id_)
        if term is None:
            raise KeyError("vocabulary: id not found.")
        return term

    def add(self, term: str) -> int:
        """Add ``term`` and return its ID; a known term keeps its ID."""
        existing = self._ids.get(term)
        if existing is not None:
            return existing
        new_id = len(self._terms)
        self._ids[term] = new_id
        self._terms.append(term)
        return new_id

    def size(self) -> int:
        """Return the highest assigned ID (-1 for an empty vocabulary)."""
        return len(self._terms) - 1

    def longest_prefix(self, term: str) -> str:
        """Return the longest known term that is a prefix of ``term``, or ``""``."""
        for end in range(len(term), 0, -1):
            candidate = term[:end]
            if candidate in self._ids:
                return candidate
        return ""

    def to_bytes(self) -> bytes:
        """Serialise the terms, in ID order."""
        return json.dumps(self._terms, ensure_ascii=False).encode("utf-8")

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._ids

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._terms == other._terms

    def __repr__(self) -> str:
        return f"Vocabulary({self._terms!r})"


def vocabulary_from_file(path: Union[str, os.PathLike]) -> Vocabulary:
    """Build a vocabulary from a file holding one term per line."""
    with open(path, "rb") as f:
        content = f.read().decode("utf-8", errors="replace")
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return Vocabulary(line[:-1] if line.endswith("\r") else line for line in lines)


def vocabulary_from_bytes(data: bytes) -> Vocabulary:
    """Rebuild a vocabulary from the output of :meth:`Vocabulary.to_bytes`."""
    try:
        terms = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError(f"invalid vocabulary data: {exc}") from exc
    if not isinstance(terms, list) or not all(isinstance(t, str) for t in terms):
        raise ValueError("invalid vocabulary data: expected a list of strings")
    return Vocabulary(terms)