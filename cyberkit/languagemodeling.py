"""Masked word prediction: result types and top-k selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from cyberkit.tokenizers import StringOffsetsPair

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_ITALIAN_MODEL",
    "DEFAULT_TOP_K",
    "CLASS_TOKEN",
    "SEPARATOR_TOKEN",
    "InputSequenceTooLongError",
    "Parameters",
    "Token",
    "Response",
    "IndexScorePair",
    "select_top_k",
    "pad",
]

DEFAULT_MODEL = "bert-base-cased"
"""English BERT model trained with a masked language objective."""

DEFAULT_ITALIAN_MODEL = "dbmdz/bert-base-italian-cased"
"""Italian BERT model trained with a masked language objective."""

DEFAULT_TOP_K = 10
"""Number of predictions per token when none is requested."""

CLASS_TOKEN = "[CLS]"
SEPARATOR_TOKEN = "[SEP]"


class InputSequenceTooLongError(ValueError):
    """Pre-processing the input produced a sequence longer than allowed."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"input sequence too long: {length} > {limit}")
        self.length = length
        self.limit = limit


@dataclass
class Parameters:
    """Parameters for masked word prediction."""

    k: int = 0
    """Number of predictions returned per token; 0 means the default."""


@dataclass
class Token:
    """A text span with its most likely words and their scores."""

    start: int = 0
    end: int = 0
    words: List[str] = field(default_factory=list)
    scores: List[float] = field(default_factory=list)


@dataclass
class Response:
    """The predicted tokens, ordered by start position."""

    tokens: List[Token] = field(default_factory=list)


@dataclass
class IndexScorePair:
    """A vocabulary index with its score."""

    index: int
    score: float


def select_top_k(scores: Sequence[float], result_size: int) -> List[IndexScorePair]:
    """Return the ``result_size`` best-scored indices, best first.

    Fewer pairs are returned when there are fewer scores than requested.
    """
    if result_size < 1:
        raise ValueError(f"result size must be positive, got {result_size}")
    if not scores:
        return []
    if result_size == 1:
        best = max(range(len(scores)), key=lambda i: scores[i])
        return [IndexScorePair(best, float(scores[best]))]

    result: List[IndexScorePair] = []
    min_score = 0.0
    min_index = -1
    for i, score in enumerate(scores):
        if len(result) < result_size:
            if min_index == -1 or score < min_score:
                min_score = score
                min_index = len(result)
            result.append(IndexScorePair(i, float(score)))
            continue
        if score <= min_score:
            continue
        result[min_index] = IndexScorePair(i, float(score))
        min_index = min(range(len(result)), key=lambda j: result[j].score)
        min_score = result[min_index].score

    result.sort(key=lambda pair: pair.score, reverse=True)
    return result


def pad(tokens: Sequence[StringOffsetsPair]) -> List[StringOffsetsPair]:
    """Surround tokens with the class and separator tokens."""
    return [StringOffsetsPair(CLASS_TOKEN), *tokens, StringOffsetsPair(SEPARATOR_TOKEN)]