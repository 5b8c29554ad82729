"""Types and helpers for extractive question answering."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Sequence, Tuple

from cyberkit.sliceutils import IndexedSlice
from cyberkit.textclassification import softmax
from cyberkit.tokenizers import StringOffsetsPair

__all__ = [
    "DEFAULT_ENGLISH_MODEL",
    "DEFAULT_ITALIAN_MODEL",
    "DEFAULT_MAX_ANSWER_LENGTH",
    "DEFAULT_MIN_CONFIDENCE",
    "DEFAULT_MAX_CANDIDATES",
    "DEFAULT_MAX_ANSWERS",
    "InputSequenceTooLongError",
    "Options",
    "Answer",
    "Response",
    "passage_logits",
    "best_indices",
    "search_candidates",
    "filter_unlikely_candidates",
    "rank_answers",
]

DEFAULT_ENGLISH_MODEL = "deepset/bert-base-cased-squad2"
"""Extractive question-answering model for English."""

DEFAULT_ITALIAN_MODEL = "mrm8488/bert-italian-finedtuned-squadv1-it-alfa"
"""Extractive question-answering model for Italian."""

DEFAULT_MAX_ANSWER_LENGTH = 20
DEFAULT_MIN_CONFIDENCE = 0.1
DEFAULT_MAX_CANDIDATES = 3
DEFAULT_MAX_ANSWERS = 3


class InputSequenceTooLongError(ValueError):
    """Pre-processing the input produced a sequence longer than allowed."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"input sequence too long: {length} > {limit}")
        self.length = length
        self.limit = limit


@dataclass
class Options:
    """Options for question answering; zero values stand for the defaults."""

    max_answers: int = 0
    max_answer_length: int = 0
    min_score: float = 0.0
    max_candidates: int = 0

    def with_defaults(self) -> "Options":
        """Return a copy with every unset (zero) option set to its default."""
        return Options(
            max_answers=self.max_answers or DEFAULT_MAX_ANSWERS,
            max_answer_length=self.max_answer_length or DEFAULT_MAX_ANSWER_LENGTH,
            min_score=self.min_score or DEFAULT_MIN_CONFIDENCE,
            max_candidates=self.max_candidates or DEFAULT_MAX_CANDIDATES,
        )


@dataclass
class Answer:
    """A span of the passage answering the question."""

    text: str = ""
    start: int = 0
    end: int = 0
    score: float = 0.0


@dataclass
class Response:
    """The answers found."""

    answers: List[Answer] = field(default_factory=list)


def passage_logits(
    starts: Sequence[float],
    ends: Sequence[float],
    question_length: int,
    passage_length: int,
) -> Tuple[List[float], List[float]]:
    """Keep only the logits of passage tokens.

    The input sequence is ``[CLS] question [SEP] passage [SEP]``.
    """
    first = question_length + 2
    last = first + passage_length
    return list(starts[first:last]), list(ends[first:last])


def best_indices(logits: Sequence[float], size: int) -> List[int]:
    """Return the indices of the ``size`` highest logits, highest first."""
    ranked = IndexedSlice(logits)
    ranked.sort(reverse=True)
    return ranked.indices[:size]


def search_candidates(
    starts_idx: Iterable[int],
    ends_idx: Sequence[int],
    starts: Sequence[float],
    ends: Sequence[float],
    passage_tokens: Sequence[StringOffsetsPair],
    passage: str,
    max_len: int,
) -> List[Answer]:
    """Build candidate answers from start/end index pairs.

    Pairs whose end comes before the start, or that span more than
    ``max_len`` tokens, are skipped. Scores are the softmax of the summed
    start and end logits over all candidates.
    """
    candidates: List[Answer] = []
    logits: List[float] = []
    for start_index in starts_idx:
        for end_index in ends_idx:
            if end_index < start_index or end_index - start_index + 1 > max_len:
                continue
            start = passage_tokens[start_index].offsets.start
            end = passage_tokens[end_index].offsets.end
            logits.append(starts[start_index] + ends[end_index])
            candidates.append(
                Answer(text=passage[start:end].strip(" "), start=start, end=end)
            )
    return [
        replace(candidate, score=probability)
        for candidate, probability in zip(candidates, softmax(logits))
    ]


def filter_unlikely_candidates(
    candidates: Iterable[Answer], min_score: float
) -> List[Answer]:
    """Keep the candidates scoring at least ``min_score``."""
    return [candidate for candidate in candidates if candidate.score >= min_score]


def rank_answers(answers: Iterable[Answer], max_answers: int) -> List[Answer]:
    """Sort answers by descending score and keep at most ``max_answers``."""
    ranked = sorted(answers, key=lambda answer: answer.score, reverse=True)
    return ranked[:max_answers]