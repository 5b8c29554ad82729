"""Types and helpers for text classification and text encoding."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Sequence

from cyberkit.sliceutils import IndexedSlice

__all__ = [
    "DEFAULT_MODEL_FOR_ITALIAN_NEWS_CLASSIFICATION",
    "DEFAULT_MODEL_FOR_GEOGRAPHIC_CATEGORIZATION_MULTI",
    "DEFAULT_ENCODING_MODEL",
    "DEFAULT_ENCODING_MODEL_MULTI",
    "InputSequenceTooLongError",
    "Response",
    "EncodingResponse",
    "filter_response",
    "id_to_label",
    "rank_labels",
    "softmax",
]

DEFAULT_MODEL_FOR_ITALIAN_NEWS_CLASSIFICATION = (
    "nlpodyssey/bert-italian-uncased-iptc-headlines"
)
"""Italian news headline classifier (top-level IPTC subject categories)."""

DEFAULT_MODEL_FOR_GEOGRAPHIC_CATEGORIZATION_MULTI = (
    "nlpodyssey/bert-multilingual-uncased-geo-countries-headlines"
)
"""Multilingual headline classifier predicting ISO 3166-1 alpha-3 country codes."""

DEFAULT_ENCODING_MODEL = "sentence-transformers/all-MiniLM-L6-v2"
"""Sentence encoder mapping text to a dense vector space."""

DEFAULT_ENCODING_MODEL_MULTI = "sentence-transformers/LaBSE"
"""Multilingual sentence encoder with a shared vector space for 109 languages."""

_DEFAULT_BINARY_LABELS = ("LABEL_0", "LABEL_1")
_INTEGER_KEY = re.compile(r"[+-]?[0-9]+")


class InputSequenceTooLongError(ValueError):
    """Pre-processing the input produced a sequence longer than allowed."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"input sequence too long: {length} > {limit}")
        self.length = length
        self.limit = limit


@dataclass
class Response:
    """Labels sorted by descending probability, with matching scores."""

    labels: List[str] = field(default_factory=list)
    scores: List[float] = field(default_factory=list)


@dataclass
class EncodingResponse:
    """The dense encoded representation of a text."""

    vector: List[float] = field(default_factory=list)


def filter_response(
    keep_threshold: float, keep_sum_threshold: float
) -> Callable[[Response], Response]:
    """Return a function that trims a classification response.

    The result keeps everything up to the last score at or above
    ``keep_threshold``; it is empty if no score reaches that threshold or
    if those scores sum to less than ``keep_sum_threshold``.
    """

    def apply(response: Response) -> Response:
        last = -1
        total = 0.0
        for i, score in enumerate(response.scores):
            if score >= keep_threshold:
                last = i
                total += score
        if last == -1 or total < keep_sum_threshold:
            return Response()
        return Response(
            labels=list(response.labels[: last + 1]),
            scores=list(response.scores[: last + 1]),
        )

    return apply


def id_to_label(value: Mapping[str, str]) -> List[str]:
    """Turn a ``{"0": label, ...}`` mapping into a list indexed by ID.

    An empty mapping stands for binary classification with default labels.
    """
    if not value:
        return list(_DEFAULT_BINARY_LABELS)
    labels = [""] * len(value)
    for key, label in value.items():
        if not _INTEGER_KEY.fullmatch(key):
            raise ValueError(f"invalid label id {key!r}")
        index = int(key)
        if not 0 <= index < len(labels):
            raise ValueError(f"label id {index} out of range [0, {len(labels)})")
        labels[index] = label
    return labels


def rank_labels(labels: Sequence[str], probabilities: Sequence[float]) -> Response:
    """Pair labels with probabilities, sorted stably by descending probability."""
    if len(labels) != len(probabilities):
        raise ValueError(
            f"{len(labels)} labels do not match {len(probabilities)} probabilities"
        )
    ranked = IndexedSlice(probabilities)
    ranked.sort(reverse=True)
    return Response(
        labels=[labels[index] for index in ranked.indices],
        scores=ranked.slice,
    )


def softmax(values: Sequence[float]) -> List[float]:
    """Return the softmax of ``values``, computed without overflow."""
    if not values:
        return []
    peak = max(values)
    exps = [math.exp(v - peak) for v in values]
    total = math.fsum(exps)
    return [e / total for e in exps]