"""Types and helpers for token classification (named-entity recognition)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List, Mapping

__all__ = [
    "DEFAULT_ENGLISH_MODEL",
    "DEFAULT_ENGLISH_MODEL_ONTONOTES",
    "DEFAULT_MODEL_MULTI",
    "AggregationStrategy",
    "InputSequenceTooLongError",
    "Parameters",
    "Token",
    "Response",
    "filter_not_entities",
    "aggregate",
    "strip_prefix",
    "extract_prefix",
    "id_to_label",
]

DEFAULT_ENGLISH_MODEL = "dbmdz/bert-large-cased-finetuned-conll03-english"
"""English NER model with the CoNLL-2003 entities LOC, MISC, ORG, PER."""

DEFAULT_ENGLISH_MODEL_ONTONOTES = "djagatiya/ner-bert-base-cased-ontonotesv5-englishv4"
"""English NER model with the OntoNotes 5 entity set."""

DEFAULT_MODEL_MULTI = "Babelscape/wikineural-multilingual-ner"
"""Multilingual NER model for de, en, es, fr, it, nl, pl, pt, ru."""

_AGGREGATE_AFTER = ("B", "I")
_AGGREGATE_PREFIXES = ("I", "E", "L")


class AggregationStrategy(str, Enum):
    """How classified tokens are combined into entities."""

    NONE = "none"
    """Every token is classified without further aggregation."""
    SIMPLE = "simple"
    """Entities are grouped according to the IOB annotation schema."""


class InputSequenceTooLongError(ValueError):
    """Pre-processing the input produced a sequence longer than allowed."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"input sequence too long: {length} > {limit}")
        self.length = length
        self.limit = limit


@dataclass
class Parameters:
    """Parameters for token classification."""

    aggregation_strategy: AggregationStrategy = AggregationStrategy.NONE


@dataclass
class Token:
    """A labelled span of text."""

    text: str = ""
    start: int = 0
    end: int = 0
    label: str = ""
    score: float = 0.0


@dataclass
class Response:
    """The classified tokens."""

    tokens: List[Token] = field(default_factory=list)


def id_to_label(value: Mapping[str, str]) -> List[str]:
    """Turn an id-to-label mapping with string keys into a list of labels.

    An empty mapping stands for binary classification.
    Raises ``ValueError`` when a key is not an integer or is out of range.
    """
    if not value:
        return ["LABEL_0", "LABEL_1"]
    labels = [""] * len(value)
    for key, label in value.items():
        try:
            index = int(key)
        except ValueError as exc:
            raise ValueError(f"invalid label id {key!r}") from exc
        if not 0 <= index < len(labels):
            raise ValueError(f"label id {index} out of range")
        labels[index] = label
    return labels


def filter_not_entities(tokens: Iterable[Token]) -> List[Token]:
    """Drop the tokens that lie outside any entity."""
    return [token for token in tokens if token.label and token.label != "0"]


def strip_prefix(label: str) -> str:
    """Remove the ``B-``/``I-``/... prefix of a label; ``"O"`` becomes ``""``."""
    if label == "O":
        return ""
    if len(label) > 2 and label[1] == "-":
        return label[2:]
    return label


def extract_prefix(label: str) -> str:
    """Return the first character of a prefixed label, or ``""`` for short labels."""
    return label[0] if len(label) > 2 else ""


def aggregate(tokens: Iterable[Token]) -> List[Token]:
    """Merge tokens that continue an entity into the token that opened it.

    Works with the IOB, BIOES and BILOU schemes: a token labelled ``I``,
    ``E`` or ``L`` joins the previous token when that one was ``B`` or ``I``.
    The labels of the returned tokens have their prefixes stripped.
    The input tokens are left untouched.
    """
    result: List[Token] = []
    last = ""
    for token in tokens:
        prefix = extract_prefix(token.label)
        if last in _AGGREGATE_AFTER and prefix in _AGGREGATE_PREFIXES:
            previous = result[-1]
            result[-1] = replace(
                previous, end=token.end, text=f"{previous.text} {token.text}"
            )
        else:
            result.append(replace(token, label=strip_prefix(token.label)))
        last = prefix
    return result