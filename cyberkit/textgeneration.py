"""Types and helpers for text generation: translation, summarisation, paraphrasing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Collection, Iterable, List, Optional, Sequence

__all__ = [
    "DEFAULT_MODEL_TEMPLATE_FOR_MACHINE_TRANSLATION",
    "DEFAULT_MODEL_FOR_TEXT_PARAPHRASING",
    "DEFAULT_MODEL_FOR_TEXT_SUMMARIZATION",
    "DEFAULT_MODEL_FOR_TEXT_SUMMARIZATION_2",
    "DEFAULT_MODEL_FOR_EXTREME_TEXT_SUMMARIZATION",
    "DEFAULT_MODEL_FOR_ABSTRACTIVE_QUESTION_ANSWERING",
    "DEFAULT_MODEL_FOR_KEYWORDS_GENERATION",
    "InputSequenceTooLongError",
    "Options",
    "Response",
    "default_model_for_machine_translation",
    "default_options",
    "default_options_for_text_paraphrasing",
    "prepare_input_for_abstractive_question_answering",
    "strip_special_tokens",
    "wrap_bos_eos",
]

DEFAULT_MODEL_TEMPLATE_FOR_MACHINE_TRANSLATION = "Helsinki-NLP/opus-mt-{}-{}"
"""Template for machine translation models, filled with source and target languages."""

DEFAULT_MODEL_FOR_TEXT_PARAPHRASING = "tuner007/pegasus_paraphrase"
"""Summarisation model fine-tuned for paraphrasing."""

DEFAULT_MODEL_FOR_TEXT_SUMMARIZATION = "facebook/bart-large-cnn"
"""Summarisation model."""

DEFAULT_MODEL_FOR_TEXT_SUMMARIZATION_2 = "google/pegasus-multi_news"
"""Summarisation model."""

DEFAULT_MODEL_FOR_EXTREME_TEXT_SUMMARIZATION = "facebook/bart-large-xsum"
"""Summarisation model producing a one-sentence summary."""

DEFAULT_MODEL_FOR_ABSTRACTIVE_QUESTION_ANSWERING = "vblagoje/bart_lfqa"
"""Summarisation model fine-tuned for answer generation."""

DEFAULT_MODEL_FOR_KEYWORDS_GENERATION = "bloomberg/KeyBART"
"""Model producing a concatenated sequence of keyphrases."""


class InputSequenceTooLongError(ValueError):
    """Pre-processing the input produced a sequence longer than allowed."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"input sequence too long: {length} > {limit}")
        self.length = length
        self.limit = limit


@dataclass
class Options:
    """Options for generating text; ``None`` means the option is unset."""

    temperature: Optional[float] = None
    """Temperature used for sampling."""
    sample: Optional[bool] = None
    """Whether to sample rather than decode greedily."""
    top_k: Optional[int] = None
    """Number of top candidates considered during generation."""
    top_p: Optional[float] = None
    """Cumulative probability of the candidates considered during generation."""


@dataclass
class Response:
    """Generated texts with their scores, in the same order."""

    texts: List[str] = field(default_factory=list)
    scores: List[float] = field(default_factory=list)


def default_model_for_machine_translation(source: str, target: str) -> str:
    """Return the default translation model for two ISO 639-1 language codes."""
    return DEFAULT_MODEL_TEMPLATE_FOR_MACHINE_TRANSLATION.format(source, target)


def default_options() -> Options:
    """Return the default options: greedy decoding at temperature 1."""
    return Options(temperature=1.0, sample=False, top_k=None, top_p=None)


def default_options_for_text_paraphrasing() -> Options:
    """Return the default options for paraphrasing, which samples."""
    return Options(temperature=1.5, sample=True, top_k=120, top_p=None)


def prepare_input_for_abstractive_question_answering(
    question: str, passages: Sequence[str]
) -> str:
    """Build the input text expected by the abstractive question-answering model."""
    context = "<P> " + " <P> ".join(passages)
    return f"question: {question} context: {context}"


def strip_special_tokens(
    token_ids: Iterable[int], special_ids: Collection[int]
) -> List[int]:
    """Drop the IDs of special tokens (start, end, padding, decoder start)."""
    special = set(special_ids)
    return [token_id for token_id in token_ids if token_id not in special]


def wrap_bos_eos(ids: Iterable[int], bos_token_id: int, eos_token_id: int) -> List[int]:
    """Surround token IDs with the beginning- and end-of-sequence tokens."""
    return [bos_token_id, *ids, eos_token_id]