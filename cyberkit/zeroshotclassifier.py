"""Types and helpers for zero-shot text classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_HYPOTHESIS_TEMPLATE",
    "DEFAULT_START_TOKEN_ID",
    "DEFAULT_END_TOKEN_ID",
    "InputSequenceTooLongError",
    "Parameters",
    "Response",
    "pad_token_ids",
]

DEFAULT_MODEL = "valhalla/distilbart-mnli-12-3"
"""Natural language inference model usable for zero-shot classification."""

DEFAULT_HYPOTHESIS_TEMPLATE = "This example is {}."
"""Template interpolated with each candidate label."""

DEFAULT_START_TOKEN_ID = 0
DEFAULT_END_TOKEN_ID = 2


class InputSequenceTooLongError(ValueError):
    """Pre-processing the input produced a sequence longer than allowed."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"input sequence too long: {length} > {limit}")
        self.length = length
        self.limit = limit


@dataclass
class Parameters:
    """Parameters for zero-shot classification."""

    candidate_labels: List[str] = field(default_factory=list)
    """Potential classes for the input (required)."""
    hypothesis_template: str = ""
    """Template with ``{}`` where the label goes; empty means the default."""
    multi_label: bool = False
    """Whether classes can overlap."""

    def hypotheses(self) -> List[str]:
        """Return one hypothesis per candidate label, in label order."""
        template = self.hypothesis_template or DEFAULT_HYPOTHESIS_TEMPLATE
        return [template.replace("{}", label) for label in self.candidate_labels]

    def is_multi_class(self) -> bool:
        """Tell whether each label is scored on its own rather than against the others."""
        return self.multi_label or len(self.candidate_labels) == 1


@dataclass
class Response:
    """Labels sorted by descending probability, with matching scores."""

    labels: List[str] = field(default_factory=list)
    scores: List[float] = field(default_factory=list)


def pad_token_ids(
    ids: Iterable[int],
    start_token_id: int = DEFAULT_START_TOKEN_ID,
    end_token_id: int = DEFAULT_END_TOKEN_ID,
) -> List[int]:
    """Surround token IDs with a start and an end token."""
    return [start_token_id, *ids, end_token_id]