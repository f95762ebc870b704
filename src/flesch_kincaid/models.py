from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .scoring import GradeLevel, ReadingEase


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True)
class Token:
    """Represents a word and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


@dataclass(frozen=True, slots=True)
class TextMetrics:
    """
    Word, syllable and sentence counts for a chunk of text.

    Metrics combine by field-wise addition, so totals over several chunks
    do not depend on the order the chunks were measured in.
    """

    words: int = 0
    syllables: int = 0
    sentences: int = 0

    def __add__(self, other: object) -> "TextMetrics":
        if not isinstance(other, TextMetrics):
            return NotImplemented
        return TextMetrics(
            words=self.words + other.words,
            syllables=self.syllables + other.syllables,
            sentences=self.sentences + other.sentences,
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "words": self.words,
            "syllables": self.syllables,
            "sentences": self.sentences,
        }


@dataclass(slots=True)
class DocumentReadability:
    """Counts and scores for one document. Scores are None when it has no words."""

    doc_id: str
    metrics: TextMetrics
    reading_ease: "ReadingEase | None" = None
    grade_level: "GradeLevel | None" = None


@dataclass(slots=True)
class CorpusReadability:
    """Per-document results plus one result for the corpus read as a whole."""

    documents: List[DocumentReadability] = field(default_factory=list)
    combined: DocumentReadability | None = None
