from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from .metrics import measure_text
from .models import TextMetrics
from .patterns import Matchers

READING_EASE_MIN = 0.0
READING_EASE_MAX = 100.0
GRADE_LEVEL_MIN = 1.0

# Lower bound of each band, highest first. A score belongs to the first band
# whose lower bound it reaches, so boundary values land in the upper band.
READING_EASE_BANDS: List[Tuple[float, str, str]] = [
    (
        90.0,
        "5th grade",
        "Very easy to read. Easily understood by an average 11-year-old.",
    ),
    (80.0, "6th grade", "Easy to read. Conversational English for consumers."),
    (70.0, "7th grade", "Fairly easy to read."),
    (
        60.0,
        "8th & 9th grade",
        "Plain English. Easily understood by 13–15-year-olds.",
    ),
    (50.0, "10th to 12th grade", "Fairly difficult to read."),
    (30.0, "College", "Difficult to read."),
    (
        10.0,
        "College graduate",
        "Very difficult to read. Best understood by university graduates.",
    ),
    (
        0.0,
        "Professional",
        "Extremely difficult to read. Best understood by university graduates.",
    ),
]


class NoDataError(ValueError):
    """Raised when a score is requested for text that contains no words."""


@dataclass(slots=True)
class ReadingEase:
    """Flesch Reading Ease, clamped to [0, 100]. Higher is easier."""

    value: float

    def __post_init__(self) -> None:
        if math.isnan(self.value):
            raise ValueError("Reading ease cannot be NaN.")
        self.value = min(READING_EASE_MAX, max(READING_EASE_MIN, float(self.value)))

    def __float__(self) -> float:
        return self.value

    def description(self) -> Tuple[str, str]:
        """Return the (short, long) label of the band this score falls in."""
        for lower, short, long in READING_EASE_BANDS:
            if self.value >= lower:
                return short, long
        raise AssertionError(f"Reading ease {self.value} escaped its clamp.")


@dataclass(slots=True)
class GradeLevel:
    """Flesch-Kincaid Grade Level, never below 1st grade."""

    value: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.value):
            raise ValueError("Grade level must be finite.")
        self.value = max(GRADE_LEVEL_MIN, float(self.value))

    def __float__(self) -> float:
        return self.value

    def description(self) -> str:
        grade = int(self.value)
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(grade, "th")
        return f"{grade}{suffix} grade"


def _ratios(metrics: TextMetrics) -> Tuple[float, float]:
    """Return (words per sentence, syllables per word)."""
    if metrics.words == 0:
        raise NoDataError("No words to score; readability is undefined.")
    sentences = max(1, metrics.sentences)
    return metrics.words / sentences, metrics.syllables / metrics.words


def reading_ease_from_metrics(metrics: TextMetrics) -> ReadingEase:
    words_per_sentence, syllables_per_word = _ratios(metrics)
    return ReadingEase(
        206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word
    )


def grade_level_from_metrics(metrics: TextMetrics) -> GradeLevel:
    words_per_sentence, syllables_per_word = _ratios(metrics)
    return GradeLevel(0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.9)


class Scorer:
    """
    Running totals over any number of text chunks.

    A scorer is meant for a single writer; build one per document and
    discard it once the scores have been read.
    """

    def __init__(self, matchers: Matchers) -> None:
        self._matchers = matchers
        self._totals = TextMetrics()

    @property
    def totals(self) -> TextMetrics:
        return self._totals

    def add(self, text: str) -> TextMetrics:
        """Measure a chunk, fold it into the totals and return its metrics."""
        metrics = measure_text(text, self._matchers)
        self.add_metrics(metrics)
        return metrics

    def add_metrics(self, metrics: TextMetrics) -> None:
        self._totals = self._totals + metrics

    def reading_ease(self) -> ReadingEase:
        return reading_ease_from_metrics(self._totals)

    def grade_level(self) -> GradeLevel:
        return grade_level_from_metrics(self._totals)
