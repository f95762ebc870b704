from __future__ import annotations

from typing import List

from . import metrics as _metrics
from . import tokenization
from .models import TextMetrics, Token
from .patterns import Matchers, default_matchers
from .scoring import GradeLevel, ReadingEase, Scorer
from .syllables import syllables_in_word


class Kincaid:
    """
    Readability engine bundling the compiled matchers with every operation
    a caller needs.

    Engines are cheap once the matchers exist: by default every instance
    shares the process-wide matchers, which are compiled on first use and
    are safe to read from several threads. Passing ``matchers`` lets tests
    or callers supply their own compiled bundle.
    """

    def __init__(self, matchers: Matchers | None = None) -> None:
        self._matchers = matchers if matchers is not None else default_matchers()

    @property
    def matchers(self) -> Matchers:
        return self._matchers

    def tokenize(self, text: str) -> List[Token]:
        return tokenization.tokenize_words(text, self._matchers)

    def word_count(self, text: str) -> int:
        return tokenization.word_count(text, self._matchers)

    def sentence_count(self, text: str) -> int:
        return tokenization.sentence_count(text, self._matchers)

    def syllables_in_word(self, word: str) -> int:
        return syllables_in_word(word, self._matchers)

    def syllable_count(self, text: str) -> int:
        return _metrics.syllable_count(text, self._matchers)

    def measure(self, text: str) -> TextMetrics:
        return _metrics.measure_text(text, self._matchers)

    def scorer(self) -> Scorer:
        """Return a fresh accumulator bound to this engine's matchers."""
        return Scorer(self._matchers)

    def reading_ease(self, text: str) -> ReadingEase:
        """Score a single chunk of text; raises NoDataError when it has no words."""
        scorer = self.scorer()
        scorer.add(text)
        return scorer.reading_ease()

    def grade_level(self, text: str) -> GradeLevel:
        scorer = self.scorer()
        scorer.add(text)
        return scorer.grade_level()
