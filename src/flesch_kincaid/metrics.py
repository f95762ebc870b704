from __future__ import annotations

from .models import TextMetrics
from .patterns import Matchers
from .syllables import syllables_in_word
from .tokenization import iter_words, sentence_count


def syllable_count(text: str, matchers: Matchers) -> int:
    """Sum the estimated syllables of every word in text."""
    return sum(syllables_in_word(word, matchers) for word in iter_words(text, matchers))


def measure_text(text: str, matchers: Matchers) -> TextMetrics:
    """Count words, syllables and sentences for one chunk of text."""
    words = 0
    syllables = 0
    for word in iter_words(text, matchers):
        words += 1
        syllables += syllables_in_word(word, matchers)
    return TextMetrics(
        words=words,
        syllables=syllables,
        sentences=sentence_count(text, matchers),
    )
