from __future__ import annotations

from typing import Iterator, List

from .models import Token
from .patterns import Matchers


def tokenize_words(text: str, matchers: Matchers) -> List[Token]:
    """Tokenize text into word tokens with character offsets."""
    tokens: List[Token] = []
    for match in matchers.word.finditer(text):
        tokens.append(
            Token(text=match.group(), start_char=match.start(), end_char=match.end())
        )
    return tokens


def iter_words(text: str, matchers: Matchers) -> Iterator[str]:
    """Yield the literal word substrings of text."""
    for match in matchers.word.finditer(text):
        yield match.group()


def word_count(text: str, matchers: Matchers) -> int:
    return sum(1 for _ in matchers.word.finditer(text))


def sentence_count(text: str, matchers: Matchers) -> int:
    """
    Count runs of terminal punctuation.

    Text without any terminal punctuation still counts as one sentence.
    """
    return max(1, sum(1 for _ in matchers.sentence.finditer(text)))
