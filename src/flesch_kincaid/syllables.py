from __future__ import annotations

from .patterns import Matchers


def syllables_in_word(word: str, matchers: Matchers) -> int:
    """
    Estimate the syllables in a single word.

    Each run of vowels counts as one syllable. The count is then raised by
    the number of distinct ADD patterns and lowered by the number of
    distinct SUB patterns found in the word. A word always has at least
    one syllable.
    """
    vowel_groups = sum(1 for _ in matchers.vowel_group.finditer(word))
    add = matchers.add.count(word)
    sub = matchers.sub.count(word)

    # Compare before subtracting so the floor matches unsigned arithmetic.
    if vowel_groups + add < sub + 1:
        return 1
    return vowel_groups + add - sub
