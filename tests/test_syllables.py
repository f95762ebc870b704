import pytest

from flesch_kincaid.metrics import measure_text, syllable_count
from flesch_kincaid.models import TextMetrics
from flesch_kincaid.patterns import (
    Matchers,
    PatternSet,
    compile_pattern,
    default_matchers,
)
from flesch_kincaid.syllables import syllables_in_word


@pytest.mark.parametrize(
    "word, expected",
    [
        ("unaware", 3),
        ("sum", 1),
        ("some", 1),
        ("pernicious", 3),
        ("egregious", 3),
        ("Zylka", 2),
        ("HELLO", 2),
        ("the", 1),
    ],
)
def test_syllables_in_word(word: str, expected: int):
    assert syllables_in_word(word, default_matchers()) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("Hello", 2),
        ("Hello World", 3),
        ("Test-case", 2),
        ("Hello, World! This is a test", 7),
        ("$5 !!!", 0),
    ],
)
def test_syllable_count(text: str, expected: int):
    assert syllable_count(text, default_matchers()) == expected


def _matchers_with(add: list[str], sub: list[str]) -> Matchers:
    base = default_matchers()
    return Matchers(
        word=base.word,
        sentence=base.sentence,
        vowel_group=compile_pattern(r"[aeiou]+"),
        add=PatternSet.compile("add", add),
        sub=PatternSet.compile("sub", sub),
    )


def test_corrections_are_applied_per_distinct_pattern():
    matchers = _matchers_with(add=[r"x", r"x+"], sub=[r"o"])
    # two vowel groups, two add patterns, one sub pattern
    assert syllables_in_word("axxo", matchers) == 2 + 2 - 1


def test_heavy_subtraction_still_yields_one_syllable():
    matchers = _matchers_with(add=[], sub=[r"a", r"b", r"c"])
    assert syllables_in_word("abc", matchers) == 1


def test_result_equal_to_zero_is_raised_to_one():
    matchers = _matchers_with(add=[], sub=[r"a"])
    assert syllables_in_word("cat", matchers) == 1


def test_measure_text_counts_all_three_metrics():
    metrics = measure_text("The cat sat. Dogs run fast!", default_matchers())
    assert metrics == TextMetrics(words=6, syllables=6, sentences=2)


def test_measure_text_of_empty_text_has_one_sentence_and_no_words():
    assert measure_text("", default_matchers()) == TextMetrics(
        words=0, syllables=0, sentences=1
    )
