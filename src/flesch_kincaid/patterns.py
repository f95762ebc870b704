from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)

PATTERN_FLAGS = re.IGNORECASE | re.UNICODE

# A run of letters, optionally joined to a second run by one hyphen or apostrophe.
# {letter} is an explicit class of Unicode letters; \w would also admit
# numeric characters such as vulgar fractions and superscript digits.
WORD_PATTERN = r"\b({letter}+(?:[-']{letter}+)?)\b"
SENTENCE_PATTERN = r"[.?!]+"
VOWEL_GROUP_PATTERN = r"[aeiou]+"

# Vowel groups that are usually silent or merged with a neighbour.
SUB_PATTERNS: Tuple[str, ...] = (
    r"e\b",
    r"ey\b",
    r"ed\b",
    r"ay\b",
    r"[kmrpbdtnvrw]es\b",
    r"ely\b",
    r"oy\b",
    r"cia",
    r"[aeilouy]le\b",
    r"tia[nl]?\b",
    r"tia([nl]s)?\b",
    r"[aeo]ym",
    r"eness\b",
    r"\bfore",
    r"ay[bclntrw]",
    r"ement",
    r"iles\b",
    r"[ao]les\b",
    r"eman\b",
    r"aying\b",
    r"oy[cln]",
    r"eful",
    r"\bey",
    r"geon",
    r"\bhome",
    r"eyn",
    r"ically",
    r"eless",
    r"sian\b",
    r"yles",
    r"\bwhite",
    r"eway",
    r"georg",
    r"lles\b",
    r"busine",
    r"illia",
    r"ules\b",
    r"\bhym",
    r"ryst",
    r"eyl",
    r"ehou",
    r"eyw",
    r"ekeep",
    r"people",
    r"every",
    r"\blife",
    r"giu",
    r"eyin",
    r"eout",
    r"oying\b",
    r"gues\b",
    r"\breine",
    r"geou",
    r"ques\b",
    r"vior",
    r"sewo",
    r"oseb",
    r"eyc",
    r"\bspace",
    r"\bstone",
    r"eover",
    r"ehol",
    r"iliar",
    r"estone",
    r"eyb",
    r"oyk",
    r"velan",
    r"piet",
    r"\bgia",
    r"somet",
    r"esvil",
    r"lyst",
    r"arriag",
    r"gior",
)

# Spellings where the vowel-group count misses a syllable.
ADD_PATTERNS: Tuple[str, ...] = (
    r"y\b",
    r"ia",
    r"\bmc",
    r"[il]e\b",
    r"ted\b",
    r"ee\b",
    r"io\b",
    r"ded\b",
    r"[io]er\b",
    r"y[bckglmnrstwxv]",
    r"sms?\b",
    r"eo",
    r"[eior]ed\b",
    r"iol",
    r"\bhy",
    r"iu",
    r"s'",
    r"oe\b",
    r"iot",
    r"tua",
    r"aue",
    r"ea\b",
    r"iest\b",
    r"ios",
    r"yst",
    r"nte\b",
    r"ce's",
    r"ying\b",
    r"[bcdfgkopt]led\b",
    r"ciat",
    r"lement",
    r"typ",
    r"ly[dehops]",
    r"[drv]ious",
    r"z's\b",
    r"ae\b",
    r"io[mpr]",
    r"tre\b",
    r"ione\b",
    r"[cdehlorn]ue\b",
    r"se's",
    r"nua",
    r"x'",
    r"oing",
    r"yz",
    r"creat",
    r"lua",
    r"iod",
    r"\breass",
    r"eing\b",
    r"dua",
    r"[bdprz]ion",
    r"iello\b",
    r"oa\b",
    r"ge's",
    r"phys",
    r"eact",
    r"ioc",
    r"iog",
    r"scien",
    r"dys",
    r"uou",
    r"\brein",
    r"ienn",
    r"rya",
    r"bre\b",
    r"tke\b",
    r"ryd",
    r"sh's\b",
    r"rua",
    r"ryp",
    r"rient",
    r"uing",
    r"xual",
    r"eely\b",
    r"leman\b",
    r"fluen",
    r"he'",
    r"dre\b",
    r"iet",
    r"loui",
    r"dl\b",
    r"\bio",
    r"rys",
    r"tui",
    r"rye",
    r"\bcoe",
    r"\breali",
    r"ntes\b",
    r"ch'",
    r"mye",
    r"eeman\b",
    r"ryo",
    r"linea",
    r"theat",
    r"reapp",
    r"oers\b",
    r"tys",
    r"\bcyp",
    r"eemp",
    r"nys",
    r"aic\b",
    r"cua",
    r"tl\b",
    r"tres\b",
    r"ciano",
    r"lione",
    r"eand",
    r"\bdya",
    r"gyp",
    r"croat",
    r"heroi",
    r"rearr",
    r"eex",
    r"cre\b",
    r"oniou",
    r"eum\b",
    r"fred\b",
    r"dien",
    r"oua",
    r"oincid",
    r"coordi",
    r"nucle",
    r"nyd",
    r"\breen",
    r"\breun",
    r"bys",
    r"iale\b",
    r"ifiers",
    r"rean",
    r"pre\b",
    r"iore\b",
    r"-in\b",
)


class PatternCompileError(RuntimeError):
    """Raised when one of the built-in matchers cannot be compiled."""


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a single case-insensitive matcher."""
    try:
        return re.compile(pattern, PATTERN_FLAGS)
    except re.error as exc:
        raise PatternCompileError(f"Invalid pattern {pattern!r}: {exc}") from exc


@dataclass(frozen=True, slots=True)
class PatternSet:
    """
    Named, ordered group of compiled patterns.

    Only the number of distinct members that match a word is meaningful;
    a pattern that matches several times still contributes once.
    """

    name: str
    patterns: Tuple[re.Pattern[str], ...]

    @classmethod
    def compile(cls, name: str, patterns: Sequence[str]) -> "PatternSet":
        return cls(name=name, patterns=tuple(compile_pattern(p) for p in patterns))

    def __len__(self) -> int:
        return len(self.patterns)

    def matches(self, text: str) -> List[int]:
        """Return the indices of every pattern that matches somewhere in text."""
        return [
            idx for idx, pattern in enumerate(self.patterns) if pattern.search(text)
        ]

    def count(self, text: str) -> int:
        return sum(1 for pattern in self.patterns if pattern.search(text))


@lru_cache(maxsize=1)
def letter_class() -> str:
    """
    Return a character class matching exactly the Unicode letters.

    str.isalpha() is true for the L* categories only, so digits, numeric
    symbols and underscores fall outside the class.
    """
    ranges: List[str] = []
    start: int | None = None
    for code in range(sys.maxunicode + 2):
        if code <= sys.maxunicode and chr(code).isalpha():
            if start is None:
                start = code
            continue
        if start is not None:
            first, last = re.escape(chr(start)), re.escape(chr(code - 1))
            ranges.append(first if start == code - 1 else f"{first}-{last}")
            start = None
    return "[" + "".join(ranges) + "]"


def word_pattern() -> str:
    return WORD_PATTERN.format(letter=letter_class())


@dataclass(frozen=True, slots=True)
class Matchers:
    """Every compiled matcher the readability engine needs."""

    word: re.Pattern[str]
    sentence: re.Pattern[str]
    vowel_group: re.Pattern[str]
    add: PatternSet
    sub: PatternSet


def compile_matchers() -> Matchers:
    """Compile the word, sentence and vowel-group matchers plus both exception sets."""
    matchers = Matchers(
        word=compile_pattern(word_pattern()),
        sentence=compile_pattern(SENTENCE_PATTERN),
        vowel_group=compile_pattern(VOWEL_GROUP_PATTERN),
        add=PatternSet.compile("add", ADD_PATTERNS),
        sub=PatternSet.compile("sub", SUB_PATTERNS),
    )
    logger.debug(
        "Compiled %d add and %d sub syllable patterns",
        len(matchers.add),
        len(matchers.sub),
    )
    return matchers


@lru_cache(maxsize=1)
def default_matchers() -> Matchers:
    """Return the process-wide matchers, compiling them on first use."""
    return compile_matchers()
