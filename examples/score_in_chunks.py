"""
Tiny helper script showing incremental scoring: paragraphs are fed to one
scorer as they arrive and the document is scored once at the end.
"""

from __future__ import annotations

from flesch_kincaid import Kincaid


def main() -> None:
    engine = Kincaid()
    paragraphs = [
        "The cat sat on the mat. It was raining outside, but the cat was warm and happy.",
        "Quantum entanglement is a physical phenomenon that occurs when particles share proximity in ways such that their states cannot be described independently.",
    ]

    scorer = engine.scorer()
    for paragraph in paragraphs:
        chunk = scorer.add(paragraph)
        print("-" * 40)
        print(paragraph)
        print(f"Words: {chunk.words}  Syllables: {chunk.syllables}  Sentences: {chunk.sentences}")

    ease = scorer.reading_ease()
    grade = scorer.grade_level()
    short, long = ease.description()
    print("=" * 40)
    print(f"Reading ease: {ease.value:.2f} ({short}: {long})")
    print(f"Grade level: {grade.value:.2f} ({grade.description()})")


if __name__ == "__main__":
    main()
