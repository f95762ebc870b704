from __future__ import annotations

from pathlib import Path


def write_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus of text files, one nested and one unsupported."""
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "notes").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(
        "The cat sat. Dogs run fast!", encoding="utf-8"
    )
    (corpus_dir / "notes" / "appendix.md").write_text(
        "Hello world.", encoding="utf-8"
    )
    (corpus_dir / "table.csv").write_text("a,b\n1,2\n", encoding="utf-8")
    return corpus_dir
