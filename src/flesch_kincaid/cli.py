from __future__ import annotations

import json
from pathlib import Path
from typing import List, TypedDict

import typer
import yaml

from .config import KincaidConfig, load_config
from .engine import Kincaid
from .models import CorpusReadability, Document, DocumentReadability
from .pipeline import process_corpus

app = typer.Typer(help="Flesch-Kincaid readability CLI.", no_args_is_help=True)

STDIN_DOC_ID = "<stdin>"
TEXT_DOC_ID = "<text>"


class DocumentSummary(TypedDict, total=False):
    doc_id: str
    words: int
    syllables: int
    sentences: int
    reading_ease: float | None
    grade_level: float | None
    reading_ease_label: str
    reading_ease_description: str
    grade_label: str


@app.command()
def analyze(
    input_path: Path | None = typer.Option(
        None,
        "--input-path",
        "-i",
        exists=True,
        readable=True,
        dir_okay=True,
        file_okay=True,
        help="File or directory to score. Reads stdin when neither this nor --text is given.",
    ),
    text: str | None = typer.Option(
        None, "--text", "-t", help="Score a literal piece of text."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    decimals: int | None = typer.Option(
        None, "--decimals", help="Round scores to this many decimal places."
    ),
    include_descriptions: bool | None = typer.Option(
        None,
        "--descriptions/--no-descriptions",
        help="Include human-readable labels for each score.",
    ),
    aggregate: bool | None = typer.Option(
        None,
        "--aggregate/--no-aggregate",
        help="Also score every document together as one corpus.",
    ),
) -> None:
    """Score the input and emit a JSON readability summary."""
    cfg = load_config(config)
    _apply_output_overrides(cfg, decimals, include_descriptions, aggregate)
    if input_path is not None and text is not None:
        raise typer.BadParameter("Use either --input-path or --text, not both.")

    if text is not None:
        documents = [Document(doc_id=TEXT_DOC_ID, text=text)]
    elif input_path is not None:
        documents = _load_documents(input_path, cfg)
    else:
        stdin = typer.get_text_stream("stdin")
        documents = [Document(doc_id=STDIN_DOC_ID, text=stdin.read())]

    results = process_corpus(documents, Kincaid())
    typer.echo(json.dumps(_build_summary(results, cfg), indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = KincaidConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_output_overrides(
    config: KincaidConfig,
    decimals: int | None,
    include_descriptions: bool | None,
    aggregate: bool | None,
) -> None:
    """Apply CLI overrides to output-related config fields when provided."""
    if decimals is not None:
        config.decimals = decimals
    if include_descriptions is not None:
        config.include_descriptions = include_descriptions
    if aggregate is not None:
        config.aggregate = aggregate


def _load_documents(input_path: Path, config: KincaidConfig) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name, config)]

    extensions = {ext.lower() for ext in config.input_extensions}
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in extensions
    )
    return [
        _document_from_file(file, file.relative_to(input_path).as_posix(), config)
        for file in files
    ]


def _document_from_file(path: Path, doc_id: str, config: KincaidConfig) -> Document:
    try:
        text = path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Unable to read {path}: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(results: CorpusReadability, config: KincaidConfig) -> dict:
    """Create a JSON-serializable summary of every document (and the corpus)."""
    summary: dict = {
        "documents": [_document_dict(result, config) for result in results.documents]
    }
    if config.aggregate and results.combined is not None:
        summary["corpus"] = _document_dict(results.combined, config)
    return summary


def _document_dict(
    result: DocumentReadability, config: KincaidConfig
) -> DocumentSummary:
    payload: DocumentSummary = {
        "doc_id": result.doc_id,
        "words": result.metrics.words,
        "syllables": result.metrics.syllables,
        "sentences": result.metrics.sentences,
        "reading_ease": None,
        "grade_level": None,
    }
    if result.reading_ease is None or result.grade_level is None:
        return payload

    payload["reading_ease"] = round(result.reading_ease.value, config.decimals)
    payload["grade_level"] = round(result.grade_level.value, config.decimals)
    if config.include_descriptions:
        short, long = result.reading_ease.description()
        payload["reading_ease_label"] = short
        payload["reading_ease_description"] = long
        payload["grade_label"] = result.grade_level.description()
    return payload


if __name__ == "__main__":
    main()
