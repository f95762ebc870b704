import json
from pathlib import Path

from typer.testing import CliRunner

from flesch_kincaid.cli import app
from tests.utils import write_sample_corpus

runner = CliRunner()


def test_cli_analyze_directory_outputs_summary(tmp_path: Path):
    """analyze scores every supported file in a directory plus the corpus."""
    corpus_dir = write_sample_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)

    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["chapter1.txt", "notes/appendix.md"]
    chapter = payload["documents"][0]
    assert chapter["words"] == 6
    assert chapter["sentences"] == 2
    assert chapter["reading_ease"] == 100.0
    assert chapter["reading_ease_label"] == "5th grade"
    assert chapter["grade_label"] == "1st grade"
    assert payload["corpus"]["words"] == 8
    assert payload["corpus"]["sentences"] == 3


def test_cli_analyze_single_file(tmp_path: Path):
    path = tmp_path / "single.txt"
    path.write_text("Hello world.", encoding="utf-8")
    result = runner.invoke(app, ["analyze", "--input-path", str(path)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["documents"][0]["doc_id"] == "single.txt"
    assert payload["documents"][0]["syllables"] == 3


def test_cli_analyze_text_without_descriptions():
    result = runner.invoke(
        app, ["analyze", "--text", "The cat sat.", "--no-descriptions", "--no-aggregate"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    doc = payload["documents"][0]
    assert doc["doc_id"] == "<text>"
    assert doc["reading_ease"] == 100.0
    assert "reading_ease_label" not in doc
    assert "corpus" not in payload


def test_cli_analyze_reads_stdin():
    result = runner.invoke(app, ["analyze"], input="Dogs run fast!")
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["documents"][0]["doc_id"] == "<stdin>"
    assert payload["documents"][0]["words"] == 3


def test_cli_analyze_reports_null_scores_for_empty_text():
    result = runner.invoke(app, ["analyze", "--text", "42 !!!"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    doc = payload["documents"][0]
    assert doc["words"] == 0
    assert doc["reading_ease"] is None
    assert doc["grade_level"] is None


def test_cli_analyze_uses_config_file(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "aggregate: false\ninclude_descriptions: false\n", encoding="utf-8"
    )
    result = runner.invoke(
        app, ["analyze", "--text", "Hello world.", "--config", str(config_path)]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert "corpus" not in payload
    assert "grade_label" not in payload["documents"][0]


def test_cli_analyze_rejects_path_and_text_together(tmp_path: Path):
    path = tmp_path / "single.txt"
    path.write_text("Hello world.", encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "--input-path", str(path), "--text", "Hello"]
    )
    assert result.exit_code != 0


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "decimals" in result.stdout
    assert "input_extensions" in result.stdout
