from __future__ import annotations

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from seqmarkov import config
from seqmarkov.cli import main


@pytest.fixture()
def corpus(tmp_path: Path) -> Path:
    path = tmp_path / "corpus.txt"
    path.write_text("xyz\n", encoding="utf-8")
    return path


def test_generate_reproduces_single_sequence_corpus(corpus: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(main, ["--log-level", "WARNING", "generate", "--corpus", str(corpus), "--order", "1", "-n", "3", "--seed", "1"])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["xyz", "xyz", "xyz"]


def test_generate_words_writes_output_file(tmp_path: Path) -> None:
    corpus = tmp_path / "weighted.txt"
    corpus.write_text("2\tBD SD HH\n", encoding="utf-8")
    output = tmp_path / "out" / "generated.txt"
    runner = CliRunner()

    result = runner.invoke(main, [
        "--log-level", "WARNING", "generate", "--corpus", str(corpus), "--words", "--weighted",
        "--rng", "numpy", "--seed", "5", "--output", str(output),
    ])

    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8") == "BD SD HH\n"


def test_generate_caps_sequence_length(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("abcdef\n", encoding="utf-8")
    runner = CliRunner()

    with caplog.at_level(logging.WARNING, logger="seqmarkov"):
        result = runner.invoke(main, ["--log-level", "WARNING", "generate", "--corpus", str(corpus), "--order", "1", "--max-length", "4"])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["abcd"]
    assert "Sequence truncated at 4 symbols" in caplog.text


def test_missing_corpus_is_reported(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(main, ["generate", "--corpus", str(tmp_path / "nope.txt")])

    assert result.exit_code != 0
    assert "Corpus file not found" in result.output


def test_invalid_order_is_a_usage_error(corpus: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(main, ["--log-level", "WARNING", "generate", "--corpus", str(corpus), "--order", "0"])

    assert result.exit_code == 2


def test_stats_lists_windows(corpus: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(main, ["--log-level", "WARNING", "stats", "--corpus", str(corpus), "--order", "1"])

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == "order: 1"
    assert lines[1] == "windows: 4"
    assert "MemoryWindow(['x']) -> {Symbol('y'): 1}" in lines


def test_unknown_random_source_is_blamed_on_rng(corpus: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "DEFAULT_RNG", "dice")
    runner = CliRunner()

    result = runner.invoke(main, ["--log-level", "WARNING", "stats", "--corpus", str(corpus), "--order", "1"])

    assert result.exit_code == 2
    assert "--rng" in result.output
    assert "--order" not in result.output
    assert "Unknown random source 'dice'" in result.output
