"""Tests for the Typer command line entry point."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Any, List

import pytest
from typer.testing import CliRunner

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import main
from main import app

runner = CliRunner()


def _write_table(tmp_path: Path) -> Path:
    csv_path = tmp_path / "people.csv"
    csv_path.write_text("name,score\nada,10\nbob,20\ncy,30\ndee,40\n", encoding="utf-8")
    return csv_path


def test_summarize_writes_chart(tmp_path: Path, fake_write_image: List[dict[str, Any]]) -> None:
    output_dir = tmp_path / "output"

    result = runner.invoke(
        app,
        ["summarize", str(_write_table(tmp_path)), "--column", "score", "--output-dir", str(output_dir)],
    )

    assert result.exit_code == 0, result.output
    assert (output_dir / "score_summary_chart.svg").exists()
    assert "Mean of 'score': 25.0" in result.output


def test_summarize_reports_schema_error(tmp_path: Path, fake_write_image: List[dict[str, Any]]) -> None:
    output_dir = tmp_path / "output"

    result = runner.invoke(
        app,
        ["summarize", str(_write_table(tmp_path)), "--column", "name", "--output-dir", str(output_dir)],
    )

    assert result.exit_code == 1
    assert "SchemaError" in result.output
    assert "'name'" in result.output
    assert not (output_dir / "name_summary_chart.svg").exists()


def test_summarize_reports_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["summarize", str(tmp_path / "absent.csv"), "--column", "score"])

    assert result.exit_code == 1
    assert "IoError" in result.output
    assert "absent.csv" in result.output


def test_summarize_rejects_unknown_format(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["summarize", str(_write_table(tmp_path)), "--column", "score", "--format", "gif"],
    )
    assert result.exit_code == 2


def test_summarize_prompts_for_column(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    fake_write_image: List[dict[str, Any]],
) -> None:
    offered: dict[str, Any] = {}

    class _Prompt:
        def execute(self) -> str:
            return "score"

    def _select(message: str, choices: List[str]) -> _Prompt:
        offered["choices"] = choices
        return _Prompt()

    monkeypatch.setattr(main.inquirer, "select", _select)
    output_dir = tmp_path / "output"

    result = runner.invoke(app, ["summarize", str(_write_table(tmp_path)), "--output-dir", str(output_dir)])

    assert result.exit_code == 0, result.output
    assert offered["choices"] == ["score"]
    assert (output_dir / "score_summary_chart.svg").exists()


def test_columns_lists_header(tmp_path: Path) -> None:
    result = runner.invoke(app, ["columns", str(_write_table(tmp_path))])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["name\ttext", "score\tnumeric"]
