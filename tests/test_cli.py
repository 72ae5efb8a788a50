"""Tests for the news-mdx command line."""

import json
from pathlib import Path

from typer.testing import CliRunner

from news_mdx.cli import app

runner = CliRunner()


def test_build_command_writes_tree(tmp_path: Path) -> None:
    input_path = tmp_path / "articles.json"
    input_path.write_text(
        json.dumps(
            [
                {
                    "title": "Storm Hits City",
                    "author": "jane doe",
                    "datePublished": "2024-03-01T10:00:00Z",
                    "content": ["A storm hit the city today."],
                }
            ]
        ),
        encoding="utf-8",
    )
    output = tmp_path / "news"

    result = runner.invoke(
        app,
        ["build", "-i", str(input_path), "-o", str(output), "--no-progress", "--timezone", "UTC"],
    )

    assert result.exit_code == 0, result.output
    assert (output / "2024" / "03" / "01" / "001.mdx").exists()
    assert "Build summary" in result.output


def test_build_command_reports_input_errors(tmp_path: Path) -> None:
    output = tmp_path / "news"
    output.mkdir()

    result = runner.invoke(
        app,
        ["build", "-i", str(tmp_path / "missing.json"), "-o", str(output), "--no-progress"],
    )

    assert result.exit_code == 1
    assert "Input error" in result.output
    assert output.exists()


def test_build_command_reads_paths_from_environment(tmp_path: Path) -> None:
    input_path = tmp_path / "articles.json"
    input_path.write_text("[]", encoding="utf-8")
    output = tmp_path / "out"

    result = runner.invoke(
        app,
        ["build", "--no-progress"],
        env={"NEWS_MDX_INPUT": str(input_path), "NEWS_MDX_OUTPUT": str(output)},
    )

    assert result.exit_code == 0, result.output
    assert "written=0" in result.output
