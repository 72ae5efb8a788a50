"""
Command-line interface for news-mdx.

Uses Typer to provide a CLI with options for the main configuration
settings. Supports loading .env files for path overrides.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .config import load_config
from .input.json_parser import InputError
from .runner import run_pipeline

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main() -> None:
    """Convert scraped news articles into a date-partitioned MDX tree."""
    # Runs before subcommand options are parsed, so .env values reach envvar options.
    load_dotenv()


@app.command()
def build(
    input: Path | None = typer.Option(
        None, "--input", "-i", envvar="NEWS_MDX_INPUT", help="Scraped articles JSON file."
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", envvar="NEWS_MDX_OUTPUT", help="Output root (rebuilt)."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", envvar="NEWS_MDX_CONFIG", exists=True, dir_okay=False
    ),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
    timezone: str | None = typer.Option(
        None, "--timezone", help="IANA timezone for date buckets (default: system local)."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Rebuild the MDX tree from the scraped articles file.

    Without options this reads scraped-data/articles.json and rebuilds
    news/. The output root is deleted and fully repopulated on every run.

    Args:
        input: Path to the input JSON file
        output: Output root directory
        config: Optional path to YAML config file
        progress: Whether to show progress bar
        timezone: Timezone used to read calendar dates
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log file format (jsonl, plain)
        log_file: Enable/disable file logging
    """
    cfg = load_config(str(config) if config else None)

    if timezone:
        cfg.grouping.timezone = timezone
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file

    input_path = input or Path(cfg.input.path)
    output_path = output or Path(cfg.output.root)

    try:
        stats = run_pipeline(input_path, output_path, cfg, show_progress=progress, console=console)
    except InputError as exc:
        console.print(f"[bold red]Input error[/bold red]: {exc}")
        raise typer.Exit(code=1) from exc

    console.print(
        f"[bold]Build summary[/bold]: total={stats.total}, unique={stats.unique}, "
        f"duplicates={stats.duplicates}, groups={stats.groups}, "
        f"unknown_dates={stats.unknown_dates}, written={stats.written}"
    )
    console.print(f"Documents written to: {stats.output_root}")


if __name__ == "__main__":
    app()
