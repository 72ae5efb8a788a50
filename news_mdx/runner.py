"""
Main pipeline orchestration for news-mdx.

This module coordinates the entire workflow:
1. Load and parse the articles JSON file
2. Deduplicate articles by title fingerprint
3. Group articles into ordered date buckets
4. Build every MDX document
5. Reset the output tree and write all documents concurrently

All transformation work finishes before the output root is touched, so a
bad input file or a normalization failure leaves the previous tree in
place. Supports both progress bar and quiet modes.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

from .config import AppConfig, resolve_timezone
from .core.dedup import dedup_articles
from .core.document import DocumentBuilder
from .core.grouping import ArticleGroups, group_articles
from .core.types import ArticleRecord, BuildStats, OutputDocument
from .input.json_parser import load_articles
from .output.sink import write_output_tree
from .text.factory import create_normalizer
from .utils.logging import log_event, setup_logging


def run_pipeline(
    input_path: Path,
    output_dir: Path,
    cfg: AppConfig,
    show_progress: bool = True,
    console: Console | None = None,
) -> BuildStats:
    """Run the complete articles-to-MDX pipeline.

    Args:
        input_path: Path to the scraped articles JSON file
        output_dir: Output root, fully rebuilt by this run
        cfg: Application configuration
        show_progress: Whether to display progress bars
        console: Rich console for output (creates default if None)

    Returns:
        BuildStats describing the run

    Raises:
        InputError: If the input file is missing or malformed
        OSError: If the output tree cannot be reset or written
    """
    logger = setup_logging(cfg.logging)
    log_event(
        logger,
        "Pipeline start",
        event="pipeline_start",
        input=str(input_path),
        output=str(output_dir),
    )

    if not show_progress:
        articles = _load(input_path, logger)
        stats, documents = _transform(articles, cfg, logger)
        written = write_output_tree(output_dir, documents, logger)
        return _finish(stats, written, output_dir, logger)

    console = console or Console()
    progress = Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=console,
    )

    with progress:
        stage_task = progress.add_task("Stages", total=3)

        articles = _load(input_path, logger)
        progress.advance(stage_task, 1)

        stats, documents = _transform(articles, cfg, logger)
        progress.advance(stage_task, 1)

        write_task = progress.add_task("Write", total=len(documents))
        written = write_output_tree(
            output_dir,
            documents,
            logger,
            on_written=lambda _path: progress.advance(write_task, 1),
        )
        progress.advance(stage_task, 1)

    return _finish(stats, written, output_dir, logger)


def build_documents(
    groups: ArticleGroups,
    builder: DocumentBuilder,
    min_width: int = 3,
) -> list[OutputDocument]:
    """Build the documents of every bucket, bucket by bucket."""
    documents: list[OutputDocument] = []
    for date_key, articles in groups.items():
        documents.extend(builder.build_group(date_key, articles, min_width))
    return documents


def _load(input_path: Path, logger: logging.Logger) -> list[ArticleRecord]:
    articles = load_articles(input_path)
    log_event(logger, "Input loaded", event="input_loaded", input=str(input_path), count=len(articles))
    return articles


def _transform(
    articles: list[ArticleRecord],
    cfg: AppConfig,
    logger: logging.Logger,
) -> tuple[BuildStats, list[OutputDocument]]:
    normalizer = create_normalizer(cfg.normalize)
    tz = resolve_timezone(cfg.grouping.timezone)

    unique = dedup_articles(articles, normalizer, cfg.dedup.title_similarity_threshold)
    groups = group_articles(unique, tz)

    builder = DocumentBuilder(
        normalizer,
        tz,
        cfg.document,
        unknown_bucket=cfg.grouping.unknown_bucket,
    )
    documents = build_documents(groups, builder, cfg.output.sequence_width)

    stats = BuildStats(
        total=len(articles),
        unique=len(unique),
        duplicates=len(articles) - len(unique),
        groups=len(groups),
        unknown_dates=len(groups.get(None, [])),
    )
    log_event(
        logger,
        "Articles grouped",
        event="articles_grouped",
        unique=stats.unique,
        duplicates=stats.duplicates,
        groups=stats.groups,
        unknown_dates=stats.unknown_dates,
    )
    return stats, documents


def _finish(
    stats: BuildStats,
    written: list[Path],
    output_dir: Path,
    logger: logging.Logger,
) -> BuildStats:
    stats.written = len(written)
    stats.output_root = output_dir
    log_event(
        logger,
        "Pipeline complete",
        event="pipeline_complete",
        output=str(output_dir),
        total=stats.total,
        written=stats.written,
    )
    return stats
