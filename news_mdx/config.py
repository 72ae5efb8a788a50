"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- InputConfig: Location of the scraped articles file
- OutputConfig: Output root and file sequencing
- DedupConfig: Deduplication settings
- GroupingConfig: Date bucketing settings
- DocumentConfig: Front matter derivation settings
- NormalizeConfig: Text normalization backend settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from typing import Any

from zoneinfo import ZoneInfo

import yaml


@dataclass
class InputConfig:
    """Configuration for the article input file.

    Attributes:
        path: Path to the UTF-8 JSON array of scraped articles
    """

    path: str = "scraped-data/articles.json"


@dataclass
class OutputConfig:
    """Configuration for the generated document tree.

    Attributes:
        root: Directory that is wiped and rebuilt on every run
        sequence_width: Minimum zero-padding of per-day file numbers
    """

    root: str = "news"
    sequence_width: int = 3


@dataclass
class DedupConfig:
    """Configuration for article deduplication.

    Attributes:
        title_similarity_threshold: Optional fuzzy match threshold (0-100).
            None means only identical title fingerprints are duplicates.
    """

    title_similarity_threshold: int | None = None


@dataclass
class GroupingConfig:
    """Configuration for date bucketing.

    Attributes:
        timezone: IANA timezone used to read calendar dates (None = system local)
        unknown_bucket: Directory name for articles with unparsable dates
    """

    timezone: str | None = None
    unknown_bucket: str = "unknown-date"


@dataclass
class DocumentConfig:
    """Configuration for derived front matter fields.

    Attributes:
        description_words: Maximum words kept from the first paragraph
        ellipsis: Marker appended to a truncated description
    """

    description_words: int = 15
    ellipsis: str = "..."


@dataclass
class NormalizeConfig:
    """Configuration for the text normalization backend.

    Attributes:
        backend: Registered normalizer name ("default")
        strip_diacritics: Whether generic normalization removes accents
        spelling_overrides: Optional YAML file of extra british: american pairs
    """

    backend: str = "default"
    strip_diacritics: bool = False
    spelling_overrides: str | None = None


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        directory: Directory holding the log file (kept outside the output root)
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "run.jsonl"
    directory: str = "logs"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    dedup: DedupConfig = field(default_factory=DedupConfig)
    grouping: GroupingConfig = field(default_factory=GroupingConfig)
    document: DocumentConfig = field(default_factory=DocumentConfig)
    normalize: NormalizeConfig = field(default_factory=NormalizeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return _fromdict(_asdict(DEFAULT_CONFIG))

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config file {path}: expected a mapping at top level")

    return _merge_config(DEFAULT_CONFIG, raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "input": {
            "path": cfg.input.path,
        },
        "output": {
            "root": cfg.output.root,
            "sequence_width": cfg.output.sequence_width,
        },
        "dedup": {
            "title_similarity_threshold": cfg.dedup.title_similarity_threshold,
        },
        "grouping": {
            "timezone": cfg.grouping.timezone,
            "unknown_bucket": cfg.grouping.unknown_bucket,
        },
        "document": {
            "description_words": cfg.document.description_words,
            "ellipsis": cfg.document.ellipsis,
        },
        "normalize": {
            "backend": cfg.normalize.backend,
            "strip_diacritics": cfg.normalize.strip_diacritics,
            "spelling_overrides": cfg.normalize.spelling_overrides,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
            "directory": cfg.logging.directory,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        input=InputConfig(**data["input"]),
        output=OutputConfig(**data["output"]),
        dedup=DedupConfig(**data["dedup"]),
        grouping=GroupingConfig(**data["grouping"]),
        document=DocumentConfig(**data["document"]),
        normalize=NormalizeConfig(**data["normalize"]),
        logging=LoggingConfig(**data["logging"]),
    )


def resolve_timezone(timezone_name: str | None) -> tzinfo:
    """Resolve local/system timezone or a specific IANA timezone name."""
    if timezone_name and timezone_name.upper() in {"UTC", "Z"}:
        return timezone.utc
    if timezone_name:
        return ZoneInfo(timezone_name)

    local = datetime.now().astimezone().tzinfo
    if local is None:
        return timezone.utc
    return local
