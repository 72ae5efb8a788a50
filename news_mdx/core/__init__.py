"""
Core domain models and transformation logic.

This package contains the pure parts of the pipeline: deduplication,
date grouping and document building. Nothing in here touches the
filesystem.
"""

from .types import (
    ArticleImage,
    ArticleRecord,
    BuildStats,
    DateKey,
    FrontMatter,
    IndexedArticle,
    OutputDocument,
)
from .dedup import dedup_articles, title_fingerprint
from .grouping import date_key_for, group_articles, parse_published
from .document import DocumentBuilder, build_description, render_document, slugify

__all__ = [
    "ArticleImage",
    "ArticleRecord",
    "BuildStats",
    "DateKey",
    "FrontMatter",
    "IndexedArticle",
    "OutputDocument",
    "dedup_articles",
    "title_fingerprint",
    "date_key_for",
    "group_articles",
    "parse_published",
    "DocumentBuilder",
    "build_description",
    "render_document",
    "slugify",
]
