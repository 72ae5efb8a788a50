"""
news-mdx - scraped news articles to MDX documents.

This package converts a JSON export of scraped news articles into a
date-partitioned tree of MDX files with normalized front matter.

Main entry point is the CLI via `news-mdx build` command.

Example:
    $ news-mdx build -i scraped-data/articles.json -o news/
"""

__all__ = [
    "__version__",
    "DocumentBuilder",
    "dedup_articles",
    "group_articles",
    "load_articles",
    "run_pipeline",
    "slugify",
]
__version__ = "0.1.0"

from .core.dedup import dedup_articles
from .core.document import DocumentBuilder, slugify
from .core.grouping import group_articles
from .input.json_parser import load_articles
from .runner import run_pipeline
