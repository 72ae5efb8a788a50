"""
Article deduplication by normalized title fingerprint.

Two records whose titles normalize to the same fingerprint are the same
article; the first one in input order wins. An optional fuzzy threshold
also drops titles that are near-identical to an already kept one.
"""

from __future__ import annotations

import logging

from rapidfuzz import fuzz

from ..text.base import TextNormalizer
from ..utils.logging import log_event
from .types import ArticleRecord

logger = logging.getLogger("news_mdx.dedup")


def title_fingerprint(title: str, normalizer: TextNormalizer) -> str:
    """Return the equality key used to detect duplicate articles.

    Empty and whitespace-only titles all map to "" and therefore collapse
    into a single kept record.
    """
    return normalizer.normalize_generic(title).lower().strip()


def dedup_articles(
    articles: list[ArticleRecord],
    normalizer: TextNormalizer,
    threshold: int | None = None,
) -> list[ArticleRecord]:
    """Remove duplicate articles from a list.

    Args:
        articles: Articles in input order
        normalizer: Text normalizer used to build title fingerprints
        threshold: Optional similarity (0-100) above which two fingerprints
                   are also treated as duplicates. None keeps exact matching.

    Returns:
        Deduplicated list of articles, preserving original order
    """
    seen: set[str] = set()
    kept: list[ArticleRecord] = []
    fingerprints: list[str] = []

    for article in articles:
        fingerprint = title_fingerprint(article.title, normalizer)
        if fingerprint in seen:
            _log_drop(article, "exact")
            continue
        if threshold is not None and _is_similar_title(fingerprint, fingerprints, threshold):
            _log_drop(article, "similar")
            continue
        seen.add(fingerprint)
        fingerprints.append(fingerprint)
        kept.append(article)

    return kept


def _is_similar_title(title: str, titles: list[str], threshold: int) -> bool:
    """Check if a fingerprint is similar to any fingerprint in the given list."""
    for existing in titles:
        if fuzz.ratio(title, existing) >= threshold:
            return True
    return False


def _log_drop(article: ArticleRecord, match: str) -> None:
    log_event(
        logger,
        "Duplicate dropped",
        level=logging.DEBUG,
        event="duplicate_dropped",
        title=article.title,
        match=match,
    )
