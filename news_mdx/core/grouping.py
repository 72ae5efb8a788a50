"""
Date bucketing of deduplicated articles.

Articles are grouped by the local calendar day of their publish timestamp
and each bucket is ordered by publish instant. Equal instants are common
when a source only provides day precision; those ties are broken by
putting the article that came later in the deduplicated list first.
Records with an unparsable timestamp go to the unknown-date bucket (key
None) instead of failing the run.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo

from dateutil import parser as dateparser

from ..utils.logging import log_event
from .types import ArticleRecord, DateKey, IndexedArticle

logger = logging.getLogger("news_mdx.grouping")

ArticleGroups = dict[DateKey | None, list[ArticleRecord]]

# Two fill-in dates that differ in every calendar field. A value parses to the
# same year, month and day under both only when it spells all three out.
_FILL_A = datetime(2000, 1, 1)
_FILL_B = datetime(2001, 2, 2)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


def parse_published(value: object, tz: tzinfo) -> datetime | None:
    """Parse a publish timestamp into an aware datetime in ``tz``.

    Naive timestamps are read as wall-clock time in ``tz``. Returns None
    when the value cannot be parsed or does not name a full calendar date
    ("March 2024", "10:00" and "Monday" are all rejected).
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        parsed = dateparser.parse(text, default=_FILL_A)
        check = dateparser.parse(text, default=_FILL_B)
    except (ValueError, OverflowError):
        return None
    if (parsed.year, parsed.month, parsed.day) != (check.year, check.month, check.day):
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz)
    return parsed.astimezone(tz)


def date_key_for(value: object, tz: tzinfo) -> DateKey | None:
    """Return the local calendar day of a publish timestamp, or None."""
    parsed = parse_published(value, tz)
    if parsed is None:
        return None
    return DateKey(parsed.year, parsed.month, parsed.day)


def instant_millis(published: datetime) -> int:
    """Whole milliseconds since the epoch; finer precision does not order articles."""
    return (published - _EPOCH) // _MILLISECOND


def group_articles(articles: list[ArticleRecord], tz: tzinfo) -> ArticleGroups:
    """Group deduplicated articles into ordered date buckets.

    Args:
        articles: Deduplicated articles in input order
        tz: Timezone whose calendar days define the buckets

    Returns:
        Mapping of DateKey (None for unparsable dates) to articles ordered by
        (publish instant ascending, deduplicated position descending).
        Buckets appear in the order their first article was seen.
    """
    buckets: dict[DateKey | None, list[tuple[int, IndexedArticle]]] = {}

    for position, article in enumerate(articles):
        published = parse_published(article.date_published, tz)
        if published is None:
            log_event(
                logger,
                "Unparsable publish date",
                level=logging.WARNING,
                event="date_unparsable",
                title=article.title,
                date_published=article.date_published,
            )
            key = None
            instant = 0
        else:
            key = DateKey(published.year, published.month, published.day)
            instant = instant_millis(published)
        buckets.setdefault(key, []).append((instant, IndexedArticle(position, article)))

    groups: ArticleGroups = {}
    for key, items in buckets.items():
        ordered = sorted(items, key=_sort_key)
        groups[key] = [item.article for _, item in ordered]
    return groups


def _sort_key(item: tuple[int, IndexedArticle]) -> tuple[int, int]:
    instant, indexed = item
    return instant, -indexed.position
