"""Tests for title-fingerprint deduplication."""

from news_mdx.core.dedup import dedup_articles, title_fingerprint
from news_mdx.core.types import ArticleRecord
from news_mdx.text import DefaultNormalizer


def _article(title: str, date: str = "2024-03-01T10:00:00Z") -> ArticleRecord:
    return ArticleRecord(title=title, author="someone", date_published=date, content=("Text.",))


def test_fingerprint_ignores_case_and_surrounding_whitespace() -> None:
    normalizer = DefaultNormalizer()
    assert title_fingerprint("  Storm Hits City ", normalizer) == "storm hits city"
    assert title_fingerprint("STORM   hits city", normalizer) == "storm hits city"


def test_first_occurrence_wins() -> None:
    normalizer = DefaultNormalizer()
    first = _article("Storm Hits City", "2024-03-01T10:00:00Z")
    later = _article("  storm hits CITY ", "2024-03-02T10:00:00Z")
    other = _article("Bridge Reopens")

    kept = dedup_articles([first, later, other], normalizer)

    assert kept == [first, other]
    assert kept[0] is first


def test_dedup_preserves_input_order() -> None:
    normalizer = DefaultNormalizer()
    articles = [_article(f"Story {i}") for i in range(5)]
    assert dedup_articles(list(reversed(articles)), normalizer) == list(reversed(articles))


def test_dedup_is_idempotent() -> None:
    normalizer = DefaultNormalizer()
    articles = [
        _article("A"),
        _article("a"),
        _article("B"),
        _article(" b "),
        _article("C"),
    ]
    once = dedup_articles(articles, normalizer)
    assert dedup_articles(once, normalizer) == once
    assert [a.title for a in once] == ["A", "B", "C"]


def test_empty_titles_collapse_to_one_record() -> None:
    normalizer = DefaultNormalizer()
    blank = _article("")
    spaces = _article("   ")
    kept = dedup_articles([blank, spaces, _article("Real")], normalizer)
    assert kept[0] is blank
    assert len(kept) == 2


def test_similarity_threshold_drops_near_duplicates() -> None:
    normalizer = DefaultNormalizer()
    articles = [_article("Storm hits the city"), _article("Storm hits the city!")]

    assert len(dedup_articles(articles, normalizer)) == 2
    assert dedup_articles(articles, normalizer, threshold=90) == [articles[0]]
