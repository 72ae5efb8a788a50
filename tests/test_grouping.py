"""Tests for date bucketing and in-bucket ordering."""

from datetime import datetime, timedelta, timezone

import pytest

from news_mdx.core.grouping import date_key_for, group_articles, instant_millis, parse_published
from news_mdx.core.types import ArticleRecord, DateKey

UTC = timezone.utc
TOKYO = timezone(timedelta(hours=9))


def _article(title: str, date: str) -> ArticleRecord:
    return ArticleRecord(title=title, author="someone", date_published=date, content=("Text.",))


def test_parse_published_handles_zulu_suffix() -> None:
    parsed = parse_published("2024-03-01T10:00:00Z", UTC)
    assert parsed == datetime(2024, 3, 1, 10, 0, tzinfo=UTC)


def test_date_key_uses_local_calendar_day() -> None:
    assert date_key_for("2024-03-01T23:30:00Z", UTC) == DateKey(2024, 3, 1)
    assert date_key_for("2024-03-01T23:30:00Z", TOKYO) == DateKey(2024, 3, 2)


def test_naive_timestamps_are_read_in_configured_timezone() -> None:
    assert date_key_for("2024-03-01 23:30", TOKYO) == DateKey(2024, 3, 1)


def test_unparsable_dates_return_none() -> None:
    assert parse_published("not a date", UTC) is None
    assert parse_published("", UTC) is None
    assert parse_published(None, UTC) is None
    assert date_key_for("2024-13-45", UTC) is None


def test_date_key_renders_path() -> None:
    assert DateKey(2024, 3, 1).path == "2024/03/01"
    assert str(DateKey(999, 12, 31)) == "0999/12/31"


def test_same_day_different_times_share_a_bucket() -> None:
    morning = _article("Morning", "2024-03-01T06:00:00Z")
    evening = _article("Evening", "2024-03-01T21:15:42.123Z")

    groups = group_articles([evening, morning], UTC)

    assert list(groups) == [DateKey(2024, 3, 1)]
    assert groups[DateKey(2024, 3, 1)] == [morning, evening]


def test_grouping_is_complete() -> None:
    articles = [
        _article("A", "2024-03-01T10:00:00Z"),
        _article("B", "2024-03-02T10:00:00Z"),
        _article("C", "2024-03-01T08:00:00Z"),
        _article("D", "garbage"),
        _article("E", "2024-04-01"),
    ]

    groups = group_articles(articles, UTC)
    members = [article for bucket in groups.values() for article in bucket]

    assert len(members) == len(articles)
    assert {a.title for a in members} == {a.title for a in articles}


def test_buckets_follow_first_seen_order() -> None:
    articles = [
        _article("A", "2024-03-02T10:00:00Z"),
        _article("B", "2024-03-01T10:00:00Z"),
        _article("C", "2024-03-02T09:00:00Z"),
    ]
    groups = group_articles(articles, UTC)
    assert list(groups) == [DateKey(2024, 3, 2), DateKey(2024, 3, 1)]


def test_equal_instants_put_later_article_first() -> None:
    first = _article("First", "2024-03-01")
    second = _article("Second", "2024-03-01")
    third = _article("Third", "2024-03-01T00:00:00+00:00")

    groups = group_articles([first, second, third], UTC)

    assert groups[DateKey(2024, 3, 1)] == [third, second, first]


def test_tie_break_only_applies_to_equal_instants() -> None:
    early = _article("Early", "2024-03-01T08:00:00Z")
    late = _article("Late", "2024-03-01T09:00:00Z")
    same_as_early = _article("Same", "2024-03-01T08:00:00Z")

    groups = group_articles([late, early, same_as_early], UTC)

    assert groups[DateKey(2024, 3, 1)] == [same_as_early, early, late]


def test_unparsable_dates_go_to_unknown_bucket() -> None:
    good = _article("Good", "2024-03-01T10:00:00Z")
    bad_one = _article("Bad one", "soon")
    bad_two = _article("Bad two", "")

    groups = group_articles([bad_one, good, bad_two], UTC)

    assert list(groups) == [None, DateKey(2024, 3, 1)]
    assert groups[None] == [bad_two, bad_one]


@pytest.mark.parametrize("value", ["March 2024", "2024-03", "10:00", "Monday", "March 5", "2024"])
def test_partial_dates_are_unparsable(value: str) -> None:
    assert parse_published(value, UTC) is None
    assert date_key_for(value, UTC) is None


def test_partial_dates_go_to_unknown_bucket() -> None:
    dated = _article("Dated", "2024-03-01T10:00:00Z")
    month_only = _article("Month only", "March 2024")

    groups = group_articles([dated, month_only], UTC)

    assert groups[None] == [month_only]
    assert groups[DateKey(2024, 3, 1)] == [dated]


def test_instants_compare_at_millisecond_precision() -> None:
    first = _article("First", "2024-03-01T10:00:00.0001Z")
    second = _article("Second", "2024-03-01T10:00:00.0002Z")
    later = _article("Later", "2024-03-01T10:00:00.001Z")

    groups = group_articles([first, second, later], UTC)

    assert groups[DateKey(2024, 3, 1)] == [second, first, later]


def test_instant_millis_truncates_sub_millisecond_part() -> None:
    parsed = parse_published("1970-01-01T00:00:01.2349Z", UTC)
    assert instant_millis(parsed) == 1234
