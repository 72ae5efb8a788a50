"""
Core data types for the news-to-MDX pipeline.

This module defines the fundamental data structures used throughout the pipeline:
- ArticleImage / ArticleRecord: Scraped article data parsed from the JSON input
- DateKey: Calendar day used to bucket articles into directories
- IndexedArticle: Article paired with its position in the deduplicated list
- FrontMatter / OutputDocument: One rendered MDX file
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath


@dataclass(frozen=True)
class ArticleImage:
    """An image attached to an article.

    Attributes:
        url: Image source URL
        caption: Optional caption, rendered as the markdown alt text
    """
    url: str
    caption: str | None = None


@dataclass(frozen=True)
class ArticleRecord:
    """Represents one scraped article as read from the input file.

    Attributes:
        title: The article headline as scraped
        author: Raw author name
        date_published: Raw timestamp string ("datePublished" in the input)
        content: Paragraphs in reading order
        images: Attached images in original order
        thumbnail: Optional thumbnail URL
    """
    title: str
    author: str = ""
    date_published: str = ""
    content: tuple[str, ...] = ()
    images: tuple[ArticleImage, ...] = ()
    thumbnail: str | None = None


@dataclass(frozen=True, order=True)
class DateKey:
    """Local calendar day of an article's publish timestamp."""
    year: int
    month: int
    day: int

    @property
    def path(self) -> str:
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class IndexedArticle:
    """Article paired with its stable position in the deduplicated list.

    The position drives the tie-break when two articles share a publish
    instant, so the group sort never has to look anything up in the
    original list.
    """
    position: int
    article: ArticleRecord


@dataclass(frozen=True)
class FrontMatter:
    slug: str
    title: str
    description: str
    author: str
    date: str
    thumbnail: str


@dataclass(frozen=True)
class OutputDocument:
    """One MDX document ready to be written.

    Attributes:
        path: Location relative to the output root (e.g. 2024/03/01/001.mdx)
        front_matter: Metadata block values
        body: Markdown body (paragraphs followed by images)
        text: Fully rendered document text
    """
    path: PurePosixPath
    front_matter: FrontMatter
    body: str
    text: str = field(default="", repr=False)

    def target(self, root: Path) -> Path:
        return root.joinpath(*self.path.parts)


@dataclass
class BuildStats:
    """Counters reported at the end of a run.

    Attributes:
        total: Records read from the input file
        unique: Records left after deduplication
        duplicates: Records dropped as duplicates
        groups: Number of date buckets
        unknown_dates: Records routed to the unknown-date bucket
        written: Documents written to disk
        output_root: Directory that was rebuilt
    """
    total: int = 0
    unique: int = 0
    duplicates: int = 0
    groups: int = 0
    unknown_dates: int = 0
    written: int = 0
    output_root: Path | None = None
