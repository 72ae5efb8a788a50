"""
MDX document building.

This module maps one ArticleRecord to one OutputDocument: it derives the
display title, author, slug, description and body through the text
normalizer and renders the front matter block with a Jinja2 template.
"""

from __future__ import annotations

import logging
import re
from datetime import tzinfo
from pathlib import PurePosixPath

from jinja2 import Environment, StrictUndefined

from ..config import DocumentConfig
from ..text.base import TextNormalizer
from ..utils.logging import log_event
from .grouping import date_key_for
from .types import ArticleImage, ArticleRecord, DateKey, FrontMatter, OutputDocument

logger = logging.getLogger("news_mdx.document")

DOCUMENT_EXTENSION = ".mdx"
UNKNOWN_BUCKET = "unknown-date"

# Values are quoted verbatim; embedded double quotes are not escaped.
DOCUMENT_TEMPLATE = """---
slug: "{{ fm.slug }}"
title: "{{ fm.title }}"
description: "{{ fm.description }}"
author: "{{ fm.author }}"
date: "{{ fm.date }}"
thumbnail: "{{ fm.thumbnail }}"
---

{{ body }}"""

_SLUG_STRIP_RE = re.compile(r"[^\w\s-]", re.ASCII)
_SLUG_SPACE_RE = re.compile(r"\s+", re.ASCII)
_SLUG_HYPHENS_RE = re.compile(r"-{2,}")
_WORD_SPLIT_RE = re.compile(r"\s+")

_env = Environment(autoescape=False, undefined=StrictUndefined, keep_trailing_newline=False)
_template = _env.from_string(DOCUMENT_TEMPLATE)


def slugify(title: str, normalizer: TextNormalizer) -> str:
    """Convert a raw title to a filesystem-safe slug.

    Examples:
        "Storm Hits City" -> "storm-hits-city"
        "  --Hello,  World!--" -> "hello-world"
    """
    slug = normalizer.normalize_generic(title).lower()
    slug = _SLUG_STRIP_RE.sub("", slug)
    slug = _SLUG_SPACE_RE.sub("-", slug)
    slug = _SLUG_HYPHENS_RE.sub("-", slug)
    return slug.strip("-")


def build_description(paragraph: str, max_words: int = 15, ellipsis: str = "...") -> str:
    """Return the paragraph when short enough, else its first words plus ellipsis."""
    words = _WORD_SPLIT_RE.split(paragraph)
    if len(words) <= max_words:
        return paragraph
    return " ".join(words[:max_words]) + ellipsis


def render_images(images: tuple[ArticleImage, ...] | list[ArticleImage]) -> str:
    """Render images as markdown references separated by blank lines."""
    return "\n\n".join(f"![{image.caption or ''}]({image.url})" for image in images)


def render_document(front_matter: FrontMatter, body: str) -> str:
    """Serialize front matter and body into the final MDX text."""
    return _template.render(fm=front_matter, body=body).strip()


def sequence_width(group_size: int, minimum: int = 3) -> int:
    """Zero-padding width for a bucket, widened when it outgrows ``minimum``."""
    return max(minimum, len(str(group_size)))


class DocumentBuilder:
    """Builds OutputDocuments from article records.

    Args:
        normalizer: Text normalization backend
        tz: Timezone whose calendar days define date buckets
        cfg: Description settings
        unknown_bucket: Directory name for articles with unparsable dates
    """

    def __init__(
        self,
        normalizer: TextNormalizer,
        tz: tzinfo,
        cfg: DocumentConfig | None = None,
        unknown_bucket: str = UNKNOWN_BUCKET,
    ):
        self._normalizer = normalizer
        self._tz = tz
        self._cfg = cfg or DocumentConfig()
        self._unknown_bucket = unknown_bucket

    def title(self, article: ArticleRecord) -> str:
        n = self._normalizer
        return n.title_case(n.normalize_spelling(n.normalize_generic(article.title)))

    def author(self, article: ArticleRecord) -> str:
        return self._normalizer.normalize_name(article.author)

    def paragraphs(self, article: ArticleRecord) -> list[str]:
        n = self._normalizer
        return [
            n.normalize_spelling(n.normalize_paragraph(n.normalize_generic(paragraph)))
            for paragraph in article.content
        ]

    def build(
        self,
        article: ArticleRecord,
        index_in_group: int,
        width: int = 3,
        date_key: DateKey | None = None,
    ) -> OutputDocument:
        """Build the document for the article at ``index_in_group`` of its bucket.

        ``date_key`` is the bucket the grouper placed the article in; when
        omitted it is derived from the article's publish date.
        """
        content = self.paragraphs(article)
        body = "\n\n".join(part for part in [*content, render_images(article.images)] if part)
        description = build_description(
            content[0] if content else "",
            max_words=self._cfg.description_words,
            ellipsis=self._cfg.ellipsis,
        )
        if date_key is None:
            date_key = date_key_for(article.date_published, self._tz)

        front_matter = FrontMatter(
            slug=slugify(article.title, self._normalizer),
            title=self.title(article),
            description=description,
            author=self.author(article),
            date=date_key.path if date_key is not None else "",
            thumbnail=article.thumbnail or "",
        )
        return OutputDocument(
            path=self._document_path(date_key, index_in_group, width),
            front_matter=front_matter,
            body=body,
            text=render_document(front_matter, body),
        )

    def build_group(
        self,
        date_key: DateKey | None,
        articles: list[ArticleRecord],
        min_width: int = 3,
    ) -> list[OutputDocument]:
        """Build every document of one ordered bucket."""
        width = sequence_width(len(articles), min_width)
        if width > min_width:
            log_event(
                logger,
                "Bucket exceeds sequence width",
                level=logging.WARNING,
                event="sequence_overflow",
                bucket=self._bucket_name(date_key),
                count=len(articles),
                width=width,
            )
        return [
            self.build(article, index, width, date_key) for index, article in enumerate(articles)
        ]

    def _bucket_name(self, date_key: DateKey | None) -> str:
        return date_key.path if date_key is not None else self._unknown_bucket

    def _document_path(self, date_key: DateKey | None, index: int, width: int) -> PurePosixPath:
        filename = f"{index + 1:0{width}d}{DOCUMENT_EXTENSION}"
        return PurePosixPath(self._bucket_name(date_key)) / filename
