"""JSON parser for the scraped articles file.

The input is a UTF-8 JSON array of article objects:

    [
        {
            "title": "Storm Hits City",
            "author": "jane doe",
            "datePublished": "2024-03-01T10:00:00Z",
            "content": ["A storm hit the city today."],
            "images": [{"url": "https://example.com/a.jpg", "caption": "Flooding"}],
            "thumbnail": "https://example.com/thumb.jpg"
        }
    ]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..core.types import ArticleImage, ArticleRecord


class InputError(ValueError):
    """Raised when the input file is missing or not in the expected format."""


def load_articles(path: Path) -> list[ArticleRecord]:
    """Read and parse the articles file.

    Raises:
        InputError: If the file cannot be read or parsed
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise InputError(f"Input file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise InputError(f"Input file is not valid JSON: {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read input file {path}: {exc}") from exc

    return parse_articles(data)


def parse_articles(data: Any) -> list[ArticleRecord]:
    """Parse the decoded JSON payload into ArticleRecord objects.

    Missing title, author and datePublished become empty strings and a
    missing content list becomes empty; a non-array ``images`` value is
    treated as no images.

    Raises:
        InputError: If the payload is not an array of article objects
    """
    if not isinstance(data, list):
        raise InputError("Invalid input format: expected a JSON array of articles")

    articles: list[ArticleRecord] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise InputError(f"Invalid article at index {index}: expected an object")
        articles.append(_parse_article(item, index))
    return articles


def _parse_article(item: dict[str, Any], index: int) -> ArticleRecord:
    content = item.get("content") or []
    if not isinstance(content, list) or not all(isinstance(p, str) for p in content):
        raise InputError(f"Invalid article at index {index}: 'content' must be a list of strings")

    images = item.get("images")
    thumbnail = item.get("thumbnail")

    return ArticleRecord(
        title=_as_text(item.get("title")),
        author=_as_text(item.get("author")),
        date_published=_as_text(item.get("datePublished")),
        content=tuple(content),
        images=tuple(_parse_images(images)) if isinstance(images, list) else (),
        thumbnail=str(thumbnail) if thumbnail is not None else None,
    )


def _parse_images(images: list[Any]) -> list[ArticleImage]:
    parsed: list[ArticleImage] = []
    for image in images:
        if not isinstance(image, dict):
            continue
        caption = image.get("caption")
        parsed.append(
            ArticleImage(
                url=_as_text(image.get("url")),
                caption=str(caption) if caption is not None else None,
            )
        )
    return parsed


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
