"""
Default text normalizer.

Implements the TextNormalizer primitives with unicodedata for character
clean-up, the titlecase library for headlines, and a British to American
word table for spelling.
"""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path

import yaml
from titlecase import titlecase

from ..config import NormalizeConfig
from .base import TextNormalizer
from .spelling import BRITISH_TO_AMERICAN

_WHITESPACE_RE = re.compile(r"\s+")
_WORD_RE = re.compile(r"[A-Za-z]+")
_NAME_PART_RE = re.compile(r"([-'’])")

# Zero-width characters survive NFKC and are invisible in rendered output.
_ZERO_WIDTH = {"\u200b", "\u200c", "\u200d", "\u2060", "\ufeff"}

NAME_PARTICLES = frozenset(
    {"da", "das", "de", "del", "der", "di", "do", "dos", "du", "la", "le", "van", "von"}
)


class DefaultNormalizer(TextNormalizer):
    """Normalizer backed by unicodedata, titlecase and a spelling table."""

    def __init__(self, cfg: NormalizeConfig | None = None):
        self._cfg = cfg or NormalizeConfig()
        self._spelling = dict(BRITISH_TO_AMERICAN)
        if self._cfg.spelling_overrides:
            self._spelling.update(_load_spelling_overrides(Path(self._cfg.spelling_overrides)))

    def normalize_generic(self, text: str) -> str:
        text = unicodedata.normalize("NFKC", text)
        if self._cfg.strip_diacritics:
            decomposed = unicodedata.normalize("NFKD", text)
            text = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
        text = "".join(ch for ch in text if _is_visible(ch))
        return _WHITESPACE_RE.sub(" ", text).strip()

    def normalize_name(self, text: str) -> str:
        words = _WHITESPACE_RE.sub(" ", text).strip().split(" ")
        normalized = []
        for position, word in enumerate(words):
            if position > 0 and word.lower() in NAME_PARTICLES:
                normalized.append(word.lower())
                continue
            normalized.append(_capitalize_name_word(word))
        return " ".join(normalized)

    def normalize_paragraph(self, text: str) -> str:
        text = _WHITESPACE_RE.sub(" ", text).strip()
        if not text:
            return text
        text = text[0].upper() + text[1:]
        if text[-1].isalnum():
            text += "."
        return text

    def normalize_spelling(self, text: str) -> str:
        def _replace(match: re.Match[str]) -> str:
            word = match.group(0)
            american = self._spelling.get(word.lower())
            if american is None:
                return word
            return _match_case(word, american)

        return _WORD_RE.sub(_replace, text)

    def title_case(self, text: str) -> str:
        return titlecase(text)


def _is_visible(ch: str) -> bool:
    if ch in _ZERO_WIDTH:
        return False
    if unicodedata.category(ch) == "Cc" and not ch.isspace():
        return False
    return True


def _capitalize_name_word(word: str) -> str:
    # McDonald, DiCaprio and friends are already cased on purpose.
    if not (word.islower() or word.isupper()):
        return word
    parts = _NAME_PART_RE.split(word.lower())
    return "".join(part[:1].upper() + part[1:] for part in parts)


def _match_case(original: str, replacement: str) -> str:
    if original.isupper() and len(original) > 1:
        return replacement.upper()
    if original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def _load_spelling_overrides(path: Path) -> dict[str, str]:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid spelling overrides {path}: expected a mapping")
    return {str(k).lower(): str(v).lower() for k, v in raw.items()}
