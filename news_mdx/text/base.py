"""
Abstract base class for text normalizers.

New backends should inherit from TextNormalizer and implement every
normalization primitive. All methods are pure, synchronous and total:
they accept any string and return a string without side effects.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TextNormalizer(ABC):
    """Capability interface the pipeline uses for all text clean-up."""

    @abstractmethod
    def normalize_generic(self, text: str) -> str:
        """Normalize unicode and whitespace of arbitrary text."""
        raise NotImplementedError

    @abstractmethod
    def normalize_name(self, text: str) -> str:
        """Normalize a person's name (casing and particles)."""
        raise NotImplementedError

    @abstractmethod
    def normalize_paragraph(self, text: str) -> str:
        """Normalize one paragraph of body text."""
        raise NotImplementedError

    @abstractmethod
    def normalize_spelling(self, text: str) -> str:
        """Rewrite spelling variants to the canonical dialect."""
        raise NotImplementedError

    @abstractmethod
    def title_case(self, text: str) -> str:
        """Convert a headline to title case."""
        raise NotImplementedError
