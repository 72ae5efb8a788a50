"""
Text normalization adapter.

The pipeline only talks to the TextNormalizer interface; concrete
backends are selected by name through the factory.
"""

from .base import TextNormalizer
from .default import DefaultNormalizer
from .factory import available_normalizers, create_normalizer

__all__ = [
    "TextNormalizer",
    "DefaultNormalizer",
    "available_normalizers",
    "create_normalizer",
]
