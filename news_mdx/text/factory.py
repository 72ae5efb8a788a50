"""Normalizer factory and registry for swappable text normalization backends."""

from __future__ import annotations

from ..config import NormalizeConfig
from .base import TextNormalizer
from .default import DefaultNormalizer


NormalizerBuilder = type[TextNormalizer]

_NORMALIZER_REGISTRY: dict[str, NormalizerBuilder] = {
    "default": DefaultNormalizer,
}


def available_normalizers() -> list[str]:
    """Return the set of registered normalizer names."""
    return sorted(_NORMALIZER_REGISTRY.keys())


def create_normalizer(cfg: NormalizeConfig) -> TextNormalizer:
    """Build a normalizer instance from runtime config."""
    name = cfg.backend.lower().strip()
    builder = _NORMALIZER_REGISTRY.get(name)
    if builder is None:
        supported = ", ".join(available_normalizers())
        raise ValueError(f"Unsupported normalizer: {cfg.backend}. Supported: {supported}")
    return builder(cfg)
