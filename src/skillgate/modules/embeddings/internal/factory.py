"""Construction of the embedding backend from Config."""

from __future__ import annotations

from skillgate.shared.config import Config

from ..public.types import Embedder
from .backend import EmbeddingBackend
from .cache import EmbeddingCache
from .heuristic import HeuristicEmbedder
from .providers import create_provider_embedder


def create_embedder(config: Config) -> Embedder:
    """Embedder selected by ``config.embedding_provider`` ('none' -> heuristic)."""
    return create_provider_embedder(config) or HeuristicEmbedder(config.heuristic_dimensions)


def create_backend(config: Config, *, load_cache: bool = True) -> EmbeddingBackend:
    cache = EmbeddingCache(
        path=config.embedding_cache_path,
        max_entries=config.embedding_cache_max_entries,
    )
    if load_cache:
        cache.load()
    return EmbeddingBackend(
        primary=create_provider_embedder(config),
        fallback=HeuristicEmbedder(config.heuristic_dimensions),
        cache=cache,
    )


__all__ = ["create_embedder", "create_backend"]
