"""Public API for the embeddings module."""

from .internal import (
    EmbeddingBackend,
    EmbeddingCache,
    GeminiEmbedder,
    HeuristicEmbedder,
    OpenAIEmbedder,
    cosine_similarity,
    create_backend,
    create_embedder,
)
from .public import CacheEntry, Embedder, EmbeddingVector

__all__ = [
    "EmbeddingBackend",
    "EmbeddingCache",
    "HeuristicEmbedder",
    "OpenAIEmbedder",
    "GeminiEmbedder",
    "cosine_similarity",
    "CacheEntry",
    "Embedder",
    "EmbeddingVector",
    "create_backend",
    "create_embedder",
]
