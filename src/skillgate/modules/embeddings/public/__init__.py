from .types import CacheEntry, Embedder, EmbeddingVector

__all__ = ["CacheEntry", "Embedder", "EmbeddingVector"]
