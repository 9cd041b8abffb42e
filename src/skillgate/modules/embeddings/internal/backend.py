"""Embedding backend: one active embedder, a heuristic fallback, a cache.

Degradation is a one-way, explicit decision (``degrade(reason)``) made by the
caller that saw the provider fail. All vectors compared against each other
must come from the same active embedder, so callers re-embed their corpus
after degrading.
"""

from __future__ import annotations

import sys
from typing import List, Optional

from ..public.types import Embedder
from .cache import EmbeddingCache
from .heuristic import HeuristicEmbedder


class EmbeddingBackend:
    def __init__(
        self,
        primary: Optional[Embedder] = None,
        fallback: Optional[HeuristicEmbedder] = None,
        cache: Optional[EmbeddingCache] = None,
    ):
        self.fallback = fallback or HeuristicEmbedder()
        self.primary = primary
        self.cache = cache
        self.degraded_reason: Optional[str] = None

    @property
    def active(self) -> Embedder:
        if self.primary is None or self.degraded_reason is not None:
            return self.fallback
        return self.primary

    @property
    def active_name(self) -> str:
        return self.active.name

    @property
    def is_degraded(self) -> bool:
        return self.degraded_reason is not None

    def degrade(self, reason: str) -> None:
        if self.degraded_reason is not None or self.primary is None:
            return
        self.degraded_reason = reason
        print(
            f"Embedding provider {self.primary.name} unavailable, "
            f"using {self.fallback.name}: {reason}",
            file=sys.stderr,
        )

    def embed(self, key: str, text: str) -> List[float]:
        """Embed ``text`` with the active embedder, through the cache.

        Provider errors propagate as EmbeddingProviderError.
        """
        embedder = self.active
        cache_key = f"{embedder.name}:{key}"
        if self.cache is not None:
            cached = self.cache.lookup(cache_key, text)
            if cached is not None:
                return cached

        vector = embedder.embed(text)
        if self.cache is not None and vector:
            self.cache.store(cache_key, text, vector)
        return vector


__all__ = ["EmbeddingBackend"]
