from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from pydantic import Field

from skillgate.shared.types import FrozenModel

EmbeddingVector = List[float]


@runtime_checkable
class Embedder(Protocol):
    """Turns text into a vector. ``name`` namespaces cached vectors."""

    name: str

    def embed(self, text: str) -> EmbeddingVector: ...


class CacheEntry(FrozenModel):
    """A cached vector bound to the exact text that produced it."""

    key: str
    content_hash: str = Field(..., description="sha256 of the embedded text")
    vector: EmbeddingVector
    created_at: float = Field(..., description="Epoch seconds")


__all__ = ["EmbeddingVector", "Embedder", "CacheEntry"]
