"""Deterministic term-frequency embedder used when no model is configured.

Tokens are hashed into a fixed number of buckets with blake2b (never the
built-in ``hash``, which is salted per process), weighted by sublinear term
frequency and L2-normalised. Queries and skill descriptions go through the
same path, so cosine similarity between them stays meaningful.
"""

from __future__ import annotations

import hashlib
import math
import re
from collections import Counter
from typing import List

TOKEN_PATTERN = re.compile(r"[a-z0-9]+")

STOP_WORDS = frozenset(
    """
    a an and are as at be but by for from has have how i if in into is it its
    me my of on or our so that the their then there these this to use used
    using was we what when where which while who will with you your
    """.split()
)

_SUFFIXES = ("ing", "ed", "es", "s")


def _stem(token: str) -> str:
    for suffix in _SUFFIXES:
        if token.endswith(suffix) and len(token) - len(suffix) >= 3:
            return token[: -len(suffix)]
    return token


def tokenize(text: str) -> List[str]:
    tokens = []
    for raw in TOKEN_PATTERN.findall(text.lower()):
        if len(raw) < 2 or raw in STOP_WORDS:
            continue
        tokens.append(_stem(raw))
    return tokens


class HeuristicEmbedder:
    def __init__(self, dimensions: int = 256):
        if dimensions < 1:
            raise ValueError("dimensions must be positive")
        self.dimensions = dimensions
        self.name = f"heuristic-tf-{dimensions}"

    def _bucket(self, token: str) -> int:
        digest = hashlib.blake2b(token.encode("utf-8"), digest_size=8).digest()
        return int.from_bytes(digest, "big") % self.dimensions

    def embed(self, text: str) -> List[float]:
        vector = [0.0] * self.dimensions
        counts = Counter(tokenize(text))
        for token in sorted(counts):
            vector[self._bucket(token)] += 1.0 + math.log(counts[token])

        norm = math.sqrt(math.fsum(x * x for x in vector))
        if norm == 0.0:
            return vector
        return [x / norm for x in vector]


__all__ = ["HeuristicEmbedder", "tokenize", "STOP_WORDS"]
