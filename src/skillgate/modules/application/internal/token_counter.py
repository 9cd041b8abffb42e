"""Token cost estimation.

The source (tiktoken or the chars/4 heuristic) is resolved once, on first
use, and pinned for the counter's lifetime, so the same text always costs
the same within a session.
"""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal, Optional

from ..public.types import TokenCountResult

CHARS_PER_TOKEN = 4

TokenSource = Literal["heuristic", "tiktoken"]


def heuristic_token_count(text: str) -> int:
    """ceil(len / 4): deterministic and non-decreasing in length."""
    if not text:
        return 0
    return (len(text) + CHARS_PER_TOKEN - 1) // CHARS_PER_TOKEN


class TokenCounter:
    def __init__(
        self,
        source: TokenSource = "heuristic",
        encoding_name: str = "cl100k_base",
        cache_size: int = 1024,
    ):
        self.requested_source = source
        self.encoding_name = encoding_name
        self._source: Optional[TokenSource] = None
        self._encoding = None
        self._count = lru_cache(maxsize=cache_size)(self._compute)

    @property
    def source(self) -> TokenSource:
        if self._source is None:
            self._resolve_source()
        return self._source

    def _resolve_source(self) -> None:
        if self.requested_source == "heuristic":
            self._source = "heuristic"
            return
        try:
            import tiktoken  # lazy import

            self._encoding = tiktoken.get_encoding(self.encoding_name)
            self._source = "tiktoken"
        except Exception as exc:
            print(
                f"tiktoken encoding '{self.encoding_name}' unavailable, "
                f"using heuristic token estimate: {exc}",
                file=sys.stderr,
            )
            self._source = "heuristic"

    def _compute(self, text: str) -> int:
        if self.source == "tiktoken":
            return len(self._encoding.encode(text, disallowed_special=()))
        return heuristic_token_count(text)

    def estimate(self, text: str) -> int:
        if not text:
            return 0
        return self._count(text)

    def count(self, text: str) -> TokenCountResult:
        source = self.source
        return TokenCountResult(
            count=self.estimate(text),
            source=source,
            confidence="high" if source == "tiktoken" else "medium",
        )


__all__ = ["TokenCounter", "heuristic_token_count", "CHARS_PER_TOKEN"]
