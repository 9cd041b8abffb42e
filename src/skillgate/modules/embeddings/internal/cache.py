"""Content-bound embedding cache.

Entries are looked up by a logical key (e.g. ``<embedder>:skill:<name>``) and
verified against the sha256 of the text. A mismatch means the source text
changed, so the entry is evicted and the caller recomputes.
"""

from __future__ import annotations

import hashlib
import json
import sys
import threading
import time
from collections import OrderedDict
from pathlib import Path
from typing import Dict, List, Optional

from skillgate.shared.utils import atomic_write_json

from ..public.types import CacheEntry

CACHE_VERSION = 1


def content_hash(text: str) -> str:
    return "sha256:" + hashlib.sha256(text.encode("utf-8")).hexdigest()


class EmbeddingCache:
    def __init__(self, path: Optional[Path] = None, max_entries: int = 1000):
        self.path = Path(path) if path else None
        self.max_entries = max_entries
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()
        self._dirty = False
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    @property
    def dirty(self) -> bool:
        """True when entries changed since the last load or save."""
        return self._dirty

    def lookup(self, key: str, text: str) -> Optional[List[float]]:
        digest = content_hash(text)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self.misses += 1
                return None
            if entry.content_hash != digest:
                del self._entries[key]
                self._dirty = True
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return list(entry.vector)

    def store(self, key: str, text: str, vector: List[float]) -> None:
        entry = CacheEntry(
            key=key,
            content_hash=content_hash(text),
            vector=list(vector),
            created_at=time.time(),
        )
        with self._lock:
            self._entries[key] = entry
            self._dirty = True
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def invalidate(self, key: str) -> bool:
        with self._lock:
            removed = self._entries.pop(key, None) is not None
            self._dirty = self._dirty or removed
            return removed

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._dirty = True

    # --- Persistence ---
    def load(self) -> None:
        """Load persisted vectors; a corrupt file just means an empty cache."""
        if self.path is None or not self.path.exists():
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if raw.get("version") != CACHE_VERSION:
                raise ValueError(f"unsupported cache version: {raw.get('version')}")
            loaded: Dict[str, CacheEntry] = {
                key: CacheEntry(key=key, **value)
                for key, value in raw.get("entries", {}).items()
            }
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            print(f"Embedding cache unreadable, starting empty: {exc}", file=sys.stderr)
            return

        with self._lock:
            self._entries = OrderedDict(
                sorted(loaded.items(), key=lambda item: item[1].created_at)
            )
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
            self._dirty = False

    def save(self) -> bool:
        if self.path is None:
            return False
        with self._lock:
            payload = {
                "version": CACHE_VERSION,
                "entries": {
                    key: entry.model_dump(exclude={"key"})
                    for key, entry in self._entries.items()
                },
            }
        try:
            atomic_write_json(self.path, payload)
        except OSError as exc:
            print(f"Failed to write embedding cache: {exc}", file=sys.stderr)
            return False
        self._dirty = False
        return True


__all__ = ["EmbeddingCache", "content_hash", "CACHE_VERSION"]
