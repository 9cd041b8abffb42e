"""Persistent, staleness-checked skill index.

The index file is a JSON document::

    {"version": 1, "buildTime": "...", "entries": [...]}

Every write builds the full document in memory and replaces the file in one
step, so a concurrent reader sees either the old or the new index.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from skillgate.modules.skills.public.types import SkillStore
from skillgate.shared.errors import IndexCorruptError, SkillNotFoundError
from skillgate.shared.utils import atomic_write_json, file_mtime_ms

from ..public.types import INDEX_VERSION, SkillIndexData, SkillIndexEntry
from .matching import trigger_match


class SkillIndex:
    """Catalogue of skill metadata backed by ``index_path``."""

    def __init__(self, store: SkillStore, index_path: Path):
        self.store = store
        self.index_path = Path(index_path)
        self._entries: Dict[str, SkillIndexEntry] = {}
        # Unreadable skills and the SKILL.md mtime they failed at
        self._skipped: Dict[str, Optional[float]] = {}
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    # --- Persistence ---
    def _read_index_file(self) -> SkillIndexData:
        try:
            with open(self.index_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            data = SkillIndexData.model_validate(raw)
        except (OSError, ValueError) as exc:
            raise IndexCorruptError(str(exc)) from exc
        if data.version != INDEX_VERSION:
            raise IndexCorruptError(f"unsupported index version: {data.version}")
        return data

    def load(self) -> None:
        """Load from disk; rebuild when the file is missing or corrupt."""
        if not self.index_path.exists():
            self.rebuild()
            return
        try:
            data = self._read_index_file()
        except IndexCorruptError as exc:
            print(f"Skill index unreadable, rebuilding: {exc}", file=sys.stderr)
            self.rebuild()
            return

        self._entries = {entry.name: entry for entry in data.entries}
        self._loaded = True

    def save(self) -> bool:
        data = SkillIndexData(
            version=INDEX_VERSION,
            build_time=datetime.now(timezone.utc).isoformat(),
            entries=list(self._entries.values()),
        )
        try:
            atomic_write_json(self.index_path, data.to_json())
        except OSError as exc:
            print(f"Failed to write skill index: {exc}", file=sys.stderr)
            return False
        return True

    # --- Entry construction ---
    def _read_entry(self, name: str) -> SkillIndexEntry:
        skill = self.store.read(name)
        meta = skill.metadata
        return SkillIndexEntry(
            name=name,
            description=meta.description,
            enabled=meta.enabled,
            triggers=meta.triggers,
            path=str(skill.path),
            mtime=file_mtime_ms(Path(skill.path)),
        )

    def _source_mtime(self, name: str) -> Optional[float]:
        skill_path = getattr(self.store, "skill_path", None)
        if skill_path is None:
            return None
        try:
            return file_mtime_ms(skill_path(name))
        except (SkillNotFoundError, OSError):
            return None

    def _try_read_entry(self, name: str) -> Optional[SkillIndexEntry]:
        try:
            entry = self._read_entry(name)
        except (SkillNotFoundError, OSError, ValueError) as exc:
            print(f"Skipping skill {name}: {exc}", file=sys.stderr)
            self._skipped[name] = self._source_mtime(name)
            return None
        self._skipped.pop(name, None)
        return entry

    def _skipped_unchanged(self, name: str) -> bool:
        if name not in self._skipped:
            return False
        recorded = self._skipped[name]
        return recorded is not None and recorded == self._source_mtime(name)

    # --- Lifecycle ---
    def rebuild(self) -> None:
        """Full rebuild from the store; bad skills are skipped."""
        entries: Dict[str, SkillIndexEntry] = {}
        self._skipped = {}
        for name in self.store.list():
            entry = self._try_read_entry(name)
            if entry is not None:
                entries[name] = entry

        self._entries = entries
        self._loaded = True
        self.save()

    def _is_stale(self, entry: SkillIndexEntry) -> bool:
        try:
            return file_mtime_ms(Path(entry.path)) != entry.mtime
        except OSError:
            # File doesn't exist anymore
            return True

    def refresh(self) -> None:
        """Reconcile stale, deleted and new skills without a full rebuild."""
        if not self._loaded:
            self.load()
            return

        changed = False
        entries: Dict[str, SkillIndexEntry] = {}
        for name, entry in self._entries.items():
            if not self._is_stale(entry):
                entries[name] = entry
                continue
            changed = True
            updated = self._try_read_entry(name)
            if updated is not None:
                entries[name] = updated

        for name in self.store.list():
            if name in entries or name in self._entries:
                continue
            if self._skipped_unchanged(name):
                continue
            added = self._try_read_entry(name)
            if added is not None:
                entries[name] = added
                changed = True

        self._entries = entries
        if changed or not self.index_path.exists():
            self.save()

    # --- Queries ---
    def get(self, name: str) -> Optional[SkillIndexEntry]:
        return self._entries.get(name)

    def get_all(self) -> List[SkillIndexEntry]:
        self.refresh()
        return list(self._entries.values())

    def get_enabled(self) -> List[SkillIndexEntry]:
        return [entry for entry in self.get_all() if entry.enabled]

    def search(self, query: str) -> List[SkillIndexEntry]:
        """Case-insensitive substring match over name and description."""
        qlow = query.lower()
        return [
            entry
            for entry in self.get_all()
            if qlow in entry.name.lower() or qlow in entry.description.lower()
        ]

    def find_by_trigger(
        self,
        intent: Optional[str] = None,
        file: Optional[str] = None,
        context: Optional[str] = None,
    ) -> List[SkillIndexEntry]:
        """Enabled entries with at least one matching trigger pattern."""
        return [
            entry
            for entry in self.get_enabled()
            if trigger_match(entry.triggers, intent=intent, file=file, context=context)
        ]


__all__ = ["SkillIndex"]
