from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from skillgate.modules.indexing import SkillIndexEntry, matched_fields

from ..public.types import ConflictResult, ScoredSkill


def _pattern_keys(entry: SkillIndexEntry) -> Set[Tuple[str, str]]:
    triggers = entry.triggers
    if triggers is None:
        return set()
    keys = set()
    for field, patterns in (
        ("intent", triggers.intents),
        ("file", triggers.files),
        ("context", triggers.contexts),
    ):
        keys.update((field, p.strip().lower()) for p in patterns)
    return keys


class ConflictResolver:
    """Detects trigger overlap and orders candidates for admission."""

    def detect_conflicts(
        self,
        candidates: Sequence[SkillIndexEntry],
        intent: Optional[str] = None,
        file: Optional[str] = None,
        context: Optional[str] = None,
    ) -> ConflictResult:
        """Flag candidates that claim the same query field or the same pattern.

        Informational only; nothing is removed.
        """
        claims: Dict[Tuple[str, ...], List[str]] = {}
        for entry in candidates:
            keys = {("query", f) for f in matched_fields(entry.triggers, intent, file, context)}
            keys |= {("pattern", field, p) for field, p in _pattern_keys(entry)}
            for key in keys:
                claims.setdefault(key, []).append(entry.name)

        overlapping: Set[str] = set()
        for names in claims.values():
            if len(set(names)) > 1:
                overlapping.update(names)

        conflicting = [entry.name for entry in candidates if entry.name in overlapping]
        conflicting = list(dict.fromkeys(conflicting))
        return ConflictResult(
            has_conflict=bool(conflicting),
            conflicting_skills=conflicting,
            resolution="priority",
        )

    def resolve_by_priority(self, scored: Iterable[ScoredSkill]) -> List[ScoredSkill]:
        """Deduplicate by name (best score kept), then order by score desc, name asc."""
        best: Dict[str, ScoredSkill] = {}
        for item in scored:
            current = best.get(item.name)
            if current is None or item.score > current.score:
                best[item.name] = item
        return sorted(best.values(), key=lambda s: (-s.score, s.name))


__all__ = ["ConflictResolver"]
