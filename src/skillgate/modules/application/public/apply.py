"""Apply skills to a conversation: trigger match, rank, resolve, admit."""

from __future__ import annotations

from typing import Dict, List, Optional

from skillgate.modules.embeddings import EmbeddingBackend, create_backend
from skillgate.modules.indexing import SkillIndex, SkillIndexEntry
from skillgate.modules.skills import FileSkillStore, SkillStore
from skillgate.shared.config import Config
from skillgate.shared.errors import SkillNotFoundError

from ..internal import ConflictResolver, RelevanceScorer, SkillSession, TokenCounter
from .types import (
    ApplyResult,
    InvokeResult,
    ScoredSkill,
    SessionReport,
    SkipReason,
)


class SkillApplicator:
    """Composes SkillIndex, RelevanceScorer, ConflictResolver and SkillSession."""

    def __init__(
        self,
        index: SkillIndex,
        store: SkillStore,
        *,
        config: Config,
        token_counter: Optional[TokenCounter] = None,
        backend: Optional[EmbeddingBackend] = None,
    ):
        self.index = index
        self.store = store
        self.config = config
        self.token_counter = token_counter or TokenCounter(
            config.token_counter, config.tiktoken_encoding
        )
        self.scorer = RelevanceScorer(backend or create_backend(config))
        self.resolver = ConflictResolver()
        self.session = SkillSession(
            self.token_counter,
            token_budget=config.get_token_budget(),
            max_skills=config.max_skills_per_session,
            savings_factor=config.savings_factor,
        )

    def initialize(self) -> None:
        """Index all enabled skills for ranking."""
        self.scorer.index_skills(self.index.get_enabled())
        self._persist_cache()

    def _persist_cache(self) -> None:
        cache = self.scorer.backend.cache
        if cache is not None and cache.path is not None and cache.dirty:
            cache.save()

    def reindex(self) -> None:
        """Re-index after skills were edited on disk."""
        self.initialize()

    def _threshold_for(self, entry: Optional[SkillIndexEntry]) -> float:
        if entry is not None and entry.triggers and entry.triggers.threshold is not None:
            return entry.triggers.threshold
        return self.config.relevance_threshold

    def _rank(
        self, matches: List[SkillIndexEntry], query: str
    ) -> List[ScoredSkill]:
        # No free text: every trigger match counts as exact.
        if not query:
            return [ScoredSkill(name=m.name, score=1.0, match_type="trigger") for m in matches]
        match_names = {m.name for m in matches}
        ranked = [s for s in self.scorer.score_against_query(query) if s.name in match_names]
        # Matches missing from the corpus (added since indexing) keep their
        # trigger match with the lowest score.
        ranked_names = {s.name for s in ranked}
        ranked.extend(
            ScoredSkill(name=m.name, score=0.0, match_type="trigger")
            for m in matches
            if m.name not in ranked_names
        )
        return ranked

    def apply(
        self,
        intent: Optional[str] = None,
        file: Optional[str] = None,
        context: Optional[str] = None,
    ) -> ApplyResult:
        """Auto-load skills whose triggers match, best first, within budget."""
        if not self.scorer.is_indexed:
            self.initialize()

        matches = self.index.find_by_trigger(intent=intent, file=file, context=context)
        if not matches:
            return ApplyResult(report=self.session.get_report())

        by_name = {m.name: m for m in matches}
        query = " ".join(part for part in (intent, context) if part)
        conflicts = self.resolver.detect_conflicts(
            matches, intent=intent, file=file, context=context
        )
        resolved = self.resolver.resolve_by_priority(self._rank(matches, query))

        loaded: List[str] = []
        skipped: List[str] = []
        reasons: Dict[str, SkipReason] = {}

        def skip(name: str, reason: SkipReason) -> None:
            skipped.append(name)
            reasons[name] = reason

        for scored in resolved:
            if self.session.is_active(scored.name):
                continue

            if scored.match_type == "similarity" and scored.score < self._threshold_for(
                by_name.get(scored.name)
            ):
                skip(scored.name, "below-threshold")
                continue

            try:
                skill = self.store.read(scored.name)
            except (SkillNotFoundError, OSError, ValueError):
                skip(scored.name, "not-found")
                continue

            result = self.session.load(scored.name, skill.body, scored.score)
            if result.success:
                loaded.append(scored.name)
            else:
                skip(scored.name, result.reason)

        if conflicts.has_conflict:
            winner = next((n for n in loaded if n in conflicts.conflicting_skills), None)
            conflicts = conflicts.model_copy(update={"winner": winner})

        self._persist_cache()

        return ApplyResult(
            loaded=loaded,
            skipped=skipped,
            skip_reasons=reasons,
            conflicts=conflicts,
            report=self.session.get_report(),
        )

    def invoke(self, skill_name: str) -> InvokeResult:
        """Manually load one skill by name."""
        if self.session.is_active(skill_name):
            return InvokeResult(
                success=True,
                skill_name=skill_name,
                content=self.session.get_skill_content(skill_name),
            )

        try:
            skill = self.store.read(skill_name)
        except (SkillNotFoundError, OSError, ValueError):
            return InvokeResult(
                success=False,
                skill_name=skill_name,
                error=f"Skill not found: {skill_name}",
            )

        load_result = self.session.load(skill_name, skill.body, 1.0)
        if not load_result.success:
            return InvokeResult(
                success=False,
                skill_name=skill_name,
                error=f"Could not load skill: {load_result.reason}",
                load_result=load_result,
            )
        return InvokeResult(
            success=True,
            skill_name=skill_name,
            content=skill.body,
            load_result=load_result,
        )

    def unload(self, skill_name: str) -> bool:
        return self.session.unload(skill_name)

    def clear(self) -> None:
        self.session.clear()

    def get_report(self) -> SessionReport:
        return self.session.get_report()

    def get_active_display(self) -> str:
        return self.session.format_active_skills_display()


def create_applicator(config: Config) -> SkillApplicator:
    """Wire a file-backed store, an index and a backend from ``config``."""
    store = FileSkillStore(config.skills_dir)
    index = SkillIndex(store, config.get_index_path())
    index.load()
    return SkillApplicator(index, store, config=config)


__all__ = ["SkillApplicator", "create_applicator"]
