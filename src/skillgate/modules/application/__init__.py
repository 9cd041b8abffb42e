"""Public API for the application module (ranking, conflicts, admission)."""

from .internal import ConflictResolver, RelevanceScorer, SkillSession, TokenCounter
from .public import (
    ActiveSkillRecord,
    ApplyResult,
    ConflictResult,
    InvokeResult,
    ScoredSkill,
    SessionReport,
    SkillLoadResult,
    TokenCountResult,
)
from .public.apply import SkillApplicator, create_applicator

__all__ = [
    "ConflictResolver",
    "RelevanceScorer",
    "SkillSession",
    "TokenCounter",
    "SkillApplicator",
    "create_applicator",
    "ActiveSkillRecord",
    "ApplyResult",
    "ConflictResult",
    "InvokeResult",
    "ScoredSkill",
    "SessionReport",
    "SkillLoadResult",
    "TokenCountResult",
]
