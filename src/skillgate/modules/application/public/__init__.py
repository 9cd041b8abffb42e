from .types import (
    ActiveSkillRecord,
    ActiveSkillSummary,
    ApplyResult,
    ConflictResult,
    InvokeResult,
    ScoredSkill,
    SessionReport,
    SkillLoadResult,
    TokenCountResult,
)

__all__ = [
    "ActiveSkillRecord",
    "ActiveSkillSummary",
    "ApplyResult",
    "ConflictResult",
    "InvokeResult",
    "ScoredSkill",
    "SessionReport",
    "SkillLoadResult",
    "TokenCountResult",
]
