from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from skillgate.shared.types import FrozenModel

MatchType = Literal["trigger", "similarity"]
LoadFailureReason = Literal["budget-exceeded", "max-skills-reached"]
SkipReason = Literal[
    "budget-exceeded", "max-skills-reached", "not-found", "below-threshold"
]


class TokenCountResult(FrozenModel):
    count: int = Field(..., ge=0)
    source: Literal["tiktoken", "heuristic"]
    confidence: Literal["high", "medium"]


class ScoredSkill(FrozenModel):
    """A skill ranked for one query."""

    name: str
    score: float
    match_type: MatchType = "similarity"


class ConflictResult(FrozenModel):
    has_conflict: bool = False
    conflicting_skills: list[str] = Field(default_factory=list)
    resolution: Literal["priority"] = "priority"
    winner: str | None = None


class ActiveSkillRecord(FrozenModel):
    """A skill held in a session's active set."""

    name: str
    content: str
    relevance_score: float
    token_count: int = Field(..., ge=0)
    estimated_savings: float = Field(default=0.0, ge=0.0)
    loaded_at: datetime


class SkillLoadResult(FrozenModel):
    success: bool
    skill_name: str
    reason: LoadFailureReason | None = None
    token_count: int = 0
    already_active: bool = False
    remaining_budget: int = 0


class ActiveSkillSummary(FrozenModel):
    name: str
    token_count: int
    relevance_score: float
    estimated_savings: float


class SessionReport(FrozenModel):
    """Derived view of a session; never mutated on its own."""

    active_count: int
    active_skills: list[ActiveSkillSummary] = Field(default_factory=list)
    tokens_used: int
    token_budget: int
    remaining_budget: int
    budget_percent_used: float
    estimated_savings: float
    max_skills: int | None = None


class ApplyResult(FrozenModel):
    loaded: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    skip_reasons: dict[str, SkipReason] = Field(default_factory=dict)
    conflicts: ConflictResult = Field(default_factory=ConflictResult)
    report: SessionReport


class InvokeResult(FrozenModel):
    success: bool
    skill_name: str
    content: str | None = None
    error: str | None = None
    load_result: SkillLoadResult | None = None


__all__ = [
    "MatchType",
    "LoadFailureReason",
    "SkipReason",
    "TokenCountResult",
    "ScoredSkill",
    "ConflictResult",
    "ActiveSkillRecord",
    "SkillLoadResult",
    "ActiveSkillSummary",
    "SessionReport",
    "ApplyResult",
    "InvokeResult",
]
