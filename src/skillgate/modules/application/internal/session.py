"""Token-budgeted registry of active skills for one conversation.

A session is not locked; callers serialize calls to a given instance.
Invariant: ``tokens_used`` equals the sum of ``token_count`` over the active
records after every public call.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..public.types import (
    ActiveSkillRecord,
    ActiveSkillSummary,
    SessionReport,
    SkillLoadResult,
)
from .token_counter import TokenCounter


class SkillSession:
    def __init__(
        self,
        token_counter: TokenCounter,
        token_budget: int,
        max_skills: Optional[int] = None,
        savings_factor: float = 2.0,
    ):
        if token_budget < 0:
            raise ValueError("token_budget must be non-negative")
        self.token_counter = token_counter
        self.token_budget = token_budget
        self.max_skills = max_skills
        self.savings_factor = savings_factor
        self._active: Dict[str, ActiveSkillRecord] = {}
        self._tokens_used = 0
        self._estimated_savings = 0.0

    @property
    def tokens_used(self) -> int:
        return self._tokens_used

    @property
    def estimated_savings(self) -> float:
        return self._estimated_savings

    @property
    def remaining_budget(self) -> int:
        return self.token_budget - self._tokens_used

    @property
    def active_names(self) -> List[str]:
        return list(self._active)

    def records(self) -> List[ActiveSkillRecord]:
        return list(self._active.values())

    def is_active(self, name: str) -> bool:
        return name in self._active

    def load(
        self,
        name: str,
        content: str,
        relevance_score: float = 1.0,
        estimated_savings: Optional[float] = None,
    ) -> SkillLoadResult:
        """Admit ``name`` if it fits; rejection leaves the session untouched."""
        existing = self._active.get(name)
        if existing is not None:
            return SkillLoadResult(
                success=True,
                skill_name=name,
                token_count=existing.token_count,
                already_active=True,
                remaining_budget=self.remaining_budget,
            )

        cost = self.token_counter.estimate(content)

        if self.max_skills is not None and len(self._active) >= self.max_skills:
            return SkillLoadResult(
                success=False,
                skill_name=name,
                reason="max-skills-reached",
                token_count=cost,
                remaining_budget=self.remaining_budget,
            )

        if self._tokens_used + cost > self.token_budget:
            return SkillLoadResult(
                success=False,
                skill_name=name,
                reason="budget-exceeded",
                token_count=cost,
                remaining_budget=self.remaining_budget,
            )

        if estimated_savings is None:
            estimated_savings = cost * self.savings_factor
        estimated_savings = max(0.0, estimated_savings)

        self._active[name] = ActiveSkillRecord(
            name=name,
            content=content,
            relevance_score=relevance_score,
            token_count=cost,
            estimated_savings=estimated_savings,
            loaded_at=datetime.now(timezone.utc),
        )
        self._tokens_used += cost
        self._estimated_savings += estimated_savings
        return SkillLoadResult(
            success=True,
            skill_name=name,
            token_count=cost,
            remaining_budget=self.remaining_budget,
        )

    def unload(self, name: str) -> bool:
        record = self._active.pop(name, None)
        if record is None:
            return False
        self._tokens_used -= record.token_count
        self._estimated_savings -= record.estimated_savings
        if not self._active:
            # Drop accumulated float drift once the set is empty
            self._estimated_savings = 0.0
        return True

    def clear(self) -> None:
        self._active.clear()
        self._tokens_used = 0
        self._estimated_savings = 0.0

    def get_skill_content(self, name: str) -> Optional[str]:
        record = self._active.get(name)
        return record.content if record else None

    def get_report(self) -> SessionReport:
        budget = self.token_budget
        used = self._tokens_used
        return SessionReport(
            active_count=len(self._active),
            active_skills=[
                ActiveSkillSummary(
                    name=r.name,
                    token_count=r.token_count,
                    relevance_score=r.relevance_score,
                    estimated_savings=r.estimated_savings,
                )
                for r in self._active.values()
            ],
            tokens_used=used,
            token_budget=budget,
            remaining_budget=budget - used,
            budget_percent_used=round(used / budget * 100, 1) if budget else 0.0,
            estimated_savings=self._estimated_savings,
            max_skills=self.max_skills,
        )

    def format_active_skills_display(self) -> str:
        if not self._active:
            return "No active skills."

        report = self.get_report()
        cap = f"/{self.max_skills}" if self.max_skills is not None else ""
        lines = [
            f"Active skills ({report.active_count}{cap}) - "
            f"{report.tokens_used:,}/{report.token_budget:,} tokens "
            f"({report.budget_percent_used}% of budget)"
        ]
        for record in self._active.values():
            lines.append(
                f"  - {record.name}: {record.token_count:,} tokens, "
                f"relevance {record.relevance_score:.2f}, "
                f"loaded {record.loaded_at.strftime('%H:%M:%S')}"
            )
        lines.append(f"Estimated savings: ~{int(report.estimated_savings):,} tokens")
        return "\n".join(lines)


__all__ = ["SkillSession"]
