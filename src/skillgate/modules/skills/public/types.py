from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import Field, field_validator

from skillgate.shared.types import FrozenModel


class SkillTriggers(FrozenModel):
    """Conditions under which a skill is auto-applied."""

    intents: list[str] = Field(default_factory=list, description="Regex or keyword patterns")
    files: list[str] = Field(default_factory=list, description="Glob patterns (* and ?)")
    contexts: list[str] = Field(default_factory=list, description="Context substrings")
    threshold: float | None = Field(
        default=None, ge=0.0, le=1.0, description="Minimum relevance to activate"
    )

    @field_validator("intents", "files", "contexts", mode="before")
    @classmethod
    def coerce_list(cls, value):
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            value = [value]
        return [str(v) for v in value]

    def is_empty(self) -> bool:
        return not (self.intents or self.files or self.contexts)


class SkillMetadata(FrozenModel):
    """Frontmatter fields the core reads."""

    name: str
    description: str = ""
    enabled: bool = True
    triggers: SkillTriggers | None = None


class Skill(FrozenModel):
    """A skill as read from the store."""

    metadata: SkillMetadata
    body: str = Field(..., description="SKILL.md body content (stripped)")
    path: Path = Field(..., description="Absolute SKILL.md path")


@runtime_checkable
class SkillStore(Protocol):
    """Read-only skill source consumed by the index and the applicator."""

    def read(self, name: str) -> Skill: ...

    def list(self) -> list[str]: ...


__all__ = ["SkillTriggers", "SkillMetadata", "Skill", "SkillStore"]
