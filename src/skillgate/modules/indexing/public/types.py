from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from skillgate.modules.skills.public.types import SkillTriggers

INDEX_VERSION = 1

TriggerField = Literal["intent", "file", "context"]


class SkillIndexEntry(BaseModel):
    """Metadata snapshot of one skill plus the mtime it was read at."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    enabled: bool = True
    triggers: SkillTriggers | None = None
    path: str
    mtime: float = Field(..., description="SKILL.md mtime in milliseconds")


class SkillIndexData(BaseModel):
    """On-disk index document."""

    model_config = ConfigDict(populate_by_name=True)

    version: int
    build_time: str = Field(..., alias="buildTime")
    entries: list[SkillIndexEntry] = Field(default_factory=list)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


__all__ = ["INDEX_VERSION", "TriggerField", "SkillIndexEntry", "SkillIndexData"]
