"""Public API for the skills module (read-only store)."""

from .internal import FileSkillStore
from .public import Skill, SkillMetadata, SkillStore, SkillTriggers

__all__ = [
    "FileSkillStore",
    "Skill",
    "SkillMetadata",
    "SkillStore",
    "SkillTriggers",
]
