from .types import Skill, SkillMetadata, SkillStore, SkillTriggers

__all__ = ["Skill", "SkillMetadata", "SkillStore", "SkillTriggers"]
