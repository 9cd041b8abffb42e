from .types import INDEX_VERSION, SkillIndexData, SkillIndexEntry, TriggerField

__all__ = ["INDEX_VERSION", "SkillIndexData", "SkillIndexEntry", "TriggerField"]
