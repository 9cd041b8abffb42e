from .store import SKILL_FILENAME, FileSkillStore, build_metadata

__all__ = ["FileSkillStore", "build_metadata", "SKILL_FILENAME"]
