"""File-backed, read-only skill store.

Layout: ``<skills_dir>/<name>/SKILL.md`` with YAML frontmatter. Extension
fields (``enabled``, ``triggers``) live under ``metadata.skillgate`` and are
also accepted at the top level for older files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from skillgate.shared.errors import SkillNotFoundError, SkillParseError
from skillgate.shared.utils import parse_frontmatter

from ..public.types import Skill, SkillMetadata, SkillTriggers

SKILL_FILENAME = "SKILL.md"


def _extension_block(meta: Dict[str, Any]) -> Dict[str, Any]:
    metadata_block = meta.get("metadata", {})
    if not isinstance(metadata_block, dict):
        return {}
    ext = metadata_block.get("skillgate", {})
    return ext if isinstance(ext, dict) else {}


def build_metadata(meta: Dict[str, Any], fallback_name: str) -> SkillMetadata:
    """Normalize parsed frontmatter into SkillMetadata."""
    ext = _extension_block(meta)

    name = meta.get("name") or fallback_name
    description = meta.get("description") or ""

    enabled = ext.get("enabled", meta.get("enabled", True))
    if not isinstance(enabled, bool):
        enabled = True

    raw_triggers = ext.get("triggers", meta.get("triggers"))
    triggers = None
    if raw_triggers is not None:
        if not isinstance(raw_triggers, dict):
            raise SkillParseError(f"{fallback_name}: triggers must be a mapping")
        try:
            triggers = SkillTriggers.model_validate(raw_triggers)
        except (TypeError, ValueError) as exc:
            raise SkillParseError(f"{fallback_name}: invalid triggers: {exc}") from exc

    return SkillMetadata(
        name=str(name),
        description=str(description),
        enabled=enabled,
        triggers=triggers,
    )


class FileSkillStore:
    """Reads skills from a directory tree. Never writes."""

    def __init__(self, skills_dir: Path):
        self.skills_dir = Path(skills_dir)

    def skill_path(self, name: str) -> Path:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise SkillNotFoundError(name)
        return self.skills_dir / name / SKILL_FILENAME

    def list(self) -> list[str]:
        if not self.skills_dir.is_dir():
            return []
        names = []
        for child in self.skills_dir.iterdir():
            if child.name.startswith("."):
                continue
            if child.is_dir() and (child / SKILL_FILENAME).is_file():
                names.append(child.name)
        return sorted(names)

    def read(self, name: str) -> Skill:
        skill_md = self.skill_path(name)
        if not skill_md.is_file():
            raise SkillNotFoundError(name)

        meta, body = parse_frontmatter(skill_md)
        if not isinstance(meta, dict):
            raise SkillParseError(f"{name}: frontmatter is not a mapping")

        return Skill(
            metadata=build_metadata(meta, name),
            body=body.strip(),
            path=skill_md.absolute(),
        )


__all__ = ["FileSkillStore", "build_metadata", "SKILL_FILENAME"]
