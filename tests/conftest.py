"""Shared pytest fixtures for skillgate."""

from pathlib import Path
from typing import Optional

import pytest
import yaml


def write_skill(
    skills_dir: Path,
    name: str,
    *,
    description: str = "",
    body: str = "body",
    triggers: Optional[dict] = None,
    enabled: Optional[bool] = None,
) -> Path:
    """Create ``<skills_dir>/<name>/SKILL.md`` and return its path."""
    ext = {}
    if triggers is not None:
        ext["triggers"] = triggers
    if enabled is not None:
        ext["enabled"] = enabled
    meta = {"name": name, "description": description}
    if ext:
        meta["metadata"] = {"skillgate": ext}

    skill_dir = skills_dir / name
    skill_dir.mkdir(parents=True, exist_ok=True)
    skill_md = skill_dir / "SKILL.md"
    skill_md.write_text(
        f"---\n{yaml.safe_dump(meta, sort_keys=False)}---\n{body}\n", encoding="utf-8"
    )
    return skill_md


@pytest.fixture
def skills_dir(tmp_path: Path) -> Path:
    path = tmp_path / "skills"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def _isolate_skillgate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of Config()."""
    for var in (
        "SKILLGATE_SKILLS_DIR",
        "SKILLGATE_INDEX_PATH",
        "SKILLGATE_EMBEDDING_PROVIDER",
        "SKILLGATE_TOKEN_BUDGET",
        "SKILLGATE_TOKEN_COUNTER",
        "SKILLGATE_MAX_SKILLS_PER_SESSION",
        "SKILLGATE_RELEVANCE_THRESHOLD",
        "SKILLGATE_EMBEDDING_CACHE_PATH",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_skill(skills_dir: Path):
    """Factory writing skills into ``skills_dir``."""

    def _make(name: str, **kwargs) -> Path:
        return write_skill(skills_dir, name, **kwargs)

    return _make
