"""Integration-test-only pytest fixtures for skillgate."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_skillgate_cache(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the embedding cache under tmp_path instead of the developer machine."""
    monkeypatch.setenv("SKILLGATE_EMBEDDING_CACHE_PATH", str(tmp_path / "cache" / "embeddings.json"))
