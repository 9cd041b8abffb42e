"""Unit tests for Config."""

from pathlib import Path

import pytest

from skillgate.shared.config import SKILLGATE_HOME, Config


class TestConfigDefaults:
    """Config default value tests."""

    def test_skills_dir_default(self):
        """SKILLGATE_SKILLS_DIR defaults to ~/.skillgate/skills."""
        cfg = Config()
        assert cfg.skills_dir == SKILLGATE_HOME / "skills"

    def test_index_path_derived_from_skills_dir(self, tmp_path):
        """Without SKILLGATE_INDEX_PATH the index lives next to the skills."""
        cfg = Config(skills_dir=tmp_path)
        assert cfg.index_path is None
        assert cfg.get_index_path() == tmp_path.resolve() / ".skill-index.json"

    def test_embedding_provider_default(self):
        cfg = Config()
        assert cfg.embedding_provider == "none"

    def test_token_counter_default(self):
        cfg = Config()
        assert cfg.token_counter == "heuristic"

    def test_budget_is_three_percent_of_window(self):
        """Default budget is 3% of a 200k context window."""
        cfg = Config()
        assert cfg.get_token_budget() == 6000

    def test_max_skills_default(self):
        cfg = Config()
        assert cfg.max_skills_per_session == 5


class TestConfigEnvironment:
    """Config environment variable loading tests."""

    def test_skills_dir_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SKILLGATE_SKILLS_DIR", str(tmp_path / "custom-skills"))
        cfg = Config()
        assert cfg.skills_dir == (tmp_path / "custom-skills").resolve()

    def test_path_expands_tilde(self, monkeypatch):
        """Paths with ~ are expanded."""
        monkeypatch.setenv("SKILLGATE_SKILLS_DIR", "~/my-skills")
        cfg = Config()
        assert "~" not in str(cfg.skills_dir)
        assert cfg.skills_dir == (Path.home() / "my-skills").resolve()

    def test_explicit_token_budget_wins(self, monkeypatch):
        monkeypatch.setenv("SKILLGATE_TOKEN_BUDGET", "1234")
        cfg = Config()
        assert cfg.get_token_budget() == 1234

    def test_budget_from_window_and_percent(self, monkeypatch):
        monkeypatch.setenv("SKILLGATE_CONTEXT_WINDOW_SIZE", "100000")
        monkeypatch.setenv("SKILLGATE_BUDGET_PERCENT", "0.05")
        cfg = Config()
        assert cfg.get_token_budget() == 5000

    def test_threshold_out_of_range_rejected(self, monkeypatch):
        monkeypatch.setenv("SKILLGATE_RELEVANCE_THRESHOLD", "1.5")
        with pytest.raises(ValueError):
            Config()


class TestConfigImmutability:
    def test_config_is_frozen(self):
        cfg = Config()
        with pytest.raises(Exception):
            cfg.max_skills_per_session = 10

    def test_with_overrides_returns_new_instance(self, tmp_path):
        cfg = Config()
        updated = cfg.with_overrides(max_skills_per_session=2)
        assert updated.max_skills_per_session == 2
        assert cfg.max_skills_per_session == 5


class TestProviderKeys:
    """Selecting a model provider without its key fails at construction."""

    def test_openai_requires_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ValueError, match="OPENAI_API_KEY"):
            Config(embedding_provider="openai")

    def test_gemini_requires_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        with pytest.raises(ValueError, match="GEMINI_API_KEY"):
            Config(embedding_provider="gemini")

    def test_openai_with_key_ok(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        cfg = Config(embedding_provider="openai")
        assert cfg.openai_api_key == "sk-test"

    def test_google_api_key_alias(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("GOOGLE_API_KEY", "g-test")
        cfg = Config(embedding_provider="gemini")
        assert cfg.gemini_api_key == "g-test"

    def test_none_provider_needs_no_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        cfg = Config(embedding_provider="none")
        assert cfg.embedding_provider == "none"
