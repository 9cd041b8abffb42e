"""Shared configuration for SkillGate.

The Config class is immutable, validated via pydantic-settings, and designed
to be passed explicitly (no global singleton). Environment variables are
prefixed with SKILLGATE_ (e.g., SKILLGATE_SKILLS_DIR).
"""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SKILLGATE_HOME = Path("~/.skillgate").expanduser()

INDEX_FILENAME = ".skill-index.json"


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="SKILLGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Paths
    skills_dir: Path = Field(
        default=SKILLGATE_HOME / "skills",
        description="Directory containing skill definitions",
    )
    index_path: Path | None = Field(
        default=None,
        description="Skill index file (defaults to <skills_dir>/.skill-index.json)",
    )
    embedding_cache_path: Path | None = Field(
        default=None,
        description="Embedding cache file; in-memory only when unset",
    )

    # Embeddings
    embedding_provider: Literal["none", "openai", "gemini"] = Field(
        default="none",
        description="Embedding provider; 'none' uses the heuristic embedder",
    )
    openai_api_key: str | None = Field(
        default=None,
        description="OpenAI API key",
        validation_alias="OPENAI_API_KEY",
    )
    openai_embedding_model: str = Field(
        default="text-embedding-3-small",
        validation_alias="OPENAI_EMBEDDING_MODEL",
    )
    gemini_api_key: str | None = Field(
        default=None,
        description="Gemini API key",
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )
    gemini_embedding_model: str = Field(
        default="gemini-embedding-001",
        validation_alias="GEMINI_EMBEDDING_MODEL",
    )
    heuristic_dimensions: int = Field(
        default=256, ge=8, le=4096, description="Buckets used by the heuristic embedder"
    )
    embedding_cache_max_entries: int = Field(
        default=1000, ge=1, description="Cached vectors kept before LRU eviction"
    )

    # Token accounting
    token_counter: Literal["heuristic", "tiktoken"] = Field(
        default="heuristic",
        description="Token estimator: chars/4 heuristic or tiktoken encoding",
    )
    tiktoken_encoding: str = Field(default="cl100k_base")
    context_window_size: int = Field(default=200_000, ge=1)
    budget_percent: float = Field(
        default=0.03, gt=0.0, le=1.0, description="Share of the context window for skills"
    )
    token_budget: int | None = Field(
        default=None, ge=0, description="Explicit budget; overrides budget_percent"
    )
    max_skills_per_session: int | None = Field(
        default=5, ge=1, description="Active skill cap per session (None = unlimited)"
    )
    relevance_threshold: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Minimum similarity for auto-apply when a skill declares no threshold",
    )
    savings_factor: float = Field(
        default=2.0, ge=0.0, description="Estimated savings per loaded token"
    )

    @field_validator("skills_dir", "index_path", "embedding_cache_path", mode="before")
    @classmethod
    def expand_path(cls, value: str | Path | None) -> Path | None:
        if value is None or value == "":
            return None
        return Path(value).expanduser().resolve()

    @model_validator(mode="after")
    def validate_provider_keys(self):
        if self.embedding_provider == "openai" and not self.openai_api_key:
            raise ValueError(
                "OPENAI_API_KEY is required when embedding_provider='openai'"
            )
        if self.embedding_provider == "gemini" and not self.gemini_api_key:
            raise ValueError(
                "GEMINI_API_KEY (or GOOGLE_API_KEY) is required when embedding_provider='gemini'"
            )
        return self

    def get_index_path(self) -> Path:
        return self.index_path or self.skills_dir / INDEX_FILENAME

    def get_token_budget(self) -> int:
        if self.token_budget is not None:
            return self.token_budget
        return int(round(self.context_window_size * self.budget_percent))

    def with_overrides(self, **kwargs) -> "Config":
        """Create new Config with overrides (immutable pattern)."""
        return self.model_copy(update=kwargs)


__all__ = ["Config", "SKILLGATE_HOME", "INDEX_FILENAME"]
