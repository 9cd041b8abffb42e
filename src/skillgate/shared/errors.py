"""Error taxonomy.

Budget and not-found outcomes at the admission boundary are returned as
typed results; these exceptions are raised only below that boundary.
"""


class SkillgateError(Exception):
    """Base class for all skillgate errors."""


class SkillNotFoundError(SkillgateError, KeyError):
    """A skill name does not resolve in the skill store."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Skill not found: {self.name}"


class SkillParseError(SkillgateError, ValueError):
    """A SKILL.md exists but its frontmatter cannot be used."""


class IndexCorruptError(SkillgateError, ValueError):
    """The persisted index is unreadable or has an unsupported version."""


class EmbeddingProviderError(SkillgateError, RuntimeError):
    """The model-backed embedder failed; the original error is chained."""

    def __init__(self, provider: str, cause: BaseException):
        super().__init__(f"{provider}: {cause}")
        self.provider = provider
        self.cause = cause


__all__ = [
    "SkillgateError",
    "SkillNotFoundError",
    "SkillParseError",
    "IndexCorruptError",
    "EmbeddingProviderError",
]
